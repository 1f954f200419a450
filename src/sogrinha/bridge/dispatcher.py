"""Privileged bridge: the only way the content view reaches the filesystem.

Every call resolves to a JSON-serializable result with a ``success`` flag.
Failures of any kind are reported in the result and never raised.
"""

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from sogrinha.bridge.dialogs import SavePathPicker
from sogrinha.bridge.operations import (
    APP_VERSION,
    ATTACHMENTS_DELETE,
    ATTACHMENTS_DOWNLOAD,
    ATTACHMENTS_LIST,
    ATTACHMENTS_UPLOAD,
    FILE_SAVE,
    AttachmentFileParams,
    AttachmentListParams,
    AttachmentUploadParams,
    SaveFileParams,
    VersionParams,
)
from sogrinha.core.modules.attachment.service import AttachmentService
from sogrinha.errors import UserError, ValidationError

logger = structlog.get_logger(__name__)

CANCELLED_MESSAGE = "Operação cancelada"
UNAVAILABLE_MESSAGE = "Bridge is not available"

type BridgeResult = dict[str, Any]


def ok(**fields: Any) -> BridgeResult:
    return {"success": True, **fields}


def failure(error: str, **fields: Any) -> BridgeResult:
    return {"success": False, **fields, "error": error}


def cancelled() -> BridgeResult:
    return failure(CANCELLED_MESSAGE, cancelled=True)


def format_validation_error(error: PydanticValidationError) -> str:
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'params'}: {err['msg']}" for err in error.errors()
    )
    return f"Invalid parameters: {details}"


@dataclass(frozen=True)
class Operation:
    params_model: type[BaseModel]
    handler: Callable[[Any], Awaitable[BridgeResult]]
    failure_fields: dict[str, Any] = field(default_factory=dict)  # Extra fields every failed result carries


class Bridge:
    """Fixed registry of named operations exposed to the content view."""

    def __init__(
        self,
        attachments: AttachmentService,
        picker: SavePathPicker,
        version: str,
        *,
        max_upload_size: int | None = None,
        allowed_mime_types: Sequence[str] = (),
    ) -> None:
        self._attachments = attachments
        self._picker = picker
        self._version = version
        self._max_upload_size = max_upload_size
        self._allowed_mime_types = tuple(allowed_mime_types)
        self._available = False
        self._operations: dict[str, Operation] = {
            ATTACHMENTS_LIST: Operation(AttachmentListParams, self._list_attachments, {"files": []}),
            ATTACHMENTS_UPLOAD: Operation(AttachmentUploadParams, self._upload_attachment),
            ATTACHMENTS_DELETE: Operation(AttachmentFileParams, self._delete_attachment),
            ATTACHMENTS_DOWNLOAD: Operation(AttachmentFileParams, self._download_attachment),
            FILE_SAVE: Operation(SaveFileParams, self._save_file),
            APP_VERSION: Operation(VersionParams, self._get_version),
        }

    @property
    def available(self) -> bool:
        return self._available

    @property
    def operations(self) -> list[str]:
        return sorted(self._operations)

    def open(self) -> None:
        """Start accepting calls, once the privileged process is up."""
        self._available = True
        logger.debug("bridge_opened", operations=self.operations)

    def close(self) -> None:
        self._available = False
        logger.debug("bridge_closed")

    async def call(self, operation: str, params: dict[str, Any] | None = None) -> BridgeResult:
        """Run one named operation.

        Args:
            operation: Registered operation name, e.g. ``attachments.list``
            params: JSON parameter object of the operation

        Returns:
            Result object; ``success`` is False on any failure, with ``error`` set
        """
        entry = self._operations.get(operation)
        extra = entry.failure_fields if entry else {}

        if not self._available:
            logger.warning("bridge_call_unavailable", operation=operation)
            return failure(UNAVAILABLE_MESSAGE, **extra)
        if entry is None:
            logger.warning("bridge_unknown_operation", operation=operation)
            return failure(f"Unknown operation: {operation}")

        try:
            parsed = entry.params_model.model_validate(params or {})
        except PydanticValidationError as e:
            message = format_validation_error(e)
            logger.warning("bridge_invalid_params", operation=operation, error=message)
            return failure(message, **extra)

        try:
            return await entry.handler(parsed)
        except UserError as e:
            logger.warning("bridge_call_failed", operation=operation, error=str(e))
            return failure(str(e), **extra)
        except OSError as e:
            logger.warning("bridge_io_failed", operation=operation, error=str(e))
            return failure(e.strerror or str(e), **extra)
        except Exception as e:
            logger.exception("bridge_call_error", operation=operation)
            return failure(str(e) or type(e).__name__, **extra)

    async def _list_attachments(self, params: AttachmentListParams) -> BridgeResult:
        files = await self._attachments.list_attachments(params)
        return ok(files=files)

    async def _upload_attachment(self, params: AttachmentUploadParams) -> BridgeResult:
        self._check_upload(params)
        await self._attachments.upload_attachment(params, params.name, params.content)
        return ok()

    async def _delete_attachment(self, params: AttachmentFileParams) -> BridgeResult:
        await self._attachments.delete_attachment(params, params.name)
        return ok()

    async def _download_attachment(self, params: AttachmentFileParams) -> BridgeResult:
        destination = await self._ask_save_path(params.name)
        if destination is None:
            return cancelled()
        path = await self._attachments.export_attachment(params, params.name, destination)
        return ok(file_path=str(path))

    async def _save_file(self, params: SaveFileParams) -> BridgeResult:
        destination = await self._ask_save_path(params.file_name)
        if destination is None:
            return cancelled()
        await asyncio.to_thread(destination.write_bytes, params.content)
        logger.debug("file_saved", path=str(destination), size=len(params.content))
        return ok(file_path=str(destination))

    async def _get_version(self, _: VersionParams) -> BridgeResult:
        return ok(version=self._version)

    async def _ask_save_path(self, default_name: str) -> Path | None:
        destination = await asyncio.to_thread(self._picker.ask_save_path, default_name)
        if destination is None:
            logger.debug("save_picker_dismissed", default_name=default_name)
        return destination

    def _check_upload(self, params: AttachmentUploadParams) -> None:
        """Advisory limits, enforced here rather than by the attachment store."""
        if self._allowed_mime_types and params.mime_type is not None:
            if params.mime_type not in self._allowed_mime_types:
                raise ValidationError(f"File type not allowed: {params.mime_type}")
        if self._max_upload_size is not None and len(params.content) > self._max_upload_size:
            raise ValidationError(f"File too large: {len(params.content)} bytes (limit {self._max_upload_size})")
