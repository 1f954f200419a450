"""Content-side capability object for calling the privileged bridge over HTTP."""

import base64
from typing import Any

import httpx
import structlog

from sogrinha.bridge.operations import (
    APP_VERSION,
    ATTACHMENTS_DELETE,
    ATTACHMENTS_DOWNLOAD,
    ATTACHMENTS_LIST,
    ATTACHMENTS_UPLOAD,
    FILE_SAVE,
)
from sogrinha.core.modules.attachment.models import EntityType

logger = structlog.get_logger(__name__)

BRIDGE_PATH = "/api/v1/bridge"


class BridgeClient:
    """Calls bridge operations through an injected ``httpx.Client``.

    The client carries base URL and shell token; every method returns the
    result object and transport failures are reported the same way.
    """

    def __init__(self, http: httpx.Client, path: str = BRIDGE_PATH) -> None:
        self._http = http
        self._path = path.rstrip("/")

    def call(self, operation: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        try:
            response = self._http.post(f"{self._path}/{operation}", json=params or {})
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.warning("bridge_http_error", operation=operation, status_code=e.response.status_code)
            return {"success": False, "error": _error_message(e.response)}
        except httpx.HTTPError as e:
            logger.warning("bridge_transport_error", operation=operation, error=str(e))
            return {"success": False, "error": str(e) or type(e).__name__}

    def list_attachments(self, entity_type: EntityType, identifier: str, entity_id: str) -> dict[str, Any]:
        return self.call(ATTACHMENTS_LIST, _scope(entity_type, identifier, entity_id))

    def upload_attachment(
        self,
        entity_type: EntityType,
        identifier: str,
        entity_id: str,
        name: str,
        content: bytes,
        mime_type: str | None = None,
    ) -> dict[str, Any]:
        params = {**_scope(entity_type, identifier, entity_id), "name": name, "content": _encode(content)}
        if mime_type is not None:
            params["mime_type"] = mime_type
        return self.call(ATTACHMENTS_UPLOAD, params)

    def delete_attachment(self, entity_type: EntityType, identifier: str, entity_id: str, name: str) -> dict[str, Any]:
        return self.call(ATTACHMENTS_DELETE, {**_scope(entity_type, identifier, entity_id), "name": name})

    def download_attachment(
        self, entity_type: EntityType, identifier: str, entity_id: str, name: str
    ) -> dict[str, Any]:
        return self.call(ATTACHMENTS_DOWNLOAD, {**_scope(entity_type, identifier, entity_id), "name": name})

    def save_file(self, file_name: str, content: bytes) -> dict[str, Any]:
        return self.call(FILE_SAVE, {"file_name": file_name, "content": _encode(content)})

    def version(self) -> dict[str, Any]:
        return self.call(APP_VERSION)


def _scope(entity_type: EntityType, identifier: str, entity_id: str) -> dict[str, str]:
    return {"entity_type": EntityType(entity_type).value, "identifier": identifier, "entity_id": entity_id}


def _encode(content: bytes) -> str:
    return base64.b64encode(content).decode("ascii")


def _error_message(response: httpx.Response) -> str:
    try:
        return str(response.json().get("message") or response.reason_phrase)
    except ValueError:
        return response.reason_phrase or f"HTTP {response.status_code}"
