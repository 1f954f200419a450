import asyncio
from collections.abc import Callable
from pathlib import Path
from typing import Any

import structlog

from sogrinha.core.core import Service
from sogrinha.core.modules.attachment.models import AttachmentScope
from sogrinha.core.modules.attachment.storage import (
    copy_attachment_file,
    delete_attachment_file,
    list_attachment_files,
    write_attachment_file,
)
from sogrinha.errors import StorageError

logger = structlog.get_logger(__name__)


class AttachmentService(Service):
    """Stores record attachments as plain files under the application data root."""

    @property
    def data_path(self) -> str:
        return self.core.config.data_path

    async def list_attachments(self, scope: AttachmentScope) -> list[str]:
        """List attachment names of a record, creating its folder when missing.

        Args:
            scope: Record the attachments belong to

        Returns:
            Sorted file names, empty when the record has no attachments
        """
        names = await self._run(list_attachment_files, self.data_path, scope)
        logger.debug("attachments_listed", scope=scope.relative_parts(), count=len(names))
        return names

    async def upload_attachment(self, scope: AttachmentScope, name: str, content: bytes) -> None:
        """Save attachment content under ``name``, overwriting a previous upload with the same name."""
        path = await self._run(write_attachment_file, self.data_path, scope, name, content)
        logger.debug("attachment_uploaded", path=str(path), size=len(content))

    async def delete_attachment(self, scope: AttachmentScope, name: str) -> None:
        """Delete one attachment.

        Raises:
            NotFoundError: If the attachment does not exist
        """
        path = await self._run(delete_attachment_file, self.data_path, scope, name)
        logger.debug("attachment_deleted", path=str(path))

    async def export_attachment(self, scope: AttachmentScope, name: str, destination: Path) -> Path:
        """Copy an attachment to a destination chosen outside the storage root.

        Raises:
            NotFoundError: If the attachment does not exist
        """
        path = await self._run(copy_attachment_file, self.data_path, scope, name, destination)
        logger.debug("attachment_exported", name=name, destination=str(path))
        return path

    @staticmethod
    async def _run[R](func: Callable[..., R], *args: Any) -> R:
        """Run a blocking filesystem call in a worker thread, reporting OS failures as StorageError."""
        try:
            return await asyncio.to_thread(func, *args)
        except OSError as e:
            raise StorageError(f"Attachment storage failed: {e.strerror or e}") from e
