"""File storage operations for attachments.

Layout: ``<data_path>/attachments/<entity_type>/<identifier>/<entity_id>/<name>``.
The directory listing is the only index; there is no metadata record.
"""

import shutil
from pathlib import Path

from sogrinha.core.modules.attachment.models import AttachmentScope
from sogrinha.core.modules.attachment.utils import validate_segment
from sogrinha.errors import NotFoundError, ValidationError

ATTACHMENTS_DIR = "attachments"


def get_attachments_root(data_path: str | Path) -> Path:
    return Path(data_path) / ATTACHMENTS_DIR


def get_scope_path(data_path: str | Path, scope: AttachmentScope) -> Path:
    """Resolve the folder holding a record's attachments.

    Args:
        data_path: Application-private data root
        scope: Record the attachments belong to

    Returns:
        Absolute folder path (not created)

    Raises:
        ValidationError: If a segment is unsafe
    """
    validate_segment(scope.identifier, "identifier")
    validate_segment(scope.entity_id, "entity_id")

    root = get_attachments_root(data_path).resolve()
    scope_path = root.joinpath(*scope.relative_parts()).resolve()
    if not scope_path.is_relative_to(root):
        raise ValidationError(f"Attachment scope escapes storage root: {scope.relative_parts()}")
    return scope_path


def get_attachment_file_path(data_path: str | Path, scope: AttachmentScope, name: str) -> Path:
    """Resolve the file path of one attachment inside its scope folder."""
    validate_segment(name, "name")
    return get_scope_path(data_path, scope) / name


def list_attachment_files(data_path: str | Path, scope: AttachmentScope) -> list[str]:
    """Ensure the scope folder exists and return its entry names, sorted."""
    folder = get_scope_path(data_path, scope)
    folder.mkdir(parents=True, exist_ok=True)
    return sorted(entry.name for entry in folder.iterdir())


def write_attachment_file(data_path: str | Path, scope: AttachmentScope, name: str, content: bytes) -> Path:
    """Write attachment content, replacing any file with the same name.

    Returns:
        Absolute path to written file
    """
    file_path = get_attachment_file_path(data_path, scope, name)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_bytes(content)
    return file_path


def delete_attachment_file(data_path: str | Path, scope: AttachmentScope, name: str) -> Path:
    """Remove one attachment file.

    Raises:
        NotFoundError: If the file does not exist
    """
    file_path = get_attachment_file_path(data_path, scope, name)
    try:
        file_path.unlink()
    except FileNotFoundError as e:
        raise NotFoundError(f"Attachment not found: {name}") from e
    return file_path


def copy_attachment_file(data_path: str | Path, scope: AttachmentScope, name: str, destination: Path) -> Path:
    """Copy an attachment byte-for-byte to a path outside the storage root.

    Raises:
        NotFoundError: If the attachment does not exist
    """
    file_path = get_attachment_file_path(data_path, scope, name)
    if not file_path.is_file():
        raise NotFoundError(f"Attachment not found: {name}")
    shutil.copyfile(file_path, destination)
    return destination
