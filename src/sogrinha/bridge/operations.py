"""Parameter models of the operations the content view may invoke.

Binary content travels base64-encoded so every parameter object is plain JSON.
"""

from pydantic import Base64Bytes, BaseModel, Field

from sogrinha.core.modules.attachment.models import AttachmentScope

ATTACHMENTS_LIST = "attachments.list"
ATTACHMENTS_UPLOAD = "attachments.upload"
ATTACHMENTS_DELETE = "attachments.delete"
ATTACHMENTS_DOWNLOAD = "attachments.download"
FILE_SAVE = "file.save"
APP_VERSION = "app.version"


class AttachmentListParams(AttachmentScope):
    pass


class AttachmentFileParams(AttachmentScope):
    """Addresses one attachment file of a record."""

    name: str = Field(..., description="Attachment file name")


class AttachmentUploadParams(AttachmentFileParams):
    content: Base64Bytes = Field(..., description="File content, base64-encoded")
    mime_type: str | None = Field(None, description="Declared MIME type, checked against the allow-list when given")


class SaveFileParams(BaseModel):
    file_name: str = Field(..., min_length=1, description="Suggested name in the save picker")
    content: Base64Bytes = Field(..., description="File content, base64-encoded")


class VersionParams(BaseModel):
    pass
