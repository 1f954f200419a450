from enum import StrEnum

from pydantic import BaseModel, Field


class EntityType(StrEnum):
    """Record categories that can own attachments (values are the on-disk folder names)."""

    OWNER = "owners"
    LESSEE = "lessees"
    REAL_ESTATE = "realEstates"
    CONTRACT = "contracts"


class AttachmentScope(BaseModel):
    """Addresses the attachment folder of one record."""

    entity_type: EntityType = Field(..., description="Record category")
    identifier: str = Field(..., description="Namespace the record's attachments are isolated in")
    entity_id: str = Field(..., description="ID of the record the attachments belong to")

    def relative_parts(self) -> tuple[str, str, str]:
        """Path segments below the attachments root, in order."""
        return (self.entity_type.value, self.identifier, self.entity_id)
