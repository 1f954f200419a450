from datetime import datetime
from enum import StrEnum
from uuid import UUID

from pydantic import BaseModel, Field

from sogrinha.core.db import MongoModel
from sogrinha.core.modules.party.models import Address
from sogrinha.utils import now


class RealEstateKind(StrEnum):
    HOUSE = "Casa"
    APARTMENT = "Apartamento"
    COMMERCIAL_OFFICES = "Salas comerciais"
    STORE = "Loja"
    WAREHOUSE = "Galpão"


class RealEstateStatus(StrEnum):
    AVAILABLE = "Disponível"
    LEASED = "Alugado"
    SOLD = "Vendido"
    CANCELLED = "Cancelado"
    UNDER_MAINTENANCE = "Em Manutenção"


class RealEstateData(BaseModel):
    """Editable fields of a property."""

    municipal_registration: str = ""  # Matrícula / inscrição municipal
    address: Address = Field(default_factory=Address)
    note: str = ""
    kind: RealEstateKind
    status: RealEstateStatus = RealEstateStatus.AVAILABLE
    has_inspection: bool = False
    has_proof_document: bool = False
    owner_id: UUID
    lessee_id: UUID | None = None


class RealEstateUpdate(BaseModel):
    """Partial update of a property, only fields that are set are applied."""

    municipal_registration: str | None = None
    address: Address | None = None
    note: str | None = None
    kind: RealEstateKind | None = None
    status: RealEstateStatus | None = None
    has_inspection: bool | None = None
    has_proof_document: bool | None = None
    owner_id: UUID | None = None
    lessee_id: UUID | None = None  # Explicit null detaches the lessee


class RealEstateSearch(BaseModel):
    municipal_registration: str | None = None
    owner_name: str | None = None
    lessee_name: str | None = None


class RealEstate(MongoModel, RealEstateData):
    owner_name: str = ""  # Denormalized on write
    lessee_name: str | None = None  # Denormalized on write
    search: RealEstateSearch = Field(default_factory=RealEstateSearch)
    created_at: datetime = Field(default_factory=now)
    updated_at: datetime = Field(default_factory=now)

    @property
    def short_address(self) -> str:
        a = self.address
        return f"{a.street}, {a.number} - {a.neighborhood}, {a.city}/{a.state}"
