from datetime import datetime
from enum import StrEnum
from typing import Self
from uuid import UUID

from pydantic import BaseModel, Field, field_validator, model_validator

from sogrinha.core.db import MongoModel
from sogrinha.utils import ensure_utc, now


class ContractKind(StrEnum):
    SALE_WITH_EXCLUSIVITY = "Venda com exclusividade"
    SALE_WITHOUT_EXCLUSIVITY = "Venda sem exclusividade"
    RENTAL_WITH_ADMINISTRATION = "Locação com administração"
    RENTAL = "Locação"

    @property
    def is_rental(self) -> bool:
        return self in (ContractKind.RENTAL, ContractKind.RENTAL_WITH_ADMINISTRATION)


class ContractStatus(StrEnum):
    ACTIVE = "Ativo"
    DONE = "Concluído"
    VOIDED = "Cancelado"


class ContractData(BaseModel):
    """Editable fields of a contract."""

    kind: ContractKind
    start_date: datetime
    end_date: datetime
    payment_day: int = Field(..., ge=1, le=31)  # Day of month the rent is due
    payment_value: float = Field(..., ge=0)  # Monthly rent, or total price for sales
    duration: int = Field(0, ge=0)  # Months
    status: ContractStatus = ContractStatus.ACTIVE
    owner_id: UUID
    lessee_id: UUID | None = None
    real_estate_id: UUID | None = None

    @field_validator("start_date", "end_date")
    @classmethod
    def attach_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    @model_validator(mode="after")
    def check_dates(self) -> Self:
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class ContractUpdate(BaseModel):
    """Partial update of a contract, only fields that are set are applied."""

    kind: ContractKind | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    payment_day: int | None = Field(None, ge=1, le=31)
    payment_value: float | None = Field(None, ge=0)
    duration: int | None = Field(None, ge=0)
    status: ContractStatus | None = None
    owner_id: UUID | None = None
    lessee_id: UUID | None = None
    real_estate_id: UUID | None = None

    @field_validator("start_date", "end_date")
    @classmethod
    def attach_utc(cls, value: datetime | None) -> datetime | None:
        return ensure_utc(value) if value is not None else None


class Contract(MongoModel, ContractData):
    identifier: str  # Human friendly number, e.g. "#ALG19102026042"
    owner_name: str = ""  # Denormalized on write
    lessee_name: str | None = None  # Denormalized on write
    real_estate_address: str | None = None  # Denormalized on write
    created_at: datetime = Field(default_factory=now)
    updated_at: datetime = Field(default_factory=now)
