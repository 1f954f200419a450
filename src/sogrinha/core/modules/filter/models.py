"""Closed sets of list filters per record type.

Every filter names one supported field through its ``field`` tag; the query
builder maps each tag to the single predicate the database supports for it.
Anything outside these unions is rejected when the request is validated.
"""

from datetime import datetime
from enum import StrEnum
from typing import Annotated, Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from sogrinha.core.modules.contract.models import ContractKind, ContractStatus
from sogrinha.core.modules.real_estate.models import RealEstateKind, RealEstateStatus


class _FilterModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class PartySearchField(StrEnum):
    """Searchable fields of owners and lessees (prefix match on the normalized value)."""

    FULL_NAME = "full_name"
    CPF = "cpf"
    RG = "rg"
    EMAIL = "email"
    CEP = "cep"
    CELPHONE = "celphone"


class PartyFilter(_FilterModel):
    field: PartySearchField
    value: str


class RealEstateTextFilter(_FilterModel):
    """Prefix match on a normalized text field."""

    field: Literal["municipal_registration", "owner_name", "lessee_name"]
    value: str


class RealEstateKindFilter(_FilterModel):
    field: Literal["kind"]
    value: RealEstateKind


class RealEstateStatusFilter(_FilterModel):
    field: Literal["status"]
    value: RealEstateStatus


RealEstateFilter = Annotated[
    RealEstateTextFilter | RealEstateKindFilter | RealEstateStatusFilter,
    Field(discriminator="field"),
]


class ContractKindFilter(_FilterModel):
    field: Literal["kind"]
    value: ContractKind


class ContractStatusFilter(_FilterModel):
    field: Literal["status"]
    value: ContractStatus


class ContractReferenceFilter(_FilterModel):
    """Contracts of one owner, lessee or property."""

    field: Literal["owner_id", "lessee_id", "real_estate_id"]
    value: UUID


class ContractEndDateFilter(_FilterModel):
    """Contracts ending on or after the given moment."""

    field: Literal["end_date"]
    value: datetime


ContractFilter = Annotated[
    ContractKindFilter | ContractStatusFilter | ContractReferenceFilter | ContractEndDateFilter,
    Field(discriminator="field"),
]


class PartyQuery(_FilterModel):
    filters: list[PartyFilter] = Field(default_factory=list, description="Conditions combined with AND")
    limit: int = Field(25, ge=1, le=500)
    offset: int = Field(0, ge=0)


class RealEstateQuery(_FilterModel):
    filters: list[RealEstateFilter] = Field(default_factory=list, description="Conditions combined with AND")
    limit: int = Field(25, ge=1, le=500)
    offset: int = Field(0, ge=0)


class ContractQuery(_FilterModel):
    filters: list[ContractFilter] = Field(default_factory=list, description="Conditions combined with AND")
    limit: int = Field(25, ge=1, le=500)
    offset: int = Field(0, ge=0)
