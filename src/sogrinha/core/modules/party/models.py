"""Shared shape of owners and lessees (the parties of a contract)."""

from datetime import datetime

from pydantic import BaseModel, Field

from sogrinha.core.db import MongoModel
from sogrinha.utils import normalize_search_value, now


class Address(BaseModel):
    state: str = ""
    city: str = ""
    neighborhood: str = ""
    street: str = ""
    number: str = ""
    complement: str = ""
    cep: str = ""

    def one_line(self) -> str:
        """Address the way contracts spell it."""
        return f"{self.street}, {self.number}, {self.neighborhood}, {self.city}/{self.state}, CEP {self.cep}"


class Partner(BaseModel):
    """Spouse or partner co-signing with the party."""

    full_name: str = ""
    rg: str = ""
    issuing_body: str = ""  # Orgão emissor of the RG
    cpf: str = ""
    celphone: str = ""
    email: str = ""
    address: Address = Field(default_factory=Address)


class PartyData(BaseModel):
    """Editable fields of a party."""

    full_name: str = Field(..., min_length=1)
    marital_status: str = ""
    profession: str = ""
    rg: str = ""
    issuing_body: str = ""  # Orgão emissor of the RG
    cpf: str = ""
    celphone: str = ""
    email: str = ""
    address: Address = Field(default_factory=Address)
    note: str = ""
    partner: Partner | None = None


class PartyUpdate(BaseModel):
    """Partial update of a party, only fields that are set are applied."""

    full_name: str | None = Field(None, min_length=1)
    marital_status: str | None = None
    profession: str | None = None
    rg: str | None = None
    issuing_body: str | None = None
    cpf: str | None = None
    celphone: str | None = None
    email: str | None = None
    address: Address | None = None
    note: str | None = None
    partner: Partner | None = None


class PartySearch(BaseModel):
    """Normalized copies of the searchable fields, used for prefix queries."""

    full_name: str | None = None
    cpf: str | None = None
    rg: str | None = None
    celphone: str | None = None
    email: str | None = None
    cep: str | None = None

    @classmethod
    def from_data(cls, data: PartyData) -> "PartySearch":
        return cls(
            full_name=normalize_search_value(data.full_name),
            cpf=normalize_search_value(data.cpf),
            rg=normalize_search_value(data.rg),
            celphone=normalize_search_value(data.celphone),
            email=normalize_search_value(data.email),
            cep=normalize_search_value(data.address.cep),
        )


class Party(MongoModel, PartyData):
    search: PartySearch = Field(default_factory=PartySearch)
    created_at: datetime = Field(default_factory=now)
    updated_at: datetime = Field(default_factory=now)
