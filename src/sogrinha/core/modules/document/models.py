from enum import StrEnum

from pydantic import BaseModel, Field

from sogrinha.core.modules.contract.models import Contract
from sogrinha.core.modules.lessee.models import Lessee
from sogrinha.core.modules.owner.models import Owner
from sogrinha.core.modules.real_estate.models import RealEstate


class DocumentFormat(StrEnum):
    PDF = "pdf"
    DOCX = "docx"

    @property
    def media_type(self) -> str:
        if self is DocumentFormat.PDF:
            return "application/pdf"
        return "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class ContractDocumentData(BaseModel):
    """A contract with its related records, resolved before rendering."""

    contract: Contract
    owner: Owner | None = None
    lessee: Lessee | None = None
    real_estate: RealEstate | None = None


class ContractSection(BaseModel):
    title: str
    paragraphs: list[str]


class Signature(BaseModel):
    role: str  # e.g. "LOCADOR"
    name: str


class ContractContent(BaseModel):
    """Format independent text of a contract document."""

    title: str
    number: str
    date_line: str  # Long date printed in the header
    sections: list[ContractSection]
    place_and_date: str
    signatures: list[Signature]
    footer: str


class RenderedDocument(BaseModel):
    filename: str
    media_type: str
    content: bytes = Field(..., repr=False)
