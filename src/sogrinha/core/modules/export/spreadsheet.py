"""Excel export of owners and lessees."""

from collections.abc import Callable, Sequence
from enum import StrEnum
from io import BytesIO

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from sogrinha.core.modules.party.models import Address, Partner, Party

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


class PartyKind(StrEnum):
    OWNERS = "owners"
    LESSEES = "lessees"

    @property
    def sheet_title(self) -> str:
        return "Owners" if self is PartyKind.OWNERS else "Lessees"

    @property
    def filename(self) -> str:
        return f"{self.value}.xlsx"


def _address_columns(suffix: str, get: Callable[[Party], Address | None]) -> list[tuple[str, Callable[[Party], str]]]:
    def field(name: str) -> Callable[[Party], str]:
        def read(party: Party) -> str:
            address = get(party)
            return getattr(address, name) if address else ""

        return read

    return [
        (f"Estado{suffix}", field("state")),
        (f"Cidade{suffix}", field("city")),
        (f"Bairro{suffix}", field("neighborhood")),
        (f"Rua{suffix}", field("street")),
        (f"Número{suffix}", field("number")),
        (f"Complemento{suffix}", field("complement")),
        (f"CEP{suffix}", field("cep")),
    ]


def _partner_value(name: str) -> Callable[[Party], str]:
    def read(party: Party) -> str:
        partner: Partner | None = party.partner
        return getattr(partner, name) if partner else ""

    return read


# (header, getter) in sheet order; search fields are never exported
COLUMNS: list[tuple[str, Callable[[Party], str]]] = [
    ("ID", lambda p: str(p.id)),
    ("Nome Completo", lambda p: p.full_name),
    ("Estado Civil", lambda p: p.marital_status),
    ("Profissão", lambda p: p.profession),
    ("RG", lambda p: p.rg),
    ("Orgão Emissor", lambda p: p.issuing_body),
    ("CPF", lambda p: p.cpf),
    ("Celular", lambda p: p.celphone),
    ("Email", lambda p: p.email),
    *_address_columns("", lambda p: p.address),
    ("Nota", lambda p: p.note),
    ("Nome Completo Parceiro", _partner_value("full_name")),
    ("RG Parceiro", _partner_value("rg")),
    ("Orgão Emissor Parceiro", _partner_value("issuing_body")),
    ("CPF Parceiro", _partner_value("cpf")),
    ("Celular Parceiro", _partner_value("celphone")),
    ("Email Parceiro", _partner_value("email")),
    *_address_columns(" Parceiro", lambda p: p.partner.address if p.partner else None),
]


def _create_workbook(kind: PartyKind, parties: Sequence[Party]) -> Workbook:
    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = kind.sheet_title

    worksheet.append([header for header, _ in COLUMNS])
    header_fill = PatternFill(fill_type="solid", fgColor="4F81BD")
    header_font = Font(color="FFFFFFFF", bold=True)
    header_alignment = Alignment(horizontal="center", vertical="center")
    for cell in worksheet[1]:
        cell.fill = header_fill
        cell.font = header_font
        cell.alignment = header_alignment
    worksheet.freeze_panes = "A2"

    for party in parties:
        worksheet.append([getter(party) for _, getter in COLUMNS])

    for index, (header, _) in enumerate(COLUMNS, start=1):
        worksheet.column_dimensions[get_column_letter(index)].width = max(12, len(header) + 2)

    return workbook


def export_parties_xlsx(kind: PartyKind, parties: Sequence[Party]) -> bytes:
    """Build an .xlsx workbook with one row per party.

    Args:
        kind: Which collection is exported, names the sheet
        parties: Parties in row order

    Returns:
        Workbook file content
    """
    workbook = _create_workbook(kind, parties)
    buffer = BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()
