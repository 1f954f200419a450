import re
import unicodedata
from datetime import UTC, date, datetime

SEARCH_STRIP_RE = re.compile(r"[^a-z0-9]")

MONTH_NAMES = [
    "janeiro",
    "fevereiro",
    "março",
    "abril",
    "maio",
    "junho",
    "julho",
    "agosto",
    "setembro",
    "outubro",
    "novembro",
    "dezembro",
]


def now() -> datetime:
    return datetime.now(UTC)


def ensure_utc(value: datetime) -> datetime:
    """Treat a datetime without timezone as UTC, so it compares with stored (aware) dates."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def normalize_search_value(value: str | None) -> str | None:
    """Normalize a value for prefix search: no accents, lowercase, only [a-z0-9].

    Returns None when nothing searchable is left.
    """
    if not value:
        return None
    decomposed = unicodedata.normalize("NFKD", value)
    ascii_only = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    normalized = SEARCH_STRIP_RE.sub("", ascii_only.lower())
    return normalized or None


def format_currency(value: float) -> str:
    """Format a value as Brazilian reais, e.g. ``R$ 1.234,56``."""
    sign = "-" if value < 0 else ""
    integer_part, decimal_part = f"{abs(value):,.2f}".split(".")
    return f"{sign}R$ {integer_part.replace(',', '.')},{decimal_part}"


def format_date(value: date) -> str:
    return value.strftime("%d/%m/%Y")


def format_date_long(value: date) -> str:
    """Format a date the way contracts spell it, e.g. ``19 de outubro de 2026``."""
    return f"{value.day} de {MONTH_NAMES[value.month - 1]} de {value.year}"
