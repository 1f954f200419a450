"""Human friendly contract numbers."""

import random
from datetime import date

from sogrinha.core.modules.contract.models import ContractKind

KIND_ABBREVIATIONS: dict[ContractKind, str] = {
    ContractKind.SALE_WITH_EXCLUSIVITY: "VDE",
    ContractKind.SALE_WITHOUT_EXCLUSIVITY: "VDS",
    ContractKind.RENTAL_WITH_ADMINISTRATION: "ALA",
    ContractKind.RENTAL: "ALG",
}
UNKNOWN_ABBREVIATION = "UNK"


def generate_identifier(kind: ContractKind, today: date, rng: random.Random | None = None) -> str:
    """Build ``#<ABBR><ddmmyyyy><nnn>`` with a random three digit suffix.

    The suffix is not checked for collisions; the identifier is for people,
    the record id stays the key.
    """
    suffix = (rng or random).randrange(1000)
    abbreviation = KIND_ABBREVIATIONS.get(kind, UNKNOWN_ABBREVIATION)
    return f"#{abbreviation}{today.strftime('%d%m%Y')}{suffix:03d}"
