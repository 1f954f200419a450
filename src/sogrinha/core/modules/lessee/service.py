from sogrinha.core.modules.lessee.models import Lessee
from sogrinha.core.modules.party.service import PartyService


class LesseeService(PartyService[Lessee]):
    """Manages lessees (tenants and buyers)."""

    collection_name = "lessees"
    model = Lessee
    label = "Lessee"
