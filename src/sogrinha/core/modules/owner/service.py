from sogrinha.core.modules.owner.models import Owner
from sogrinha.core.modules.party.service import PartyService


class OwnerService(PartyService[Owner]):
    """Manages property owners."""

    collection_name = "owners"
    model = Owner
    label = "Owner"
