from sogrinha.core.modules.party.models import Party


class Owner(Party):
    """Owner of real estate: the landlord or seller in a contract."""
