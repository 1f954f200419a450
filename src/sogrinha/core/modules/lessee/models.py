from sogrinha.core.modules.party.models import Party


class Lessee(Party):
    """Tenant or buyer in a contract."""
