"""Shared pytest fixtures."""

import copy
from collections import defaultdict
from datetime import UTC, datetime
from types import SimpleNamespace
from unittest.mock import MagicMock
from uuid import UUID

import pytest

from sogrinha.config import Config
from sogrinha.core.modules.attachment.models import AttachmentScope, EntityType
from sogrinha.core.modules.attachment.service import AttachmentService
from sogrinha.core.modules.contract.models import Contract, ContractKind, ContractStatus
from sogrinha.core.modules.contract.service import ContractService
from sogrinha.core.modules.lessee.models import Lessee
from sogrinha.core.modules.lessee.service import LesseeService
from sogrinha.core.modules.owner.models import Owner
from sogrinha.core.modules.owner.service import OwnerService
from sogrinha.core.modules.party.models import Address
from sogrinha.core.modules.real_estate.models import RealEstate, RealEstateKind, RealEstateStatus
from sogrinha.core.modules.real_estate.service import RealEstateService

OWNER_ID = UUID("12345678-1234-5678-1234-567812345678")
LESSEE_ID = UUID("87654321-4321-8765-4321-876543218765")
REAL_ESTATE_ID = UUID("11111111-2222-3333-4444-555555555555")


class InMemoryCollection:
    """Keeps documents by _id, enough of a collection for the record write paths."""

    def __init__(self) -> None:
        self.docs: dict[UUID, dict] = {}

    async def insert_one(self, doc):
        self.docs[doc["_id"]] = copy.deepcopy(doc)

    async def find_one(self, query):
        doc = self.docs.get(query["_id"])
        return copy.deepcopy(doc) if doc is not None else None

    async def update_one(self, query, update):
        self.docs[query["_id"]].update(copy.deepcopy(update["$set"]))

    async def delete_one(self, query):
        removed = self.docs.pop(query["_id"], None)
        return SimpleNamespace(deleted_count=0 if removed is None else 1)


class InMemoryDatabase:
    def __init__(self) -> None:
        self.collections: defaultdict[str, InMemoryCollection] = defaultdict(InMemoryCollection)

    def get_collection(self, name):
        return self.collections[name]


@pytest.fixture
def config(tmp_path):
    """Configuration pointing data and downloads into the test's temporary directory."""
    return Config(
        _env_file=None,
        database_url="mongodb://localhost:27017/sogrinha_test",
        data_path=str(tmp_path / "data"),
        downloads_path=str(tmp_path / "downloads"),
    )


@pytest.fixture
def attachment_service(config):
    """Attachment service wired to a stand-in core, no database involved."""
    service = AttachmentService(MagicMock())
    service.set_core(SimpleNamespace(config=config))
    return service


@pytest.fixture
def contract_scope():
    """Attachment folder of one contract."""
    return AttachmentScope(entity_type=EntityType.CONTRACT, identifier="agency-1", entity_id="c42")


@pytest.fixture
def mock_owner():
    """Create an owner with a full address."""
    return Owner(
        id=OWNER_ID,
        full_name="José da Silva",
        marital_status="casado",
        profession="engenheiro",
        rg="12.345.678-9",
        issuing_body="SSP/SP",
        cpf="123.456.789-00",
        celphone="(11) 98765-4321",
        email="jose@example.com",
        address=Address(
            state="SP",
            city="São Paulo",
            neighborhood="Centro",
            street="Rua Direita",
            number="100",
            cep="01002-000",
        ),
    )


@pytest.fixture
def mock_lessee():
    """Create a lessee."""
    return Lessee(
        id=LESSEE_ID,
        full_name="Maria Souza",
        marital_status="solteira",
        rg="98.765.432-1",
        issuing_body="SSP/RJ",
        cpf="987.654.321-00",
        address=Address(state="RJ", city="Niterói", street="Rua da Praia", number="7", cep="24000-000"),
    )


@pytest.fixture
def mock_real_estate():
    """Create a leased apartment of the mock owner."""
    return RealEstate(
        id=REAL_ESTATE_ID,
        municipal_registration="MAT-2024-001",
        address=Address(
            state="SP",
            city="São Paulo",
            neighborhood="Pinheiros",
            street="Rua dos Pinheiros",
            number="500",
            complement="apto 12",
            cep="05422-000",
        ),
        kind=RealEstateKind.APARTMENT,
        status=RealEstateStatus.LEASED,
        owner_id=OWNER_ID,
        lessee_id=LESSEE_ID,
        owner_name="José da Silva",
        lessee_name="Maria Souza",
    )


@pytest.fixture
def mock_contract():
    """Create an active rental contract."""
    return Contract(
        identifier="#ALG19102026042",
        kind=ContractKind.RENTAL,
        start_date=datetime(2026, 10, 1, tzinfo=UTC),
        end_date=datetime(2027, 9, 30, tzinfo=UTC),
        payment_day=5,
        payment_value=2500.0,
        duration=12,
        status=ContractStatus.ACTIVE,
        owner_id=OWNER_ID,
        lessee_id=LESSEE_ID,
        real_estate_id=REAL_ESTATE_ID,
        owner_name="José da Silva",
        lessee_name="Maria Souza",
    )


@pytest.fixture
def database():
    """Database keeping every collection in memory."""
    return InMemoryDatabase()


@pytest.fixture
def services(database):
    """Record services wired together through a stand-in core."""
    services = SimpleNamespace(
        owner=OwnerService(database),
        lessee=LesseeService(database),
        real_estate=RealEstateService(database),
        contract=ContractService(database),
    )
    core = SimpleNamespace(services=services)
    for service in vars(services).values():
        service.set_core(core)
    return services
