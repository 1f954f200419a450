import asyncio
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from uuid import UUID

from sogrinha.bridge.dialogs import DirectorySavePicker
from sogrinha.bridge.dispatcher import Bridge
from sogrinha.config import Config
from sogrinha.core.core import Core
from sogrinha.core.modules.contract.models import Contract, ContractData, ContractUpdate
from sogrinha.core.modules.document.models import ContractDocumentData, DocumentFormat, RenderedDocument
from sogrinha.core.modules.document.service import generate_contract_document
from sogrinha.core.modules.export.spreadsheet import PartyKind, export_parties_xlsx
from sogrinha.core.modules.filter.models import ContractQuery, PartyQuery, RealEstateQuery
from sogrinha.core.modules.lessee.models import Lessee
from sogrinha.core.modules.owner.models import Owner
from sogrinha.core.modules.party.models import PartyData, PartyUpdate
from sogrinha.core.modules.party.service import PartyService
from sogrinha.core.modules.real_estate.models import RealEstate, RealEstateData, RealEstateUpdate
from sogrinha.core.modules.stats.calculator import compute_home_stats
from sogrinha.core.modules.stats.models import HomeStats
from sogrinha.core.pagination import PaginationResult
from sogrinha.utils import now


class App:
    """Facade for all application operations, resolves related records before delegating to Core."""

    def __init__(self, config: Config) -> None:
        self._core = Core(config)
        self.bridge = Bridge(
            self._core.services.attachment,
            DirectorySavePicker(config.downloads_path),
            config.app_version,
            max_upload_size=config.attachment_max_size,
            allowed_mime_types=config.attachment_mime_types,
        )

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management, the bridge is open only while Core runs."""
        async with self._core.lifespan():
            self.bridge.open()
            try:
                yield
            finally:
                self.bridge.close()

    # Owners

    async def get_owners(self, query: PartyQuery) -> PaginationResult[Owner]:
        return await self._core.services.owner.list_parties(query.filters, query.limit, query.offset)

    async def get_owner(self, owner_id: UUID) -> Owner:
        return await self._core.services.owner.get_party(owner_id)

    async def create_owner(self, data: PartyData) -> Owner:
        return await self._core.services.owner.create_party(data)

    async def update_owner(self, owner_id: UUID, update: PartyUpdate) -> Owner:
        return await self._core.services.owner.update_party(owner_id, update)

    async def delete_owner(self, owner_id: UUID) -> None:
        await self._core.services.owner.delete_party(owner_id)

    async def export_owners(self) -> bytes:
        """All owners as an .xlsx workbook."""
        return await self._export_parties(PartyKind.OWNERS, self._core.services.owner)

    # Lessees

    async def get_lessees(self, query: PartyQuery) -> PaginationResult[Lessee]:
        return await self._core.services.lessee.list_parties(query.filters, query.limit, query.offset)

    async def get_lessee(self, lessee_id: UUID) -> Lessee:
        return await self._core.services.lessee.get_party(lessee_id)

    async def create_lessee(self, data: PartyData) -> Lessee:
        return await self._core.services.lessee.create_party(data)

    async def update_lessee(self, lessee_id: UUID, update: PartyUpdate) -> Lessee:
        return await self._core.services.lessee.update_party(lessee_id, update)

    async def delete_lessee(self, lessee_id: UUID) -> None:
        await self._core.services.lessee.delete_party(lessee_id)

    async def export_lessees(self) -> bytes:
        """All lessees as an .xlsx workbook."""
        return await self._export_parties(PartyKind.LESSEES, self._core.services.lessee)

    # Real estates

    async def get_real_estates(self, query: RealEstateQuery) -> PaginationResult[RealEstate]:
        return await self._core.services.real_estate.list_real_estates(query.filters, query.limit, query.offset)

    async def get_real_estate(self, real_estate_id: UUID) -> RealEstate:
        return await self._core.services.real_estate.get_real_estate(real_estate_id)

    async def create_real_estate(self, data: RealEstateData) -> RealEstate:
        """Create property, owner and lessee must exist."""
        return await self._core.services.real_estate.create_real_estate(data)

    async def update_real_estate(self, real_estate_id: UUID, update: RealEstateUpdate) -> RealEstate:
        return await self._core.services.real_estate.update_real_estate(real_estate_id, update)

    async def delete_real_estate(self, real_estate_id: UUID) -> None:
        await self._core.services.real_estate.delete_real_estate(real_estate_id)

    # Contracts

    async def get_contracts(self, query: ContractQuery) -> PaginationResult[Contract]:
        return await self._core.services.contract.list_contracts(query.filters, query.limit, query.offset)

    async def get_contract(self, contract_id: UUID) -> Contract:
        return await self._core.services.contract.get_contract(contract_id)

    async def create_contract(self, data: ContractData) -> Contract:
        """Create contract with a generated identifier, referenced records must exist."""
        return await self._core.services.contract.create_contract(data)

    async def update_contract(self, contract_id: UUID, update: ContractUpdate) -> Contract:
        return await self._core.services.contract.update_contract(contract_id, update)

    async def delete_contract(self, contract_id: UUID) -> None:
        await self._core.services.contract.delete_contract(contract_id)

    async def generate_contract_document(self, contract_id: UUID, document_format: DocumentFormat) -> RenderedDocument:
        """Render a contract with its owner, lessee and property (missing related records render blank)."""
        data = await self._resolve_contract_document_data(contract_id)
        return await asyncio.to_thread(generate_contract_document, data, document_format, now().date())

    # Dashboard

    async def get_home_stats(self) -> HomeStats:
        real_estates = await self._core.services.real_estate.list_all_real_estates()
        contracts = await self._core.services.contract.list_all_contracts()
        return compute_home_stats(real_estates, contracts, now().date())

    async def _export_parties(self, kind: PartyKind, service: PartyService[Owner] | PartyService[Lessee]) -> bytes:
        parties = await service.list_all_parties()
        return await asyncio.to_thread(export_parties_xlsx, kind, parties)

    async def _resolve_contract_document_data(self, contract_id: UUID) -> ContractDocumentData:
        services = self._core.services
        contract = await services.contract.get_contract(contract_id)
        lessee = await services.lessee.find_party(contract.lessee_id) if contract.lessee_id else None
        real_estate = (
            await services.real_estate.find_real_estate(contract.real_estate_id) if contract.real_estate_id else None
        )
        return ContractDocumentData(
            contract=contract,
            owner=await services.owner.find_party(contract.owner_id),
            lessee=lessee,
            real_estate=real_estate,
        )
