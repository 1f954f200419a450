from datetime import date
from typing import Any
from uuid import UUID

import structlog
from pymongo.asynchronous.database import AsyncDatabase

from sogrinha.core.core import Service
from sogrinha.core.db import merge_update
from sogrinha.core.modules.contract.identifiers import generate_identifier
from sogrinha.core.modules.contract.models import Contract, ContractData, ContractUpdate
from sogrinha.core.modules.filter.models import ContractFilter
from sogrinha.core.modules.filter.query_builder import CONTRACT_SORT, build_contract_query
from sogrinha.core.pagination import PaginationResult, paginate
from sogrinha.errors import NotFoundError
from sogrinha.utils import now

logger = structlog.get_logger(__name__)


class ContractService(Service):
    """Manages contracts between owners, lessees and properties."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("contracts")

    async def on_start(self) -> None:
        """Create indexes for sorting and the equality filters."""
        await self._collection.create_index([("start_date", -1)])
        await self._collection.create_index([("end_date", 1)])
        for field in ("kind", "status", "owner_id", "lessee_id", "real_estate_id"):
            await self._collection.create_index([(field, 1)])

    async def get_contract(self, contract_id: UUID) -> Contract:
        doc = await self._collection.find_one({"_id": contract_id})
        if not doc:
            raise NotFoundError(f"Contract not found: {contract_id}")
        return Contract.model_validate(doc)

    async def create_contract(self, data: ContractData, today: date | None = None) -> Contract:
        """Create a contract with a fresh identifier.

        Raises:
            NotFoundError: If the owner, lessee or property does not exist
        """
        identifier = generate_identifier(data.kind, today or now().date())
        contract = Contract.model_validate(
            {**data.model_dump(), **await self._denormalized_fields(data), "identifier": identifier}
        )
        await self._collection.insert_one(contract.to_mongo())
        logger.debug("contract_created", contract_id=contract.id, identifier=identifier)
        return contract

    async def update_contract(self, contract_id: UUID, update: ContractUpdate) -> Contract:
        current = await self.get_contract(contract_id)
        data = merge_update(ContractData, current, update)

        update_doc = {**data.model_dump(), **await self._denormalized_fields(data), "updated_at": now()}
        await self._collection.update_one({"_id": contract_id}, {"$set": update_doc})
        logger.debug("contract_updated", contract_id=contract_id)
        return await self.get_contract(contract_id)

    async def delete_contract(self, contract_id: UUID) -> None:
        result = await self._collection.delete_one({"_id": contract_id})
        if result.deleted_count == 0:
            raise NotFoundError(f"Contract not found: {contract_id}")
        logger.debug("contract_deleted", contract_id=contract_id)

    async def list_contracts(
        self, filters: list[ContractFilter], limit: int = 25, offset: int = 0
    ) -> PaginationResult[Contract]:
        """Get a page of contracts matching every filter, newest start date first."""
        query = build_contract_query(filters)
        page = await paginate(self._collection, query, CONTRACT_SORT, limit, offset, Contract.model_validate)
        logger.debug("list_contracts", query=query, total=page.total)
        return page

    async def list_all_contracts(self) -> list[Contract]:
        return await Contract.list_cursor(self._collection.find({}))

    async def _denormalized_fields(self, data: ContractData) -> dict[str, Any]:
        services = self.core.services
        owner = await services.owner.get_party(data.owner_id)
        lessee = await services.lessee.get_party(data.lessee_id) if data.lessee_id else None
        real_estate = await services.real_estate.get_real_estate(data.real_estate_id) if data.real_estate_id else None
        return {
            "owner_name": owner.full_name,
            "lessee_name": lessee.full_name if lessee else None,
            "real_estate_address": real_estate.short_address if real_estate else None,
        }
