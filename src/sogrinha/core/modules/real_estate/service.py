from typing import Any
from uuid import UUID

import structlog
from pymongo.asynchronous.database import AsyncDatabase

from sogrinha.core.core import Service
from sogrinha.core.db import merge_update
from sogrinha.core.modules.filter.models import RealEstateFilter
from sogrinha.core.modules.filter.query_builder import REAL_ESTATE_SORT, build_real_estate_query
from sogrinha.core.modules.real_estate.models import RealEstate, RealEstateData, RealEstateSearch, RealEstateUpdate
from sogrinha.core.pagination import PaginationResult, paginate
from sogrinha.errors import NotFoundError
from sogrinha.utils import normalize_search_value, now

logger = structlog.get_logger(__name__)


class RealEstateService(Service):
    """Manages properties and keeps their owner/lessee names denormalized."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("realEstates")

    async def on_start(self) -> None:
        """Create indexes for the prefix searches and the equality filters."""
        for field in RealEstateSearch.model_fields:
            await self._collection.create_index([(f"search.{field}", 1)])
        await self._collection.create_index([("kind", 1)])
        await self._collection.create_index([("status", 1)])

    async def get_real_estate(self, real_estate_id: UUID) -> RealEstate:
        real_estate = await self.find_real_estate(real_estate_id)
        if real_estate is None:
            raise NotFoundError(f"Real estate not found: {real_estate_id}")
        return real_estate

    async def find_real_estate(self, real_estate_id: UUID) -> RealEstate | None:
        doc = await self._collection.find_one({"_id": real_estate_id})
        return RealEstate.model_validate(doc) if doc else None

    async def create_real_estate(self, data: RealEstateData) -> RealEstate:
        """Create a property after resolving its owner and lessee.

        Raises:
            NotFoundError: If the owner or lessee does not exist
        """
        real_estate = RealEstate.model_validate({**data.model_dump(), **await self._denormalized_fields(data)})
        await self._collection.insert_one(real_estate.to_mongo())
        logger.debug("real_estate_created", real_estate_id=real_estate.id, owner_id=data.owner_id)
        return real_estate

    async def update_real_estate(self, real_estate_id: UUID, update: RealEstateUpdate) -> RealEstate:
        current = await self.get_real_estate(real_estate_id)
        data = merge_update(RealEstateData, current, update)

        update_doc = {**data.model_dump(), **await self._denormalized_fields(data), "updated_at": now()}
        update_doc["search"] = update_doc["search"].model_dump()
        await self._collection.update_one({"_id": real_estate_id}, {"$set": update_doc})
        logger.debug("real_estate_updated", real_estate_id=real_estate_id)
        return await self.get_real_estate(real_estate_id)

    async def delete_real_estate(self, real_estate_id: UUID) -> None:
        result = await self._collection.delete_one({"_id": real_estate_id})
        if result.deleted_count == 0:
            raise NotFoundError(f"Real estate not found: {real_estate_id}")
        logger.debug("real_estate_deleted", real_estate_id=real_estate_id)

    async def list_real_estates(
        self, filters: list[RealEstateFilter], limit: int = 25, offset: int = 0
    ) -> PaginationResult[RealEstate]:
        query = build_real_estate_query(filters)
        page = await paginate(self._collection, query, REAL_ESTATE_SORT, limit, offset, RealEstate.model_validate)
        logger.debug("list_real_estates", query=query, total=page.total)
        return page

    async def list_all_real_estates(self) -> list[RealEstate]:
        return await RealEstate.list_cursor(self._collection.find({}))

    async def _denormalized_fields(self, data: RealEstateData) -> dict[str, Any]:
        owner = await self.core.services.owner.get_party(data.owner_id)
        lessee = await self.core.services.lessee.get_party(data.lessee_id) if data.lessee_id else None
        lessee_name = lessee.full_name if lessee else None
        return {
            "owner_name": owner.full_name,
            "lessee_name": lessee_name,
            "search": RealEstateSearch(
                municipal_registration=normalize_search_value(data.municipal_registration),
                owner_name=normalize_search_value(owner.full_name),
                lessee_name=normalize_search_value(lessee_name),
            ),
        }
