from typing import Any, ClassVar
from uuid import UUID

import structlog
from pymongo.asynchronous.database import AsyncDatabase

from sogrinha.core.core import Service
from sogrinha.core.db import merge_update
from sogrinha.core.modules.filter.models import PartyFilter
from sogrinha.core.modules.filter.query_builder import PARTY_SORT, build_party_query
from sogrinha.core.modules.party.models import Party, PartyData, PartySearch, PartyUpdate
from sogrinha.core.pagination import PaginationResult, paginate
from sogrinha.errors import NotFoundError
from sogrinha.utils import now

logger = structlog.get_logger(__name__)


class PartyService[P: Party](Service):
    """Manages one collection of parties (owners or lessees)."""

    collection_name: ClassVar[str]
    model: ClassVar[type[Party]]
    label: ClassVar[str]

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection(self.collection_name)

    async def on_start(self) -> None:
        """Create indexes for the prefix searches."""
        for field in PartySearch.model_fields:
            await self._collection.create_index([(f"search.{field}", 1)])

    async def get_party(self, party_id: UUID) -> P:
        """Get party by ID.

        Raises:
            NotFoundError: If the party does not exist
        """
        party = await self.find_party(party_id)
        if party is None:
            raise NotFoundError(f"{self.label} not found: {party_id}")
        return party

    async def find_party(self, party_id: UUID) -> P | None:
        doc = await self._collection.find_one({"_id": party_id})
        if doc is None:
            return None
        return self._validate(doc)

    async def create_party(self, data: PartyData) -> P:
        party = self._validate({**data.model_dump(), "search": PartySearch.from_data(data)})
        await self._collection.insert_one(party.to_mongo())
        logger.debug("party_created", collection=self.collection_name, party_id=party.id)
        return party

    async def update_party(self, party_id: UUID, update: PartyUpdate) -> P:
        """Apply a partial update and refresh the search fields.

        Raises:
            NotFoundError: If the party does not exist
        """
        current = await self.get_party(party_id)
        data = merge_update(PartyData, current, update)

        update_doc = {**data.model_dump(), "search": PartySearch.from_data(data).model_dump(), "updated_at": now()}
        await self._collection.update_one({"_id": party_id}, {"$set": update_doc})
        logger.debug("party_updated", collection=self.collection_name, party_id=party_id)
        return await self.get_party(party_id)

    async def delete_party(self, party_id: UUID) -> None:
        result = await self._collection.delete_one({"_id": party_id})
        if result.deleted_count == 0:
            raise NotFoundError(f"{self.label} not found: {party_id}")
        logger.debug("party_deleted", collection=self.collection_name, party_id=party_id)

    async def list_parties(self, filters: list[PartyFilter], limit: int = 25, offset: int = 0) -> PaginationResult[P]:
        """Get a page of parties matching every filter, ordered by name."""
        query = build_party_query(filters)
        page = await paginate(self._collection, query, PARTY_SORT, limit, offset, self._validate)
        logger.debug("list_parties", collection=self.collection_name, query=query, total=page.total)
        return page

    async def list_all_parties(self) -> list[P]:
        cursor = self._collection.find({})
        for field, direction in PARTY_SORT:
            cursor = cursor.sort(field, direction)
        return [self._validate(doc) async for doc in cursor]

    def _validate(self, doc: dict[str, Any]) -> P:
        return self.model.model_validate(doc)  # type: ignore[return-value]
