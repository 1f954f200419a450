from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, Field
from pymongo.asynchronous.collection import AsyncCollection


class PaginationResult[T](BaseModel):
    """One page of a filtered list."""

    items: list[T] = Field(..., description="Records in the current page")
    total: int = Field(..., description="Number of records matching the filters across all pages", ge=0)
    limit: int = Field(..., description="Maximum items per page", ge=1)
    offset: int = Field(..., description="Number of items skipped", ge=0)

    @property
    def has_more(self) -> bool:
        """Whether there are more items beyond the current page."""
        return self.offset + len(self.items) < self.total


async def paginate[T](
    collection: AsyncCollection[dict[str, Any]],
    query: dict[str, Any],
    sort: list[tuple[str, int]],
    limit: int,
    offset: int,
    parse: Callable[[dict[str, Any]], T],
) -> PaginationResult[T]:
    """Count the matches of ``query`` and fetch one sorted page of them."""
    total = await collection.count_documents(query)
    cursor = collection.find(query)
    for field, direction in sort:
        cursor = cursor.sort(field, direction)
    docs = await cursor.skip(offset).limit(limit).to_list()
    return PaginationResult(items=[parse(doc) for doc in docs], total=total, limit=limit, offset=offset)
