"""Tests for paginated listing."""

import pytest

from sogrinha.core.pagination import PaginationResult, paginate


class FakeCursor:
    def __init__(self, docs):
        self.docs = docs
        self.calls = []

    def sort(self, field, direction):
        self.calls.append(("sort", field, direction))
        self.docs = sorted(self.docs, key=lambda doc: doc[field], reverse=direction < 0)
        return self

    def skip(self, offset):
        self.calls.append(("skip", offset))
        self.docs = self.docs[offset:]
        return self

    def limit(self, limit):
        self.calls.append(("limit", limit))
        self.docs = self.docs[:limit]
        return self

    async def to_list(self):
        return self.docs


class FakeCollection:
    """In-memory stand-in answering only the calls paginate makes."""

    def __init__(self, docs):
        self.docs = docs
        self.queries = []

    async def count_documents(self, query):
        self.queries.append(query)
        return len(self.docs)

    def find(self, query):
        self.queries.append(query)
        self.cursor = FakeCursor(list(self.docs))
        return self.cursor


class TestPaginate:
    """Tests for paginate function."""

    @pytest.mark.asyncio
    async def test_page(self):
        """Test that one sorted page is returned with the full count."""
        collection = FakeCollection([{"n": 3}, {"n": 1}, {"n": 2}, {"n": 5}, {"n": 4}])

        page = await paginate(collection, {"kind": {"$eq": "Casa"}}, [("n", -1)], 2, 1, lambda doc: doc["n"])

        assert page.items == [4, 3]
        assert page.total == 5
        assert page.has_more
        assert collection.queries == [{"kind": {"$eq": "Casa"}}, {"kind": {"$eq": "Casa"}}]
        assert collection.cursor.calls == [("sort", "n", -1), ("skip", 1), ("limit", 2)]

    def test_last_page_has_no_more(self):
        """Test has_more on the final page."""
        assert not PaginationResult[int](items=[1, 2], total=4, limit=2, offset=2).has_more
