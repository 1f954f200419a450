"""Pure functions for building MongoDB queries from filters."""

from collections.abc import Iterable
from typing import Any

from sogrinha.core.modules.filter.models import (
    ContractEndDateFilter,
    ContractFilter,
    ContractKindFilter,
    ContractReferenceFilter,
    ContractStatusFilter,
    PartyFilter,
    RealEstateFilter,
    RealEstateKindFilter,
    RealEstateStatusFilter,
    RealEstateTextFilter,
)
from sogrinha.utils import normalize_search_value

# Upper bound appended to a prefix so that a range query matches every value starting with it
PREFIX_RANGE_END = "\uf8ff"

Condition = tuple[str, dict[str, Any]]

PARTY_SORT: list[tuple[str, int]] = [("search.full_name", 1)]
REAL_ESTATE_SORT: list[tuple[str, int]] = [("search.municipal_registration", 1)]
CONTRACT_SORT: list[tuple[str, int]] = [("start_date", -1)]


def build_prefix_range(value: str) -> dict[str, Any] | None:
    """Build a range matching every normalized value that starts with ``value``.

    Returns None when nothing searchable is left after normalization, so the
    filter is skipped instead of matching nothing.
    """
    normalized = normalize_search_value(value)
    if normalized is None:
        return None
    return {"$gte": normalized, "$lte": normalized + PREFIX_RANGE_END}


def build_party_condition(condition: PartyFilter) -> Condition | None:
    prefix = build_prefix_range(condition.value)
    if prefix is None:
        return None
    return f"search.{condition.field.value}", prefix


def build_real_estate_condition(condition: RealEstateFilter) -> Condition | None:
    if isinstance(condition, RealEstateTextFilter):
        prefix = build_prefix_range(condition.value)
        if prefix is None:
            return None
        return f"search.{condition.field}", prefix
    if isinstance(condition, RealEstateKindFilter | RealEstateStatusFilter):
        return condition.field, {"$eq": condition.value.value}
    raise ValueError(f"Unsupported real estate filter {condition!r} - programming error")


def build_contract_condition(condition: ContractFilter) -> Condition:
    if isinstance(condition, ContractKindFilter | ContractStatusFilter):
        return condition.field, {"$eq": condition.value.value}
    if isinstance(condition, ContractReferenceFilter):
        return condition.field, {"$eq": condition.value}
    if isinstance(condition, ContractEndDateFilter):
        return condition.field, {"$gte": condition.value}
    raise ValueError(f"Unsupported contract filter {condition!r} - programming error")


def merge_conditions(conditions: Iterable[Condition | None]) -> dict[str, Any]:
    """Combine field conditions with AND, moving repeated fields into ``$and``."""
    query: dict[str, Any] = {}
    for condition in conditions:
        if condition is None:
            continue
        field_path, operator = condition
        if field_path in query:
            if "$and" not in query:
                query["$and"] = [{field_path: query.pop(field_path)}]
            query["$and"].append({field_path: operator})
        elif "$and" in query and any(field_path in clause for clause in query["$and"]):
            query["$and"].append({field_path: operator})
        else:
            query[field_path] = operator
    return query


def build_party_query(filters: list[PartyFilter]) -> dict[str, Any]:
    return merge_conditions(build_party_condition(f) for f in filters)


def build_real_estate_query(filters: list[RealEstateFilter]) -> dict[str, Any]:
    return merge_conditions(build_real_estate_condition(f) for f in filters)


def build_contract_query(filters: list[ContractFilter]) -> dict[str, Any]:
    return merge_conditions(build_contract_condition(f) for f in filters)
