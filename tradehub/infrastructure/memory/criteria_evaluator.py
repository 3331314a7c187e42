"""
Evaluates ListingQuery criteria and orderings against plain Python objects.

Field names are read as attributes of the listing entity, so a criterion on
``owner_company`` resolves through Product.owner_company.
"""
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from tradehub.domain.query.criteria import (
    AnyFieldContains,
    Criterion,
    FieldEquals,
    FieldEqualsIgnoreCase,
    ListingQuery,
    NumericRange,
    SortOrder,
)

T = TypeVar("T")


def matches(record: Any, criterion: Criterion) -> bool:
    if isinstance(criterion, FieldEquals):
        return getattr(record, criterion.field) == criterion.value

    if isinstance(criterion, FieldEqualsIgnoreCase):
        value = getattr(record, criterion.field)
        return value is not None and value.lower() == criterion.value.lower()

    if isinstance(criterion, AnyFieldContains):
        term = criterion.term.lower()
        return any(
            term in value.lower()
            for value in (getattr(record, field) for field in criterion.fields)
            if value
        )

    if isinstance(criterion, NumericRange):
        value = getattr(record, criterion.field)
        if value is None:
            return False
        if criterion.lower is not None and float(value) < criterion.lower:
            return False
        if criterion.upper is not None and float(value) > criterion.upper:
            return False
        return True

    raise TypeError(f"Unknown criterion type: {type(criterion).__name__}")


def filter_records(records: Iterable[T], query: ListingQuery) -> list[T]:
    return [r for r in records if all(matches(r, c) for c in query.criteria)]


def _sort_key(order: SortOrder) -> Callable[[Any], tuple[bool, Any]]:
    # Missing values sort last in either direction.
    if order.descending:
        return lambda r: (getattr(r, order.field) is not None, getattr(r, order.field))
    return lambda r: (getattr(r, order.field) is None, getattr(r, order.field))


def sort_records(records: list[T], ordering: tuple[SortOrder, ...]) -> list[T]:
    ordered = list(records)
    # Stable sorts applied from the least significant key up.
    for order in reversed(ordering):
        ordered.sort(key=_sort_key(order), reverse=order.descending)
    return ordered
