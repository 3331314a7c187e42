"""
Storage-agnostic query model.

A ListingQuery is an explicit list of criteria (ANDed together) plus an
ordering. Field names refer to listing attributes (``title``,
``owner_company``, ``category_name`` ...); each store adapter decides how a
field maps to its own representation.
"""
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class FieldEquals:
    field: str
    value: Any


@dataclass(frozen=True)
class FieldEqualsIgnoreCase:
    field: str
    value: str


@dataclass(frozen=True)
class AnyFieldContains:
    """Case-insensitive substring match on at least one of ``fields``."""

    fields: tuple[str, ...]
    term: str


@dataclass(frozen=True)
class NumericRange:
    """Inclusive bounds; a record with no value never matches."""

    field: str
    lower: float | None = None
    upper: float | None = None


Criterion = Union[FieldEquals, FieldEqualsIgnoreCase, AnyFieldContains, NumericRange]


@dataclass(frozen=True)
class SortOrder:
    field: str
    descending: bool = False


@dataclass(frozen=True)
class ListingQuery:
    criteria: tuple[Criterion, ...]
    ordering: tuple[SortOrder, ...]
