"""
Compiles storage-agnostic ListingQuery criteria into SQLAlchemy clauses.

Each repository declares how listing field names map onto its model: either a
plain column, or a column reached through a many-to-one relationship (which
compiles to an EXISTS via ``relationship.has(...)``).
"""
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from sqlalchemy import ColumnElement, and_, func, or_, true
from sqlalchemy.orm import InstrumentedAttribute

from tradehub.domain.query.criteria import (
    AnyFieldContains,
    Criterion,
    FieldEquals,
    FieldEqualsIgnoreCase,
    NumericRange,
    SortOrder,
)


@dataclass(frozen=True)
class RelatedColumn:
    relationship: InstrumentedAttribute[Any]
    column: InstrumentedAttribute[Any]


FieldTarget = InstrumentedAttribute[Any] | RelatedColumn
ClauseBuilder = Callable[[Any], ColumnElement[bool]]


class UnsupportedFieldError(ValueError):
    def __init__(self, field: str) -> None:
        super().__init__(f"Field '{field}' is not queryable on this listing type.")


class CriteriaCompiler:
    def __init__(self, fields: dict[str, FieldTarget]) -> None:
        self._fields = fields

    def where(self, criteria: tuple[Criterion, ...]) -> list[ColumnElement[bool]]:
        return [self._compile(criterion) for criterion in criteria]

    def order_by(self, ordering: tuple[SortOrder, ...]) -> list[Any]:
        clauses = []
        for order in ordering:
            target = self._target(order.field)
            if isinstance(target, RelatedColumn):
                raise UnsupportedFieldError(order.field)
            direction = target.desc() if order.descending else target.asc()
            clauses.append(direction.nulls_last())
        return clauses

    def _target(self, field: str) -> FieldTarget:
        try:
            return self._fields[field]
        except KeyError:
            raise UnsupportedFieldError(field) from None

    def _on(self, field: str, build: ClauseBuilder) -> ColumnElement[bool]:
        target = self._target(field)
        if isinstance(target, RelatedColumn):
            return target.relationship.has(build(target.column))
        return build(target)

    def _compile(self, criterion: Criterion) -> ColumnElement[bool]:
        if isinstance(criterion, FieldEquals):
            return self._on(criterion.field, lambda col: col == criterion.value)

        if isinstance(criterion, FieldEqualsIgnoreCase):
            value = criterion.value.lower()
            return self._on(criterion.field, lambda col: func.lower(col) == value)

        if isinstance(criterion, AnyFieldContains):
            term = criterion.term
            return or_(
                *(
                    self._on(field, lambda col: col.icontains(term, autoescape=True))
                    for field in criterion.fields
                )
            )

        if isinstance(criterion, NumericRange):
            def _range(col: Any) -> ColumnElement[bool]:
                bounds = []
                if criterion.lower is not None:
                    bounds.append(col >= criterion.lower)
                if criterion.upper is not None:
                    bounds.append(col <= criterion.upper)
                # NULL compares as unknown, so a missing value never satisfies a bound.
                return and_(col.is_not(None), *bounds) if bounds else true()

            return self._on(criterion.field, _range)

        raise TypeError(f"Unknown criterion type: {type(criterion).__name__}")
