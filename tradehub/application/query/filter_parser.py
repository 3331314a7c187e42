"""
Query-string parsing for the browse endpoints.

Validation is intentionally uneven and mirrors what the browse UI has always
done:

* enum filters (condition, availability, type) are strict and fail the request
* numeric price bounds soft-fail: garbage is treated as "no bound"
* sortBy silently falls back to ``newest``
* page/limit fall back to their defaults on garbage or non-positive input
"""
import math
import re
from collections.abc import Mapping
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError

from tradehub.domain.enums.product_availability import ProductAvailability
from tradehub.domain.enums.product_condition import ProductCondition
from tradehub.domain.enums.sort_key import TRADE_SUGGESTION_SORT_KEYS, SortKey
from tradehub.domain.enums.trade_type import TradeType
from tradehub.domain.query.filter_spec import (
    DEFAULT_PAGE,
    DEFAULT_PRODUCT_LIMIT,
    DEFAULT_TRADE_SUGGESTION_LIMIT,
    ProductFilterSpec,
    TradeSuggestionFilterSpec,
)

# Sentinel sent by the category dropdown when nothing is selected.
ALL_CATEGORIES = "All Categories"


class FilterValidationError(Exception):
    """Raised when a strict query parameter holds a value outside its enumeration."""

    def __init__(self, field: str, message: str, allowed_values: tuple[str, ...] = ()) -> None:
        self.field = field
        self.message = message
        self.allowed_values = allowed_values
        super().__init__(message)


def _blank_to_none(value: Any) -> Any:
    if value is None or value == "":
        return None
    return value


# Numbers are read from the leading numeric prefix, so "3abc" is 3 and "2.5" is 2
# as a page number. Anything without such a prefix counts as absent.
_LEADING_INT = re.compile(r"\s*[+-]?\d+", re.ASCII)
_LEADING_FLOAT = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def _soft_float(value: Any) -> float | None:
    if not isinstance(value, str):
        return None
    match = _LEADING_FLOAT.match(value)
    if match is None:
        return None
    parsed = float(match.group())
    return parsed if math.isfinite(parsed) else None


def _positive_int(value: Any) -> int | None:
    if not isinstance(value, str):
        return None
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    try:
        parsed = int(match.group())
    except ValueError:
        # Longer than the interpreter will convert.
        return None
    return parsed if parsed > 0 else None


OptionalText = Annotated[str | None, BeforeValidator(_blank_to_none)]
SoftFloat = Annotated[float | None, BeforeValidator(_soft_float)]
PositiveInt = Annotated[int | None, BeforeValidator(_positive_int)]


class _ListingQueryParams(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    search: OptionalText = None
    category: OptionalText = None
    country: OptionalText = None
    sort_by: str | None = Field(default=None, alias="sortBy")
    page: PositiveInt = None
    limit: PositiveInt = None


class _ProductQueryParams(_ListingQueryParams):
    min_price: SoftFloat = Field(default=None, alias="minPrice")
    max_price: SoftFloat = Field(default=None, alias="maxPrice")
    condition: Annotated[ProductCondition | None, BeforeValidator(_blank_to_none)] = None
    availability: Annotated[ProductAvailability | None, BeforeValidator(_blank_to_none)] = None


class _TradeSuggestionQueryParams(_ListingQueryParams):
    type: Annotated[TradeType | None, BeforeValidator(_blank_to_none)] = None


_STRICT_FIELDS: dict[str, type[Enum]] = {
    "condition": ProductCondition,
    "availability": ProductAvailability,
    "type": TradeType,
}


def _validate(model: type[BaseModel], raw: Mapping[str, str]) -> Any:
    try:
        return model.model_validate(dict(raw))
    except ValidationError as exc:
        first = exc.errors()[0]
        field = str(first["loc"][0]) if first["loc"] else "query"
        enum_type = _STRICT_FIELDS.get(field)
        allowed = tuple(member.value for member in enum_type) if enum_type else ()
        if allowed:
            message = f"Invalid value for '{field}'. Allowed values: {', '.join(allowed)}"
        else:
            message = f"Invalid value for '{field}': {first['msg']}"
        raise FilterValidationError(field, message, allowed) from exc


def parse_product_filters(
    raw: Mapping[str, str], *, default_limit: int = DEFAULT_PRODUCT_LIMIT
) -> ProductFilterSpec:
    params: _ProductQueryParams = _validate(_ProductQueryParams, raw)
    category = params.category if params.category != ALL_CATEGORIES else None
    return ProductFilterSpec(
        search=params.search,
        category=category,
        country=params.country,
        min_price=params.min_price,
        max_price=params.max_price,
        condition=params.condition,
        availability=params.availability,
        sort_by=SortKey.parse(params.sort_by),
        page=params.page or DEFAULT_PAGE,
        limit=params.limit or default_limit,
    )


def parse_trade_suggestion_filters(
    raw: Mapping[str, str], *, default_limit: int = DEFAULT_TRADE_SUGGESTION_LIMIT
) -> TradeSuggestionFilterSpec:
    params: _TradeSuggestionQueryParams = _validate(_TradeSuggestionQueryParams, raw)
    return TradeSuggestionFilterSpec(
        search=params.search,
        category=params.category,
        country=params.country,
        type=params.type,
        sort_by=SortKey.parse(params.sort_by, TRADE_SUGGESTION_SORT_KEYS),
        page=params.page or DEFAULT_PAGE,
        limit=params.limit or default_limit,
    )
