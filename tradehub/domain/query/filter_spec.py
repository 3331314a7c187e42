"""
Validated, fully-resolved browse filters.

Instances are only built by the query-parameter parser: every field is either
a validated value or None, never a raw request string.
"""
from dataclasses import dataclass

from tradehub.domain.enums.product_availability import ProductAvailability
from tradehub.domain.enums.product_condition import ProductCondition
from tradehub.domain.enums.sort_key import SortKey
from tradehub.domain.enums.trade_type import TradeType

DEFAULT_PAGE = 1
DEFAULT_PRODUCT_LIMIT = 12
DEFAULT_TRADE_SUGGESTION_LIMIT = 10


@dataclass(frozen=True)
class ProductFilterSpec:
    search: str | None = None
    category: str | None = None
    country: str | None = None
    # min_price <= max_price is not enforced; an inverted range matches nothing.
    min_price: float | None = None
    max_price: float | None = None
    condition: ProductCondition | None = None
    availability: ProductAvailability | None = None
    sort_by: SortKey = SortKey.NEWEST
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_PRODUCT_LIMIT

    @property
    def has_price_bounds(self) -> bool:
        return self.min_price is not None or self.max_price is not None


@dataclass(frozen=True)
class TradeSuggestionFilterSpec:
    search: str | None = None
    category: str | None = None
    country: str | None = None
    type: TradeType | None = None
    sort_by: SortKey = SortKey.NEWEST
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_TRADE_SUGGESTION_LIMIT
