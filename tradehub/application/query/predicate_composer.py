"""
Pure translation of filter specs into storage-agnostic ListingQuery objects.
"""
from tradehub.domain.enums.listing_status import ProductStatus, SuggestionStatus
from tradehub.domain.enums.sort_key import SortKey
from tradehub.domain.query.criteria import (
    AnyFieldContains,
    Criterion,
    FieldEquals,
    FieldEqualsIgnoreCase,
    ListingQuery,
    NumericRange,
    SortOrder,
)
from tradehub.domain.query.filter_spec import ProductFilterSpec, TradeSuggestionFilterSpec

PRODUCT_SEARCH_FIELDS = ("title", "description", "brand", "owner_company")
TRADE_SUGGESTION_SEARCH_FIELDS = ("title", "description")

SORT_ORDERS: dict[SortKey, SortOrder] = {
    SortKey.NEWEST: SortOrder("created_at", descending=True),
    SortKey.OLDEST: SortOrder("created_at"),
    SortKey.PRICE_LOW: SortOrder("price"),
    SortKey.PRICE_HIGH: SortOrder("price", descending=True),
    SortKey.POPULAR: SortOrder("views", descending=True),
    SortKey.NAME: SortOrder("title"),
}

# Stable secondary key so repeated queries paginate identically.
TIE_BREAK = SortOrder("id")


def ordering_for(sort_by: SortKey) -> tuple[SortOrder, ...]:
    return (SORT_ORDERS[sort_by], TIE_BREAK)


def compose_product_query(filters: ProductFilterSpec) -> ListingQuery:
    criteria: list[Criterion] = [FieldEquals("status", ProductStatus.ACTIVE)]

    if filters.search:
        criteria.append(AnyFieldContains(PRODUCT_SEARCH_FIELDS, filters.search))
    if filters.category:
        # Products are filtered on the category's display name, not its id.
        criteria.append(FieldEqualsIgnoreCase("category_name", filters.category))
    if filters.country:
        criteria.append(FieldEqualsIgnoreCase("country", filters.country))
    if filters.has_price_bounds:
        criteria.append(NumericRange("price", lower=filters.min_price, upper=filters.max_price))
    if filters.condition is not None:
        criteria.append(FieldEquals("condition", filters.condition))
    if filters.availability is not None:
        criteria.append(FieldEquals("availability", filters.availability))

    return ListingQuery(criteria=tuple(criteria), ordering=ordering_for(filters.sort_by))


def compose_trade_suggestion_query(filters: TradeSuggestionFilterSpec) -> ListingQuery:
    criteria: list[Criterion] = [FieldEquals("status", SuggestionStatus.ACTIVE)]

    if filters.search:
        criteria.append(AnyFieldContains(TRADE_SUGGESTION_SEARCH_FIELDS, filters.search))
    if filters.category:
        criteria.append(FieldEquals("category", filters.category))
    if filters.country:
        criteria.append(FieldEqualsIgnoreCase("country", filters.country))
    if filters.type is not None:
        criteria.append(FieldEquals("type", filters.type))

    return ListingQuery(criteria=tuple(criteria), ordering=ordering_for(filters.sort_by))
