from collections.abc import Mapping
from dataclasses import dataclass

import structlog

from tradehub.application.interfaces.listing_repository import ProductRepository
from tradehub.application.query.filter_parser import parse_product_filters
from tradehub.application.query.paginator import fetch_page
from tradehub.application.query.predicate_composer import compose_product_query
from tradehub.domain.entities.product import Product
from tradehub.domain.query.filter_spec import DEFAULT_PRODUCT_LIMIT
from tradehub.domain.query.page_result import PageResult

logger = structlog.get_logger(__name__)


@dataclass
class SearchProductsInput:
    query_params: Mapping[str, str]


class SearchProducts:
    """
    Use case: browse/search public products.

    Parses the raw query string (may raise FilterValidationError before the
    store is touched), composes the query and reads one page plus the total.
    """

    def __init__(
        self, product_repo: ProductRepository, default_limit: int = DEFAULT_PRODUCT_LIMIT
    ) -> None:
        self._product_repo = product_repo
        self._default_limit = default_limit

    async def execute(self, input_data: SearchProductsInput) -> PageResult[Product]:
        filters = parse_product_filters(input_data.query_params, default_limit=self._default_limit)
        query = compose_product_query(filters)

        result = await fetch_page(
            page=filters.page,
            limit=filters.limit,
            find=lambda skip, take: self._product_repo.find(query, skip=skip, take=take),
            count=lambda: self._product_repo.count(query),
        )

        logger.info(
            "products_searched",
            criteria=len(query.criteria),
            sort_by=filters.sort_by.value,
            page=filters.page,
            limit=filters.limit,
            total_count=result.pagination.total_count,
        )
        return result
