from collections.abc import Mapping
from dataclasses import dataclass

import structlog

from tradehub.application.interfaces.listing_repository import TradeSuggestionRepository
from tradehub.application.query.filter_parser import parse_trade_suggestion_filters
from tradehub.application.query.paginator import fetch_page
from tradehub.application.query.predicate_composer import compose_trade_suggestion_query
from tradehub.domain.entities.trade_suggestion import TradeSuggestion
from tradehub.domain.query.filter_spec import DEFAULT_TRADE_SUGGESTION_LIMIT
from tradehub.domain.query.page_result import PageResult

logger = structlog.get_logger(__name__)


@dataclass
class SearchTradeSuggestionsInput:
    query_params: Mapping[str, str]


class SearchTradeSuggestions:
    """Use case: browse/search active trade suggestions."""

    def __init__(
        self,
        suggestion_repo: TradeSuggestionRepository,
        default_limit: int = DEFAULT_TRADE_SUGGESTION_LIMIT,
    ) -> None:
        self._suggestion_repo = suggestion_repo
        self._default_limit = default_limit

    async def execute(
        self, input_data: SearchTradeSuggestionsInput
    ) -> PageResult[TradeSuggestion]:
        filters = parse_trade_suggestion_filters(
            input_data.query_params, default_limit=self._default_limit
        )
        query = compose_trade_suggestion_query(filters)

        result = await fetch_page(
            page=filters.page,
            limit=filters.limit,
            find=lambda skip, take: self._suggestion_repo.find(query, skip=skip, take=take),
            count=lambda: self._suggestion_repo.count(query),
        )

        logger.info(
            "trade_suggestions_searched",
            criteria=len(query.criteria),
            sort_by=filters.sort_by.value,
            page=filters.page,
            limit=filters.limit,
            total_count=result.pagination.total_count,
        )
        return result
