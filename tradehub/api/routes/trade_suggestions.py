from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from tradehub.api.dependencies import (
    get_create_trade_suggestion_use_case,
    get_current_user_id,
    get_search_trade_suggestions_use_case,
)
from tradehub.api.schemas.common import OwnerResponse, PaginationResponse
from tradehub.api.schemas.trade_suggestion_schemas import (
    CreateTradeSuggestionRequest,
    TradeSuggestionDetailResponse,
    TradeSuggestionListData,
    TradeSuggestionListResponse,
    TradeSuggestionResponse,
)
from tradehub.application.use_cases.create_trade_suggestion import (
    CreateTradeSuggestion,
    CreateTradeSuggestionInput,
)
from tradehub.application.use_cases.search_trade_suggestions import (
    SearchTradeSuggestions,
    SearchTradeSuggestionsInput,
)
from tradehub.domain.entities.trade_suggestion import TradeSuggestion

router = APIRouter(prefix="/trade-suggestions", tags=["trade-suggestions"])


def _suggestion_to_response(suggestion: TradeSuggestion) -> TradeSuggestionResponse:
    owner = suggestion.owner
    return TradeSuggestionResponse(
        id=suggestion.id,
        title=suggestion.title,
        description=suggestion.description,
        type=suggestion.type,
        category=suggestion.category,
        country=suggestion.country,
        budget=suggestion.budget,
        quantity=suggestion.quantity,
        timeline=suggestion.timeline,
        specifications=suggestion.specifications,
        contact_info=suggestion.contact_info,
        status=suggestion.status,
        priority=suggestion.priority,
        views=suggestion.views,
        expires_at=suggestion.expires_at,
        created_at=suggestion.created_at,
        updated_at=suggestion.updated_at,
        user_id=owner.id,
        user=OwnerResponse(
            id=owner.id,
            name=owner.name,
            company=owner.company,
            country=owner.country,
            city=owner.city,
            is_verified=owner.is_verified,
        ),
    )


@router.get("", response_model=TradeSuggestionListResponse)
async def search_trade_suggestions(
    request: Request,
    use_case: SearchTradeSuggestions = Depends(get_search_trade_suggestions_use_case),
) -> TradeSuggestionListResponse:
    """Browse active trade suggestions (type, category, country, search, sortBy, page, limit)."""
    result = await use_case.execute(
        SearchTradeSuggestionsInput(query_params=dict(request.query_params))
    )
    return TradeSuggestionListResponse(
        data=TradeSuggestionListData(
            trade_suggestions=[_suggestion_to_response(s) for s in result.items],
            pagination=PaginationResponse.from_meta(result.pagination),
        )
    )


@router.post(
    "", status_code=status.HTTP_201_CREATED, response_model=TradeSuggestionDetailResponse
)
async def create_trade_suggestion(
    body: CreateTradeSuggestionRequest,
    user_id: UUID = Depends(get_current_user_id),
    use_case: CreateTradeSuggestion = Depends(get_create_trade_suggestion_use_case),
) -> TradeSuggestionDetailResponse:
    specifications = (
        body.specifications.model_dump(by_alias=True, exclude_none=True)
        if body.specifications
        else {}
    )
    suggestion = await use_case.execute(
        CreateTradeSuggestionInput(
            owner_id=user_id,
            title=body.title,
            description=body.description,
            type=body.type,
            category=body.category,
            country=body.country,
            timeline=body.timeline,
            budget=body.budget,
            quantity=body.quantity,
            specifications=specifications,
            contact_info=body.contact_info.model_dump(by_alias=True, exclude_none=True),
        )
    )
    return TradeSuggestionDetailResponse(data=_suggestion_to_response(suggestion))
