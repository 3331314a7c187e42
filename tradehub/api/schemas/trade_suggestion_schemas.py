from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import Field

from tradehub.api.schemas.common import CamelModel, OwnerResponse, PaginationResponse
from tradehub.domain.enums.listing_status import SuggestionStatus
from tradehub.domain.enums.trade_type import TradeType


class TradeSuggestionResponse(CamelModel):
    id: UUID
    title: str
    description: str
    type: TradeType
    category: str
    country: str
    budget: str | None = None
    quantity: str | None = None
    timeline: str | None = None
    specifications: dict[str, Any]
    contact_info: dict[str, Any]
    status: SuggestionStatus
    priority: int
    views: int
    expires_at: datetime | None = None
    created_at: datetime
    updated_at: datetime
    user_id: UUID
    user: OwnerResponse


class TradeSuggestionListData(CamelModel):
    trade_suggestions: list[TradeSuggestionResponse]
    pagination: PaginationResponse


class TradeSuggestionListResponse(CamelModel):
    success: bool = True
    data: TradeSuggestionListData


class TradeSuggestionDetailResponse(CamelModel):
    success: bool = True
    data: TradeSuggestionResponse


class TradeSpecifications(CamelModel):
    product_name: str | None = None
    brand: str | None = None
    model: str | None = None
    quality: str | None = None
    packaging: str | None = None
    certification: str | None = None
    additional_requirements: str | None = None


class ContactInfo(CamelModel):
    preferred_contact: str
    phone: str | None = None
    email: str | None = None
    company_website: str | None = None
    additional_notes: str | None = None


class CreateTradeSuggestionRequest(CamelModel):
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1)
    type: TradeType
    category: str = Field(min_length=1, max_length=128)
    country: str = Field(min_length=1, max_length=128)
    budget: str | None = Field(default=None, max_length=128)
    quantity: str | None = Field(default=None, max_length=128)
    timeline: str = Field(min_length=1, max_length=128)
    specifications: TradeSpecifications | None = None
    contact_info: ContactInfo
