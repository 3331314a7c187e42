from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import Field

from tradehub.api.schemas.common import CamelModel, OwnerResponse, PaginationResponse
from tradehub.domain.enums.listing_status import ProductStatus
from tradehub.domain.enums.product_availability import ProductAvailability
from tradehub.domain.enums.product_condition import ProductCondition


class CategorySummaryResponse(CamelModel):
    id: UUID
    name: str
    slug: str


class ProductResponse(CamelModel):
    id: UUID
    title: str
    slug: str
    description: str
    short_desc: str | None = None
    price: float | None = None
    currency: str
    min_order: str | None = None
    unit: str | None = None
    images: list[str]
    specifications: dict[str, Any]
    hs_code: str | None = None
    origin: str | None = None
    brand: str | None = None
    model: str | None = None
    condition: ProductCondition
    availability: ProductAvailability
    status: ProductStatus
    views: int
    is_promoted: bool
    country: str
    state: str | None = None
    city: str | None = None
    keywords: list[str]
    created_at: datetime
    updated_at: datetime
    user_id: UUID
    category_id: UUID
    user: OwnerResponse
    category: CategorySummaryResponse


class ProductListData(CamelModel):
    products: list[ProductResponse]
    pagination: PaginationResponse


class ProductListResponse(CamelModel):
    success: bool = True
    data: ProductListData


class ProductDetailResponse(CamelModel):
    success: bool = True
    data: ProductResponse


class CreateProductRequest(CamelModel):
    title: str = Field(min_length=1, max_length=512)
    description: str = Field(min_length=1)
    short_desc: str | None = Field(default=None, max_length=512)
    price: Decimal | None = Field(default=None, gt=0, max_digits=12, decimal_places=2)
    currency: str = Field(default="USD", pattern=r"^[A-Z]{3}$")
    min_order: str | None = Field(default=None, max_length=128)
    unit: str | None = Field(default=None, max_length=64)
    images: list[str] = Field(default_factory=list)
    specifications: dict[str, Any] = Field(default_factory=dict)
    hs_code: str | None = Field(default=None, max_length=32)
    origin: str | None = Field(default=None, max_length=128)
    brand: str | None = Field(default=None, max_length=128)
    model: str | None = Field(default=None, max_length=128)
    condition: ProductCondition = ProductCondition.NEW
    availability: ProductAvailability = ProductAvailability.AVAILABLE
    country: str = Field(min_length=1, max_length=128)
    state: str | None = Field(default=None, max_length=128)
    city: str | None = Field(default=None, max_length=128)
    category_id: UUID
    keywords: list[str] = Field(default_factory=list)
