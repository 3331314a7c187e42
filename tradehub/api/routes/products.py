from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from tradehub.api.dependencies import (
    get_create_product_use_case,
    get_current_user_id,
    get_get_product_use_case,
    get_search_products_use_case,
)
from tradehub.api.schemas.common import OwnerResponse, PaginationResponse
from tradehub.api.schemas.product_schemas import (
    CategorySummaryResponse,
    CreateProductRequest,
    ProductDetailResponse,
    ProductListData,
    ProductListResponse,
    ProductResponse,
)
from tradehub.application.use_cases.create_product import CreateProduct, CreateProductInput
from tradehub.application.use_cases.get_product import GetProduct, GetProductInput
from tradehub.application.use_cases.search_products import SearchProducts, SearchProductsInput
from tradehub.domain.entities.product import Product

router = APIRouter(prefix="/products", tags=["products"])

# Request fields stored on Product as-is, beyond the ones CreateProductInput names.
_DETAIL_FIELDS = (
    "short_desc",
    "min_order",
    "unit",
    "images",
    "specifications",
    "hs_code",
    "origin",
    "brand",
    "model",
    "state",
    "city",
    "keywords",
)


def _product_to_response(product: Product) -> ProductResponse:
    owner = product.owner
    return ProductResponse(
        id=product.id,
        title=product.title,
        slug=product.slug,
        description=product.description,
        short_desc=product.short_desc,
        price=float(product.price) if product.price is not None else None,
        currency=product.currency,
        min_order=product.min_order,
        unit=product.unit,
        images=product.images,
        specifications=product.specifications,
        hs_code=product.hs_code,
        origin=product.origin,
        brand=product.brand,
        model=product.model,
        condition=product.condition,
        availability=product.availability,
        status=product.status,
        views=product.views,
        is_promoted=product.is_promoted,
        country=product.country,
        state=product.state,
        city=product.city,
        keywords=product.keywords,
        created_at=product.created_at,
        updated_at=product.updated_at,
        user_id=owner.id,
        category_id=product.category.id,
        user=OwnerResponse(
            id=owner.id,
            name=owner.name,
            company=owner.company,
            country=owner.country,
            city=owner.city,
            is_verified=owner.is_verified,
        ),
        category=CategorySummaryResponse(
            id=product.category.id, name=product.category.name, slug=product.category.slug
        ),
    )


@router.get("", response_model=ProductListResponse)
async def search_products(
    request: Request,
    use_case: SearchProducts = Depends(get_search_products_use_case),
) -> ProductListResponse:
    """
    Browse public products.

    Query parameters: search, category, country, minPrice, maxPrice,
    condition, availability, sortBy, page, limit.
    """
    result = await use_case.execute(SearchProductsInput(query_params=dict(request.query_params)))
    return ProductListResponse(
        data=ProductListData(
            products=[_product_to_response(p) for p in result.items],
            pagination=PaginationResponse.from_meta(result.pagination),
        )
    )


@router.get("/{product_id}", response_model=ProductDetailResponse)
async def get_product(
    product_id: UUID,
    use_case: GetProduct = Depends(get_get_product_use_case),
) -> ProductDetailResponse:
    product = await use_case.execute(GetProductInput(product_id=product_id))
    return ProductDetailResponse(data=_product_to_response(product))


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ProductDetailResponse)
async def create_product(
    body: CreateProductRequest,
    user_id: UUID = Depends(get_current_user_id),
    use_case: CreateProduct = Depends(get_create_product_use_case),
) -> ProductDetailResponse:
    product = await use_case.execute(
        CreateProductInput(
            owner_id=user_id,
            category_id=body.category_id,
            title=body.title,
            description=body.description,
            country=body.country,
            price=body.price,
            currency=body.currency,
            condition=body.condition,
            availability=body.availability,
            details={name: getattr(body, name) for name in _DETAIL_FIELDS},
        )
    )
    return ProductDetailResponse(data=_product_to_response(product))
