from fastapi import APIRouter, Depends

from tradehub.api.dependencies import get_list_categories_use_case
from tradehub.api.schemas.category_schemas import CategoryListResponse, CategoryResponse
from tradehub.application.use_cases.list_categories import ListCategories

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=CategoryListResponse)
async def list_categories(
    use_case: ListCategories = Depends(get_list_categories_use_case),
) -> CategoryListResponse:
    categories = await use_case.execute()
    return CategoryListResponse(
        data=[
            CategoryResponse(
                id=c.id,
                name=c.name,
                slug=c.slug,
                description=c.description,
                image=c.image,
                product_count=c.active_product_count,
            )
            for c in categories
        ]
    )
