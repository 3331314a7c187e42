from dataclasses import dataclass
from uuid import UUID

from tradehub.application.errors import ListingNotFoundError
from tradehub.application.interfaces.listing_repository import ProductRepository
from tradehub.domain.entities.product import Product


@dataclass
class GetProductInput:
    product_id: UUID


class GetProduct:
    """Use case: show a public product and count the view."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def execute(self, input_data: GetProductInput) -> Product:
        product = await self._product_repo.get_by_id(input_data.product_id)
        if product is None or not product.status.is_public:
            raise ListingNotFoundError(input_data.product_id)

        await self._product_repo.increment_views(product.id)
        product.record_view()
        return product
