from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any
from uuid import UUID

import structlog

from tradehub.application.errors import CategoryNotFoundError, UnknownUserError
from tradehub.application.interfaces.catalog_repository import CategoryRepository, UserDirectory
from tradehub.application.interfaces.event_publisher import EventPublisher
from tradehub.application.interfaces.listing_repository import ProductRepository
from tradehub.domain.entities.product import Product
from tradehub.domain.enums.product_availability import ProductAvailability
from tradehub.domain.enums.product_condition import ProductCondition

logger = structlog.get_logger(__name__)


@dataclass
class CreateProductInput:
    owner_id: UUID
    category_id: UUID
    title: str
    description: str
    country: str
    price: Decimal | None = None
    currency: str = "USD"
    condition: ProductCondition = ProductCondition.NEW
    availability: ProductAvailability = ProductAvailability.AVAILABLE
    # Optional descriptive fields (short_desc, brand, images, ...), passed to Product as-is.
    details: dict[str, Any] = field(default_factory=dict)


class CreateProduct:
    """
    Use case: list a new product for the acting user.

    Resolves the owner and category, persists the product in ACTIVE status
    and publishes a ProductCreatedEvent.
    """

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
        user_directory: UserDirectory,
        event_publisher: EventPublisher,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo
        self._user_directory = user_directory
        self._event_publisher = event_publisher

    async def execute(self, input_data: CreateProductInput) -> Product:
        owner = await self._user_directory.get_owner(input_data.owner_id)
        if owner is None:
            raise UnknownUserError(input_data.owner_id)

        category = await self._category_repo.get_by_id(input_data.category_id)
        if category is None or not category.is_active:
            raise CategoryNotFoundError(input_data.category_id)

        product = Product.create(
            owner=owner,
            category=category.summary(),
            title=input_data.title,
            description=input_data.description,
            country=input_data.country,
            price=input_data.price,
            currency=input_data.currency,
            condition=input_data.condition,
            availability=input_data.availability,
            **input_data.details,
        )

        await self._product_repo.add(product)
        # Sent before the request session commits. If that commit fails, subscribers
        # have already seen an event for a product that was rolled back.
        await self._event_publisher.publish_many(product.collect_events())

        logger.info(
            "product_created",
            product_id=str(product.id),
            owner_id=str(owner.id),
            category=category.name,
        )
        return product
