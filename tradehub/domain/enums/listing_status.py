from enum import Enum


class ProductStatus(str, Enum):
    """Moderation/lifecycle status of a product listing."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    PENDING = "PENDING"
    REJECTED = "REJECTED"
    EXPIRED = "EXPIRED"

    @property
    def is_public(self) -> bool:
        """Only ACTIVE products are returned by browse and search."""
        return self is ProductStatus.ACTIVE


class SuggestionStatus(str, Enum):
    """Lifecycle status of a trade suggestion."""

    ACTIVE = "ACTIVE"
    CLOSED = "CLOSED"
    EXPIRED = "EXPIRED"
    PENDING = "PENDING"

    @property
    def is_public(self) -> bool:
        return self is SuggestionStatus.ACTIVE
