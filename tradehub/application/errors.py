from uuid import UUID


class ListingNotFoundError(Exception):
    def __init__(self, listing_id: UUID) -> None:
        self.listing_id = listing_id
        super().__init__(f"Listing {listing_id} not found.")


class CategoryNotFoundError(Exception):
    def __init__(self, category_id: UUID) -> None:
        self.category_id = category_id
        super().__init__(f"Category {category_id} not found.")


class UnknownUserError(Exception):
    """The acting user id supplied by the identity provider matches no account."""

    def __init__(self, user_id: UUID) -> None:
        self.user_id = user_id
        super().__init__(f"User {user_id} not found.")
