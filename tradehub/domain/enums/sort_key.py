from enum import Enum


class SortKey(str, Enum):
    """Browse orderings accepted through the `sortBy` query parameter."""

    NEWEST = "newest"
    OLDEST = "oldest"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    POPULAR = "popular"
    NAME = "name"

    @classmethod
    def parse(cls, raw: str | None, allowed: frozenset["SortKey"] | None = None) -> "SortKey":
        """Resolve a raw value, falling back to NEWEST when it is absent or unknown."""
        try:
            key = cls(raw)
        except ValueError:
            return cls.NEWEST
        if allowed is not None and key not in allowed:
            return cls.NEWEST
        return key


# Trade suggestions carry no numeric price.
TRADE_SUGGESTION_SORT_KEYS: frozenset[SortKey] = frozenset(
    {SortKey.NEWEST, SortKey.OLDEST, SortKey.POPULAR, SortKey.NAME}
)
