from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class OwnerSummary:
    """Public profile of the user who posted a listing."""

    id: UUID
    name: str | None = None
    company: str | None = None
    country: str | None = None
    city: str | None = None
    is_verified: bool = False
