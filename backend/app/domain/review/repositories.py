"""Review repository protocol."""
from typing import Protocol

from app.domain.review.entities import Review


class ReviewRepository(Protocol):
    """Review repository protocol."""

    async def create(self, review: Review) -> Review:
        """Store a new review."""
        ...

    async def get_by_id(self, review_id: str) -> Review | None:
        """Get review by ID."""
        ...

    async def list_by_product(self, product_id: str) -> list[Review]:
        """List reviews for a product, most recent first."""
        ...

    async def list_recent(self, limit: int) -> list[Review]:
        """List the most recent reviews across all products."""
        ...
