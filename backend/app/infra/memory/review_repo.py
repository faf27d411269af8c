"""In-memory review repository."""
import threading

from app.domain.common.errors import ConflictError
from app.domain.review.entities import Review


class InMemoryReviewRepository:
    """Reviews are immutable, so they are stored and returned as-is."""

    def __init__(self):
        self._reviews: dict[str, Review] = {}
        self._lock = threading.Lock()

    async def create(self, review: Review) -> Review:
        with self._lock:
            if review.id in self._reviews:
                raise ConflictError(f"Review {review.id} already exists")
            self._reviews[review.id] = review
        return review

    async def get_by_id(self, review_id: str) -> Review | None:
        with self._lock:
            return self._reviews.get(review_id)

    async def list_by_product(self, product_id: str) -> list[Review]:
        return [r for r in self._newest_first() if r.product_id == product_id]

    async def list_recent(self, limit: int) -> list[Review]:
        return self._newest_first()[:limit]

    def _newest_first(self) -> list[Review]:
        # id breaks created_at ties, matching the SQL adapter's ORDER BY
        with self._lock:
            reviews = list(self._reviews.values())
        return sorted(reviews, key=lambda r: (r.created_at, r.id), reverse=True)
