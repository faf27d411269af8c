"""Review use cases."""
import logging

from app.domain.common.errors import ValidationError
from app.domain.review.entities import Review
from app.domain.review.repositories import ReviewRepository

logger = logging.getLogger(__name__)


class CreateReviewUseCase:
    """Post a buyer review."""

    def __init__(self, review_repo: ReviewRepository):
        self.review_repo = review_repo

    async def execute(
        self,
        product_id: str,
        buyer_id: str,
        seller_id: str,
        rating: int,
        comment: str,
        product_title: str,
        buyer_name: str,
    ) -> Review:
        review = Review.create(
            product_id=product_id,
            buyer_id=buyer_id,
            seller_id=seller_id,
            rating=rating,
            comment=comment,
            product_title=product_title,
            buyer_name=buyer_name,
        )
        review = await self.review_repo.create(review)
        logger.info("Review %s created for product %s (rating=%d)", review.id, product_id, rating)
        return review


class GetReviewTimelineUseCase:
    """Most recent reviews, newest first."""

    def __init__(self, review_repo: ReviewRepository):
        self.review_repo = review_repo

    async def execute(self, limit: int = 10) -> list[Review]:
        if limit < 0:
            raise ValidationError("limit must be zero or greater")
        if limit == 0:
            return []
        return await self.review_repo.list_recent(limit)


class ListProductReviewsUseCase:
    def __init__(self, review_repo: ReviewRepository):
        self.review_repo = review_repo

    async def execute(self, product_id: str) -> list[Review]:
        return await self.review_repo.list_by_product(product_id)
