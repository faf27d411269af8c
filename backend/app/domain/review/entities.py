"""Review domain entities."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict

from app.domain.common.errors import ValidationError
from app.domain.common.types import generate_id, utcnow

MIN_RATING = 1
MAX_RATING = 5


class Review(BaseModel):
    """Buyer review of a completed purchase. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: str
    product_id: str
    buyer_id: str
    seller_id: str
    rating: int
    comment: str
    product_title: str
    buyer_name: str
    created_at: datetime

    @classmethod
    def create(
        cls,
        product_id: str,
        buyer_id: str,
        seller_id: str,
        rating: int,
        comment: str,
        product_title: str,
        buyer_name: str,
    ) -> "Review":
        """Create a review; rating must be within 1..5."""
        if not is_valid_rating(rating):
            raise ValidationError(f"rating must be between {MIN_RATING} and {MAX_RATING}, got {rating}")
        return cls(
            id=generate_id(),
            product_id=product_id,
            buyer_id=buyer_id,
            seller_id=seller_id,
            rating=rating,
            comment=comment,
            product_title=product_title,
            buyer_name=buyer_name,
            created_at=utcnow(),
        )


def is_valid_rating(rating: int) -> bool:
    if isinstance(rating, bool) or not isinstance(rating, int):
        return False
    return MIN_RATING <= rating <= MAX_RATING
