"""Review database model."""
from sqlalchemy import Column, String, Integer, DateTime, Text, CheckConstraint, Index

from app.domain.common.types import ensure_utc
from app.domain.review.entities import Review
from app.infra.db.base import Base


class ReviewModel(Base):
    """Review row (insert-only)."""

    __tablename__ = "reviews"

    id = Column(String, primary_key=True)
    product_id = Column(String, nullable=False)
    buyer_id = Column(String, nullable=False)
    seller_id = Column(String, nullable=False)
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=False, default="")
    product_title = Column(String, nullable=False)
    buyer_name = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_reviews_rating_range"),
        Index("ix_reviews_product_id", "product_id"),
        Index("ix_reviews_created_at", "created_at"),
    )

    def to_entity(self) -> Review:
        """Convert to domain entity."""
        return Review(
            id=self.id,
            product_id=self.product_id,
            buyer_id=self.buyer_id,
            seller_id=self.seller_id,
            rating=self.rating,
            comment=self.comment,
            product_title=self.product_title,
            buyer_name=self.buyer_name,
            created_at=ensure_utc(self.created_at),
        )

    @classmethod
    def from_entity(cls, entity: Review) -> "ReviewModel":
        """Create from domain entity."""
        return cls(**entity.model_dump())
