"""Review repository implementation."""
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.domain.common.errors import ConflictError
from app.domain.review.entities import Review
from app.infra.db.models.review import ReviewModel


class ReviewRepositoryImpl:
    """Review repository over SQLAlchemy."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def create(self, review: Review) -> Review:
        """Insert a review."""
        async with self.session_factory() as session:
            session.add(ReviewModel.from_entity(review))
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise ConflictError(f"Review {review.id} already exists") from e
        return review

    async def get_by_id(self, review_id: str) -> Review | None:
        async with self.session_factory() as session:
            model = await session.get(ReviewModel, review_id)
            return model.to_entity() if model else None

    async def list_by_product(self, product_id: str) -> list[Review]:
        """Reviews for a product, newest first."""
        async with self.session_factory() as session:
            result = await session.execute(
                select(ReviewModel)
                .where(ReviewModel.product_id == product_id)
                .order_by(ReviewModel.created_at.desc(), ReviewModel.id.desc())
            )
            return [m.to_entity() for m in result.scalars().all()]

    async def list_recent(self, limit: int) -> list[Review]:
        """Newest reviews across all products."""
        async with self.session_factory() as session:
            result = await session.execute(
                select(ReviewModel).order_by(ReviewModel.created_at.desc(), ReviewModel.id.desc()).limit(limit)
            )
            return [m.to_entity() for m in result.scalars().all()]
