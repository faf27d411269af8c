"""Stamp card repository implementation."""
import logging

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.domain.common.errors import ConflictError
from app.domain.stamp_card.entities import StampCard
from app.infra.db.models.stamp_card import StampCardModel

logger = logging.getLogger(__name__)


class StampCardRepositoryImpl:
    """Stamp card repository over SQLAlchemy."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def _select(self, session: AsyncSession, user_id: str) -> StampCardModel | None:
        result = await session.execute(
            select(StampCardModel).where(StampCardModel.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def get_by_user_id(self, user_id: str) -> StampCard | None:
        """Get a user's card."""
        async with self.session_factory() as session:
            model = await self._select(session, user_id)
            return model.to_entity() if model else None

    async def find_or_create(self, user_id: str) -> StampCard:
        """Return the user's card, inserting an empty one if none exists.

        A concurrent insert loses on the unique user_id constraint and re-reads
        the winner's card.
        """
        async with self.session_factory() as session:
            model = await self._select(session, user_id)
            if model is not None:
                return model.to_entity()

            card = StampCard.create(user_id)
            session.add(StampCardModel.from_entity(card, version=1))
            try:
                await session.commit()
            except IntegrityError:
                await session.rollback()
                model = await self._select(session, user_id)
                if model is None:
                    raise
                return model.to_entity()
        logger.debug("Created stamp card %s for %s", card.id, user_id)
        return card.model_copy(update={"version": 1})

    async def save(self, card: StampCard) -> StampCard:
        """Update a card whose version still matches (inserts when version is 0)."""
        new_version = card.version + 1
        async with self.session_factory() as session:
            if card.version == 0:
                session.add(StampCardModel.from_entity(card, version=new_version))
                try:
                    await session.commit()
                except IntegrityError as e:
                    await session.rollback()
                    raise ConflictError(f"Stamp card for {card.user_id} already exists") from e
            else:
                result = await session.execute(
                    update(StampCardModel)
                    .where(
                        StampCardModel.id == card.id,
                        StampCardModel.version == card.version,
                    )
                    .values(
                        stamps=card.stamps,
                        total_purchases=card.total_purchases,
                        last_purchase_at=card.last_purchase_at,
                        updated_at=card.updated_at,
                        version=new_version,
                    )
                )
                if result.rowcount == 0:
                    await session.rollback()
                    raise ConflictError(
                        f"Stamp card for {card.user_id} was modified concurrently (expected version {card.version})"
                    )
                await session.commit()
        return card.model_copy(update={"version": new_version})
