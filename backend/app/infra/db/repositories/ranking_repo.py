"""Category ranking repository implementation."""
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.domain.ranking.entities import CategoryRanking
from app.infra.db.models.ranking import CategoryRankingModel


class CategoryRankingRepositoryImpl:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def list_top(self, limit: int) -> list[CategoryRanking]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(CategoryRankingModel).order_by(CategoryRankingModel.rank).limit(limit)
            )
            return [m.to_entity() for m in result.scalars().all()]

    async def replace_all(self, rankings: list[CategoryRanking]) -> None:
        """Swap the whole projection in one transaction."""
        async with self.session_factory() as session:
            await session.execute(delete(CategoryRankingModel))
            session.add_all([CategoryRankingModel.from_entity(r) for r in rankings])
            await session.commit()
