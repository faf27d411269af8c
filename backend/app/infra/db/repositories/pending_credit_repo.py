"""Pending stamp credit repository implementation."""
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.domain.checkout.models import PendingStampCredit
from app.infra.db.models.checkout import PendingStampCreditModel


class PendingCreditRepositoryImpl:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def add(self, credit: PendingStampCredit) -> PendingStampCredit:
        async with self.session_factory() as session:
            session.add(PendingStampCreditModel.from_entity(credit))
            await session.commit()
        return credit

    async def list_all(self) -> list[PendingStampCredit]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(PendingStampCreditModel).order_by(PendingStampCreditModel.created_at)
            )
            return [m.to_entity() for m in result.scalars().all()]

    async def remove(self, credit_id: str) -> bool:
        """Delete in one statement; the row count says whether this caller won."""
        async with self.session_factory() as session:
            result = await session.execute(
                delete(PendingStampCreditModel).where(PendingStampCreditModel.id == credit_id)
            )
            await session.commit()
            return result.rowcount == 1
