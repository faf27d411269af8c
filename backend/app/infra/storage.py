"""Storage registry: which repository adapters back the application."""
import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from app.domain.checkout.repositories import PendingCreditRepository
from app.domain.product.repositories import ProductRepository
from app.domain.ranking.repositories import CategoryRankingRepository
from app.domain.review.repositories import ReviewRepository
from app.domain.stamp_card.repositories import StampCardRepository
from app.domain.user.repositories import UserRepository

logger = logging.getLogger(__name__)

MEMORY_BACKEND = "memory"
DATABASE_BACKEND = "database"


@dataclass
class Repositories:
    """One adapter per repository contract, plus the engine when database-backed."""
    products: ProductRepository
    stamp_cards: StampCardRepository
    reviews: ReviewRepository
    rankings: CategoryRankingRepository
    users: UserRepository
    pending_credits: PendingCreditRepository
    backend: str = MEMORY_BACKEND
    engine: Optional[AsyncEngine] = None

    async def init_schema(self) -> None:
        """Create tables (database backend only)."""
        if self.engine is None:
            return
        from app.infra.db import models  # noqa: F401  (register tables with Base)
        from app.infra.db.base import Base

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ready")

    async def ping(self) -> None:
        """Raise if the backing store is unreachable."""
        if self.engine is None:
            return
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def close(self) -> None:
        if self.engine is not None:
            await self.engine.dispose()


def build_memory_repositories() -> Repositories:
    """Fresh, empty in-memory adapters."""
    from app.infra.memory.pending_credit_repo import InMemoryPendingCreditRepository
    from app.infra.memory.product_repo import InMemoryProductRepository
    from app.infra.memory.ranking_repo import InMemoryCategoryRankingRepository
    from app.infra.memory.review_repo import InMemoryReviewRepository
    from app.infra.memory.stamp_card_repo import InMemoryStampCardRepository
    from app.infra.memory.user_repo import InMemoryUserRepository

    return Repositories(
        products=InMemoryProductRepository(),
        stamp_cards=InMemoryStampCardRepository(),
        reviews=InMemoryReviewRepository(),
        rankings=InMemoryCategoryRankingRepository(),
        users=InMemoryUserRepository(),
        pending_credits=InMemoryPendingCreditRepository(),
        backend=MEMORY_BACKEND,
    )


def build_database_repositories(database_url: str, echo: bool = False) -> Repositories:
    """SQLAlchemy adapters sharing one engine."""
    from app.infra.db.base import create_engine, create_sessionmaker
    from app.infra.db.repositories.pending_credit_repo import PendingCreditRepositoryImpl
    from app.infra.db.repositories.product_repo import ProductRepositoryImpl
    from app.infra.db.repositories.ranking_repo import CategoryRankingRepositoryImpl
    from app.infra.db.repositories.review_repo import ReviewRepositoryImpl
    from app.infra.db.repositories.stamp_card_repo import StampCardRepositoryImpl
    from app.infra.db.repositories.user_repo import UserRepositoryImpl

    engine = create_engine(database_url, echo=echo)
    session_factory = create_sessionmaker(engine)
    return Repositories(
        products=ProductRepositoryImpl(session_factory),
        stamp_cards=StampCardRepositoryImpl(session_factory),
        reviews=ReviewRepositoryImpl(session_factory),
        rankings=CategoryRankingRepositoryImpl(session_factory),
        users=UserRepositoryImpl(session_factory),
        pending_credits=PendingCreditRepositoryImpl(session_factory),
        backend=DATABASE_BACKEND,
        engine=engine,
    )


def build_repositories(settings) -> Repositories:
    """Pick adapters from settings.storage_backend."""
    backend = (settings.storage_backend or MEMORY_BACKEND).lower()
    if backend == MEMORY_BACKEND:
        logger.info("Using in-memory storage (state is lost on restart)")
        return build_memory_repositories()
    if backend == DATABASE_BACKEND:
        logger.info("Using database storage")
        return build_database_repositories(settings.database_url, echo=settings.database_echo)
    raise ValueError(f"Unknown storage_backend: {settings.storage_backend!r}")
