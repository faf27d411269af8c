"""Database base configuration."""
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool


def normalize_async_url(url: str) -> str:
    """Ensure URL uses an async driver; deployments often hand out sync URLs."""
    u = (url or "").strip()
    if u.startswith("postgresql://"):
        return u.replace("postgresql://", "postgresql+asyncpg://", 1)
    if u.startswith("sqlite:///") or u == "sqlite://":
        return u.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return u


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create the async engine. In-memory SQLite shares one connection so tables survive."""
    url = normalize_async_url(database_url)
    if url.startswith("sqlite+aiosqlite://") and (":memory:" in url or url.endswith("://")):
        return create_async_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_async_engine(url, echo=echo, future=True)


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


# Note: models are imported from app.infra.db.models before create_all so they register with Base.
