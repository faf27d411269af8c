"""User repository implementation."""
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.domain.user.entities import User
from app.infra.db.models.user import UserModel


class UserRepositoryImpl:
    """User repository implementation."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def get_by_id(self, user_id: str) -> User | None:
        """Get user by ID."""
        async with self.session_factory() as session:
            model = await session.get(UserModel, user_id)
            return model.to_entity() if model else None

    async def save(self, user: User) -> User:
        """Insert or update user."""
        async with self.session_factory() as session:
            await session.merge(UserModel.from_entity(user))
            await session.commit()
        return user
