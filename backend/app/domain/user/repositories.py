"""User repository protocol."""
from typing import Protocol

from app.domain.user.entities import User


class UserRepository(Protocol):
    """User repository protocol."""

    async def get_by_id(self, user_id: str) -> User | None:
        """Get user by ID."""
        ...

    async def save(self, user: User) -> User:
        """Insert or update a user."""
        ...
