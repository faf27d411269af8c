"""User use cases."""
import logging
from typing import Optional

from app.domain.common.errors import NotFoundError
from app.domain.user.entities import User
from app.domain.user.repositories import UserRepository

logger = logging.getLogger(__name__)


class GetUserUseCase:
    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def execute(self, user_id: str) -> User:
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user


class UpdateProfileUseCase:
    """Update a user's display name and avatar."""

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def execute(self, user_id: str, display_name: str, avatar: Optional[str] = None) -> User:
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        user.update_profile(display_name, avatar)
        user = await self.user_repo.save(user)
        logger.info("Profile updated for %s", user_id)
        return user
