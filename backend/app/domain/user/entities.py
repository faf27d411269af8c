"""User domain entities."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from app.domain.common.errors import ValidationError
from app.domain.common.types import generate_id, utcnow


class User(BaseModel):
    """Marketplace member (buyer and/or seller)."""

    id: str
    username: str
    email: str
    display_name: str
    avatar: Optional[str] = None
    rating: float = 0.0
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls,
        username: str,
        email: str,
        display_name: str,
        avatar: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> "User":
        """Create a new user."""
        now = utcnow()
        return cls(
            id=user_id or generate_id(),
            username=username,
            email=email,
            display_name=display_name,
            avatar=avatar,
            rating=0.0,
            created_at=now,
            updated_at=now,
        )

    def update_profile(self, display_name: str, avatar: Optional[str] = None) -> None:
        """Change display name; avatar is only replaced when given."""
        if not display_name or not display_name.strip():
            raise ValidationError("display_name is required")
        self.display_name = display_name
        if avatar:
            self.avatar = avatar
        self.updated_at = utcnow()
