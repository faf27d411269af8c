"""Stamp card domain entities."""
from datetime import datetime
from typing import ClassVar, Optional

from pydantic import BaseModel

from app.domain.common.errors import InsufficientStampsError
from app.domain.common.types import generate_id, utcnow


class StampCard(BaseModel):
    """Per-user loyalty card. One stamp per completed purchase."""

    STAMPS_FOR_REWARD: ClassVar[int] = 10

    id: str
    user_id: str
    stamps: int = 0
    total_purchases: int = 0
    last_purchase_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    version: int = 0

    @classmethod
    def create(cls, user_id: str) -> "StampCard":
        """Create an empty card for a user."""
        now = utcnow()
        return cls(
            id=generate_id(),
            user_id=user_id,
            stamps=0,
            total_purchases=0,
            last_purchase_at=None,
            created_at=now,
            updated_at=now,
        )

    def add_stamp(self) -> None:
        now = utcnow()
        self.stamps += 1
        self.total_purchases += 1
        self.last_purchase_at = now
        self.updated_at = now

    def can_get_reward(self) -> bool:
        return self.stamps >= self.STAMPS_FOR_REWARD

    def use_reward(self) -> None:
        """Redeem one reward: removes exactly one threshold block of stamps."""
        if not self.can_get_reward():
            raise InsufficientStampsError(self.stamps, self.STAMPS_FOR_REWARD)
        self.stamps -= self.STAMPS_FOR_REWARD
        self.updated_at = utcnow()

    def stamps_until_reward(self) -> int:
        return max(0, self.STAMPS_FOR_REWARD - self.stamps)

    def reward_count(self) -> int:
        return self.stamps // self.STAMPS_FOR_REWARD
