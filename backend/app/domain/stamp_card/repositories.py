"""Stamp card repository protocol."""
from typing import Protocol

from app.domain.stamp_card.entities import StampCard


class StampCardRepository(Protocol):
    """Stamp card repository protocol. At most one card per user."""

    async def get_by_user_id(self, user_id: str) -> StampCard | None:
        """Get a user's card, or None."""
        ...

    async def find_or_create(self, user_id: str) -> StampCard:
        """Atomically return the user's card, creating an empty one if missing."""
        ...

    async def save(self, card: StampCard) -> StampCard:
        """Update the card if its version matches the stored one; raises ConflictError otherwise."""
        ...
