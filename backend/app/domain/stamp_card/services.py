"""Stamp card use cases."""
import logging

from app.domain.common.errors import ConflictError, NotFoundError, ValidationError
from app.domain.stamp_card.entities import StampCard
from app.domain.stamp_card.repositories import StampCardRepository

logger = logging.getLogger(__name__)


def _require_user_id(user_id: str) -> None:
    if not user_id or not user_id.strip():
        raise ValidationError("user_id is required")


class GetStampCardUseCase:
    """Get a user's card, creating an empty one on first access."""

    def __init__(self, stamp_card_repo: StampCardRepository):
        self.stamp_card_repo = stamp_card_repo

    async def execute(self, user_id: str) -> StampCard:
        _require_user_id(user_id)
        return await self.stamp_card_repo.find_or_create(user_id)


class AddStampUseCase:
    """Credit one stamp to a user's card.

    A stale save (another writer got there first) reloads the card and tries
    again, up to ``max_attempts`` times.
    """

    def __init__(self, stamp_card_repo: StampCardRepository, max_attempts: int = 3):
        self.stamp_card_repo = stamp_card_repo
        self.max_attempts = max(1, max_attempts)

    async def execute(self, user_id: str) -> StampCard:
        _require_user_id(user_id)
        for attempt in range(1, self.max_attempts + 1):
            card = await self.stamp_card_repo.find_or_create(user_id)
            card.add_stamp()
            try:
                card = await self.stamp_card_repo.save(card)
            except ConflictError:
                if attempt == self.max_attempts:
                    raise
                logger.warning("Stamp card for %s changed concurrently; retrying (%d/%d)",
                               user_id, attempt, self.max_attempts)
                continue
            logger.info("Stamp added for %s (stamps=%d, total_purchases=%d)",
                        user_id, card.stamps, card.total_purchases)
            return card
        raise ConflictError(f"Could not add stamp for {user_id}")


class UseRewardUseCase:
    """Redeem one reward from an existing card."""

    def __init__(self, stamp_card_repo: StampCardRepository):
        self.stamp_card_repo = stamp_card_repo

    async def execute(self, user_id: str) -> StampCard:
        _require_user_id(user_id)
        card = await self.stamp_card_repo.get_by_user_id(user_id)
        if card is None:
            raise NotFoundError("StampCard", user_id)
        card.use_reward()
        card = await self.stamp_card_repo.save(card)
        logger.info("Reward redeemed by %s (stamps left=%d)", user_id, card.stamps)
        return card
