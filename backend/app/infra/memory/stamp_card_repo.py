"""In-memory stamp card repository."""
import logging

from app.domain.stamp_card.entities import StampCard
from app.infra.memory.base import VersionedStore

logger = logging.getLogger(__name__)


class InMemoryStampCardRepository:
    """Stamp cards keyed by user id."""

    def __init__(self):
        self._store: VersionedStore[StampCard] = VersionedStore("StampCard")

    async def get_by_user_id(self, user_id: str) -> StampCard | None:
        return self._store.get(user_id)

    async def find_or_create(self, user_id: str) -> StampCard:
        # Lookup and insert under one lock so concurrent first stamps share a card.
        with self._store.lock:
            card = self._store.get_locked(user_id)
            if card is not None:
                return card
            card = self._store.save_locked(user_id, StampCard.create(user_id))
        logger.debug("Created stamp card %s for %s", card.id, user_id)
        return card

    async def save(self, card: StampCard) -> StampCard:
        return self._store.save(card.user_id, card)
