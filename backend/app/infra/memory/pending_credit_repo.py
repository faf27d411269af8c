"""In-memory pending stamp credit ledger."""
import dataclasses
import threading

from app.domain.checkout.models import PendingStampCredit


class InMemoryPendingCreditRepository:
    def __init__(self):
        self._credits: dict[str, PendingStampCredit] = {}
        self._lock = threading.Lock()

    async def add(self, credit: PendingStampCredit) -> PendingStampCredit:
        with self._lock:
            self._credits[credit.id] = dataclasses.replace(credit)
        return credit

    async def list_all(self) -> list[PendingStampCredit]:
        with self._lock:
            credits = [dataclasses.replace(c) for c in self._credits.values()]
        return sorted(credits, key=lambda c: c.created_at)

    async def remove(self, credit_id: str) -> bool:
        with self._lock:
            return self._credits.pop(credit_id, None) is not None
