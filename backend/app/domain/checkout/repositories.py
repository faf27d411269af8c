"""Checkout repository protocols."""
from typing import Protocol

from app.domain.checkout.models import PendingStampCredit


class PendingCreditRepository(Protocol):
    """Ledger of purchases still owed a stamp."""

    async def add(self, credit: PendingStampCredit) -> PendingStampCredit:
        """Record a pending credit."""
        ...

    async def list_all(self) -> list[PendingStampCredit]:
        """List pending credits, oldest first."""
        ...

    async def remove(self, credit_id: str) -> bool:
        """Drop a credit. Only one of several concurrent callers gets True."""
        ...
