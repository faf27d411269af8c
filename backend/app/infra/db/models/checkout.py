"""Checkout database models."""
from dataclasses import asdict

from sqlalchemy import Column, String, Integer, DateTime, Text

from app.domain.checkout.models import PendingStampCredit
from app.domain.common.types import ensure_utc
from app.infra.db.base import Base


class PendingStampCreditModel(Base):
    """Purchases still owed a stamp."""

    __tablename__ = "pending_stamp_credits"

    id = Column(String, primary_key=True)
    product_id = Column(String, nullable=False)
    buyer_id = Column(String, nullable=False)
    reason = Column(Text, nullable=False, default="")
    attempts = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False)
    last_attempt_at = Column(DateTime(timezone=True), nullable=True)

    def to_entity(self) -> PendingStampCredit:
        return PendingStampCredit(
            id=self.id,
            product_id=self.product_id,
            buyer_id=self.buyer_id,
            reason=self.reason,
            attempts=self.attempts,
            created_at=ensure_utc(self.created_at),
            last_attempt_at=ensure_utc(self.last_attempt_at),
        )

    @classmethod
    def from_entity(cls, entity: PendingStampCredit) -> "PendingStampCreditModel":
        return cls(**asdict(entity))
