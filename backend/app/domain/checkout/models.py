"""Checkout domain models."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from app.domain.product.entities import Product
from app.domain.stamp_card.entities import StampCard


@dataclass
class PendingStampCredit:
    """A completed purchase whose stamp was not credited."""
    id: str
    product_id: str
    buyer_id: str
    reason: str
    attempts: int
    created_at: datetime
    last_attempt_at: Optional[datetime] = None


@dataclass
class PurchaseOutcome:
    """Result of the purchase -> stamp saga."""
    product: Product
    stamp_card: Optional[StampCard]
    stamp_awarded: bool
    pending_credit_id: Optional[str] = None


@dataclass
class RetryReport:
    """Result of replaying pending stamp credits."""
    credited: list[str] = field(default_factory=list)  # pending credit ids
    failed: list[str] = field(default_factory=list)
