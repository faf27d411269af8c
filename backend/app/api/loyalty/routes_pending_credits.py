"""Pending stamp credit routes (purchases whose stamp still needs crediting)."""
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.api.deps import get_checkout_service
from app.domain.checkout.services import CheckoutService

router = APIRouter()


class PendingCreditResponse(BaseModel):
    id: str
    product_id: str
    buyer_id: str
    reason: str
    attempts: int
    created_at: datetime
    last_attempt_at: Optional[datetime]


class RetryReportResponse(BaseModel):
    credited: List[str]
    failed: List[str]


@router.get("/pending-credits", response_model=List[PendingCreditResponse])
async def list_pending_credits(
    checkout: CheckoutService = Depends(get_checkout_service),
):
    """Purchases that completed without crediting a stamp, oldest first."""
    credits = await checkout.list_pending_credits()
    return [
        PendingCreditResponse(
            id=c.id,
            product_id=c.product_id,
            buyer_id=c.buyer_id,
            reason=c.reason,
            attempts=c.attempts,
            created_at=c.created_at,
            last_attempt_at=c.last_attempt_at,
        )
        for c in credits
    ]


@router.post("/pending-credits/retry", response_model=RetryReportResponse)
async def retry_pending_credits(
    checkout: CheckoutService = Depends(get_checkout_service),
):
    """Replay every pending credit through stamp accrual."""
    report = await checkout.retry_pending_credits()
    return RetryReportResponse(credited=report.credited, failed=report.failed)
