"""Checkout service: purchase followed by stamp accrual."""
import logging

from app.domain.checkout.models import PendingStampCredit, PurchaseOutcome, RetryReport
from app.domain.checkout.repositories import PendingCreditRepository
from app.domain.common.types import generate_id, utcnow
from app.domain.product.services import PurchaseProductUseCase
from app.domain.stamp_card.services import AddStampUseCase

logger = logging.getLogger(__name__)


class CheckoutService:
    """Two-step saga: mark the product SOLD, then credit the buyer a stamp.

    Step 1 errors propagate and nothing else happens. SOLD is terminal, so a
    step 2 failure cannot be compensated by undoing the sale; it is logged at
    ERROR and recorded in the pending-credit ledger for retry_pending_credits().
    """

    def __init__(
        self,
        purchase_product: PurchaseProductUseCase,
        add_stamp: AddStampUseCase,
        pending_credit_repo: PendingCreditRepository,
    ):
        self.purchase_product = purchase_product
        self.add_stamp = add_stamp
        self.pending_credit_repo = pending_credit_repo

    async def purchase(self, product_id: str, buyer_id: str) -> PurchaseOutcome:
        product = await self.purchase_product.execute(product_id, buyer_id)

        try:
            card = await self.add_stamp.execute(buyer_id)
        except Exception as e:
            logger.exception(
                "Stamp accrual failed after purchase of %s by %s; recording pending credit",
                product_id,
                buyer_id,
            )
            credit = await self.pending_credit_repo.add(
                PendingStampCredit(
                    id=generate_id(),
                    product_id=product_id,
                    buyer_id=buyer_id,
                    reason=f"{type(e).__name__}: {e}",
                    attempts=1,
                    created_at=utcnow(),
                    last_attempt_at=utcnow(),
                )
            )
            return PurchaseOutcome(
                product=product,
                stamp_card=None,
                stamp_awarded=False,
                pending_credit_id=credit.id,
            )

        return PurchaseOutcome(product=product, stamp_card=card, stamp_awarded=True)

    async def list_pending_credits(self) -> list[PendingStampCredit]:
        return await self.pending_credit_repo.list_all()

    async def retry_pending_credits(self) -> RetryReport:
        """Replay every pending credit through stamp accrual.

        Each credit is claimed by removing it from the ledger before the stamp
        is added, so overlapping retries never credit the same purchase twice.
        A credit whose accrual fails again is written back with its attempt
        counter bumped.
        """
        report = RetryReport()
        for credit in await self.pending_credit_repo.list_all():
            if not await self.pending_credit_repo.remove(credit.id):
                logger.debug("Pending stamp credit %s already claimed", credit.id)
                continue
            try:
                await self.add_stamp.execute(credit.buyer_id)
            except Exception as e:
                credit.attempts += 1
                credit.last_attempt_at = utcnow()
                credit.reason = f"{type(e).__name__}: {e}"
                await self.pending_credit_repo.add(credit)
                logger.error(
                    "Pending stamp credit %s for %s still failing (attempts=%d): %s",
                    credit.id, credit.buyer_id, credit.attempts, e,
                )
                report.failed.append(credit.id)
                continue
            logger.info("Pending stamp credit %s settled for %s", credit.id, credit.buyer_id)
            report.credited.append(credit.id)
        return report
