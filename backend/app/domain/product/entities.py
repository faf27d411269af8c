"""Product domain entities."""
from datetime import datetime
from enum import Enum

from pydantic import BaseModel

from app.domain.common.errors import InvalidStateError
from app.domain.common.types import generate_id, utcnow


class ProductStatus(str, Enum):
    """Listing status. AVAILABLE is the only non-terminal state."""
    AVAILABLE = "AVAILABLE"
    SOLD = "SOLD"
    RESERVED = "RESERVED"


class ProductCondition(str, Enum):
    """Item condition as declared by the seller."""
    NEW = "NEW"
    LIKE_NEW = "LIKE_NEW"
    GOOD = "GOOD"
    FAIR = "FAIR"
    POOR = "POOR"


class Money(BaseModel):
    """Whole-unit amount tagged with a currency code."""

    amount: int
    currency: str


class Product(BaseModel):
    """Product listing entity."""

    id: str
    title: str
    description: str
    price: Money
    condition: ProductCondition
    status: ProductStatus
    seller_id: str
    category_id: str
    images: list[str] = []
    created_at: datetime
    updated_at: datetime
    version: int = 0  # 0 = never persisted; bumped by the repository on each save

    @classmethod
    def create(
        cls,
        title: str,
        description: str,
        price: Money,
        condition: ProductCondition,
        seller_id: str,
        category_id: str,
        images: list[str],
    ) -> "Product":
        """Create a new AVAILABLE listing."""
        now = utcnow()
        return cls(
            id=generate_id(),
            title=title,
            description=description,
            price=price,
            condition=condition,
            status=ProductStatus.AVAILABLE,
            seller_id=seller_id,
            category_id=category_id,
            images=list(images),
            created_at=now,
            updated_at=now,
        )

    def is_available(self) -> bool:
        return self.status == ProductStatus.AVAILABLE

    def mark_as_sold(self) -> None:
        """Transition AVAILABLE -> SOLD."""
        self._transition(ProductStatus.SOLD)

    def reserve(self) -> None:
        """Transition AVAILABLE -> RESERVED."""
        self._transition(ProductStatus.RESERVED)

    def _transition(self, target: ProductStatus) -> None:
        if not self.is_available():
            raise InvalidStateError(
                f"Product {self.id} is {self.status.value}; cannot move to {target.value}"
            )
        self.status = target
        self.updated_at = utcnow()
