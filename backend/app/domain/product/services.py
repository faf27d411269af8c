"""Product use cases."""
import logging
from typing import Optional

from app.domain.common.errors import (
    InvalidStateError,
    NotFoundError,
    SelfPurchaseError,
    ValidationError,
)
from app.domain.product.entities import Money, Product, ProductCondition
from app.domain.product.repositories import ProductRepository, ProductSearchCriteria

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY = "JPY"


class CreateProductUseCase:
    """List a new item for sale."""

    def __init__(self, product_repo: ProductRepository, currency: str = DEFAULT_CURRENCY):
        self.product_repo = product_repo
        self.currency = currency

    async def execute(
        self,
        title: str,
        description: str,
        price: int,
        condition: Optional[ProductCondition],
        seller_id: str,
        category_id: str,
        images: Optional[list[str]],
    ) -> Product:
        if not title or not title.strip():
            raise ValidationError("title is required")
        if not description or not description.strip():
            raise ValidationError("description is required")
        if price is None or price < 0:
            raise ValidationError("price must be zero or greater")
        if not condition:
            raise ValidationError("condition is required")
        if not seller_id:
            raise ValidationError("seller_id is required")
        if not category_id:
            raise ValidationError("category_id is required")
        if images is None:
            raise ValidationError("images is required")
        try:
            condition = ProductCondition(condition)
        except ValueError:
            raise ValidationError(f"Invalid condition: {condition}")

        product = Product.create(
            title=title,
            description=description,
            price=Money(amount=price, currency=self.currency),
            condition=condition,
            seller_id=seller_id,
            category_id=category_id,
            images=images,
        )
        product = await self.product_repo.save(product)
        logger.info("Listed product %s by seller %s (%s %s)", product.id, seller_id, price, self.currency)
        return product


class GetProductUseCase:
    """Load a single product."""

    def __init__(self, product_repo: ProductRepository):
        self.product_repo = product_repo

    async def execute(self, product_id: str) -> Product:
        product = await self.product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return product


class ListProductsUseCase:
    """Page through all products."""

    def __init__(self, product_repo: ProductRepository):
        self.product_repo = product_repo

    async def execute(self, limit: Optional[int] = None, offset: int = 0) -> list[Product]:
        if limit is not None and limit < 0:
            raise ValidationError("limit must be zero or greater")
        if offset < 0:
            raise ValidationError("offset must be zero or greater")
        return await self.product_repo.list_all(limit=limit, offset=offset)


class SearchProductsUseCase:
    """Filter products by the given criteria."""

    def __init__(self, product_repo: ProductRepository):
        self.product_repo = product_repo

    async def execute(self, criteria: ProductSearchCriteria) -> list[Product]:
        if criteria.min_price is not None and criteria.min_price < 0:
            raise ValidationError("min_price must be zero or greater")
        if criteria.max_price is not None and criteria.max_price < 0:
            raise ValidationError("max_price must be zero or greater")
        return await self.product_repo.search(criteria)


class _TransitionProductUseCase:
    """Shared precondition checks for buyer-initiated status changes."""

    action = "transition"

    def __init__(self, product_repo: ProductRepository):
        self.product_repo = product_repo

    async def _load_for_buyer(self, product_id: str, buyer_id: str) -> Product:
        if not buyer_id:
            raise ValidationError("buyer_id is required")
        product = await self.product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        # Checked in order: existence, availability, ownership.
        if not product.is_available():
            raise InvalidStateError(
                f"Product {product_id} is {product.status.value} and cannot be {self.action}"
            )
        if product.seller_id == buyer_id:
            raise SelfPurchaseError(product_id, buyer_id)
        return product


class PurchaseProductUseCase(_TransitionProductUseCase):
    """Mark an available product as SOLD to a buyer.

    Stamp accrual is not part of this use case; see CheckoutService.
    """

    action = "purchased"

    async def execute(self, product_id: str, buyer_id: str) -> Product:
        product = await self._load_for_buyer(product_id, buyer_id)
        product.mark_as_sold()
        product = await self.product_repo.save(product)
        logger.info("Product %s sold to %s", product_id, buyer_id)
        return product


class ReserveProductUseCase(_TransitionProductUseCase):
    """Hold an available product for a buyer."""

    action = "reserved"

    async def execute(self, product_id: str, buyer_id: str) -> Product:
        product = await self._load_for_buyer(product_id, buyer_id)
        product.reserve()
        product = await self.product_repo.save(product)
        logger.info("Product %s reserved for %s", product_id, buyer_id)
        return product
