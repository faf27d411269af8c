"""Product domain repository protocols."""
from dataclasses import dataclass
from typing import Optional, Protocol

from app.domain.product.entities import Product, ProductCondition


def fold_search_text(text: str) -> str:
    """Case-fold text for keyword matching. Uses Python's Unicode-aware lower()."""
    return text.lower()


@dataclass
class ProductSearchCriteria:
    """Optional search predicates; every predicate that is set must match."""

    keyword: Optional[str] = None
    category_id: Optional[str] = None
    min_price: Optional[int] = None
    max_price: Optional[int] = None
    condition: Optional[ProductCondition] = None
    seller_id: Optional[str] = None

    @property
    def normalized_keyword(self) -> Optional[str]:
        """Lower-cased keyword, or None when blank."""
        if self.keyword is None or not self.keyword.strip():
            return None
        return fold_search_text(self.keyword.strip())

    def matches(self, product: Product) -> bool:
        keyword = self.normalized_keyword
        if keyword is not None:
            if keyword not in fold_search_text(product.title) and keyword not in fold_search_text(product.description):
                return False
        if self.category_id is not None and product.category_id != self.category_id:
            return False
        if self.min_price is not None and product.price.amount < self.min_price:
            return False
        if self.max_price is not None and product.price.amount > self.max_price:
            return False
        if self.condition is not None and product.condition != self.condition:
            return False
        if self.seller_id is not None and product.seller_id != self.seller_id:
            return False
        return True


class ProductRepository(Protocol):
    """Product repository protocol."""

    async def get_by_id(self, product_id: str) -> Product | None:
        """Get product by ID."""
        ...

    async def list_all(self, limit: int | None = None, offset: int = 0) -> list[Product]:
        """List products in creation order."""
        ...

    async def search(self, criteria: ProductSearchCriteria) -> list[Product]:
        """List products matching all set predicates, in creation order."""
        ...

    async def save(self, product: Product) -> Product:
        """Insert (version 0) or update (version must match stored). Returns the stored copy.

        Raises ConflictError on a stale version or a duplicate insert.
        """
        ...

    async def delete(self, product_id: str) -> bool:
        """Delete product; False if it did not exist."""
        ...
