"""In-memory product repository."""
import logging

from app.domain.product.entities import Product
from app.domain.product.repositories import ProductSearchCriteria
from app.infra.memory.base import VersionedStore

logger = logging.getLogger(__name__)


class InMemoryProductRepository:
    """Product repository backed by a process-local dict."""

    def __init__(self):
        self._store: VersionedStore[Product] = VersionedStore("Product")

    async def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def _in_creation_order(self) -> list[Product]:
        # id breaks created_at ties, matching the SQL adapter
        return sorted(self._store.values(), key=lambda p: (p.created_at, p.id))

    async def list_all(self, limit: int | None = None, offset: int = 0) -> list[Product]:
        products = self._in_creation_order()
        if limit is None:
            return products[offset:]
        return products[offset:offset + limit]

    async def search(self, criteria: ProductSearchCriteria) -> list[Product]:
        return [p for p in self._in_creation_order() if criteria.matches(p)]

    async def save(self, product: Product) -> Product:
        saved = self._store.save(product.id, product)
        logger.debug("Saved product %s (version=%d)", saved.id, saved.version)
        return saved

    async def delete(self, product_id: str) -> bool:
        return self._store.delete(product_id)
