"""Product repository implementation."""
import logging

from sqlalchemy import or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.domain.common.errors import ConflictError
from app.domain.product.entities import Product
from app.domain.product.repositories import ProductSearchCriteria, fold_search_text
from app.infra.db.models.product import ProductModel

logger = logging.getLogger(__name__)


class ProductRepositoryImpl:
    """Product repository over SQLAlchemy; one session per call."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def get_by_id(self, product_id: str) -> Product | None:
        """Get product by ID."""
        async with self.session_factory() as session:
            model = await session.get(ProductModel, product_id)
            return model.to_entity() if model else None

    async def list_all(self, limit: int | None = None, offset: int = 0) -> list[Product]:
        """List products in creation order."""
        stmt = select(ProductModel).order_by(ProductModel.created_at, ProductModel.id).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [m.to_entity() for m in result.scalars().all()]

    async def search(self, criteria: ProductSearchCriteria) -> list[Product]:
        """Filter products; predicates are ANDed."""
        stmt = select(ProductModel)
        keyword = criteria.normalized_keyword
        if keyword is not None:
            stmt = stmt.where(
                or_(
                    ProductModel.title_folded.contains(keyword, autoescape=True),
                    ProductModel.description_folded.contains(keyword, autoescape=True),
                )
            )
        if criteria.category_id is not None:
            stmt = stmt.where(ProductModel.category_id == criteria.category_id)
        if criteria.min_price is not None:
            stmt = stmt.where(ProductModel.price_amount >= criteria.min_price)
        if criteria.max_price is not None:
            stmt = stmt.where(ProductModel.price_amount <= criteria.max_price)
        if criteria.condition is not None:
            stmt = stmt.where(ProductModel.condition == criteria.condition)
        if criteria.seller_id is not None:
            stmt = stmt.where(ProductModel.seller_id == criteria.seller_id)
        stmt = stmt.order_by(ProductModel.created_at, ProductModel.id)

        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [m.to_entity() for m in result.scalars().all()]

    async def save(self, product: Product) -> Product:
        """Insert a new product or update one whose version still matches."""
        new_version = product.version + 1
        async with self.session_factory() as session:
            if product.version == 0:
                session.add(ProductModel.from_entity(product, version=new_version))
                try:
                    await session.commit()
                except IntegrityError as e:
                    await session.rollback()
                    raise ConflictError(f"Product {product.id} already exists") from e
            else:
                result = await session.execute(
                    update(ProductModel)
                    .where(
                        ProductModel.id == product.id,
                        ProductModel.version == product.version,
                    )
                    .values(
                        title=product.title,
                        description=product.description,
                        title_folded=fold_search_text(product.title),
                        description_folded=fold_search_text(product.description),
                        price_amount=product.price.amount,
                        price_currency=product.price.currency,
                        condition=product.condition,
                        status=product.status,
                        category_id=product.category_id,
                        images=list(product.images),
                        updated_at=product.updated_at,
                        version=new_version,
                    )
                )
                if result.rowcount == 0:
                    await session.rollback()
                    raise ConflictError(
                        f"Product {product.id} was modified concurrently (expected version {product.version})"
                    )
                await session.commit()
        logger.debug("Saved product %s (version=%d)", product.id, new_version)
        return product.model_copy(update={"version": new_version}, deep=True)

    async def delete(self, product_id: str) -> bool:
        """Delete product."""
        async with self.session_factory() as session:
            model = await session.get(ProductModel, product_id)
            if model is None:
                return False
            await session.delete(model)
            await session.commit()
            return True
