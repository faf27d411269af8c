"""Product database model."""
from sqlalchemy import Column, String, Integer, DateTime, Text, JSON, Index
from sqlalchemy import Enum as SAEnum

from app.domain.common.types import ensure_utc
from app.domain.product.entities import Money, Product, ProductCondition, ProductStatus
from app.domain.product.repositories import fold_search_text
from app.infra.db.base import Base


class ProductModel(Base):
    """Product listing row. ``version`` backs optimistic concurrency."""

    __tablename__ = "products"

    id = Column(String, primary_key=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    # lower-cased copies for keyword search; SQL lower() is ASCII-only on SQLite
    title_folded = Column(String, nullable=False)
    description_folded = Column(Text, nullable=False)
    price_amount = Column(Integer, nullable=False)
    price_currency = Column(String(3), nullable=False)
    condition = Column(SAEnum(ProductCondition, name="product_condition", native_enum=False), nullable=False)
    status = Column(SAEnum(ProductStatus, name="product_status", native_enum=False), nullable=False)
    seller_id = Column(String, nullable=False)
    category_id = Column(String, nullable=False)
    images = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
    version = Column(Integer, nullable=False, default=1)

    __table_args__ = (
        Index("ix_products_category_id", "category_id"),
        Index("ix_products_seller_id", "seller_id"),
    )

    def to_entity(self) -> Product:
        """Convert to domain entity."""
        return Product(
            id=self.id,
            title=self.title,
            description=self.description,
            price=Money(amount=self.price_amount, currency=self.price_currency),
            condition=self.condition,
            status=self.status,
            seller_id=self.seller_id,
            category_id=self.category_id,
            images=list(self.images or []),
            created_at=ensure_utc(self.created_at),
            updated_at=ensure_utc(self.updated_at),
            version=self.version,
        )

    @classmethod
    def from_entity(cls, entity: Product, version: int) -> "ProductModel":
        """Create from domain entity."""
        return cls(
            id=entity.id,
            title=entity.title,
            description=entity.description,
            title_folded=fold_search_text(entity.title),
            description_folded=fold_search_text(entity.description),
            price_amount=entity.price.amount,
            price_currency=entity.price.currency,
            condition=entity.condition,
            status=entity.status,
            seller_id=entity.seller_id,
            category_id=entity.category_id,
            images=list(entity.images),
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            version=version,
        )
