"""Stamp card database model."""
from sqlalchemy import Column, String, Integer, DateTime, CheckConstraint

from app.domain.common.types import ensure_utc
from app.domain.stamp_card.entities import StampCard
from app.infra.db.base import Base


class StampCardModel(Base):
    """Stamp card row; ``user_id`` is unique (one card per user)."""

    __tablename__ = "stamp_cards"

    id = Column(String, primary_key=True)
    user_id = Column(String, nullable=False, unique=True)
    stamps = Column(Integer, nullable=False, default=0)
    total_purchases = Column(Integer, nullable=False, default=0)
    last_purchase_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
    version = Column(Integer, nullable=False, default=1)

    __table_args__ = (
        CheckConstraint("stamps >= 0", name="ck_stamp_cards_stamps_non_negative"),
    )

    def to_entity(self) -> StampCard:
        """Convert to domain entity."""
        return StampCard(
            id=self.id,
            user_id=self.user_id,
            stamps=self.stamps,
            total_purchases=self.total_purchases,
            last_purchase_at=ensure_utc(self.last_purchase_at),
            created_at=ensure_utc(self.created_at),
            updated_at=ensure_utc(self.updated_at),
            version=self.version,
        )

    @classmethod
    def from_entity(cls, entity: StampCard, version: int) -> "StampCardModel":
        """Create from domain entity."""
        return cls(
            id=entity.id,
            user_id=entity.user_id,
            stamps=entity.stamps,
            total_purchases=entity.total_purchases,
            last_purchase_at=entity.last_purchase_at,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            version=version,
        )
