"""Category ranking database model."""
from sqlalchemy import Column, String, Integer

from app.domain.ranking.entities import CategoryRanking
from app.infra.db.base import Base


class CategoryRankingModel(Base):
    __tablename__ = "category_rankings"

    category_id = Column(String, primary_key=True)
    category_name = Column(String, nullable=False)
    sold_count = Column(Integer, nullable=False, default=0)
    total_revenue = Column(Integer, nullable=False, default=0)
    rank = Column(Integer, nullable=False)

    def to_entity(self) -> CategoryRanking:
        return CategoryRanking(
            category_id=self.category_id,
            category_name=self.category_name,
            sold_count=self.sold_count,
            total_revenue=self.total_revenue,
            rank=self.rank,
        )

    @classmethod
    def from_entity(cls, entity: CategoryRanking) -> "CategoryRankingModel":
        return cls(**entity.model_dump())
