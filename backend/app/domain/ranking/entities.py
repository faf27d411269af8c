"""Category ranking projection."""
from pydantic import BaseModel, ConfigDict


class CategoryRanking(BaseModel):
    """Read-only sales summary for one category."""

    model_config = ConfigDict(frozen=True)

    category_id: str
    category_name: str
    sold_count: int
    total_revenue: int
    rank: int
