"""Category ranking repository protocol."""
from typing import Protocol

from app.domain.ranking.entities import CategoryRanking


class CategoryRankingRepository(Protocol):
    """Category ranking repository protocol."""

    async def list_top(self, limit: int) -> list[CategoryRanking]:
        """First ``limit`` rankings ordered by rank."""
        ...

    async def replace_all(self, rankings: list[CategoryRanking]) -> None:
        """Replace the stored projection."""
        ...
