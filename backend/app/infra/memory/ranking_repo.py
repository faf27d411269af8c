"""In-memory category ranking repository."""
from app.domain.ranking.entities import CategoryRanking


class InMemoryCategoryRankingRepository:
    def __init__(self):
        self._rankings: list[CategoryRanking] = []

    async def list_top(self, limit: int) -> list[CategoryRanking]:
        return self._rankings[:limit]

    async def replace_all(self, rankings: list[CategoryRanking]) -> None:
        self._rankings = sorted(rankings, key=lambda r: r.rank)
