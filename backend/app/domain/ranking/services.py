"""Category ranking use cases."""
from app.domain.common.errors import ValidationError
from app.domain.ranking.entities import CategoryRanking
from app.domain.ranking.repositories import CategoryRankingRepository


class GetCategoryRankingUseCase:
    """Top categories by rank."""

    def __init__(self, ranking_repo: CategoryRankingRepository):
        self.ranking_repo = ranking_repo

    async def execute(self, limit: int = 5) -> list[CategoryRanking]:
        if limit < 0:
            raise ValidationError("limit must be zero or greater")
        if limit == 0:
            return []
        return await self.ranking_repo.list_top(limit)
