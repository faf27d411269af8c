"""Ranking API routes."""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from app.api.deps import get_app_settings, get_repositories
from app.domain.ranking.services import GetCategoryRankingUseCase
from app.infra.storage import Repositories
from app.settings import Settings

router = APIRouter()


class CategoryRankingResponse(BaseModel):
    """Category ranking response."""
    category_id: str
    category_name: str
    sold_count: int
    total_revenue: int
    rank: int


@router.get("/categories", response_model=List[CategoryRankingResponse])
async def get_category_rankings(
    limit: Optional[int] = Query(None, ge=0),
    repos: Repositories = Depends(get_repositories),
    settings: Settings = Depends(get_app_settings),
):
    """Top categories by rank."""
    if limit is None:
        limit = settings.category_ranking_default_limit
    rankings = await GetCategoryRankingUseCase(repos.rankings).execute(limit)
    return [CategoryRankingResponse(**r.model_dump()) for r in rankings]
