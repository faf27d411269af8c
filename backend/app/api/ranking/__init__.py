"""Ranking API routes."""
from fastapi import APIRouter

from app.api.ranking import routes_rankings

router = APIRouter()

router.include_router(routes_rankings.router, prefix="/rankings", tags=["rankings"])
