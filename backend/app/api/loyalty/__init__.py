"""Loyalty operations API routes."""
from fastapi import APIRouter

from app.api.loyalty import routes_pending_credits

router = APIRouter()

router.include_router(routes_pending_credits.router, prefix="/loyalty", tags=["loyalty"])
