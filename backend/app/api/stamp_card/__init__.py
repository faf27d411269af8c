"""Stamp card API routes."""
from fastapi import APIRouter

from app.api.stamp_card import routes_stamp_cards

router = APIRouter()

router.include_router(routes_stamp_cards.router, prefix="/stamp-cards", tags=["stamp-cards"])
