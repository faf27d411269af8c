"""Review API routes."""
from fastapi import APIRouter

from app.api.review import routes_reviews

router = APIRouter()

router.include_router(routes_reviews.router, prefix="/reviews", tags=["reviews"])
