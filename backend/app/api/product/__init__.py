"""Product API routes."""
from fastapi import APIRouter

from app.api.product import routes_products

router = APIRouter()

router.include_router(routes_products.router, prefix="/products", tags=["products"])
