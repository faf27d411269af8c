"""Product API routes."""
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from app.api.deps import get_app_settings, get_checkout_service, get_repositories
from app.api.review.routes_reviews import ReviewResponse
from app.domain.checkout.services import CheckoutService
from app.domain.product.entities import Product, ProductCondition, ProductStatus
from app.domain.product.repositories import ProductSearchCriteria
from app.domain.product.services import (
    CreateProductUseCase,
    GetProductUseCase,
    ListProductsUseCase,
    ReserveProductUseCase,
    SearchProductsUseCase,
)
from app.domain.review.services import ListProductReviewsUseCase
from app.infra.storage import Repositories
from app.settings import Settings

router = APIRouter()


# Request/Response Models
class MoneyResponse(BaseModel):
    amount: int
    currency: str


class ProductResponse(BaseModel):
    """Product response."""
    id: str
    title: str
    description: str
    price: MoneyResponse
    condition: ProductCondition
    status: ProductStatus
    seller_id: str
    category_id: str
    images: List[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResponse":
        return cls(
            id=product.id,
            title=product.title,
            description=product.description,
            price=MoneyResponse(amount=product.price.amount, currency=product.price.currency),
            condition=product.condition,
            status=product.status,
            seller_id=product.seller_id,
            category_id=product.category_id,
            images=list(product.images),
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class CreateProductRequest(BaseModel):
    """Create product request. Price is in whole currency units."""
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    price: int = Field(ge=0)
    condition: ProductCondition
    seller_id: str = Field(min_length=1)
    category_id: str = Field(min_length=1)
    images: List[str] = []


class BuyerRequest(BaseModel):
    """Purchase / reserve request."""
    buyer_id: str = Field(min_length=1)


class PurchaseResponse(BaseModel):
    success: bool
    stamp_awarded: bool


# Routes: fixed paths first so "/search" is not captured by "/{product_id}"
@router.get("/search", response_model=List[ProductResponse])
async def search_products(
    keyword: Optional[str] = None,
    category_id: Optional[str] = None,
    min_price: Optional[int] = None,
    max_price: Optional[int] = None,
    condition: Optional[ProductCondition] = None,
    seller_id: Optional[str] = None,
    repos: Repositories = Depends(get_repositories),
):
    """Search listings. Every filter that is given must match."""
    criteria = ProductSearchCriteria(
        keyword=keyword,
        category_id=category_id,
        min_price=min_price,
        max_price=max_price,
        condition=condition,
        seller_id=seller_id,
    )
    products = await SearchProductsUseCase(repos.products).execute(criteria)
    return [ProductResponse.from_entity(p) for p in products]


@router.get("", response_model=List[ProductResponse])
async def list_products(
    limit: Optional[int] = Query(None, ge=0),
    offset: int = Query(0, ge=0),
    repos: Repositories = Depends(get_repositories),
):
    """List all products in creation order."""
    products = await ListProductsUseCase(repos.products).execute(limit=limit, offset=offset)
    return [ProductResponse.from_entity(p) for p in products]


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    request: CreateProductRequest,
    repos: Repositories = Depends(get_repositories),
    settings: Settings = Depends(get_app_settings),
):
    """List a new item for sale."""
    use_case = CreateProductUseCase(repos.products, currency=settings.default_currency)
    product = await use_case.execute(
        title=request.title,
        description=request.description,
        price=request.price,
        condition=request.condition,
        seller_id=request.seller_id,
        category_id=request.category_id,
        images=request.images,
    )
    return ProductResponse.from_entity(product)


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: str,
    repos: Repositories = Depends(get_repositories),
):
    product = await GetProductUseCase(repos.products).execute(product_id)
    return ProductResponse.from_entity(product)


@router.post("/{product_id}/purchase", response_model=PurchaseResponse)
async def purchase_product(
    product_id: str,
    request: BuyerRequest,
    checkout: CheckoutService = Depends(get_checkout_service),
):
    """Buy a product and credit the buyer a stamp.

    The sale stands even when the stamp could not be credited; in that case
    stamp_awarded is false and the credit is queued for retry.
    """
    outcome = await checkout.purchase(product_id, request.buyer_id)
    return PurchaseResponse(success=True, stamp_awarded=outcome.stamp_awarded)


@router.post("/{product_id}/reserve", response_model=ProductResponse)
async def reserve_product(
    product_id: str,
    request: BuyerRequest,
    repos: Repositories = Depends(get_repositories),
):
    """Hold a product for a buyer."""
    product = await ReserveProductUseCase(repos.products).execute(product_id, request.buyer_id)
    return ProductResponse.from_entity(product)


@router.get("/{product_id}/reviews", response_model=List[ReviewResponse])
async def list_product_reviews(
    product_id: str,
    repos: Repositories = Depends(get_repositories),
):
    """Reviews for one product, newest first."""
    reviews = await ListProductReviewsUseCase(repos.reviews).execute(product_id)
    return [ReviewResponse.from_entity(r) for r in reviews]
