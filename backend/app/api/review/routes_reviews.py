"""Review API routes."""
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from app.api.deps import get_app_settings, get_repositories
from app.domain.review.entities import MAX_RATING, MIN_RATING, Review
from app.domain.review.services import CreateReviewUseCase, GetReviewTimelineUseCase
from app.infra.storage import Repositories
from app.settings import Settings

router = APIRouter()


# Request/Response Models
class ReviewResponse(BaseModel):
    """Review response."""
    id: str
    product_id: str
    buyer_id: str
    seller_id: str
    rating: int
    comment: str
    product_title: str
    buyer_name: str
    created_at: datetime

    @classmethod
    def from_entity(cls, review: Review) -> "ReviewResponse":
        return cls(**review.model_dump())


class CreateReviewRequest(BaseModel):
    """Create review request."""
    product_id: str = Field(min_length=1)
    buyer_id: str = Field(min_length=1)
    seller_id: str = Field(min_length=1)
    rating: int = Field(ge=MIN_RATING, le=MAX_RATING, strict=True)
    comment: str
    product_title: str
    buyer_name: str


@router.post("", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
async def create_review(
    request: CreateReviewRequest,
    repos: Repositories = Depends(get_repositories),
):
    """Post a review for a purchased product."""
    review = await CreateReviewUseCase(repos.reviews).execute(
        product_id=request.product_id,
        buyer_id=request.buyer_id,
        seller_id=request.seller_id,
        rating=request.rating,
        comment=request.comment,
        product_title=request.product_title,
        buyer_name=request.buyer_name,
    )
    return ReviewResponse.from_entity(review)


@router.get("/timeline", response_model=List[ReviewResponse])
async def get_review_timeline(
    limit: Optional[int] = Query(None, ge=0),
    repos: Repositories = Depends(get_repositories),
    settings: Settings = Depends(get_app_settings),
):
    """Most recent reviews across all products, newest first."""
    if limit is None:
        limit = settings.review_timeline_default_limit
    reviews = await GetReviewTimelineUseCase(repos.reviews).execute(limit)
    return [ReviewResponse.from_entity(r) for r in reviews]
