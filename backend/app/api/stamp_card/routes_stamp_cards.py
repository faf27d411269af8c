"""Stamp card API routes."""
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.api.deps import get_add_stamp_use_case, get_repositories
from app.domain.stamp_card.entities import StampCard
from app.domain.stamp_card.services import AddStampUseCase, GetStampCardUseCase, UseRewardUseCase
from app.infra.storage import Repositories

router = APIRouter()


# Request/Response Models
class StampCardResponse(BaseModel):
    """Stamp card response, with derived reward progress."""
    id: str
    user_id: str
    stamps: int
    total_purchases: int
    last_purchase_at: Optional[datetime]
    created_at: datetime
    updated_at: datetime
    stamps_for_reward: int
    stamps_until_reward: int
    reward_count: int
    can_get_reward: bool

    @classmethod
    def from_entity(cls, card: StampCard) -> "StampCardResponse":
        return cls(
            id=card.id,
            user_id=card.user_id,
            stamps=card.stamps,
            total_purchases=card.total_purchases,
            last_purchase_at=card.last_purchase_at,
            created_at=card.created_at,
            updated_at=card.updated_at,
            stamps_for_reward=card.STAMPS_FOR_REWARD,
            stamps_until_reward=card.stamps_until_reward(),
            reward_count=card.reward_count(),
            can_get_reward=card.can_get_reward(),
        )


class UseRewardResponse(BaseModel):
    success: bool


@router.get("/{user_id}", response_model=StampCardResponse)
async def get_stamp_card(
    user_id: str,
    repos: Repositories = Depends(get_repositories),
):
    """Get a user's stamp card; an empty card is created on first access."""
    card = await GetStampCardUseCase(repos.stamp_cards).execute(user_id)
    return StampCardResponse.from_entity(card)


@router.post("/{user_id}/stamps", response_model=StampCardResponse)
async def add_stamp(
    user_id: str,
    add_stamp_use_case: AddStampUseCase = Depends(get_add_stamp_use_case),
):
    """Credit one stamp directly (manual adjustment)."""
    card = await add_stamp_use_case.execute(user_id)
    return StampCardResponse.from_entity(card)


@router.post("/{user_id}/use-reward", response_model=UseRewardResponse)
async def use_reward(
    user_id: str,
    repos: Repositories = Depends(get_repositories),
):
    """Redeem one reward (removes STAMPS_FOR_REWARD stamps)."""
    await UseRewardUseCase(repos.stamp_cards).execute(user_id)
    return UseRewardResponse(success=True)
