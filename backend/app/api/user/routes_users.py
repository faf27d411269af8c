"""User API routes."""
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from app.api.deps import get_repositories
from app.domain.user.entities import User
from app.domain.user.services import GetUserUseCase, UpdateProfileUseCase
from app.infra.storage import Repositories

router = APIRouter()


class UserResponse(BaseModel):
    """User response."""
    id: str
    username: str
    email: str
    display_name: str
    avatar: Optional[str]
    rating: float
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(**user.model_dump())


class UpdateProfileRequest(BaseModel):
    display_name: str = Field(min_length=1)
    avatar: Optional[str] = None


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    repos: Repositories = Depends(get_repositories),
):
    user = await GetUserUseCase(repos.users).execute(user_id)
    return UserResponse.from_entity(user)


@router.patch("/{user_id}/profile", response_model=UserResponse)
async def update_profile(
    user_id: str,
    request: UpdateProfileRequest,
    repos: Repositories = Depends(get_repositories),
):
    """Update display name and (optionally) avatar."""
    user = await UpdateProfileUseCase(repos.users).execute(
        user_id, display_name=request.display_name, avatar=request.avatar
    )
    return UserResponse.from_entity(user)
