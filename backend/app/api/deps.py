"""API dependencies."""
from fastapi import Depends, Request

from app.domain.checkout.services import CheckoutService
from app.domain.product.services import PurchaseProductUseCase
from app.domain.stamp_card.services import AddStampUseCase
from app.infra.storage import Repositories
from app.settings import Settings


def get_repositories(request: Request) -> Repositories:
    """Storage registry attached to the app by create_app()."""
    return request.app.state.repositories


def get_app_settings(request: Request) -> Settings:
    """Settings the app was built with."""
    return request.app.state.settings


def get_add_stamp_use_case(
    repos: Repositories = Depends(get_repositories),
    settings: Settings = Depends(get_app_settings),
) -> AddStampUseCase:
    return AddStampUseCase(repos.stamp_cards, max_attempts=settings.stamp_card_save_retries)


def get_checkout_service(
    repos: Repositories = Depends(get_repositories),
    add_stamp: AddStampUseCase = Depends(get_add_stamp_use_case),
) -> CheckoutService:
    """Purchase -> stamp workflow over the app's repositories."""
    return CheckoutService(
        purchase_product=PurchaseProductUseCase(repos.products),
        add_stamp=add_stamp,
        pending_credit_repo=repos.pending_credits,
    )
