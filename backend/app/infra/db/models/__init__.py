"""Database models."""
from app.infra.db.models.product import ProductModel
from app.infra.db.models.stamp_card import StampCardModel
from app.infra.db.models.review import ReviewModel
from app.infra.db.models.ranking import CategoryRankingModel
from app.infra.db.models.user import UserModel
from app.infra.db.models.checkout import PendingStampCreditModel

__all__ = [
    "ProductModel",
    "StampCardModel",
    "ReviewModel",
    "CategoryRankingModel",
    "UserModel",
    "PendingStampCreditModel",
]
