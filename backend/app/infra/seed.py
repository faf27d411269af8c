"""Sample data for local development. Only runs when called explicitly."""
import logging
from datetime import datetime, timezone

from app.domain.product.entities import Money, Product, ProductCondition, ProductStatus
from app.domain.ranking.entities import CategoryRanking
from app.domain.review.entities import Review
from app.domain.stamp_card.entities import StampCard
from app.domain.user.entities import User
from app.infra.storage import Repositories

logger = logging.getLogger(__name__)

PLACEHOLDER_IMAGE = "/placeholder.svg?height=300&width=300"


def _day(month: int, day: int) -> datetime:
    return datetime(2024, month, day, tzinfo=timezone.utc)


def sample_users() -> list[User]:
    return [
        User(id=uid, username=uid, email=f"{uid}@example.com", display_name=name,
             rating=rating, created_at=_day(1, 1), updated_at=_day(1, 1))
        for uid, name, rating in [
            ("user1", "Taro Yamada", 4.8),
            ("user2", "Hanako Sato", 4.5),
            ("user3", "Jiro Tanaka", 4.9),
            ("current-user", "Current User", 0.0),
        ]
    ]


def sample_products(currency: str = "JPY") -> list[Product]:
    rows = [
        ("1", "iPhone 14 Pro", "Great condition. Used for about a year.", 120000,
         ProductCondition.LIKE_NEW, ProductStatus.AVAILABLE, "user1", "electronics", _day(1, 15), _day(1, 15)),
        ("2", "Nike Air Max", "Size 27cm. Worn only a few times.", 8500,
         ProductCondition.GOOD, ProductStatus.AVAILABLE, "user2", "fashion", _day(1, 10), _day(1, 10)),
        ("3", "MacBook Air M2", "2023 model. Barely used.", 150000,
         ProductCondition.NEW, ProductStatus.SOLD, "user3", "electronics", _day(1, 5), _day(1, 20)),
        ("4", "Nintendo Switch", "All accessories included. Tested and working.", 25000,
         ProductCondition.GOOD, ProductStatus.AVAILABLE, "user1", "books", _day(1, 12), _day(1, 12)),
    ]
    return [
        Product(
            id=pid, title=title, description=description,
            price=Money(amount=amount, currency=currency),
            condition=condition, status=status, seller_id=seller_id, category_id=category_id,
            images=[PLACEHOLDER_IMAGE], created_at=created_at, updated_at=updated_at,
        )
        for pid, title, description, amount, condition, status, seller_id, category_id, created_at, updated_at in rows
    ]


def sample_reviews() -> list[Review]:
    return [
        Review(id="1", product_id="1", buyer_id="user2", seller_id="user1", rating=5,
               comment="Great item! Carefully packed, very happy.", product_title="iPhone 14 Pro",
               buyer_name="Hanako Sato", created_at=_day(1, 22)),
        Review(id="2", product_id="2", buyer_id="user3", seller_id="user2", rating=4,
               comment="Better condition than I expected.", product_title="Nike Air Max",
               buyer_name="Jiro Tanaka", created_at=_day(1, 21)),
        Review(id="3", product_id="3", buyer_id="user1", seller_id="user3", rating=5,
               comment="Like new! Thanks for the quick response.", product_title="MacBook Air M2",
               buyer_name="Taro Yamada", created_at=_day(1, 20)),
    ]


def sample_rankings() -> list[CategoryRanking]:
    return [
        CategoryRanking(category_id="electronics", category_name="Electronics, Phones & Cameras",
                        sold_count=156, total_revenue=2340000, rank=1),
        CategoryRanking(category_id="fashion", category_name="Fashion",
                        sold_count=134, total_revenue=890000, rank=2),
        CategoryRanking(category_id="books", category_name="Books, Music & Games",
                        sold_count=98, total_revenue=450000, rank=3),
        CategoryRanking(category_id="sports", category_name="Sports & Leisure",
                        sold_count=76, total_revenue=680000, rank=4),
        CategoryRanking(category_id="home", category_name="Home & Interior",
                        sold_count=54, total_revenue=320000, rank=5),
    ]


def sample_stamp_card() -> StampCard:
    return StampCard(
        id="1", user_id="current-user", stamps=3, total_purchases=3,
        last_purchase_at=_day(1, 20), created_at=_day(1, 1), updated_at=_day(1, 20),
    )


async def seed_sample_data(repos: Repositories, currency: str = "JPY") -> None:
    """Load the sample catalogue. Existing records are left alone."""
    for user in sample_users():
        if await repos.users.get_by_id(user.id) is None:
            await repos.users.save(user)

    for product in sample_products(currency):
        if await repos.products.get_by_id(product.id) is None:
            await repos.products.save(product)

    for review in sample_reviews():
        if await repos.reviews.get_by_id(review.id) is None:
            await repos.reviews.create(review)

    card = sample_stamp_card()
    if await repos.stamp_cards.get_by_user_id(card.user_id) is None:
        await repos.stamp_cards.save(card)

    await repos.rankings.replace_all(sample_rankings())
    logger.info("Sample data loaded")
