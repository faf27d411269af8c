"""Tests for reviews, category rankings and user profiles."""
from datetime import timedelta

import pytest

from app.domain.common.errors import NotFoundError, ValidationError
from app.domain.common.types import utcnow
from app.domain.ranking.services import GetCategoryRankingUseCase
from app.domain.review.entities import Review
from app.domain.review.services import (
    CreateReviewUseCase,
    GetReviewTimelineUseCase,
    ListProductReviewsUseCase,
)
from app.domain.user.services import GetUserUseCase, UpdateProfileUseCase


def review_at(review_id: str, minutes_ago: int, product_id: str = "p1") -> Review:
    return Review(
        id=review_id, product_id=product_id, buyer_id="b", seller_id="s", rating=5,
        comment="", product_title="Item", buyer_name="Buyer",
        created_at=utcnow() - timedelta(minutes=minutes_ago),
    )


class TestReviews:
    async def test_create_review(self, memory_repos):
        review = await CreateReviewUseCase(memory_repos.reviews).execute(
            product_id="p1", buyer_id="b", seller_id="s", rating=4,
            comment="Nice", product_title="Item", buyer_name="Buyer",
        )
        assert review.rating == 4
        assert await memory_repos.reviews.get_by_id(review.id) == review

    @pytest.mark.parametrize("rating", [0, 6])
    async def test_invalid_rating_not_stored(self, memory_repos, rating):
        with pytest.raises(ValidationError):
            await CreateReviewUseCase(memory_repos.reviews).execute(
                product_id="p1", buyer_id="b", seller_id="s", rating=rating,
                comment="", product_title="Item", buyer_name="Buyer",
            )
        assert await memory_repos.reviews.list_recent(10) == []

    async def test_timeline_newest_first_with_limit(self, memory_repos):
        for review in (review_at("old", 30), review_at("new", 1), review_at("mid", 10)):
            await memory_repos.reviews.create(review)

        timeline = await GetReviewTimelineUseCase(memory_repos.reviews).execute(limit=2)
        assert [r.id for r in timeline] == ["new", "mid"]

    async def test_timeline_limit_zero_and_negative(self, memory_repos):
        await memory_repos.reviews.create(review_at("r1", 1))
        timeline = GetReviewTimelineUseCase(memory_repos.reviews)
        assert await timeline.execute(limit=0) == []
        with pytest.raises(ValidationError):
            await timeline.execute(limit=-1)

    async def test_reviews_for_product(self, memory_repos):
        await memory_repos.reviews.create(review_at("a", 5, product_id="p1"))
        await memory_repos.reviews.create(review_at("b", 1, product_id="p1"))
        await memory_repos.reviews.create(review_at("c", 3, product_id="p2"))
        reviews = await ListProductReviewsUseCase(memory_repos.reviews).execute("p1")
        assert [r.id for r in reviews] == ["b", "a"]


class TestRankings:
    async def test_default_limit_is_top_five(self, seeded_repos):
        rankings = await GetCategoryRankingUseCase(seeded_repos.rankings).execute()
        assert [r.rank for r in rankings] == [1, 2, 3, 4, 5]

    async def test_limit(self, seeded_repos):
        rankings = await GetCategoryRankingUseCase(seeded_repos.rankings).execute(limit=2)
        assert [r.category_id for r in rankings] == ["electronics", "fashion"]

    async def test_limit_zero_and_negative(self, seeded_repos):
        use_case = GetCategoryRankingUseCase(seeded_repos.rankings)
        assert await use_case.execute(limit=0) == []
        with pytest.raises(ValidationError):
            await use_case.execute(limit=-1)

    async def test_empty_store(self, memory_repos):
        assert await GetCategoryRankingUseCase(memory_repos.rankings).execute() == []


class TestUsers:
    async def test_get_user(self, seeded_repos):
        user = await GetUserUseCase(seeded_repos.users).execute("user1")
        assert user.display_name == "Taro Yamada"

    async def test_get_missing_user(self, memory_repos):
        with pytest.raises(NotFoundError):
            await GetUserUseCase(memory_repos.users).execute("nobody")

    async def test_update_profile(self, seeded_repos):
        user = await UpdateProfileUseCase(seeded_repos.users).execute(
            "user2", display_name="Hanako S.", avatar="/hanako.png"
        )
        assert user.display_name == "Hanako S."
        stored = await seeded_repos.users.get_by_id("user2")
        assert stored.avatar == "/hanako.png"

    async def test_update_missing_user(self, memory_repos):
        with pytest.raises(NotFoundError):
            await UpdateProfileUseCase(memory_repos.users).execute("nobody", display_name="X")
