"""HTTP API tests (/v1/*) against the seeded in-memory store."""
import pytest

NEW_PRODUCT = {
    "title": "Road Bike",
    "description": "Aluminium frame, 54cm",
    "price": 45000,
    "condition": "GOOD",
    "seller_id": "user2",
    "category_id": "sports",
    "images": ["/bike.png"],
}


class TestHealth:
    async def test_health(self, client):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    async def test_health_under_prefix(self, client):
        response = await client.get("/v1/health")
        assert response.status_code == 200

    async def test_ready(self, client):
        response = await client.get("/ready")
        assert response.status_code == 200
        body = response.json()
        assert body["ready"] is True
        assert set(body["checks"]) == {"config", "packages", "storage"}


class TestProducts:
    async def test_list_products(self, client):
        response = await client.get("/v1/products")
        assert response.status_code == 200
        # creation order of the sample catalogue
        assert [p["id"] for p in response.json()] == ["3", "2", "4", "1"]

    async def test_list_products_paging(self, client):
        response = await client.get("/v1/products", params={"limit": 2, "offset": 1})
        assert [p["id"] for p in response.json()] == ["2", "4"]

    async def test_get_product(self, client):
        response = await client.get("/v1/products/1")
        assert response.status_code == 200
        body = response.json()
        assert body["title"] == "iPhone 14 Pro"
        assert body["price"] == {"amount": 120000, "currency": "JPY"}
        assert body["status"] == "AVAILABLE"
        assert "version" not in body

    async def test_status_enum_in_openapi(self, client):
        schema = (await client.get("/openapi.json")).json()
        product_schema = schema["components"]["schemas"]["ProductResponse"]
        assert product_schema["properties"]["status"]["$ref"].endswith("/ProductStatus")
        assert schema["components"]["schemas"]["ProductStatus"]["enum"] == ["AVAILABLE", "SOLD", "RESERVED"]

    async def test_get_missing_product(self, client):
        response = await client.get("/v1/products/nope")
        assert response.status_code == 404
        assert response.json()["detail"] == "Product with id nope not found"

    async def test_create_product(self, client):
        response = await client.post("/v1/products", json=NEW_PRODUCT)
        assert response.status_code == 201
        created = response.json()
        assert created["status"] == "AVAILABLE"
        assert created["price"]["currency"] == "JPY"

        fetched = await client.get(f"/v1/products/{created['id']}")
        assert fetched.json()["title"] == "Road Bike"

    @pytest.mark.parametrize(
        "field,value",
        [("price", -100), ("condition", "BROKEN"), ("title", ""), ("seller_id", "")],
    )
    async def test_create_product_validation(self, client, field, value):
        response = await client.post("/v1/products", json={**NEW_PRODUCT, field: value})
        assert response.status_code == 422

    async def test_search(self, client):
        response = await client.get("/v1/products/search", params={"keyword": "NINTENDO"})
        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == ["4"]

    async def test_search_no_filters_returns_all(self, client):
        response = await client.get("/v1/products/search")
        assert len(response.json()) == 4

    async def test_search_filters(self, client):
        response = await client.get(
            "/v1/products/search",
            params={"category_id": "electronics", "max_price": 130000, "condition": "LIKE_NEW"},
        )
        assert [p["id"] for p in response.json()] == ["1"]

    async def test_search_negative_price(self, client):
        response = await client.get("/v1/products/search", params={"min_price": -1})
        assert response.status_code == 422


class TestPurchase:
    async def test_purchase_awards_stamp(self, client):
        response = await client.post("/v1/products/2/purchase", json={"buyer_id": "current-user"})
        assert response.status_code == 200
        assert response.json() == {"success": True, "stamp_awarded": True}

        product = await client.get("/v1/products/2")
        assert product.json()["status"] == "SOLD"
        card = await client.get("/v1/stamp-cards/current-user")
        assert card.json()["stamps"] == 4

    async def test_purchase_sold_product_conflicts(self, client):
        response = await client.post("/v1/products/3/purchase", json={"buyer_id": "current-user"})
        assert response.status_code == 409

    async def test_purchase_own_product_forbidden(self, client):
        response = await client.post("/v1/products/1/purchase", json={"buyer_id": "user1"})
        assert response.status_code == 403
        product = await client.get("/v1/products/1")
        assert product.json()["status"] == "AVAILABLE"

    async def test_purchase_missing_product(self, client):
        response = await client.post("/v1/products/nope/purchase", json={"buyer_id": "current-user"})
        assert response.status_code == 404

    async def test_purchase_requires_buyer(self, client):
        response = await client.post("/v1/products/1/purchase", json={})
        assert response.status_code == 422

    async def test_reserve(self, client):
        response = await client.post("/v1/products/4/reserve", json={"buyer_id": "user2"})
        assert response.status_code == 200
        assert response.json()["status"] == "RESERVED"

        response = await client.post("/v1/products/4/purchase", json={"buyer_id": "user2"})
        assert response.status_code == 409


class TestReviews:
    async def test_timeline_default(self, client):
        response = await client.get("/v1/reviews/timeline")
        assert response.status_code == 200
        assert [r["id"] for r in response.json()] == ["1", "2", "3"]

    async def test_timeline_limit(self, client):
        response = await client.get("/v1/reviews/timeline", params={"limit": 1})
        assert [r["id"] for r in response.json()] == ["1"]

    async def test_create_review(self, client):
        payload = {
            "product_id": "1", "buyer_id": "user3", "seller_id": "user1", "rating": 5,
            "comment": "Fast shipping", "product_title": "iPhone 14 Pro", "buyer_name": "Jiro Tanaka",
        }
        response = await client.post("/v1/reviews", json=payload)
        assert response.status_code == 201
        review_id = response.json()["id"]

        timeline = await client.get("/v1/reviews/timeline", params={"limit": 1})
        assert timeline.json()[0]["id"] == review_id

        product_reviews = await client.get("/v1/products/1/reviews")
        assert [r["id"] for r in product_reviews.json()] == [review_id, "1"]

    @pytest.mark.parametrize("rating", [0, 6])
    async def test_create_review_bad_rating(self, client, rating):
        payload = {
            "product_id": "1", "buyer_id": "user3", "seller_id": "user1", "rating": rating,
            "comment": "", "product_title": "iPhone 14 Pro", "buyer_name": "Jiro Tanaka",
        }
        response = await client.post("/v1/reviews", json=payload)
        assert response.status_code == 422


class TestRankings:
    async def test_default_limit(self, client):
        response = await client.get("/v1/rankings/categories")
        assert [r["rank"] for r in response.json()] == [1, 2, 3, 4, 5]

    async def test_limit(self, client):
        response = await client.get("/v1/rankings/categories", params={"limit": 3})
        assert [r["category_id"] for r in response.json()] == ["electronics", "fashion", "books"]


class TestStampCards:
    async def test_get_seeded_card(self, client):
        response = await client.get("/v1/stamp-cards/current-user")
        body = response.json()
        assert body["stamps"] == 3
        assert body["stamps_until_reward"] == 7
        assert body["reward_count"] == 0
        assert body["can_get_reward"] is False

    async def test_get_creates_card(self, client):
        response = await client.get("/v1/stamp-cards/brand-new")
        assert response.status_code == 200
        assert response.json()["stamps"] == 0

    async def test_use_reward_without_enough_stamps(self, client):
        response = await client.post("/v1/stamp-cards/current-user/use-reward")
        assert response.status_code == 409

    async def test_use_reward_missing_card(self, client):
        response = await client.post("/v1/stamp-cards/ghost/use-reward")
        assert response.status_code == 404

    async def test_add_stamps_then_redeem(self, client):
        for _ in range(7):
            response = await client.post("/v1/stamp-cards/current-user/stamps")
            assert response.status_code == 200
        assert response.json()["can_get_reward"] is True

        response = await client.post("/v1/stamp-cards/current-user/use-reward")
        assert response.json() == {"success": True}

        card = await client.get("/v1/stamp-cards/current-user")
        assert card.json()["stamps"] == 0
        assert card.json()["total_purchases"] == 10


class TestUsers:
    async def test_get_user(self, client):
        response = await client.get("/v1/users/user1")
        assert response.status_code == 200
        assert response.json()["display_name"] == "Taro Yamada"

    async def test_update_profile(self, client):
        response = await client.patch("/v1/users/user1/profile", json={"display_name": "Taro Y."})
        assert response.status_code == 200
        assert response.json()["display_name"] == "Taro Y."

    async def test_update_missing_user(self, client):
        response = await client.patch("/v1/users/nobody/profile", json={"display_name": "X"})
        assert response.status_code == 404


class TestPendingCredits:
    async def test_empty_ledger(self, client):
        response = await client.get("/v1/loyalty/pending-credits")
        assert response.status_code == 200
        assert response.json() == []

        response = await client.post("/v1/loyalty/pending-credits/retry")
        assert response.json() == {"credited": [], "failed": []}
