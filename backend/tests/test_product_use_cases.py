"""Tests for product use cases (listing, search, purchase state machine)."""
import pytest

from app.domain.common.errors import (
    ConflictError,
    InvalidStateError,
    NotFoundError,
    PolicyViolationError,
    SelfPurchaseError,
    ValidationError,
)
from app.domain.product.entities import ProductCondition, ProductStatus
from app.domain.product.repositories import ProductSearchCriteria
from app.domain.product.services import (
    CreateProductUseCase,
    GetProductUseCase,
    ListProductsUseCase,
    PurchaseProductUseCase,
    ReserveProductUseCase,
    SearchProductsUseCase,
)


@pytest.fixture
def products(memory_repos):
    return memory_repos.products


async def list_product(products, **overrides):
    fields = dict(
        title="Vintage Camera",
        description="Film camera in working order",
        price=12000,
        condition=ProductCondition.GOOD,
        seller_id="seller-1",
        category_id="electronics",
        images=["/camera.png"],
    )
    fields.update(overrides)
    return await CreateProductUseCase(products).execute(**fields)


class TestCreateProduct:
    async def test_create_persists_available_product(self, products):
        product = await list_product(products)
        assert product.status == ProductStatus.AVAILABLE
        assert product.price.amount == 12000
        assert product.price.currency == "JPY"
        assert product.version == 1

        stored = await products.get_by_id(product.id)
        assert stored is not None
        assert stored.title == "Vintage Camera"

    async def test_currency_comes_from_use_case(self, products):
        product = await CreateProductUseCase(products, currency="USD").execute(
            title="Lamp", description="Desk lamp", price=20,
            condition="NEW", seller_id="s", category_id="home", images=[],
        )
        assert product.price.currency == "USD"
        assert product.condition == ProductCondition.NEW

    async def test_zero_price_allowed(self, products):
        product = await list_product(products, price=0)
        assert product.price.amount == 0

    @pytest.mark.parametrize(
        "overrides",
        [
            {"title": ""},
            {"title": "   "},
            {"description": ""},
            {"price": -1},
            {"price": None},
            {"condition": None},
            {"condition": "BROKEN"},
            {"seller_id": ""},
            {"category_id": ""},
            {"images": None},
        ],
    )
    async def test_invalid_input_rejected(self, products, overrides):
        with pytest.raises(ValidationError):
            await list_product(products, **overrides)
        assert await products.list_all() == []


class TestGetAndList:
    async def test_get_missing_product(self, products):
        with pytest.raises(NotFoundError) as exc_info:
            await GetProductUseCase(products).execute("missing")
        assert exc_info.value.resource == "Product"

    async def test_list_pagination(self, products):
        created = [await list_product(products, title=f"Item {i}") for i in range(5)]
        page = await ListProductsUseCase(products).execute(limit=2, offset=1)
        assert [p.id for p in page] == [p.id for p in created[1:3]]

    async def test_list_rejects_negative_paging(self, products):
        with pytest.raises(ValidationError):
            await ListProductsUseCase(products).execute(limit=-1)
        with pytest.raises(ValidationError):
            await ListProductsUseCase(products).execute(offset=-1)


class TestSearch:
    async def test_empty_criteria_returns_everything(self, seeded_repos):
        everything = await SearchProductsUseCase(seeded_repos.products).execute(ProductSearchCriteria())
        assert len(everything) == 4

    async def test_unknown_keyword_returns_nothing(self, seeded_repos):
        result = await SearchProductsUseCase(seeded_repos.products).execute(
            ProductSearchCriteria(keyword="nonexistent-xyz")
        )
        assert result == []

    async def test_keyword_is_case_insensitive_over_title_and_description(self, seeded_repos):
        search = SearchProductsUseCase(seeded_repos.products)
        by_title = await search.execute(ProductSearchCriteria(keyword="iphone"))
        assert [p.id for p in by_title] == ["1"]
        by_description = await search.execute(ProductSearchCriteria(keyword="BARELY"))
        assert [p.id for p in by_description] == ["3"]

    async def test_blank_keyword_is_ignored(self, seeded_repos):
        result = await SearchProductsUseCase(seeded_repos.products).execute(
            ProductSearchCriteria(keyword="   ")
        )
        assert len(result) == 4

    async def test_price_bounds_are_inclusive(self, seeded_repos):
        result = await SearchProductsUseCase(seeded_repos.products).execute(
            ProductSearchCriteria(min_price=8500, max_price=25000)
        )
        assert sorted(p.id for p in result) == ["2", "4"]

    async def test_inverted_price_range_is_empty(self, seeded_repos):
        result = await SearchProductsUseCase(seeded_repos.products).execute(
            ProductSearchCriteria(min_price=50000, max_price=1000)
        )
        assert result == []

    async def test_predicates_are_combined(self, seeded_repos):
        result = await SearchProductsUseCase(seeded_repos.products).execute(
            ProductSearchCriteria(category_id="electronics", condition=ProductCondition.NEW)
        )
        assert [p.id for p in result] == ["3"]
        result = await SearchProductsUseCase(seeded_repos.products).execute(
            ProductSearchCriteria(seller_id="user1", category_id="books")
        )
        assert [p.id for p in result] == ["4"]

    async def test_negative_price_bound_rejected(self, seeded_repos):
        with pytest.raises(ValidationError):
            await SearchProductsUseCase(seeded_repos.products).execute(ProductSearchCriteria(min_price=-5))


class TestPurchase:
    async def test_purchase_marks_sold(self, products):
        product = await list_product(products)
        sold = await PurchaseProductUseCase(products).execute(product.id, "buyer-1")
        assert sold.status == ProductStatus.SOLD
        stored = await products.get_by_id(product.id)
        assert stored.status == ProductStatus.SOLD

    async def test_second_purchase_fails(self, products):
        product = await list_product(products)
        purchase = PurchaseProductUseCase(products)
        await purchase.execute(product.id, "buyer-1")
        with pytest.raises(InvalidStateError):
            await purchase.execute(product.id, "buyer-2")
        with pytest.raises(InvalidStateError):
            await purchase.execute(product.id, "buyer-1")

    async def test_self_purchase_is_policy_violation(self, products):
        product = await list_product(products, seller_id="S")
        with pytest.raises(PolicyViolationError) as exc_info:
            await PurchaseProductUseCase(products).execute(product.id, "S")
        assert isinstance(exc_info.value, SelfPurchaseError)
        stored = await products.get_by_id(product.id)
        assert stored.status == ProductStatus.AVAILABLE

    async def test_missing_product(self, products):
        with pytest.raises(NotFoundError):
            await PurchaseProductUseCase(products).execute("nope", "buyer-1")

    async def test_empty_buyer_rejected(self, products):
        product = await list_product(products)
        with pytest.raises(ValidationError):
            await PurchaseProductUseCase(products).execute(product.id, "")

    async def test_availability_checked_before_ownership(self, products):
        product = await list_product(products, seller_id="S")
        await PurchaseProductUseCase(products).execute(product.id, "buyer-1")
        with pytest.raises(InvalidStateError):
            await PurchaseProductUseCase(products).execute(product.id, "S")

    async def test_stale_concurrent_purchase_conflicts(self, products):
        product = await list_product(products)
        first = await products.get_by_id(product.id)
        second = await products.get_by_id(product.id)

        first.mark_as_sold()
        await products.save(first)

        second.mark_as_sold()
        with pytest.raises(ConflictError):
            await products.save(second)

    async def test_loaded_copy_does_not_leak_into_store(self, products):
        product = await list_product(products)
        loaded = await products.get_by_id(product.id)
        loaded.mark_as_sold()
        stored = await products.get_by_id(product.id)
        assert stored.status == ProductStatus.AVAILABLE


class TestReserve:
    async def test_reserve_then_purchase_fails(self, products):
        product = await list_product(products)
        reserved = await ReserveProductUseCase(products).execute(product.id, "buyer-1")
        assert reserved.status == ProductStatus.RESERVED
        with pytest.raises(InvalidStateError):
            await PurchaseProductUseCase(products).execute(product.id, "buyer-1")

    async def test_seller_cannot_reserve_own_product(self, products):
        product = await list_product(products, seller_id="S")
        with pytest.raises(SelfPurchaseError):
            await ReserveProductUseCase(products).execute(product.id, "S")
