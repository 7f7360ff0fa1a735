"""In-memory repositories — seeded fixtures, linear-scan CRUD, id sequencing."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from catalog_api.core.errors import ResourceNotFoundError
from catalog_api.core.product import Product
from catalog_api.core.user import User
from catalog_api.infrastructure.memory_repositories import (
    InMemoryProductRepository, InMemoryUserRepository,
)


# ─── Products ───────────────────────────────────────────────────

async def test_seeded_catalog_has_five_products(product_repo):
    products = await product_repo.get_all()
    assert [p.id for p in products] == ["1", "2", "3", "4", "5"]
    assert products[0].name == "Laptop"
    assert products[0].price == Decimal("999.99")


async def test_get_by_id_is_exact_match(product_repo):
    assert (await product_repo.get_by_id("2")).name == "Coffee Mug"
    assert await product_repo.get_by_id(" 2") is None
    assert await product_repo.get_by_id("99") is None
    assert await product_repo.get_by_id("") is None


async def test_get_by_category_is_case_insensitive(product_repo):
    products = await product_repo.get_by_category("eLeCtRoNiCs")
    assert [p.name for p in products] == ["Laptop", "Wireless Mouse", "Old Keyboard"]


async def test_get_by_category_empty_or_unknown_returns_empty(product_repo):
    assert await product_repo.get_by_category("") == []
    assert await product_repo.get_by_category("Garden") == []


async def test_get_in_stock_matches_fixture_scenario(product_repo):
    names = {p.name for p in await product_repo.get_in_stock()}
    assert names == {"Laptop", "Coffee Mug", "Desk Chair"}


async def test_create_assigns_max_plus_one_and_overwrites_caller_id(product_repo):
    created = await product_repo.create(
        Product(id="caller-id", name="Lamp", price=Decimal("30"), category="Home"),
    )
    assert created.id == "6"
    assert (await product_repo.get_by_id("6")) is created


async def test_create_after_delete_uses_current_max(product_repo):
    await product_repo.delete("5")
    created = await product_repo.create(Product(name="Lamp"))
    assert created.id == "5"


async def test_create_in_empty_store_starts_at_one():
    repo = InMemoryProductRepository([])
    created = await repo.create(Product(name="First"))
    assert created.id == "1"


async def test_update_overwrites_fields_in_place(product_repo):
    stored = await product_repo.get_by_id("1")
    updated = await product_repo.update(Product(
        id="1", name="Gaming Laptop", price=Decimal("1299.00"),
        category="Gaming", stock=-2, is_discontinued=True,
    ))
    assert updated is stored
    assert stored.name == "Gaming Laptop"
    assert stored.price == Decimal("1299.00")
    assert stored.category == "Gaming"
    assert stored.stock == -2
    assert stored.is_discontinued is True


async def test_update_missing_product_raises_not_found(product_repo):
    with pytest.raises(ResourceNotFoundError):
        await product_repo.update(Product(id="404", name="Ghost"))


async def test_delete_reports_whether_removed(product_repo):
    assert await product_repo.delete("3") is True
    assert await product_repo.get_by_id("3") is None
    assert await product_repo.delete("3") is False


async def test_repositories_do_not_share_fixtures():
    a, b = InMemoryProductRepository(), InMemoryProductRepository()
    (await a.get_by_id("1")).name = "Changed"
    assert (await b.get_by_id("1")).name == "Laptop"


# ─── Users ──────────────────────────────────────────────────────

async def test_get_by_email_is_case_insensitive(user_repo):
    user = await user_repo.get_by_email("JOHN.DOE@example.COM")
    assert user.id == "1"
    assert await user_repo.get_by_email("nobody@example.com") is None


async def test_get_active_excludes_inactive(user_repo):
    emails = [u.email for u in await user_repo.get_active()]
    assert emails == ["john.doe@example.com", "jane.smith@example.com"]


async def test_create_user_assigns_id_and_stamps_utc_time(user_repo):
    stale = datetime(2000, 1, 1, tzinfo=timezone.utc)
    before = datetime.now(timezone.utc)
    created = await user_repo.create(
        User(id="x", email="new@example.com", created_at=stale),
    )
    assert created.id == "4"
    assert created.created_at >= before
    assert created.created_at - before < timedelta(seconds=5)


async def test_create_user_performs_no_uniqueness_check(user_repo):
    await user_repo.create(User(email="john.doe@example.com"))
    active = [u for u in await user_repo.get_active() if u.email == "john.doe@example.com"]
    assert len(active) == 2


async def test_update_user_keeps_id_and_created_at(user_repo):
    stored = await user_repo.get_by_id("2")
    created_at = stored.created_at
    await user_repo.update(User(
        id="2", email="jane@new.com", first_name="Janet",
        last_name="S", is_active=False,
    ))
    assert stored.id == "2"
    assert stored.created_at == created_at
    assert stored.email == "jane@new.com"
    assert stored.full_name == "Janet S"
    assert stored.is_active is False


async def test_update_missing_user_raises_not_found(user_repo):
    with pytest.raises(ResourceNotFoundError):
        await user_repo.update(User(id="77"))


async def test_exists_and_delete(user_repo):
    assert await user_repo.exists("3") is True
    assert await user_repo.delete("3") is True
    assert await user_repo.exists("3") is False
    assert await user_repo.delete("3") is False


async def test_empty_user_store():
    repo = InMemoryUserRepository([])
    assert await repo.get_active() == []
    assert (await repo.create(User(email="a@b.com"))).id == "1"
