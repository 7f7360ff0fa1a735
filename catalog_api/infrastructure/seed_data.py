"""Fixture Data — the demo catalog every fresh store starts with.

Invariants:
    - Fresh objects on every call (stores never share mutable fixtures)
    - Product ids "1".."5", user ids "1".."3"
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from catalog_api.core.product import Product
from catalog_api.core.user import User


def seed_products() -> list[Product]:
    return [
        Product(
            id="1", name="Laptop", price=Decimal("999.99"),
            category="Electronics", stock=15,
        ),
        Product(
            id="2", name="Coffee Mug", price=Decimal("12.50"),
            category="Kitchen", stock=50,
        ),
        Product(
            id="3", name="Wireless Mouse", price=Decimal("25.99"),
            category="Electronics", stock=0,
        ),
        Product(
            id="4", name="Old Keyboard", price=Decimal("45.00"),
            category="Electronics", stock=5, is_discontinued=True,
        ),
        Product(
            id="5", name="Desk Chair", price=Decimal("199.99"),
            category="Furniture", stock=8,
        ),
    ]


def seed_users() -> list[User]:
    now = datetime.now(timezone.utc)
    return [
        User(
            id="1", email="john.doe@example.com", first_name="John",
            last_name="Doe", created_at=now - timedelta(days=30),
        ),
        User(
            id="2", email="jane.smith@example.com", first_name="Jane",
            last_name="Smith", created_at=now - timedelta(days=15),
        ),
        User(
            id="3", email="inactive.user@example.com", first_name="Inactive",
            last_name="User", created_at=now - timedelta(days=60),
            is_active=False,
        ),
    ]
