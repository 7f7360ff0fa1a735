"""In-Memory Repositories — list-backed product and user stores.

Invariants:
    - Each repository exclusively owns its list; callers get stored references
    - Lookups are linear scans with exact (ordinal) id comparison
    - Email and category comparisons are case-insensitive (casefold)
    - create() reassigns the id with the sequential scheme (max numeric id + 1)
    - update() on a missing id raises ResourceNotFoundError; get/delete never raise

Design Decisions:
    - No lock: no await between read and write, so each call is atomic on one
      event loop. Multiple workers get independent stores (demo limitation)
    - seed=None loads the fixture catalog; pass [] for an empty store
"""

import logging
from datetime import datetime, timezone

from catalog_api.core.errors import ResourceNotFoundError
from catalog_api.core.identifiers import next_sequential_id
from catalog_api.core.product import Product
from catalog_api.core.user import User
from catalog_api.infrastructure.seed_data import seed_products, seed_users

logger = logging.getLogger(__name__)


class InMemoryProductRepository:
    """ProductRepository backed by a Python list."""

    def __init__(self, seed: list[Product] | None = None):
        self._products: list[Product] = (
            seed_products() if seed is None else list(seed)
        )

    def _find(self, product_id: str) -> Product | None:
        return next((p for p in self._products if p.id == product_id), None)

    async def get_by_id(self, product_id: str) -> Product | None:
        return self._find(product_id)

    async def get_by_category(self, category: str) -> list[Product]:
        wanted = category.casefold()
        return [p for p in self._products if p.category.casefold() == wanted]

    async def get_in_stock(self) -> list[Product]:
        return [p for p in self._products if p.is_in_stock()]

    async def get_all(self) -> list[Product]:
        return list(self._products)

    async def create(self, product: Product) -> Product:
        product.id = next_sequential_id(p.id for p in self._products)
        self._products.append(product)
        logger.debug(f"Stored product {product.id}", extra={"product_id": product.id})
        return product

    async def update(self, product: Product) -> Product:
        existing = self._find(product.id)
        if existing is None:
            raise ResourceNotFoundError("Product", product.id)
        existing.name = product.name
        existing.price = product.price
        existing.category = product.category
        existing.stock = product.stock
        existing.is_discontinued = product.is_discontinued
        return existing

    async def delete(self, product_id: str) -> bool:
        product = self._find(product_id)
        if product is None:
            return False
        self._products.remove(product)
        return True


class InMemoryUserRepository:
    """UserRepository backed by a Python list. Performs no uniqueness check."""

    def __init__(self, seed: list[User] | None = None):
        self._users: list[User] = seed_users() if seed is None else list(seed)

    def _find(self, user_id: str) -> User | None:
        return next((u for u in self._users if u.id == user_id), None)

    async def get_by_id(self, user_id: str) -> User | None:
        return self._find(user_id)

    async def get_by_email(self, email: str) -> User | None:
        wanted = email.casefold()
        return next(
            (u for u in self._users if u.email.casefold() == wanted), None,
        )

    async def get_active(self) -> list[User]:
        return [u for u in self._users if u.is_active]

    async def create(self, user: User) -> User:
        user.id = next_sequential_id(u.id for u in self._users)
        user.created_at = datetime.now(timezone.utc)
        self._users.append(user)
        logger.debug(f"Stored user {user.id}", extra={"user_id": user.id})
        return user

    async def update(self, user: User) -> User:
        existing = self._find(user.id)
        if existing is None:
            raise ResourceNotFoundError("User", user.id)
        existing.email = user.email
        existing.first_name = user.first_name
        existing.last_name = user.last_name
        existing.is_active = user.is_active
        return existing

    async def delete(self, user_id: str) -> bool:
        user = self._find(user_id)
        if user is None:
            return False
        self._users.remove(user)
        return True

    async def exists(self, user_id: str) -> bool:
        return self._find(user_id) is not None
