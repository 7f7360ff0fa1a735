"""SQL Repositories — SQLAlchemy-backed product and user stores.

Invariants:
    - Same contracts as the in-memory repositories (core/repository_protocols.py)
    - One session per call; every write commits before returning
    - Domain objects returned are detached copies, never ORM records
    - Category/email matching uses the casefolded category_key/email_key
      columns, same folding as the memory backend (SQLite lower() is ASCII-only)

Design Decisions:
    - Sequential ids computed from the stored ids, same scheme as the memory backend
    - seed_if_empty() loads the fixture catalog on first start only
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import func, select

from catalog_api.core.errors import ResourceNotFoundError
from catalog_api.core.identifiers import next_sequential_id
from catalog_api.core.product import Product
from catalog_api.core.user import User
from catalog_api.infrastructure.database import DatabaseSessionManager
from catalog_api.infrastructure.seed_data import seed_products, seed_users
from catalog_api.models.product import ProductRecord
from catalog_api.models.user import UserRecord

logger = logging.getLogger(__name__)


def _to_product(record: ProductRecord) -> Product:
    return Product(
        id=record.id,
        name=record.name,
        price=record.price,
        category=record.category,
        stock=record.stock,
        is_discontinued=record.is_discontinued,
    )


def _product_record(product: Product) -> ProductRecord:
    return ProductRecord(
        **vars(product), category_key=product.category.casefold(),
    )


def _user_record(user: User) -> UserRecord:
    return UserRecord(**vars(user), email_key=user.email.casefold())


def _to_user(record: UserRecord) -> User:
    created_at = record.created_at
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return User(
        id=record.id,
        email=record.email,
        first_name=record.first_name,
        last_name=record.last_name,
        created_at=created_at,
        is_active=record.is_active,
    )


class SqlProductRepository:
    """ProductRepository backed by the products table."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def seed_if_empty(self) -> None:
        async with self._db.session() as db:
            count = await db.scalar(select(func.count()).select_from(ProductRecord))
            if count:
                return
            for product in seed_products():
                db.add(_product_record(product))
            await db.commit()
        logger.info("Seeded products table", extra={"backend": "sql"})

    async def get_by_id(self, product_id: str) -> Product | None:
        async with self._db.session() as db:
            record = await db.get(ProductRecord, product_id)
            return _to_product(record) if record else None

    async def get_by_category(self, category: str) -> list[Product]:
        async with self._db.session() as db:
            result = await db.execute(
                select(ProductRecord)
                .where(ProductRecord.category_key == category.casefold())
                .order_by(ProductRecord.id),
            )
            return [_to_product(r) for r in result.scalars().all()]

    async def get_in_stock(self) -> list[Product]:
        async with self._db.session() as db:
            result = await db.execute(
                select(ProductRecord)
                .where(ProductRecord.stock > 0)
                .where(ProductRecord.is_discontinued.is_(False))
                .order_by(ProductRecord.id),
            )
            return [_to_product(r) for r in result.scalars().all()]

    async def get_all(self) -> list[Product]:
        async with self._db.session() as db:
            result = await db.execute(select(ProductRecord).order_by(ProductRecord.id))
            return [_to_product(r) for r in result.scalars().all()]

    async def create(self, product: Product) -> Product:
        async with self._db.session() as db:
            ids = (await db.execute(select(ProductRecord.id))).scalars().all()
            product.id = next_sequential_id(ids)
            db.add(_product_record(product))
            await db.commit()
        return product

    async def update(self, product: Product) -> Product:
        async with self._db.session() as db:
            record = await db.get(ProductRecord, product.id)
            if record is None:
                raise ResourceNotFoundError("Product", product.id)
            record.name = product.name
            record.price = product.price
            record.category = product.category
            record.category_key = product.category.casefold()
            record.stock = product.stock
            record.is_discontinued = product.is_discontinued
            await db.commit()
            return _to_product(record)

    async def delete(self, product_id: str) -> bool:
        async with self._db.session() as db:
            record = await db.get(ProductRecord, product_id)
            if record is None:
                return False
            await db.delete(record)
            await db.commit()
            return True


class SqlUserRepository:
    """UserRepository backed by the users table. No uniqueness check on insert."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def seed_if_empty(self) -> None:
        async with self._db.session() as db:
            count = await db.scalar(select(func.count()).select_from(UserRecord))
            if count:
                return
            for user in seed_users():
                db.add(_user_record(user))
            await db.commit()
        logger.info("Seeded users table", extra={"backend": "sql"})

    async def get_by_id(self, user_id: str) -> User | None:
        async with self._db.session() as db:
            record = await db.get(UserRecord, user_id)
            return _to_user(record) if record else None

    async def get_by_email(self, email: str) -> User | None:
        async with self._db.session() as db:
            result = await db.execute(
                select(UserRecord)
                .where(UserRecord.email_key == email.casefold())
                .order_by(UserRecord.id)
                .limit(1),
            )
            record = result.scalar_one_or_none()
            return _to_user(record) if record else None

    async def get_active(self) -> list[User]:
        async with self._db.session() as db:
            result = await db.execute(
                select(UserRecord)
                .where(UserRecord.is_active.is_(True))
                .order_by(UserRecord.id),
            )
            return [_to_user(r) for r in result.scalars().all()]

    async def create(self, user: User) -> User:
        async with self._db.session() as db:
            ids = (await db.execute(select(UserRecord.id))).scalars().all()
            user.id = next_sequential_id(ids)
            user.created_at = datetime.now(timezone.utc)
            db.add(_user_record(user))
            await db.commit()
        return user

    async def update(self, user: User) -> User:
        async with self._db.session() as db:
            record = await db.get(UserRecord, user.id)
            if record is None:
                raise ResourceNotFoundError("User", user.id)
            record.email = user.email
            record.email_key = user.email.casefold()
            record.first_name = user.first_name
            record.last_name = user.last_name
            record.is_active = user.is_active
            await db.commit()
            return _to_user(record)

    async def delete(self, user_id: str) -> bool:
        async with self._db.session() as db:
            record = await db.get(UserRecord, user_id)
            if record is None:
                return False
            await db.delete(record)
            await db.commit()
            return True

    async def exists(self, user_id: str) -> bool:
        async with self._db.session() as db:
            count = await db.scalar(
                select(func.count()).select_from(UserRecord)
                .where(UserRecord.id == user_id),
            )
            return bool(count)
