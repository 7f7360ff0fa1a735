"""Product ORM — table backing SqlProductRepository.

Invariants:
    - id is a string primary key assigned by the repository (sequential scheme)
    - price stored as its exact decimal text; Decimal in, same Decimal out
    - category_key is category.casefold(), written by the repository on every save
"""

from decimal import Decimal

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import TypeDecorator

from catalog_api.db.base import Base


class DecimalString(TypeDecorator):
    """Decimal persisted as its string form, without scale limits."""
    impl = String(64)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return None if value is None else str(Decimal(value))

    def process_result_value(self, value, dialect):
        return None if value is None else Decimal(value)


class ProductRecord(Base):
    """Persisted product row."""
    __tablename__ = "products"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    price: Mapped[Decimal] = mapped_column(DecimalString, nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    category_key: Mapped[str] = mapped_column(
        String(100), nullable=False, default="", index=True,
    )
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_discontinued: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
