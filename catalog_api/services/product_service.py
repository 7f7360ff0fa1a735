"""Product Service — validation and catalog rules over a ProductRepository.

Invariants:
    - Blank ids are rejected (ValidationError) before any repository call
    - Blank category short-circuits to [] without touching the repository
    - A created product always has a non-blank name and a price >= 0
    - calculate_total_value counts in-stock products only and is pure
    - An out-of-range discount never persists a change

Design Decisions:
    - create() pre-assigns an opaque id; the repository then assigns its own
      sequential id. Only a repository that keeps caller ids would expose the opaque one
    - get_available() re-filters the repository result by is_in_stock(); the
      second filter is idempotent
"""

import logging
from decimal import Decimal
from typing import Iterable

from catalog_api.core.errors import DiscountOutOfRangeError, ValidationError
from catalog_api.core.identifiers import is_blank, new_opaque_id
from catalog_api.core.product import Product
from catalog_api.core.repository_protocols import ProductRepository

logger = logging.getLogger(__name__)


class ProductService:
    """Product use cases."""

    def __init__(self, repository: ProductRepository):
        if repository is None:
            raise ValueError("repository is required")
        self._repository = repository

    async def get_by_id(self, product_id: str | None) -> Product | None:
        if is_blank(product_id):
            raise ValidationError(
                "Product ID cannot be null or empty", "product_id",
            )
        return await self._repository.get_by_id(product_id)

    async def get_available(self) -> list[Product]:
        products = await self._repository.get_in_stock()
        return [p for p in products if p.is_in_stock()]

    async def get_by_category(self, category: str | None) -> list[Product]:
        if is_blank(category):
            return []
        return await self._repository.get_by_category(category)

    async def list_all(self) -> list[Product]:
        return await self._repository.get_all()

    async def create(self, product: Product | None) -> Product:
        if product is None:
            raise ValidationError("Product is required", "product")
        if is_blank(product.name):
            raise ValidationError("Product name is required", "name")
        if product.price < 0:
            raise ValidationError("Product price cannot be negative", "price")

        product.id = new_opaque_id()
        created = await self._repository.create(product)
        logger.info(
            f"Created product {created.name!r}",
            extra={"product_id": created.id},
        )
        return created

    @staticmethod
    def calculate_total_value(products: Iterable[Product] | None) -> Decimal:
        """Sum of price * stock over the in-stock products."""
        if not products:
            return Decimal(0)
        return sum(
            (p.price * p.stock for p in products if p.is_in_stock()),
            Decimal(0),
        )

    async def apply_discount(
        self, product_id: str, discount_percentage: Decimal | int | float,
    ) -> bool:
        """Discount the stored price. False when absent or percentage out of range."""
        product = await self._repository.get_by_id(product_id)
        if product is None:
            return False

        try:
            new_price = product.calculate_discount_price(discount_percentage)
        except DiscountOutOfRangeError as e:
            logger.warning(e.message, extra={"product_id": product_id})
            return False

        product.price = new_price
        await self._repository.update(product)
        logger.info(
            f"Applied {discount_percentage}% discount, new price {new_price}",
            extra={"product_id": product_id},
        )
        return True
