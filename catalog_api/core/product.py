"""Product Entity — catalog item with stock and discount rules.

Invariants:
    - is_in_stock() == (stock > 0 and not is_discontinued)
    - calculate_discount_price() uses exact Decimal arithmetic, no rounding
    - calculate_discount_price() never mutates the product
    - stock may be any integer in the stored model (negative included)

Design Decisions:
    - Mutable dataclass: repositories update stored records in place
    - Price is Decimal end to end; floats are converted through str()
"""

from dataclasses import dataclass
from decimal import Decimal

from catalog_api.core.errors import DiscountOutOfRangeError

MIN_DISCOUNT = Decimal(0)
MAX_DISCOUNT = Decimal(100)


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Coerce a numeric value to Decimal without binary-float artifacts."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass
class Product:
    """Catalog product — pure data plus two derived computations."""

    id: str = ""
    name: str = ""
    price: Decimal = Decimal(0)
    category: str = ""
    stock: int = 0
    is_discontinued: bool = False

    def is_in_stock(self) -> bool:
        return self.stock > 0 and not self.is_discontinued

    def calculate_discount_price(
        self, discount_percentage: Decimal | int | float,
    ) -> Decimal:
        """Price after applying a percentage discount in [0, 100].

        Raises DiscountOutOfRangeError for any other percentage.
        """
        pct = to_decimal(discount_percentage)
        if pct < MIN_DISCOUNT or pct > MAX_DISCOUNT:
            raise DiscountOutOfRangeError(discount_percentage)
        return self.price * (1 - pct / 100)
