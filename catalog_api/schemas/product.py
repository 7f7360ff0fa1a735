"""Product Schemas — Pydantic models for product endpoints.

Invariants:
    - Shape validation only; catalog rules (blank name, negative price) are
      enforced by ProductService so they map to the same error envelope
    - Decimals serialize as JSON strings (exact, no float rounding)
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from catalog_api.core.product import Product


class ProductCreate(BaseModel):
    """Product creation payload."""
    name: str = ""
    price: Decimal = Decimal(0)
    category: str = ""
    stock: int = 0
    is_discontinued: bool = False

    def to_entity(self) -> Product:
        return Product(
            name=self.name,
            price=self.price,
            category=self.category,
            stock=self.stock,
            is_discontinued=self.is_discontinued,
        )


class ProductResponse(BaseModel):
    """Public product representation."""
    id: str
    name: str
    price: Decimal
    category: str
    stock: int
    is_discontinued: bool
    in_stock: bool

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResponse":
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            category=product.category,
            stock=product.stock,
            is_discontinued=product.is_discontinued,
            in_stock=product.is_in_stock(),
        )


class DiscountRequest(BaseModel):
    """Discount payload. Range is checked by the domain, not here."""
    discount_percentage: Decimal = Field(allow_inf_nan=False)


class TotalValueResponse(BaseModel):
    total_value: Decimal
    product_count: int


class MessageResponse(BaseModel):
    message: str
