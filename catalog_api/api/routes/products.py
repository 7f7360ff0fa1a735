"""Product Routes — catalog queries, creation, discounts and valuation.

Invariants:
    - /available and /category/{category} are registered before /{product_id}
    - Missing products surface as ResourceNotFoundError (404 envelope)
    - A rejected discount (absent product or out-of-range percentage) is a 404
    - calculate-total-value skips unknown ids; product_count counts found ones only
"""

import logging

from fastapi import APIRouter, Body, Depends, Response, status

from catalog_api.api.dependencies import get_product_service
from catalog_api.core.errors import ResourceNotFoundError
from catalog_api.schemas.product import (
    DiscountRequest, MessageResponse, ProductCreate, ProductResponse,
    TotalValueResponse,
)
from catalog_api.services.product_service import ProductService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/products", tags=["products"])


@router.get("", response_model=list[ProductResponse])
async def list_products(service: ProductService = Depends(get_product_service)):
    """List every product in the catalog."""
    return [ProductResponse.from_entity(p) for p in await service.list_all()]


@router.get("/available", response_model=list[ProductResponse])
async def list_available_products(
    service: ProductService = Depends(get_product_service),
):
    """Products in stock and not discontinued."""
    return [ProductResponse.from_entity(p) for p in await service.get_available()]


@router.get("/category/{category}", response_model=list[ProductResponse])
async def list_products_by_category(
    category: str, service: ProductService = Depends(get_product_service),
):
    products = await service.get_by_category(category)
    return [ProductResponse.from_entity(p) for p in products]


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: str, service: ProductService = Depends(get_product_service),
):
    product = await service.get_by_id(product_id)
    if product is None:
        raise ResourceNotFoundError("Product", product_id)
    return ProductResponse.from_entity(product)


@router.post(
    "", response_model=ProductResponse, status_code=status.HTTP_201_CREATED,
)
async def create_product(
    body: ProductCreate,
    response: Response,
    service: ProductService = Depends(get_product_service),
):
    """Create a product. The returned id is assigned by the store."""
    created = await service.create(body.to_entity())
    response.headers["Location"] = f"{router.prefix}/{created.id}"
    return ProductResponse.from_entity(created)


@router.put("/{product_id}/discount", response_model=MessageResponse)
async def apply_discount(
    product_id: str,
    body: DiscountRequest,
    service: ProductService = Depends(get_product_service),
):
    applied = await service.apply_discount(product_id, body.discount_percentage)
    if not applied:
        raise ResourceNotFoundError(
            "Product", product_id,
            message=(
                f"Product with ID {product_id} not found "
                "or discount percentage is invalid"
            ),
        )
    return MessageResponse(message="Discount applied successfully")


@router.post("/calculate-total-value", response_model=TotalValueResponse)
async def calculate_total_value(
    product_ids: list[str] = Body(...),
    service: ProductService = Depends(get_product_service),
):
    """Total stock value of the given products (in-stock ones only)."""
    products = []
    for product_id in product_ids:
        product = await service.get_by_id(product_id)
        if product is not None:
            products.append(product)
    return TotalValueResponse(
        total_value=service.calculate_total_value(products),
        product_count=len(products),
    )
