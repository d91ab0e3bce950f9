"""Product CRUD endpoints."""

from typing import Any

from fastapi import APIRouter, Depends, Query, status

from flatfile_api.application.schemas import (
    RecordEnvelope,
    RecordListEnvelope,
    success,
    success_list,
)
from flatfile_api.application.services import ProductService
from flatfile_api.domain.entities import ProductFilter
from flatfile_api.infrastructure.dependencies import get_product_service
from flatfile_api.presentation.api.payload import record_payload

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=RecordListEnvelope)
async def list_products(
    category: str | None = Query(None, description="Exact category match"),
    min_price: str | None = Query(None, alias="minPrice", description="Keep price >= minPrice"),
    max_price: str | None = Query(None, alias="maxPrice", description="Keep price <= maxPrice"),
    service: ProductService = Depends(get_product_service),
) -> RecordListEnvelope:
    """Retrieve products, optionally filtered by category and price range."""
    filters = ProductFilter.from_query(category=category, min_price=min_price, max_price=max_price)
    products = await service.list_products(filters)
    return success_list("products", products)


@router.get("/{product_id}", response_model=RecordEnvelope)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> RecordEnvelope:
    """Retrieve a single product by ID."""
    product = await service.get_product(product_id)
    return success("product", product)


@router.post("", response_model=RecordEnvelope, status_code=status.HTTP_201_CREATED)
async def create_product(
    payload: dict[str, Any] = Depends(record_payload),
    service: ProductService = Depends(get_product_service),
) -> RecordEnvelope:
    """Create a new product with the next free numeric id."""
    product = await service.create_product(payload)
    return success("product", product)


@router.patch("/{product_id}", response_model=RecordEnvelope)
async def update_product(
    product_id: str,
    payload: dict[str, Any] = Depends(record_payload),
    service: ProductService = Depends(get_product_service),
) -> RecordEnvelope:
    """Merge the given fields into an existing product. The id never changes."""
    product = await service.update_product(product_id, payload)
    return success("product", product)


@router.delete("/{product_id}", response_model=RecordEnvelope)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> RecordEnvelope:
    """Delete a product and return the removed record."""
    product = await service.delete_product(product_id)
    return success("product", product)
