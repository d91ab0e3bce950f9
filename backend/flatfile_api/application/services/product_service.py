"""Application service (use case) for Product operations."""

import logging
import re
from typing import Any

from flatfile_api.application.interfaces import CollectionStore
from flatfile_api.domain.entities import Product, ProductFilter
from flatfile_api.domain.exceptions import EntityNotFoundError

from .collection_service import CollectionService

logger = logging.getLogger(__name__)

_INTEGER_ID = re.compile(r"^[+-]?\d+$")


def parse_product_id(raw: str | int) -> int:
    """Parse a path identifier; anything that is not an integer is simply absent."""
    if isinstance(raw, int):
        return raw
    if not _INTEGER_ID.match(raw.strip()):
        raise EntityNotFoundError(Product.entity_name, raw)
    return int(raw)


class ProductService(CollectionService[Product]):
    """Orchestrates product CRUD and filtering over the products collection."""

    record_type = Product

    def __init__(self, store: CollectionStore, collection: str = "products.json"):
        super().__init__(store, collection)

    async def list_products(self, filters: ProductFilter | None = None) -> list[Product]:
        products = await self._load()
        if filters is None:
            return products
        return filters.apply(products)

    async def get_product(self, product_id: str | int) -> Product:
        return await self._get(parse_product_id(product_id))

    async def create_product(self, payload: dict[str, Any]) -> Product:
        products = await self._load()
        # Records without an integer id do not take part in numbering
        numbered = (p.id for p in products if isinstance(p.id, int) and not isinstance(p.id, bool))
        next_id = max(numbered, default=0) + 1
        # The payload id is ignored; products are always numbered by the server
        product = Product(id=next_id).merged(payload)
        products.append(product)
        await self._save(products)
        logger.info("Created product %d", product.id)
        return product

    async def update_product(self, product_id: str | int, payload: dict[str, Any]) -> Product:
        return await self._update(parse_product_id(product_id), payload)

    async def delete_product(self, product_id: str | int) -> Product:
        product = await self._delete(parse_product_id(product_id))
        logger.info("Deleted product %d", product.id)
        return product
