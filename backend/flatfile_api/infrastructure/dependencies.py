"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends

from flatfile_api.config import get_settings
from flatfile_api.application.interfaces import CollectionStore
from flatfile_api.application.services import ProductService, UserService
from flatfile_api.infrastructure.storage.json_collection_store import JsonCollectionStore


def get_collection_store() -> CollectionStore:
    """Provides the JSON collection store rooted at the configured data directory."""
    return JsonCollectionStore(get_settings().data_dir)


async def get_user_service(
    store: CollectionStore = Depends(get_collection_store),
) -> AsyncGenerator[UserService, None]:
    """Provides a UserService bound to the users collection."""
    yield UserService(store, collection=get_settings().users_file)


async def get_product_service(
    store: CollectionStore = Depends(get_collection_store),
) -> AsyncGenerator[ProductService, None]:
    """Provides a ProductService bound to the products collection."""
    yield ProductService(store, collection=get_settings().products_file)
