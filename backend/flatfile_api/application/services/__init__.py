from .collection_service import CollectionService
from .product_service import ProductService
from .user_service import UserService

__all__ = [
    "CollectionService",
    "ProductService",
    "UserService",
]
