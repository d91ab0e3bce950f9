from .record import Record, User, Product
from .product_filter import ProductFilter
