"""Product list filters resolved from query-string parameters."""

import logging
import math
from dataclasses import dataclass

from .record import Product

logger = logging.getLogger(__name__)


def _parse_price(name: str, raw: str | None) -> float | None:
    """Parse a price bound; blank, unparseable or non-finite input means no bound."""
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring unparseable %s filter: %r", name, raw)
        return None
    if not math.isfinite(value):
        logger.warning("Ignoring non-finite %s filter: %r", name, raw)
        return None
    return value


@dataclass(frozen=True)
class ProductFilter:
    """Conjunctive product filter. ``None`` means the filter is not applied."""

    category: str | None = None
    min_price: float | None = None
    max_price: float | None = None

    @classmethod
    def from_query(
        cls,
        category: str | None = None,
        min_price: str | None = None,
        max_price: str | None = None,
    ) -> "ProductFilter":
        return cls(
            category=category or None,
            min_price=_parse_price("minPrice", min_price),
            max_price=_parse_price("maxPrice", max_price),
        )

    def apply(self, products: list[Product]) -> list[Product]:
        """Filter in order: category, then min price, then max price."""
        result = list(products)
        if self.category is not None:
            result = [p for p in result if p.category == self.category]
        if self.min_price is not None:
            result = [p for p in result if p.price is not None and p.price >= self.min_price]
        if self.max_price is not None:
            result = [p for p in result if p.price is not None and p.price <= self.max_price]
        return result
