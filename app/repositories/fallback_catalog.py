# app/repositories/fallback_catalog.py
import copy
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from typing import Any

from app.models.product import Product
from app.schemas.product import ProductFilters

# Static catalog served when the database cannot be reached.
# Ids match the rows created by `python -m app.data.seed`.
DEFAULT_CATALOG: tuple[Mapping[str, Any], ...] = (
    {
        "id": 1,
        "name": "Laptop Pro",
        "description": "15-inch laptop with 16 GB RAM and 512 GB SSD",
        "price": 1200.0,
        "compare_price": 1399.0,
        "sku": "LAPTOP-PRO-15",
        "stock": 10,
        "category": "Computers",
        "brand": "TechLine",
        "tags": ["laptop", "notebook"],
        "weight": 1.8,
        "dimensions": {"length": 35.7, "width": 24.5, "height": 1.6},
        "is_featured": True,
    },
    {
        "id": 2,
        "name": "Wireless Mouse",
        "description": "Ergonomic 2.4 GHz mouse with USB receiver",
        "price": 50.0,
        "sku": "MOUSE-WL-01",
        "stock": 10,
        "category": "Accessories",
        "brand": "TechLine",
        "tags": ["mouse", "wireless"],
        "weight": 0.09,
    },
    {
        "id": 3,
        "name": "Mechanical Keyboard",
        "description": "Tenkeyless keyboard with brown switches",
        "price": 150.0,
        "sku": "KEYB-MECH-TKL",
        "stock": 10,
        "category": "Accessories",
        "brand": "KeyWorks",
        "tags": ["keyboard", "mechanical"],
        "weight": 0.85,
        "is_featured": True,
    },
)

_EPOCH = datetime(2025, 1, 1, tzinfo=timezone.utc)


class FallbackProductRepository:
    """
    Read-only product source with the same read interface as
    ProductRepository.

    The `session` argument is accepted for interface compatibility and
    ignored. Entries are copied on every read so callers cannot mutate
    the catalog.
    """

    def __init__(self, entries: Iterable[Mapping[str, Any]] = DEFAULT_CATALOG):
        self._entries = tuple(dict(entry) for entry in entries)

    def _products(self) -> list[Product]:
        products = []
        for entry in self._entries:
            data = {"created_at": _EPOCH, **copy.deepcopy(entry)}
            products.append(Product(**data))
        return products

    @staticmethod
    def _matches(product: Product, filters: ProductFilters) -> bool:
        if not product.is_active:
            return False
        if filters.category and product.category != filters.category:
            return False
        if filters.min_price is not None and product.price < filters.min_price:
            return False
        if filters.max_price is not None and product.price > filters.max_price:
            return False
        if filters.featured is not None and product.is_featured != filters.featured:
            return False
        if filters.search:
            term = filters.search.lower()
            haystack = f"{product.name} {product.description or ''}".lower()
            if term not in haystack:
                return False
        return True

    def entries(self) -> list[dict[str, Any]]:
        """Raw catalog entries, for seeding."""
        return [copy.deepcopy(entry) for entry in self._entries]

    def get_active_by_id(self, session: Any, product_id: int) -> Product | None:
        for product in self._products():
            if product.id == product_id and product.is_active:
                return product
        return None

    def list_active(
        self,
        session: Any,
        filters: ProductFilters,
    ) -> tuple[list[Product], int]:
        matching = [p for p in self._products() if self._matches(p, filters)]
        matching.sort(key=lambda p: (p.created_at, p.id), reverse=True)
        page = matching[filters.offset : filters.offset + filters.limit]
        return page, len(matching)
