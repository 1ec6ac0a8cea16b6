# app/schemas/product.py
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from sqlmodel import SQLModel

from app.schemas.common import RESPONSE_CONFIG, Pagination


@dataclass(frozen=True)
class ProductFilters:
    """
    Validated catalog query.

    Built by the products router after pagination, price and search
    validation; consumed by both the live and the fallback repository.
    """

    page: int = 1
    limit: int = 10
    category: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    search: str | None = None
    featured: bool | None = None

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class ProductRead(SQLModel):
    """
    Product representation for clients.
    """

    model_config = RESPONSE_CONFIG

    id: int
    name: str
    description: str | None = None
    price: float
    compare_price: float | None = None
    sku: str
    stock: int
    category: str | None = None
    brand: str | None = None
    images: list[str] = []
    weight: float | None = None
    dimensions: dict[str, Any] | None = None
    tags: list[str] = []
    is_active: bool
    is_featured: bool
    seo_title: str | None = None
    seo_description: str | None = None
    created_at: datetime | None = None


class ProductResponse(SQLModel):
    model_config = RESPONSE_CONFIG

    message: str
    product: ProductRead


class ProductListResponse(SQLModel):
    model_config = RESPONSE_CONFIG

    message: str
    products: list[ProductRead]
    pagination: Pagination
