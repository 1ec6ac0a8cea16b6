# app/models/product.py
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, Column
from sqlmodel import SQLModel, Field


class Product(SQLModel, table=True):
    """
    Product catalog entry.

    Products are managed outside this service; the API only reads them.
    Integer ids are shared with the static fallback catalog so that
    the same id resolves in both sources.
    """

    __tablename__ = "products"

    id: int | None = Field(default=None, primary_key=True)

    name: str = Field(
        min_length=2,
        max_length=100,
        index=True,
        description="Display name",
    )

    description: str | None = Field(default=None, max_length=1000)

    price: float = Field(ge=0, index=True, description="Unit price (EUR)")

    compare_price: float | None = Field(
        default=None,
        ge=0,
        description="Optional compare-at (list) price",
    )

    sku: str = Field(
        max_length=50,
        unique=True,
        index=True,
        description="Stock keeping unit, upper-case",
    )

    stock: int = Field(default=0, ge=0)

    category: str | None = Field(default=None, max_length=50, index=True)
    brand: str | None = Field(default=None, max_length=50)

    images: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
        description="Image URLs",
    )

    weight: float | None = Field(default=None, ge=0, description="Weight in kg")

    dimensions: dict[str, Any] | None = Field(
        default=None,
        sa_column=Column(JSON, nullable=True),
        description="{length, width, height} in cm",
    )

    tags: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
    )

    is_active: bool = Field(
        default=True,
        index=True,
        description="Whether this product is visible on the storefront",
    )

    is_featured: bool = Field(default=False, index=True)

    seo_title: str | None = Field(default=None, max_length=60)
    seo_description: str | None = Field(default=None, max_length=160)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
