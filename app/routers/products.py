# app/routers/products.py
from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.core.config import get_settings
from app.core.validators import (
    ensure_valid_query,
    validate_featured,
    validate_pagination,
    validate_price_filter,
    validate_search,
)
from app.database import get_session
from app.repositories.fallback_catalog import FallbackProductRepository
from app.repositories.product_repo import ProductRepository
from app.schemas.product import ProductFilters, ProductListResponse, ProductResponse
from app.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])

settings = get_settings()

repo = ProductRepository()
fallback = FallbackProductRepository()
service = ProductService(repo, fallback, force_fallback=settings.USE_FALLBACK_CATALOG)


def product_filters(
    page: str | None = None,
    limit: str | None = None,
    category: str | None = None,
    min_price: str | None = Query(default=None, alias="minPrice"),
    max_price: str | None = Query(default=None, alias="maxPrice"),
    search: str | None = None,
    featured: str | None = None,
) -> ProductFilters:
    """
    Collect and validate the catalog query string.

    - page/limit are clamped (never rejected)
    - minPrice/maxPrice must be non-negative and ordered
    - search is trimmed; blank means no search, >100 chars is rejected
    - featured must be a true/false style flag when given
    """
    query = {
        "page": page,
        "limit": limit,
        "minPrice": min_price,
        "maxPrice": max_price,
        "search": search,
        "featured": featured,
    }
    ensure_valid_query(validate_pagination, query)
    ensure_valid_query(validate_price_filter, query)
    ensure_valid_query(validate_search, query)
    ensure_valid_query(validate_featured, query)

    return ProductFilters(
        page=query["page"],
        limit=query["limit"],
        category=category.strip() if category and category.strip() else None,
        min_price=query["minPrice"],
        max_price=query["maxPrice"],
        search=query.get("search"),
        featured=query.get("featured"),
    )


# -------- Public endpoints --------


@router.get("", response_model=ProductListResponse)
def list_products(
    filters: ProductFilters = Depends(product_filters),
    session: Session = Depends(get_session),
):
    """
    List active products with pagination and filters.

    Falls back to the static catalog when the database is unreachable.
    """
    return service.list_products(session, filters)


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: int,
    session: Session = Depends(get_session),
):
    """
    Get a single active product by id.

    - 404 when the product does not exist or is inactive.
    """
    return service.get_product(session, product_id)
