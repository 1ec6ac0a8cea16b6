# app/services/product_service.py
import logging

from sqlmodel import Session

from app.core.errors import NotFoundError, StorageUnavailable
from app.repositories.fallback_catalog import FallbackProductRepository
from app.repositories.product_repo import ProductRepository
from app.schemas.common import Pagination
from app.schemas.product import (
    ProductFilters,
    ProductListResponse,
    ProductRead,
    ProductResponse,
)

logger = logging.getLogger(__name__)

FALLBACK_SUFFIX = " (fallback data)"


class ProductService:
    """
    Read-only catalog operations.

    The live repository is tried first; when it raises StorageUnavailable
    (or when `force_fallback` is set) the injected fallback source answers
    instead and the response message is tagged so clients can tell.
    """

    def __init__(
        self,
        repo: ProductRepository,
        fallback: FallbackProductRepository,
        force_fallback: bool = False,
    ):
        self.repo = repo
        self.fallback = fallback
        self.force_fallback = force_fallback

    def _read(self, operation: str, session: Session, *args):
        """
        Run a read against the live repo, or the fallback on storage faults.

        Returns:
            (result, used_fallback)
        """
        if not self.force_fallback:
            try:
                return getattr(self.repo, operation)(session, *args), False
            except StorageUnavailable as exc:
                logger.warning("Catalog %s served from fallback: %s", operation, exc)
        return getattr(self.fallback, operation)(session, *args), True

    def list_products(self, session: Session, filters: ProductFilters) -> ProductListResponse:
        (rows, total), used_fallback = self._read("list_active", session, filters)

        message = "Products retrieved successfully"
        if used_fallback:
            message += FALLBACK_SUFFIX

        return ProductListResponse(
            message=message,
            products=[ProductRead.model_validate(row) for row in rows],
            pagination=Pagination.build(filters.page, filters.limit, total),
        )

    def get_product(self, session: Session, product_id: int) -> ProductResponse:
        product, used_fallback = self._read("get_active_by_id", session, product_id)
        if product is None:
            raise NotFoundError("Product not found")

        message = "Product retrieved successfully"
        if used_fallback:
            message += FALLBACK_SUFFIX

        return ProductResponse(message=message, product=ProductRead.model_validate(product))
