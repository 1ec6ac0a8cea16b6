# app/repositories/product_repo.py
from sqlalchemy import func, or_
from sqlmodel import Session, select

from app.core.errors import translate_storage_errors
from app.models.product import Product
from app.schemas.product import ProductFilters


class ProductRepository:
    """
    Data access layer for Product.

    - Pure DB operations (queries + seeding inserts).
    - No FastAPI, no business logic.
    - Read interface shared with FallbackProductRepository:
        get_active_by_id(session, product_id)
        list_active(session, filters) -> (rows, total)
    """

    def _apply_filters(self, stmt, filters: ProductFilters):
        stmt = stmt.where(Product.is_active == True)  # noqa: E712
        if filters.category:
            stmt = stmt.where(Product.category == filters.category)
        if filters.min_price is not None:
            stmt = stmt.where(Product.price >= filters.min_price)
        if filters.max_price is not None:
            stmt = stmt.where(Product.price <= filters.max_price)
        if filters.featured is not None:
            stmt = stmt.where(Product.is_featured == filters.featured)
        if filters.search:
            pattern = f"%{filters.search.lower()}%"
            stmt = stmt.where(
                or_(
                    func.lower(Product.name).like(pattern),
                    func.lower(Product.description).like(pattern),
                )
            )
        return stmt

    @translate_storage_errors
    def get_active_by_id(self, session: Session, product_id: int) -> Product | None:
        stmt = select(Product).where(Product.id == product_id, Product.is_active == True)  # noqa: E712
        return session.exec(stmt).first()

    @translate_storage_errors
    def list_active(
        self,
        session: Session,
        filters: ProductFilters,
    ) -> tuple[list[Product], int]:
        """
        Filtered, paginated listing of active products.

        Returns:
            (rows for the requested page, total matching rows)
        """
        count_stmt = self._apply_filters(select(func.count()).select_from(Product), filters)
        total = session.exec(count_stmt).one()
        if filters.offset >= total:
            return [], total

        stmt = self._apply_filters(select(Product), filters)
        stmt = stmt.order_by(Product.created_at.desc(), Product.id.desc())
        stmt = stmt.offset(filters.offset).limit(filters.limit)
        return list(session.exec(stmt).all()), total

    @translate_storage_errors
    def count(self, session: Session) -> int:
        return session.exec(select(func.count()).select_from(Product)).one()

    @translate_storage_errors
    def create(self, session: Session, product: Product) -> Product:
        session.add(product)
        session.commit()
        session.refresh(product)
        return product
