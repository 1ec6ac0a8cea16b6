# app/services/cart_service.py
import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.core.errors import NotFoundError, StorageUnavailable, ValidationError
from app.models.cart import MAX_CART_QUANTITY, CartItem
from app.models.product import Product
from app.repositories.cart_repo import CartRepository
from app.repositories.product_repo import ProductRepository
from app.schemas.cart import (
    CartItemCreate,
    CartItemRead,
    CartItemUpdate,
    CartResponse,
    CartSummary,
)

logger = logging.getLogger(__name__)

QUANTITY_RANGE_MESSAGE = f"Quantity must be between 1 and {MAX_CART_QUANTITY}"


def _check_quantity(quantity: int | None) -> int:
    if quantity is None or not 1 <= quantity <= MAX_CART_QUANTITY:
        raise ValidationError([QUANTITY_RANGE_MESSAGE])
    return quantity


def _to_read(item: CartItem) -> CartItemRead:
    return CartItemRead(
        id=item.id,
        product_id=item.product_id,
        product_name=item.product_name,
        quantity=item.quantity,
        price=item.price,
        total=item.line_total,
    )


class CartService:
    """
    Business logic for cart operations.

    Responsibilities:
      - validate product existence and active flag
      - enforce 1 <= quantity <= 999 and quantity <= stock
      - merge repeated adds into the existing row
      - snapshot price/name from the product at add time
      - compute line totals and cart totals

    Reads degrade to an empty cart when storage is unavailable;
    writes let StorageUnavailable propagate.
    """

    def __init__(self, cart_repo: CartRepository, product_repo: ProductRepository):
        self.cart_repo = cart_repo
        self.product_repo = product_repo

    # ---- internal helpers ----

    def _get_active_product(self, session: Session, product_id: int) -> Product:
        product = self.product_repo.get_active_by_id(session, product_id)
        if not product:
            raise NotFoundError("Product not found")
        return product

    @staticmethod
    def _check_stock(product: Product, quantity: int) -> None:
        if quantity > product.stock:
            raise ValidationError(
                [f"Not enough stock. Available: {product.stock}"],
                message="Insufficient stock",
            )

    def _merge(
        self,
        session: Session,
        item: CartItem,
        product: Product,
        quantity: int,
    ) -> CartItem:
        new_qty = item.quantity + quantity
        if new_qty > MAX_CART_QUANTITY:
            raise ValidationError([QUANTITY_RANGE_MESSAGE])
        self._check_stock(product, new_qty)

        item.quantity = new_qty
        item.updated_at = datetime.now(timezone.utc)
        return self.cart_repo.update(session, item)

    # ---- public operations ----

    def get_cart(self, session: Session, user_id: uuid.UUID) -> CartResponse:
        """
        Return the cart with totals:
          - total_items: number of rows
          - total_price: sum of snapshot price * quantity
        """
        message = "Cart retrieved successfully"
        try:
            items = self.cart_repo.list_for_user(session, user_id)
        except StorageUnavailable as exc:
            logger.warning("Cart for %s unavailable, returning empty cart: %s", user_id, exc)
            items = []
            message += " (fallback data)"

        total_price = round(sum(it.line_total for it in items), 2)
        return CartResponse(
            message=message,
            cart=CartSummary(
                items=[_to_read(it) for it in items],
                total_items=len(items),
                total_price=total_price,
            ),
        )

    def add_to_cart(
        self,
        session: Session,
        user_id: uuid.UUID,
        payload: CartItemCreate,
    ) -> tuple[CartItemRead, bool]:
        """
        Add a product to the user's cart.

        Rules:
          - product must exist and be active
          - an existing row for the product gets its quantity increased
          - a new row snapshots the product's current price and name

        Returns:
            (item, created) where created is False for a merge.
        """
        if payload.product_id is None:
            raise ValidationError(["Product ID is required"])
        quantity = _check_quantity(payload.quantity)

        product = self._get_active_product(session, payload.product_id)

        existing = self.cart_repo.get_item(session, user_id, product.id)
        if existing:
            return _to_read(self._merge(session, existing, product, quantity)), False

        self._check_stock(product, quantity)
        try:
            item = self.cart_repo.create_from_product(
                session, user_id=user_id, product=product, quantity=quantity
            )
        except IntegrityError:
            # A concurrent add created the row first; fold into it instead.
            session.rollback()
            existing = self.cart_repo.get_item(session, user_id, product.id)
            if existing is None:
                raise
            return _to_read(self._merge(session, existing, product, quantity)), False

        return _to_read(item), True

    def update_quantity(
        self,
        session: Session,
        user_id: uuid.UUID,
        item_id: uuid.UUID,
        payload: CartItemUpdate,
    ) -> CartItemRead:
        """Replace the quantity of one of the user's cart items."""
        quantity = _check_quantity(payload.quantity)

        item = self.cart_repo.get_owned(session, user_id, item_id)
        if not item:
            raise NotFoundError("Cart item not found")

        item.quantity = quantity
        item.updated_at = datetime.now(timezone.utc)
        return _to_read(self.cart_repo.update(session, item))

    def remove_item(
        self,
        session: Session,
        user_id: uuid.UUID,
        item_id: uuid.UUID,
    ) -> None:
        item = self.cart_repo.get_owned(session, user_id, item_id)
        if not item:
            raise NotFoundError("Cart item not found")

        self.cart_repo.delete(session, item)

    def clear_cart(self, session: Session, user_id: uuid.UUID) -> int:
        """Remove every item from the cart; returns how many were removed."""
        return self.cart_repo.clear_user_cart(session, user_id)
