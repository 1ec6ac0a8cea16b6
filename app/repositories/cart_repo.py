# app/repositories/cart_repo.py
import uuid
from sqlmodel import Session, select

from app.core.errors import translate_storage_errors
from app.models.cart import CartItem
from app.models.product import Product


class CartRepository:

    # Get items for a user, newest first
    @translate_storage_errors
    def list_for_user(self, session: Session, user_id: uuid.UUID) -> list[CartItem]:
        stmt = (
            select(CartItem)
            .where(CartItem.user_id == user_id)
            .order_by(CartItem.created_at.desc())
        )
        return list(session.exec(stmt).all())

    @translate_storage_errors
    def get_item(
        self, session: Session, user_id: uuid.UUID, product_id: int
    ) -> CartItem | None:
        stmt = select(CartItem).where(
            CartItem.user_id == user_id, CartItem.product_id == product_id
        )
        return session.exec(stmt).first()

    @translate_storage_errors
    def get_owned(
        self, session: Session, user_id: uuid.UUID, item_id: uuid.UUID
    ) -> CartItem | None:
        """Cart item by id, only if it belongs to `user_id`."""
        stmt = select(CartItem).where(CartItem.id == item_id, CartItem.user_id == user_id)
        return session.exec(stmt).first()

    # CRUD
    @translate_storage_errors
    def update(self, session: Session, item: CartItem) -> CartItem:
        session.add(item)
        session.commit()
        session.refresh(item)
        return item

    @translate_storage_errors
    def delete(self, session: Session, item: CartItem) -> None:
        session.delete(item)
        session.commit()

    @translate_storage_errors
    def clear_user_cart(self, session: Session, user_id: uuid.UUID) -> int:
        """Delete every item of a user's cart; returns the number of rows removed."""
        rows = self.list_for_user(session, user_id)
        for row in rows:
            session.delete(row)
        session.commit()
        return len(rows)

    @translate_storage_errors
    def create_from_product(
            self,
            session: Session,
            *,
            user_id: uuid.UUID,
            product: Product,
            quantity: int,
    ) -> CartItem:
        """
        Create a CartItem from a Product, snapshotting:
          - price
          - product_name

        Raises IntegrityError if the (user, product) row already exists;
        the caller decides whether to merge instead.
        """
        item = CartItem(
            user_id=user_id,
            product_id=product.id,
            quantity=quantity,
            price=product.price,
            product_name=product.name,
        )
        session.add(item)
        session.commit()
        session.refresh(item)
        return item
