# app/models/cart.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field

MAX_CART_QUANTITY = 999


class CartItem(SQLModel, table=True):
    """
    Shopping cart entry for a user.

    One user cannot have 2 rows for the same product; the unique
    constraint closes the race between concurrent adds.

    price / product_name are snapshots taken when the item was added
    and are not refreshed when the product changes.
    """

    __tablename__ = "cart_items"
    __table_args__ = (
        UniqueConstraint("user_id", "product_id", name="uq_cart_user_product"),
    )

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    user_id: uuid.UUID = Field(
        foreign_key="users.id",
        ondelete="CASCADE",
        index=True,
    )

    product_id: int = Field(
        foreign_key="products.id",
        ondelete="CASCADE",
        index=True,
    )

    quantity: int = Field(
        default=1,
        ge=1,
        le=MAX_CART_QUANTITY,
        description="Between 1 and 999",
    )

    price: float = Field(ge=0, description="Price when added to cart")
    product_name: str = Field(description="Product name when added to cart")

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )

    @property
    def line_total(self) -> float:
        return round(self.quantity * self.price, 2)
