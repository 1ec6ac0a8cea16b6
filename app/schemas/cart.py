# app/schemas/cart.py
import uuid

from sqlmodel import SQLModel

from app.schemas.common import REQUEST_CONFIG, RESPONSE_CONFIG


class CartItemCreate(SQLModel):
    """
    Payload for adding to cart.

    quantity defaults to 1; range checks happen in the service.
    """

    model_config = REQUEST_CONFIG

    product_id: int | None = None
    quantity: int = 1


class CartItemUpdate(SQLModel):
    """
    Payload for updating quantity of a cart item.
    """

    model_config = REQUEST_CONFIG

    quantity: int | None = None


class CartItemRead(SQLModel):
    """
    Read model for a single cart item, including its line total.
    """

    model_config = RESPONSE_CONFIG

    id: uuid.UUID
    product_id: int
    product_name: str
    quantity: int
    price: float
    total: float


class CartSummary(SQLModel):
    """
    Cart contents with totals.

    total_items counts rows, not units.
    """

    model_config = RESPONSE_CONFIG

    items: list[CartItemRead]
    total_items: int
    total_price: float


class CartResponse(SQLModel):
    model_config = RESPONSE_CONFIG

    message: str
    cart: CartSummary


class CartItemResponse(SQLModel):
    model_config = RESPONSE_CONFIG

    message: str
    item: CartItemRead
