# app/routers/cart.py
import uuid

from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session

from app.core.auth import CurrentUser, get_current_user
from app.database import get_session
from app.repositories.cart_repo import CartRepository
from app.repositories.product_repo import ProductRepository
from app.schemas.cart import (
    CartItemCreate,
    CartItemResponse,
    CartItemUpdate,
    CartResponse,
)
from app.schemas.common import MessageResponse
from app.services.cart_service import CartService

# All cart routes require a bearer token
router = APIRouter(
    prefix="/cart",
    tags=["Cart"],
)

cart_repo = CartRepository()
product_repo = ProductRepository()
service = CartService(cart_repo, product_repo)


@router.get("", response_model=CartResponse)
def get_my_cart(
    session: Session = Depends(get_session),
    current_user: CurrentUser = Depends(get_current_user),
):
    """
    Get the current user's cart with totals.

    Returns an empty cart, tagged as fallback data, when the
    database is unreachable.
    """
    return service.get_cart(session, current_user.id)


@router.post(
    "",
    response_model=CartItemResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_to_cart(
    payload: CartItemCreate,
    response: Response,
    session: Session = Depends(get_session),
    current_user: CurrentUser = Depends(get_current_user),
):
    """
    Add a product to the current user's cart.

    - 201 when a new cart row was created.
    - 200 when the quantity was merged into an existing row.
    """
    item, created = service.add_to_cart(session, current_user.id, payload)
    if not created:
        response.status_code = status.HTTP_200_OK
        return CartItemResponse(message="Cart quantity updated successfully", item=item)
    return CartItemResponse(message="Product added to cart successfully", item=item)


@router.put("/{item_id}", response_model=CartItemResponse)
def update_cart_item(
    item_id: uuid.UUID,
    payload: CartItemUpdate,
    session: Session = Depends(get_session),
    current_user: CurrentUser = Depends(get_current_user),
):
    """
    Set the quantity of a cart item (1–999).
    """
    item = service.update_quantity(
        session=session,
        user_id=current_user.id,
        item_id=item_id,
        payload=payload,
    )
    return CartItemResponse(message="Cart quantity updated successfully", item=item)


@router.delete("/{item_id}", response_model=MessageResponse)
def remove_cart_item(
    item_id: uuid.UUID,
    session: Session = Depends(get_session),
    current_user: CurrentUser = Depends(get_current_user),
):
    """
    Remove one item from the cart.
    """
    service.remove_item(session, current_user.id, item_id)
    return MessageResponse(message="Product removed from cart successfully")


@router.delete("", response_model=MessageResponse)
def clear_cart(
    session: Session = Depends(get_session),
    current_user: CurrentUser = Depends(get_current_user),
):
    """
    Clear the entire cart.
    """
    service.clear_cart(session, current_user.id)
    return MessageResponse(message="Cart cleared successfully")
