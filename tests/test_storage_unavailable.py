import uuid

import pytest

from app.core.errors import StorageUnavailable
from app.repositories.product_repo import ProductRepository
from app.schemas.product import ProductFilters
from conftest import register


def test_repository_translates_connection_errors():
    from sqlmodel import Session, create_engine

    broken = create_engine("sqlite:////nonexistent-dir/for-tests/shop.db")
    with Session(broken) as session:
        with pytest.raises(StorageUnavailable):
            ProductRepository().list_active(session, ProductFilters())


def test_product_list_falls_back_to_catalog(down_client):
    response = down_client.get("/api/products?limit=2")

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Products retrieved successfully (fallback data)"
    assert [p["name"] for p in body["products"]] == ["Mechanical Keyboard", "Wireless Mouse"]
    assert body["pagination"]["totalItems"] == 3


def test_product_detail_falls_back_to_catalog(down_client):
    response = down_client.get("/api/products/3")

    assert response.status_code == 200
    assert response.json()["message"].endswith("(fallback data)")
    assert response.json()["product"]["name"] == "Mechanical Keyboard"

    assert down_client.get("/api/products/999999").status_code == 404


def test_cart_read_degrades_to_empty_cart(down_client, claims_headers):
    response = down_client.get("/api/cart", headers=claims_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Cart retrieved successfully (fallback data)"
    assert body["cart"] == {"items": [], "totalItems": 0, "totalPrice": 0.0}


def test_auth_still_rejects_bad_tokens_while_down(down_client):
    response = down_client.get("/api/cart", headers={"Authorization": "Bearer nope"})

    assert response.status_code == 401


@pytest.mark.parametrize(
    "method, path, body",
    [
        ("post", "/api/cart", {"productId": 1, "quantity": 1}),
        ("put", f"/api/cart/{uuid.uuid4()}", {"quantity": 2}),
        ("delete", f"/api/cart/{uuid.uuid4()}", None),
        ("delete", "/api/cart", None),
    ],
)
def test_cart_writes_fail_hard(down_client, claims_headers, method, path, body):
    kwargs = {"headers": claims_headers}
    if body is not None:
        kwargs["json"] = body

    response = getattr(down_client, method)(path, **kwargs)

    assert response.status_code == 500
    assert response.json() == {"status": "error", "message": "Internal server error"}


def test_register_fails_hard(down_client):
    response = register(down_client)

    assert response.status_code == 500
    assert "password" not in response.text
