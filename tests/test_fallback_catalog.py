from app.repositories.fallback_catalog import FallbackProductRepository
from app.schemas.product import ProductFilters


def test_lists_every_active_entry():
    rows, total = FallbackProductRepository().list_active(None, ProductFilters())

    assert total == 3
    assert [p.name for p in rows] == ["Mechanical Keyboard", "Wireless Mouse", "Laptop Pro"]


def test_filters_and_pagination():
    repo = FallbackProductRepository()

    rows, total = repo.list_active(None, ProductFilters(category="Accessories", max_price=100))
    assert total == 1
    assert rows[0].sku == "MOUSE-WL-01"

    rows, total = repo.list_active(None, ProductFilters(search="KEYBOARD"))
    assert [p.id for p in rows] == [3]

    rows, total = repo.list_active(None, ProductFilters(featured=True))
    assert {p.id for p in rows} == {1, 3}

    rows, total = repo.list_active(None, ProductFilters(page=2, limit=2))
    assert total == 3
    assert [p.id for p in rows] == [1]


def test_get_by_id_skips_inactive_and_unknown():
    repo = FallbackProductRepository(
        [
            {"id": 1, "name": "Shown", "price": 1.0, "sku": "A"},
            {"id": 2, "name": "Hidden", "price": 1.0, "sku": "B", "is_active": False},
        ]
    )

    assert repo.get_active_by_id(None, 1).name == "Shown"
    assert repo.get_active_by_id(None, 2) is None
    assert repo.get_active_by_id(None, 999999) is None


def test_reads_cannot_mutate_the_catalog():
    repo = FallbackProductRepository()

    repo.get_active_by_id(None, 1).tags.append("tampered")
    repo.entries()[0]["name"] = "Tampered"

    product = repo.get_active_by_id(None, 1)
    assert product.name == "Laptop Pro"
    assert "tampered" not in product.tags


def test_orders_like_the_live_repository():
    repo = FallbackProductRepository(
        [
            {"id": 7, "name": "Seven", "price": 1.0, "sku": "S7"},
            {"id": 2, "name": "Two", "price": 1.0, "sku": "S2"},
            {"id": 9, "name": "Nine", "price": 1.0, "sku": "S9"},
        ]
    )

    rows, _ = repo.list_active(None, ProductFilters())

    assert [p.id for p in rows] == [9, 7, 2]
