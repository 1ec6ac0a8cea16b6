import pytest

from app.core.errors import ValidationError
from app.core.validators import (
    ensure_valid,
    ensure_valid_query,
    validate_featured,
    validate_login,
    validate_pagination,
    validate_price_filter,
    validate_product,
    validate_profile_update,
    validate_registration,
    validate_search,
)


def valid_registration(**overrides):
    data = {
        "firstName": "  John ",
        "lastName": "Doe",
        "email": "  John.Doe@Example.COM ",
        "password": "password123",
    }
    data.update(overrides)
    return data


class TestRegistration:
    def test_valid_payload_is_normalized(self):
        data = valid_registration()

        assert validate_registration(data) == []
        assert data["firstName"] == "John"
        assert data["email"] == "john.doe@example.com"
        assert data["password"] == "password123"

    def test_missing_first_name(self):
        data = valid_registration()
        del data["firstName"]

        assert "First name is required" in validate_registration(data)

    def test_invalid_email(self):
        errors = validate_registration(valid_registration(email="invalid-email"))

        assert errors == ["Invalid email format"]

    def test_short_password(self):
        errors = validate_registration(valid_registration(password="123"))

        assert errors == ["Password must be at least 6 characters long"]

    def test_long_password(self):
        errors = validate_registration(valid_registration(password="x" * 101))

        assert errors == ["Password must be at most 100 characters long"]

    def test_name_length_is_checked_after_trim(self):
        errors = validate_registration(valid_registration(lastName="  D  "))

        assert errors == ["Last name must be between 2 and 50 characters"]

    def test_failure_leaves_payload_untouched(self):
        data = valid_registration(password="123")
        before = dict(data)

        validate_registration(data)

        assert data == before

    def test_collects_every_error(self):
        assert len(validate_registration({})) == 4


class TestLogin:
    def test_valid(self):
        data = {"email": " USER@example.com", "password": "x"}

        assert validate_login(data) == []
        assert data["email"] == "user@example.com"

    def test_missing_email(self):
        assert validate_login({"password": "password123"}) == ["Email is required"]

    def test_missing_password(self):
        assert validate_login({"email": "a@b.co"}) == ["Password is required"]


class TestProfileUpdate:
    def test_password_is_optional(self):
        data = {"firstName": "Jane", "lastName": "Roe", "email": "JANE@example.com"}

        assert validate_profile_update(data) == []
        assert data["email"] == "jane@example.com"
        assert "password" not in data

    def test_password_length_checked_when_present(self):
        data = {"firstName": "Jane", "lastName": "Roe", "email": "j@example.com", "password": "abc"}

        assert validate_profile_update(data) == ["Password must be at least 6 characters long"]

    def test_blank_phone_clears(self):
        data = {"firstName": "Jane", "lastName": "Roe", "email": "j@example.com", "phoneNumber": "  "}

        assert validate_profile_update(data) == []
        assert data["phoneNumber"] is None


class TestProduct:
    def test_valid_product_is_normalized(self):
        data = {"name": " Laptop ", "price": "10.5", "sku": " ab-12 ", "stock": "3", "brand": " X "}

        assert validate_product(data) == []
        assert data == {"name": "Laptop", "price": 10.5, "sku": "AB-12", "stock": 3, "brand": "X"}

    def test_required_fields(self):
        errors = validate_product({})

        assert errors == ["Product name is required", "Price is required", "SKU is required"]

    @pytest.mark.parametrize("price", ["abc", -1, "-0.01"])
    def test_bad_price(self, price):
        errors = validate_product({"name": "Laptop", "price": price, "sku": "A"})

        assert errors == ["Price must be a non-negative number"]

    def test_zero_price_is_allowed(self):
        assert validate_product({"name": "Sticker", "price": 0, "sku": "FREE"}) == []

    def test_bad_stock(self):
        errors = validate_product({"name": "Laptop", "price": 1, "sku": "A", "stock": "-2"})

        assert errors == ["Stock must be a non-negative integer"]

    def test_sku_too_long(self):
        errors = validate_product({"name": "Laptop", "price": 1, "sku": "A" * 51})

        assert errors == ["SKU must be at most 50 characters"]


class TestPagination:
    def test_defaults(self):
        data = {}

        assert validate_pagination(data) == []
        assert data == {"page": 1, "limit": 10}

    def test_page_floors_at_one(self):
        data = {"page": "0", "limit": "5"}

        validate_pagination(data)

        assert data == {"page": 1, "limit": 5}

    def test_limit_ceiling(self):
        data = {"limit": "200"}

        validate_pagination(data)

        assert data["limit"] == 100

    def test_garbage_is_clamped(self):
        data = {"page": "abc", "limit": "-3"}

        validate_pagination(data)

        assert data == {"page": 1, "limit": 10}


class TestPriceFilter:
    def test_valid_range_is_parsed(self):
        data = {"minPrice": "10.50", "maxPrice": "100.00"}

        assert validate_price_filter(data) == []
        assert data == {"minPrice": 10.5, "maxPrice": 100.0}

    def test_invalid_min(self):
        assert validate_price_filter({"minPrice": "invalid"}) == [
            "Invalid minimum price",
            "Minimum price must be a non-negative number",
        ]

    def test_negative_max(self):
        assert validate_price_filter({"maxPrice": "-1"}) == [
            "Invalid maximum price",
            "Maximum price must be a non-negative number",
        ]

    def test_min_above_max(self):
        data = {"minPrice": "100", "maxPrice": "50"}

        assert validate_price_filter(data) == [
            "Invalid price range",
            "Minimum price cannot be greater than maximum price",
        ]
        assert data == {"minPrice": "100", "maxPrice": "50"}


class TestSearch:
    def test_trimmed(self):
        data = {"search": "  laptop "}

        assert validate_search(data) == []
        assert data["search"] == "laptop"

    def test_blank_is_dropped(self):
        data = {"search": "   "}

        assert validate_search(data) == []
        assert "search" not in data

    def test_too_long(self):
        assert validate_search({"search": "a" * 101}) == [
            "Invalid search term",
            "Search term must be at most 100 characters",
        ]


class TestFeatured:
    @pytest.mark.parametrize(
        "raw, expected", [("true", True), (" YES ", True), ("0", False), ("False", False)]
    )
    def test_parsed(self, raw, expected):
        data = {"featured": raw}

        assert validate_featured(data) == []
        assert data["featured"] is expected

    def test_blank_is_dropped(self):
        data = {"featured": " "}

        assert validate_featured(data) == []
        assert "featured" not in data

    def test_unknown_value(self):
        data = {"featured": "maybe"}

        assert validate_featured(data) == ["Invalid featured flag", "Featured must be true or false"]
        assert data == {"featured": "maybe"}


def test_ensure_valid_raises_with_all_messages():
    with pytest.raises(ValidationError) as exc_info:
        ensure_valid(validate_login, {})

    assert exc_info.value.message == "Validation error"
    assert exc_info.value.errors == ["Email is required", "Password is required"]


def test_ensure_valid_query_uses_the_message_pair():
    with pytest.raises(ValidationError) as exc_info:
        ensure_valid_query(validate_price_filter, {"minPrice": "100", "maxPrice": "50"})

    assert exc_info.value.message == "Invalid price range"
    assert exc_info.value.errors == ["Minimum price cannot be greater than maximum price"]
