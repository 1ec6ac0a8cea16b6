# app/core/validators.py
"""
Field-level validation for untrusted request input.

Every validator takes a mutable mapping (a request payload or the
collected query parameters) and follows the same contract:

  - on failure: return a non-empty list of messages, leave `data` untouched
  - on success: return [] and normalize `data` in place
    (trimmed strings, lower-cased emails, parsed numbers, clamped ranges)

The validators have no FastAPI or database dependencies so they can be
unit tested with plain dicts.
"""
import math
import re
from collections.abc import Callable, MutableMapping
from typing import Any

from app.core.errors import ValidationError

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

NAME_MIN, NAME_MAX = 2, 50
PASSWORD_MIN, PASSWORD_MAX = 6, 100
PRODUCT_NAME_MIN, PRODUCT_NAME_MAX = 2, 100
SKU_MAX = 50
PHONE_MAX = 20
SEARCH_MAX = 100

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

TRUTHY = {"1", "true", "yes"}
FALSY = {"0", "false", "no"}

Payload = MutableMapping[str, Any]


# ----- Helpers -----


def _text(value: Any) -> str:
    """Stripped string form of a value, or "" for missing/non-string input."""
    if not isinstance(value, str):
        return ""
    return value.strip()


def _parse_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def _parse_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def _check_name(data: Payload, field: str, label: str, errors: list[str]) -> None:
    value = _text(data.get(field))
    if not value:
        errors.append(f"{label} is required")
    elif not NAME_MIN <= len(value) <= NAME_MAX:
        errors.append(f"{label} must be between {NAME_MIN} and {NAME_MAX} characters")


def _check_email(data: Payload, errors: list[str]) -> None:
    value = _text(data.get("email"))
    if not value:
        errors.append("Email is required")
    elif not EMAIL_RE.match(value):
        errors.append("Invalid email format")


def _check_password_length(password: str, errors: list[str]) -> None:
    if len(password) < PASSWORD_MIN:
        errors.append(f"Password must be at least {PASSWORD_MIN} characters long")
    elif len(password) > PASSWORD_MAX:
        errors.append(f"Password must be at most {PASSWORD_MAX} characters long")


# ----- User payloads -----


def validate_registration(data: Payload) -> list[str]:
    """firstName, lastName, email and password are all required."""
    errors: list[str] = []
    _check_name(data, "firstName", "First name", errors)
    _check_name(data, "lastName", "Last name", errors)
    _check_email(data, errors)

    password = data.get("password")
    if not isinstance(password, str) or not password:
        errors.append("Password is required")
    else:
        _check_password_length(password, errors)

    if errors:
        return errors

    data["firstName"] = _text(data["firstName"])
    data["lastName"] = _text(data["lastName"])
    data["email"] = _text(data["email"]).lower()
    return []


def validate_login(data: Payload) -> list[str]:
    """Email shape is checked; password only has to be present."""
    errors: list[str] = []
    _check_email(data, errors)

    password = data.get("password")
    if not isinstance(password, str) or not password:
        errors.append("Password is required")

    if errors:
        return errors

    data["email"] = _text(data["email"]).lower()
    return []


def validate_profile_update(data: Payload) -> list[str]:
    """
    Same rules as registration, except that password is optional.

    An empty or whitespace phone number clears the stored one.
    """
    errors: list[str] = []
    _check_name(data, "firstName", "First name", errors)
    _check_name(data, "lastName", "Last name", errors)
    _check_email(data, errors)

    password = data.get("password")
    if password is not None:
        if not isinstance(password, str) or not password:
            errors.append("Password cannot be empty")
        else:
            _check_password_length(password, errors)

    phone = data.get("phoneNumber")
    if phone is not None and len(_text(phone)) > PHONE_MAX:
        errors.append(f"Phone number must be at most {PHONE_MAX} characters")

    if errors:
        return errors

    data["firstName"] = _text(data["firstName"])
    data["lastName"] = _text(data["lastName"])
    data["email"] = _text(data["email"]).lower()
    if phone is not None:
        data["phoneNumber"] = _text(phone) or None
    return []


# ----- Product payloads -----


def validate_product(data: Payload) -> list[str]:
    """
    name, price and sku are required; stock is optional.

    On success the SKU is upper-cased and price/stock are parsed.
    """
    errors: list[str] = []

    name = _text(data.get("name"))
    if not name:
        errors.append("Product name is required")
    elif not PRODUCT_NAME_MIN <= len(name) <= PRODUCT_NAME_MAX:
        errors.append(
            f"Product name must be between {PRODUCT_NAME_MIN} and {PRODUCT_NAME_MAX} characters"
        )

    price = None
    if data.get("price") is None:
        errors.append("Price is required")
    else:
        price = _parse_float(data["price"])
        if price is None or price < 0:
            errors.append("Price must be a non-negative number")

    sku = _text(data.get("sku"))
    if not sku:
        errors.append("SKU is required")
    elif len(sku) > SKU_MAX:
        errors.append(f"SKU must be at most {SKU_MAX} characters")

    stock = None
    if data.get("stock") is not None:
        stock = _parse_int(data["stock"])
        if stock is None or stock < 0:
            errors.append("Stock must be a non-negative integer")

    if errors:
        return errors

    data["name"] = name
    data["price"] = price
    data["sku"] = sku.upper()
    if stock is not None:
        data["stock"] = stock
    for field in ("description", "category", "brand"):
        if isinstance(data.get(field), str):
            data[field] = data[field].strip()
    return []


# ----- Query parameters -----


def validate_pagination(data: Payload) -> list[str]:
    """
    Coerce page/limit to integers. Bad values are clamped, never rejected.
    """
    page = _parse_int(data.get("page", DEFAULT_PAGE))
    if page is None or page < 1:
        page = DEFAULT_PAGE

    limit = _parse_int(data.get("limit", DEFAULT_LIMIT))
    if limit is None or limit < 1:
        limit = DEFAULT_LIMIT
    elif limit > MAX_LIMIT:
        limit = MAX_LIMIT

    data["page"] = page
    data["limit"] = limit
    return []


def validate_price_filter(data: Payload) -> list[str]:
    """
    minPrice/maxPrice must be non-negative numbers, and min <= max.

    Errors come as a (message, detail) pair: the first entry is the
    response message, the second the itemized detail.
    """
    bounds: dict[str, float] = {}
    for field, label in (("minPrice", "minimum"), ("maxPrice", "maximum")):
        if data.get(field) is None:
            continue
        value = _parse_float(data[field])
        if value is None or value < 0:
            return [
                f"Invalid {label} price",
                f"{label.capitalize()} price must be a non-negative number",
            ]
        bounds[field] = value

    if "minPrice" in bounds and "maxPrice" in bounds and bounds["minPrice"] > bounds["maxPrice"]:
        return [
            "Invalid price range",
            "Minimum price cannot be greater than maximum price",
        ]

    data.update(bounds)
    return []


def validate_search(data: Payload) -> list[str]:
    """Trim the search term; drop it when empty. Same (message, detail) pair on error."""
    if data.get("search") is None:
        return []

    term = _text(data["search"])
    if not term:
        del data["search"]
        return []
    if len(term) > SEARCH_MAX:
        return [
            "Invalid search term",
            f"Search term must be at most {SEARCH_MAX} characters",
        ]

    data["search"] = term
    return []


def validate_featured(data: Payload) -> list[str]:
    """
    Parse the featured flag to a bool. Missing or blank means no filter;
    anything other than true/false/1/0/yes/no is rejected.
    """
    if data.get("featured") is None:
        return []

    value = _text(data["featured"]).lower()
    if not value:
        del data["featured"]
        return []
    if value in TRUTHY:
        data["featured"] = True
    elif value in FALSY:
        data["featured"] = False
    else:
        return ["Invalid featured flag", "Featured must be true or false"]
    return []


# ----- Raising wrappers for the routers -----


def ensure_valid(validator: Callable[[Payload], list[str]], data: Payload) -> None:
    """Run a body validator and raise a 400 with every message on failure."""
    errors = validator(data)
    if errors:
        raise ValidationError(errors)


def ensure_valid_query(validator: Callable[[Payload], list[str]], data: Payload) -> None:
    """Run a query validator; its (message, detail) pair becomes the 400 body."""
    errors = validator(data)
    if errors:
        message, *details = errors
        raise ValidationError(details, message=message)
