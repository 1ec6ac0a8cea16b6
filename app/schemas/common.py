# app/schemas/common.py
import math

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel

# Request bodies arrive in camelCase but may also use field names.
REQUEST_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)

# Responses are built from ORM rows by attribute name and rendered in camelCase.
RESPONSE_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    from_attributes=True,
)


class MessageResponse(SQLModel):
    """Body for endpoints that only report an outcome."""

    model_config = RESPONSE_CONFIG

    message: str


class Pagination(SQLModel):
    """
    Pagination metadata for list endpoints.
    """

    model_config = RESPONSE_CONFIG

    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    has_next_page: bool
    has_prev_page: bool

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        total_pages = math.ceil(total / limit) if limit > 0 else 0
        return cls(
            current_page=page,
            total_pages=total_pages,
            total_items=total,
            items_per_page=limit,
            has_next_page=page < total_pages,
            has_prev_page=page > 1,
        )


class ServiceInfo(SQLModel):
    message: str
    version: str
    status: str
    timestamp: str


class HealthStatus(SQLModel):
    status: str
    uptime: float
    timestamp: str
