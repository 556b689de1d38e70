# app/schemas/base.py
import math

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for API payloads.

    JSON uses camelCase (`inStock`, `customerName`), Python uses snake_case.
    Both spellings are accepted on input; responses are emitted in camelCase.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PaginationBase(CamelModel):
    """
    Pagination metadata shared by catalog and order listings.
    """

    current_page: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool
    limit: int


def page_window(page: int, limit: int, total: int) -> dict:
    """
    Compute pagination fields for a 1-based page.

    totalPages = ceil(total / limit), hasNextPage = page < totalPages,
    hasPrevPage = page > 1.
    """
    total_pages = math.ceil(total / limit)
    return {
        "current_page": page,
        "total_pages": total_pages,
        "has_next_page": page < total_pages,
        "has_prev_page": page > 1,
        "limit": limit,
    }
