"""
Pagination Utilities.

Two flavours of pagination live here:

- Offset-based list pagination for API endpoints (limit/offset query
  parameters and the standard PaginatedResponse envelope).
- Page-number windows for the note board, where one page shows a fixed
  number of notes and navigation moves one page at a time.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, TypeVar

from fastapi import Query
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel

from modules.backend.core.config import get_app_config
from modules.backend.schemas.base import PaginatedResponse, PaginationInfo, ResponseMetadata

T = TypeVar("T")


# =============================================================================
# Offset Pagination Parameters
# =============================================================================


@dataclass
class PaginationParams:
    """Pagination parameters extracted from query string."""

    limit: int
    offset: int


def get_pagination_params(
    limit: int | None = Query(
        default=None,
        ge=1,
        description="Maximum number of items to return",
    ),
    offset: int = Query(
        default=0,
        ge=0,
        description="Number of items to skip",
    ),
) -> PaginationParams:
    """
    FastAPI dependency for pagination parameters.

    The default and upper bound for `limit` come from the `pagination`
    section of application.yaml.

    Usage:
        @router.get("/items")
        async def list_items(
            pagination: PaginationParams = Depends(get_pagination_params),
        ):
            ...
    """
    settings = get_app_config().application.pagination
    if limit is None:
        limit = settings.default_limit
    elif limit > settings.max_limit:
        raise RequestValidationError([
            {
                "loc": ("query", "limit"),
                "msg": f"Input should be less than or equal to {settings.max_limit}",
                "type": "less_than_equal",
                "input": limit,
            }
        ])
    return PaginationParams(limit=limit, offset=offset)


def create_paginated_response(
    items: list[Any],
    item_schema: type[BaseModel],
    total: int,
    limit: int = 20,
    offset: int = 0,
    request_id: str | None = None,
) -> dict[str, Any]:
    """
    Create a standardized paginated response.

    Args:
        items: List of items (model instances or dicts)
        item_schema: Pydantic schema to validate items
        total: Total count of items
        limit: Page size limit
        offset: Current offset
        request_id: Request ID for metadata

    Returns:
        Dict matching PaginatedResponse structure
    """
    validated_items = [
        item_schema.model_validate(item).model_dump(mode="json")
        for item in items
    ]

    pagination = PaginationInfo(
        total=total,
        limit=limit,
        offset=offset,
        has_more=(offset + len(items)) < total,
    )

    response = PaginatedResponse(
        data=validated_items,
        pagination=pagination,
        metadata=ResponseMetadata(request_id=request_id),
    )

    return response.model_dump(mode="json")


# =============================================================================
# Page Windows
# =============================================================================


@dataclass(frozen=True)
class PageWindow:
    """
    One page of a collection, identified by a 1-based page number.

    The window never validates `number` against `total_pages`; callers only
    move between pages through controls that are disabled at the ends.
    """

    number: int
    size: int
    total_items: int

    @property
    def total_pages(self) -> int:
        """Number of pages; an empty collection still counts as one page."""
        return max(1, math.ceil(self.total_items / self.size))

    @property
    def start(self) -> int:
        return (self.number - 1) * self.size

    @property
    def stop(self) -> int:
        return self.number * self.size

    @property
    def has_previous(self) -> bool:
        return self.number > 1

    @property
    def has_next(self) -> bool:
        return self.number < self.total_pages

    @property
    def show_controls(self) -> bool:
        """Navigation is only shown once there is more than one item."""
        return self.total_items > 1

    def slice(self, items: Sequence[T]) -> list[T]:
        """Return the items that fall on this page."""
        return list(items[self.start:self.stop])
