"""Common response wrapper schemas for API responses."""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from lang_portal.pagination import PaginatedResult

T = TypeVar("T")


class MessageResponse(BaseModel):
    """Plain message response."""

    message: str


class PaginationMeta(BaseModel):
    """Page metadata attached to every list response."""

    model_config = ConfigDict(from_attributes=True)

    current_page: int = Field(..., ge=1, description="Current page number")
    total_pages: int = Field(..., ge=0, description="ceil(total_items / items_per_page)")
    total_items: int = Field(..., ge=0, description="Total number of items across all pages")
    items_per_page: int = Field(..., ge=1, description="Page size used for this response")


class PaginatedResponse(BaseModel, Generic[T]):
    """Generic pagination wrapper."""

    items: list[T]
    pagination: PaginationMeta


def to_paginated_response(
    result: PaginatedResult[Any], convert: Callable[[Any], T]
) -> PaginatedResponse[T]:
    """Build the response envelope for a paginated service result."""
    return PaginatedResponse(
        items=[convert(item) for item in result.items],
        pagination=PaginationMeta.model_validate(result.meta),
    )
