"""Pagination DTOs."""

import math

from pydantic import BaseModel


class PaginationInfo(BaseModel):
    """Page metadata returned with every list response."""

    current_page: int
    total_pages: int
    total_count: int
    has_next: bool
    has_previous: bool

    @classmethod
    def from_counts(cls, page: int, limit: int, total_count: int) -> "PaginationInfo":
        """Build pagination metadata for a page of ``limit`` items."""
        return cls(
            current_page=page,
            total_pages=math.ceil(total_count / limit) if limit else 0,
            total_count=total_count,
            has_next=page * limit < total_count,
            has_previous=page > 1,
        )
