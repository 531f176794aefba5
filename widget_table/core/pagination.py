"""Offset/limit windowing over an ordered collection."""

from __future__ import annotations

import math

from pydantic import BaseModel, Field

from widget_table.core.state import PaginationState, SortOrder


class WindowSpec(BaseModel):
    """What the data source needs to fetch exactly one page.

    ``sort_key`` is passed through from the request untouched; callers must
    check it against their sortable columns before building a query.
    """

    offset: int = Field(ge=0)
    limit: int = Field(gt=0)
    sort_key: str
    order: SortOrder

    model_config = {"frozen": True}


class PageMeta(BaseModel):
    total: int
    page: int
    limit: int
    pages: int

    model_config = {"populate_by_name": True}


def window(state: PaginationState, page_size: int) -> WindowSpec:
    """Window for ``state.page``.

    The offset is not clamped against the collection size: a page past the
    end yields an offset past the end, and the data source returns no rows.
    """
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return WindowSpec(
        offset=(state.page - 1) * page_size,
        limit=page_size,
        sort_key=state.sort_key,
        order=state.order,
    )


def total_pages(total_count: int, page_size: int) -> int:
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    if total_count < 0:
        raise ValueError(f"total_count must not be negative, got {total_count}")
    return math.ceil(total_count / page_size)


def page_meta(state: PaginationState, total_count: int, page_size: int) -> PageMeta:
    return PageMeta(
        total=total_count,
        page=state.page,
        limit=page_size,
        pages=total_pages(total_count, page_size),
    )
