"""Per-widget sort/order/page state and its compact query-string token.

Every widget on a page owns exactly one query parameter, named after the
element type it lists (``user-w``, ``course-w``). The value is a token of the
form ``{sort_key}-{order}-{page}``, e.g. ``created_at-desc-3``.

Decoding is total: a missing, truncated or tampered token degrades field by
field to the defaults instead of failing the request.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Literal, Optional

from pydantic import BaseModel, Field

SortOrder = Literal["asc", "desc"]

DEFAULT_SORT_KEY = "created_at"
DEFAULT_ORDER: SortOrder = "desc"
DEFAULT_PAGE = 1

# Keeps (page - 1) * page_size inside a signed 64-bit OFFSET for any allowed page size.
MAX_PAGE = 10**9

TOKEN_SEPARATOR = "-"
WIDGET_KEY_SUFFIX = "-w"

_ORDERS = ("asc", "desc")


class PaginationState(BaseModel):
    """Immutable sort/order/page triple for one widget instance."""

    sort_key: str = DEFAULT_SORT_KEY
    order: SortOrder = DEFAULT_ORDER
    page: int = Field(default=DEFAULT_PAGE, ge=1, le=MAX_PAGE)

    model_config = {"frozen": True}

    @property
    def token(self) -> str:
        return encode(self)


def widget_key(element_type_name: str) -> str:
    """Query-parameter name for the widget listing ``element_type_name``.

    Two widgets over the same element type share a key, and therefore state.
    """
    return f"{element_type_name}{WIDGET_KEY_SUFFIX}".lower()


def _field(fields: list[str], index: int) -> str:
    return fields[index] if index < len(fields) else ""


def _parse_page(raw: str) -> int:
    if not (raw.isascii() and raw.isdigit()):
        return DEFAULT_PAGE
    if len(raw.lstrip("0")) > len(str(MAX_PAGE)):
        return DEFAULT_PAGE
    page = int(raw)
    return page if 1 <= page <= MAX_PAGE else DEFAULT_PAGE


def decode(params: Mapping[str, str], key: str) -> PaginationState:
    """Read the widget's state from ``params[key]``, defaulting each field."""
    raw = params.get(key)
    if not raw:
        return PaginationState()

    fields = raw.split(TOKEN_SEPARATOR)
    sort_key = _field(fields, 0) or DEFAULT_SORT_KEY
    order = _field(fields, 1)
    if order not in _ORDERS:
        order = DEFAULT_ORDER
    page = _parse_page(_field(fields, 2))

    return PaginationState(sort_key=sort_key, order=order, page=page)


def encode(
    state: PaginationState,
    *,
    sort_key: Optional[str] = None,
    order: Optional[SortOrder] = None,
    page: Optional[int] = None,
) -> str:
    """Token for ``state`` with any given field replaced.

    Overrides are a sparse patch: ``encode(state, page=3)`` keeps the sort
    key and order and only moves the page.
    """
    fields = (
        sort_key if sort_key is not None else state.sort_key,
        order if order is not None else state.order,
        page if page is not None else state.page,
    )
    return TOKEN_SEPARATOR.join(str(f) for f in fields)


def sort_toggle(state: PaginationState, sort_key: str) -> PaginationState:
    """Target state of a column header link: new sort, flipped order, page 1."""
    order: SortOrder = "asc" if state.order == "desc" else "desc"
    return state.model_copy(update={"sort_key": sort_key, "order": order, "page": 1})


def link_params(params: Mapping[str, str], key: str, token: str) -> dict[str, str]:
    """Copy of ``params`` with this widget's key set to ``token``.

    Keys belonging to other widgets on the same page are carried over as-is.
    """
    merged = dict(params)
    merged[key] = token
    return merged
