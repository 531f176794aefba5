"""Which page numbers a pager exposes, and the links it renders.

At most five numbered buttons are shown. The window follows the current page,
keeping it in the middle where possible, and is pinned to the first or last
five pages near either end so no button points past the collection.
"""

from __future__ import annotations

from typing import Literal, NamedTuple, Optional

from pydantic import BaseModel

from widget_table.core.state import PaginationState, encode

PAGE_BUTTON_WINDOW = 5

LinkRel = Literal["first", "prev", "page", "next", "last"]

FIRST_LABEL = "« First"
PREV_LABEL = "‹ Prev"
NEXT_LABEL = "Next ›"
LAST_LABEL = "Last »"


class Navigability(NamedTuple):
    show_first_prev: bool
    show_next_last: bool


class PageRange(BaseModel):
    buttons: list[int]
    current: int
    show_first_prev: bool
    show_next_last: bool


class PageLink(BaseModel):
    """One clickable pager element, ready for a link renderer."""

    rel: LinkRel
    label: str
    page: int
    token: str
    current: bool = False


def build_buttons(current_page: int, total_pages: int) -> list[int]:
    if total_pages <= PAGE_BUTTON_WINDOW:
        return list(range(1, total_pages + 1))

    if current_page <= 2:
        start = 1
    elif current_page >= total_pages - 2:
        start = total_pages - (PAGE_BUTTON_WINDOW - 1)
    else:
        start = current_page - 2

    start = max(start, 1)
    end = min(start + PAGE_BUTTON_WINDOW - 1, total_pages)
    return list(range(start, end + 1))


def navigability(current_page: int, total_pages: int) -> Navigability:
    return Navigability(
        show_first_prev=current_page > 1,
        show_next_last=current_page < total_pages,
    )


def prev_page(current_page: int, total_pages: int) -> Optional[int]:
    if current_page <= 1:
        return None
    return current_page - 1


def next_page(current_page: int, total_pages: int) -> Optional[int]:
    # Pages past the end have no "next" either.
    if current_page >= total_pages:
        return None
    return current_page + 1


def build_page_range(current_page: int, total_pages: int) -> PageRange:
    nav = navigability(current_page, total_pages)
    return PageRange(
        buttons=build_buttons(current_page, total_pages),
        current=current_page,
        show_first_prev=nav.show_first_prev,
        show_next_last=nav.show_next_last,
    )


def build_page_links(state: PaginationState, total_pages: int) -> list[PageLink]:
    """Pager links in render order for ``state``.

    Each link keeps the current sort key and order and only moves the page.
    """
    current = state.page
    page_range = build_page_range(current, total_pages)
    links: list[PageLink] = []

    def _link(rel: LinkRel, label: str, page: int, is_current: bool = False) -> PageLink:
        return PageLink(
            rel=rel,
            label=label,
            page=page,
            token=encode(state, page=page),
            current=is_current,
        )

    if page_range.show_first_prev:
        links.append(_link("first", FIRST_LABEL, 1))
        previous = prev_page(current, total_pages)
        if previous is not None:
            links.append(_link("prev", PREV_LABEL, previous))

    for page in page_range.buttons:
        links.append(_link("page", str(page), page, page == current))

    if page_range.show_next_last:
        following = next_page(current, total_pages)
        if following is not None:
            links.append(_link("next", NEXT_LABEL, following))
        links.append(_link("last", LAST_LABEL, total_pages))

    return links
