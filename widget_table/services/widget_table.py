"""Widget table service — decodes a widget's state, fetches its page, builds the view model.

This is the one place that turns request data into a query, so it owns the
sort-key whitelist: only sortable columns (and the default ``created_at``)
ever reach ``ORDER BY``. A token naming anything else is treated like any
other malformed token and falls back to the default sort.

Rule: no FastAPI here. Routers pass in the query parameters and the path the
links should point at.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Literal
from urllib.parse import urlencode

from widget_table.core.config import settings
from widget_table.core.page_range import build_page_links, build_page_range
from widget_table.core.pagination import page_meta, total_pages, window
from widget_table.core.state import (
    DEFAULT_SORT_KEY,
    PaginationState,
    decode,
    encode,
    link_params,
    sort_toggle,
    widget_key,
)
from widget_table.repositories.base import BaseRepository
from widget_table.schemas.widget_table import (
    PageLinkOut,
    PagerOut,
    RowActionOut,
    SortHeaderOut,
    WidgetRowOut,
    WidgetStateOut,
    WidgetTableOut,
)

logger = logging.getLogger(__name__)

RowAction = Literal["show", "update", "destroy"]

_ACTION_METHODS: dict[str, str] = {
    "show": "GET",
    "update": "PUT",
    "destroy": "DELETE",
}


@dataclass(frozen=True)
class Column:
    """A table column. Sortable columns sort on their attribute."""

    title: str
    attribute: str
    sortable: bool = True

    @property
    def name(self) -> str:
        return self.title.lower().replace(" ", "_")

    @property
    def sort_key(self) -> str | None:
        return self.attribute if self.sortable else None


class WidgetTableService:
    def __init__(
        self,
        repository: BaseRepository,
        columns: Sequence[Column],
        *,
        per_page: int | None = None,
        resource_path: str = "",
        actions: Sequence[RowAction] = (),
    ):
        if per_page is None:
            per_page = settings.widget_per_page
        if not 0 < per_page <= settings.widget_max_per_page:
            raise ValueError(
                f"per_page must be between 1 and {settings.widget_max_per_page}, got {per_page}"
            )
        unknown = [c.attribute for c in columns if not repository.has_column(c.attribute)]
        if unknown:
            raise ValueError(f"{repository.model.__name__} has no column(s): {', '.join(unknown)}")

        self._repo = repository
        self._columns = tuple(columns)
        self._per_page = per_page
        self._resource_path = resource_path.rstrip("/")
        self._actions = tuple(actions)

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def resource(self) -> str:
        return self._repo.model.__name__

    @property
    def key(self) -> str:
        return widget_key(self.resource)

    @property
    def sortable_keys(self) -> frozenset[str]:
        keys = {c.sort_key for c in self._columns if c.sortable}
        if self._repo.has_column(DEFAULT_SORT_KEY):
            keys.add(DEFAULT_SORT_KEY)
        return frozenset(keys)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def resolve_state(self, params: Mapping[str, str]) -> PaginationState:
        """Decode this widget's state and drop a sort key that is not whitelisted."""
        state = decode(params, self.key)
        if state.sort_key not in self.sortable_keys:
            logger.warning(
                "Widget %s: unsortable key %r requested, using %r",
                self.key, state.sort_key, DEFAULT_SORT_KEY,
            )
            state = state.model_copy(update={"sort_key": DEFAULT_SORT_KEY})
        return state

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------

    async def build(
        self,
        params: Mapping[str, str],
        *,
        base_path: str = "",
        filters: dict[str, Any] | None = None,
    ) -> WidgetTableOut:
        """Build the widget for the given query parameters.

        ``filters`` scopes the collection (e.g. one user's courses) before
        windowing. ``base_path`` is the path every generated link points at.
        """
        state = self.resolve_state(params)
        total = await self._repo.count(filters)
        items = await self._repo.list(window(state, self._per_page), filters)
        pages = total_pages(total, self._per_page)

        logger.debug(
            "Widget %s: token=%s total=%d pages=%d rows=%d",
            self.key, state.token, total, pages, len(items),
        )

        return WidgetTableOut(
            key=self.key,
            resource=self.resource,
            state=WidgetStateOut(
                sort_key=state.sort_key,
                order=state.order,
                page=state.page,
                token=state.token,
            ),
            meta=page_meta(state, total, self._per_page),
            headers=self._headers(state, params, base_path),
            rows=[self._row(item) for item in items],
            pager=self._pager(state, pages, params, base_path),
        )

    def _link(self, params: Mapping[str, str], token: str, base_path: str) -> tuple[str, dict[str, str]]:
        merged = link_params(params, self.key, token)
        return f"{base_path}?{urlencode(merged)}", merged

    def _headers(
        self, state: PaginationState, params: Mapping[str, str], base_path: str
    ) -> list[SortHeaderOut]:
        headers = []
        for column in self._columns:
            if not column.sortable:
                headers.append(SortHeaderOut(title=column.title, name=column.name, sortable=False))
                continue

            href, merged = self._link(
                params, encode(sort_toggle(state, column.sort_key)), base_path
            )
            headers.append(
                SortHeaderOut(
                    title=column.title,
                    name=column.name,
                    sortable=True,
                    sort_key=column.sort_key,
                    sorted=state.order if state.sort_key == column.sort_key else None,
                    href=href,
                    params=merged,
                )
            )
        return headers

    def _pager(
        self,
        state: PaginationState,
        pages: int,
        params: Mapping[str, str],
        base_path: str,
    ) -> PagerOut:
        page_range = build_page_range(state.page, pages)
        links = []
        for link in build_page_links(state, pages):
            href, merged = self._link(params, link.token, base_path)
            links.append(
                PageLinkOut(
                    rel=link.rel,
                    label=link.label,
                    page=link.page,
                    current=link.current,
                    href=href,
                    params=merged,
                )
            )
        return PagerOut(
            buttons=page_range.buttons,
            current=page_range.current,
            show_first_prev=page_range.show_first_prev,
            show_next_last=page_range.show_next_last,
            links=links,
        )

    def _row(self, item: Any) -> WidgetRowOut:
        return WidgetRowOut(
            id=item.id,
            cells={c.attribute: getattr(item, c.attribute) for c in self._columns},
            actions=[
                RowActionOut(
                    name=action,
                    method=_ACTION_METHODS[action],
                    href=f"{self._resource_path}/{item.id}",
                )
                for action in self._actions
            ],
        )
