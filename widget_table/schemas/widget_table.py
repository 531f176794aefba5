"""Widget table view model — everything a renderer needs to draw one table.

Links are returned both as the full parameter set (``params``) and as a
ready-made ``href``; only this widget's key differs from the incoming query
string.
"""


from typing import Any, Literal

from widget_table.core.pagination import PageMeta
from widget_table.core.state import SortOrder
from widget_table.schemas.common import CamelModel

class WidgetStateOut(CamelModel):
    sort_key: str
    order: SortOrder
    page: int
    token: str

class SortHeaderOut(CamelModel):
    title: str
    name: str
    sortable: bool
    sort_key: str | None = None
    sorted: SortOrder | None = None
    href: str | None = None
    params: dict[str, str] | None = None

class RowActionOut(CamelModel):
    name: Literal["show", "update", "destroy"]
    method: Literal["GET", "PUT", "DELETE"]
    href: str

class WidgetRowOut(CamelModel):
    id: str
    cells: dict[str, Any]
    actions: list[RowActionOut] = []

class PageLinkOut(CamelModel):
    rel: Literal["first", "prev", "page", "next", "last"]
    label: str
    page: int
    current: bool = False
    href: str
    params: dict[str, str]

class PagerOut(CamelModel):
    buttons: list[int]
    current: int
    show_first_prev: bool
    show_next_last: bool
    links: list[PageLinkOut]

class WidgetTableOut(CamelModel):
    key: str
    resource: str
    state: WidgetStateOut
    meta: PageMeta
    headers: list[SortHeaderOut]
    rows: list[WidgetRowOut]
    pager: PagerOut
