"""Dashboard router — several independent widget tables on one page.

Each widget reads only its own key (``user-w``, ``course-w``) from the shared
query string, so paging one table leaves the others where they were.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from widget_table.core.response import DataResponse
from widget_table.db.base import get_db
from widget_table.schemas.widget_table import WidgetTableOut
from widget_table.services.widgets import courses_widget, users_widget

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("", response_model=DataResponse[list[WidgetTableOut]])
async def dashboard(
    request: Request,
    session: AsyncSession = Depends(get_db),
):
    """Users and courses widget tables, each paged and sorted on its own."""
    params = request.query_params
    path = request.url.path
    return {
        "data": [
            await users_widget(session).build(params, base_path=path),
            await courses_widget(session).build(params, base_path=path),
        ]
    }
