"""Widget table definitions for each registered resource.

A widget needs a repository, its columns and the resource path its row
actions point at. Add a factory here when a new resource gets a table.
"""


from sqlalchemy.ext.asyncio import AsyncSession

from widget_table.repositories.course import CourseRepository
from widget_table.repositories.user import UserRepository
from widget_table.services.widget_table import Column, WidgetTableService

API_PREFIX = "/api/v1"

USER_COLUMNS = (
    Column("Name", "name"),
    Column("Email", "email"),
    Column("Role", "role"),
    Column("Created At", "created_at"),
)

COURSE_COLUMNS = (
    Column("Title", "title"),
    Column("Credits", "credits"),
    Column("Status", "status"),
    Column("Description", "description", sortable=False),
    Column("Created At", "created_at"),
)


def users_widget(session: AsyncSession, per_page: int | None = None) -> WidgetTableService:
    return WidgetTableService(
        UserRepository(session),
        USER_COLUMNS,
        per_page=per_page,
        resource_path=f"{API_PREFIX}/users",
        actions=("show", "update", "destroy"),
    )


def courses_widget(session: AsyncSession, per_page: int | None = None) -> WidgetTableService:
    return WidgetTableService(
        CourseRepository(session),
        COURSE_COLUMNS,
        per_page=per_page,
        resource_path=f"{API_PREFIX}/courses",
        actions=("show", "update", "destroy"),
    )
