"""Domain package — all ORM models are imported here so Alembic autogenerate detects them.

Folder intent:
  user.py    — Users (parents of courses)
  course.py  — Courses, always owned by a user
  mixins.py  — Shared TimestampMixin (created_at is the default widget sort key)
"""

from widget_table.domain.course import Course
from widget_table.domain.user import User

__all__ = [
    "Course",
    "User",
]
