"""Course service — CRUD business rules for courses.

Rule: No FastAPI here. Pure Python business logic over the repositories.
"""


from sqlalchemy.ext.asyncio import AsyncSession

from widget_table.core.exceptions import NotFoundError, ValidationError
from widget_table.domain.course import Course
from widget_table.repositories.course import CourseRepository
from widget_table.repositories.user import UserRepository
from widget_table.schemas.course import CourseCreate, CourseUpdate

class CourseService:
    def __init__(self, session: AsyncSession):
        self._repo = CourseRepository(session)
        self._users = UserRepository(session)

    async def get_course(self, course_id: str) -> Course:
        course = await self._repo.get_by_id(course_id)
        if not course:
            raise NotFoundError("Course", course_id)
        return course

    async def create_course(self, data: CourseCreate) -> Course:
        if not await self._users.get_by_id(data.user_id):
            raise ValidationError(f"User '{data.user_id}' does not exist")
        return await self._repo.create(**data.model_dump(exclude_none=True))

    async def update_course(self, course_id: str, data: CourseUpdate) -> Course:
        _ = await self.get_course(course_id)  # raises 404 if missing
        updated = await self._repo.update(
            course_id, **data.model_dump(exclude_none=True, exclude_unset=True)
        )
        return updated  # type: ignore[return-value]

    async def delete_course(self, course_id: str) -> None:
        deleted = await self._repo.soft_delete(course_id)
        if not deleted:
            raise NotFoundError("Course", course_id)
