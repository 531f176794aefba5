from widget_table.domain.course import Course
from widget_table.repositories.base import BaseRepository


class CourseRepository(BaseRepository[Course]):
    model = Course
