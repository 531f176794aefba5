"""Course Pydantic schemas (request DTOs and response models)."""


from datetime import datetime

from pydantic import Field

from widget_table.schemas.common import CamelModel

class CourseCreate(CamelModel):
    user_id: str
    title: str
    description: str | None = None
    credits: int = Field(default=0, ge=0)
    status: str | None = None

class CourseUpdate(CamelModel):
    title: str | None = None
    description: str | None = None
    credits: int | None = Field(default=None, ge=0)
    status: str | None = None

class CourseOut(CamelModel):
    id: str
    user_id: str
    title: str
    description: str | None = None
    credits: int
    status: str
    created_at: datetime
    updated_at: datetime
