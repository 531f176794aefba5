"""User Pydantic schemas (request DTOs and response models)."""


from datetime import datetime

from pydantic import EmailStr

from widget_table.schemas.common import CamelModel

class UserCreate(CamelModel):
    name: str
    email: EmailStr
    role: str | None = None

class UserUpdate(CamelModel):
    name: str | None = None
    email: EmailStr | None = None
    role: str | None = None

class UserOut(CamelModel):
    id: str
    name: str
    email: str
    role: str
    created_at: datetime
    updated_at: datetime
