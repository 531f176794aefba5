"""User service — CRUD business rules for users.

Rule: No FastAPI here. Pure Python business logic over the repository.
"""


from sqlalchemy.ext.asyncio import AsyncSession

from widget_table.core.exceptions import ConflictError, NotFoundError
from widget_table.domain.user import User
from widget_table.repositories.user import UserRepository
from widget_table.schemas.user import UserCreate, UserUpdate

class UserService:
    def __init__(self, session: AsyncSession):
        self._repo = UserRepository(session)

    async def get_user(self, user_id: str) -> User:
        user = await self._repo.get_by_id(user_id)
        if not user:
            raise NotFoundError("User", user_id)
        return user

    async def create_user(self, data: UserCreate) -> User:
        if await self._repo.get_by_email(data.email):
            raise ConflictError(f"User with email '{data.email}' already exists")
        return await self._repo.create(**data.model_dump(exclude_none=True))

    async def update_user(self, user_id: str, data: UserUpdate) -> User:
        user = await self.get_user(user_id)  # raises 404 if missing
        if data.email and data.email != user.email and await self._repo.get_by_email(data.email):
            raise ConflictError(f"User with email '{data.email}' already exists")
        updated = await self._repo.update(
            user_id, **data.model_dump(exclude_none=True, exclude_unset=True)
        )
        return updated  # type: ignore[return-value]

    async def delete_user(self, user_id: str) -> None:
        deleted = await self._repo.soft_delete(user_id)
        if not deleted:
            raise NotFoundError("User", user_id)
