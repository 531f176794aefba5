from widget_table.domain.user import User
from widget_table.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    model = User

    async def get_by_email(self, email: str) -> User | None:
        """Active user with this email; soft-deleted users do not hold it."""
        result = await self._session.execute(
            self._base_query().where(User.email == email)
        )
        return result.scalars().first()
