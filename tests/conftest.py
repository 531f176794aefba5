"""Test configuration and fixtures."""
from datetime import datetime, timedelta, timezone

import pytest
from httpx import ASGITransport, AsyncClient

import widget_table.domain  # noqa: F401  registers models on Base.metadata
from widget_table.db.base import Base, get_db, make_engine, make_session_factory
from widget_table.domain.course import Course
from widget_table.domain.user import User
from widget_table.main import app

BASE_TIME = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
async def test_db(tmp_path):
    """Create a throwaway SQLite database with all tables."""
    engine = make_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_db):
    return make_session_factory(test_db)


@pytest.fixture
async def db_session(session_factory):
    """Create a test database session."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    """Create an async test client with database override."""

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


async def seed_users(session, count: int) -> list[User]:
    """Users ``user-00``..; ``user-00`` is the newest."""
    users = [
        User(
            name=f"user-{i:02d}",
            email=f"user{i:02d}@learnhub.io",
            role="student" if i % 2 else "instructor",
            created_at=BASE_TIME - timedelta(minutes=i),
        )
        for i in range(count)
    ]
    session.add_all(users)
    await session.commit()
    return users


async def seed_courses(session, user: User, count: int, prefix: str = "course") -> list[Course]:
    courses = [
        Course(
            user_id=user.id,
            title=f"{prefix}-{i:02d}",
            credits=i,
            status="published",
            created_at=BASE_TIME - timedelta(minutes=i),
        )
        for i in range(count)
    ]
    session.add_all(courses)
    await session.commit()
    return courses


@pytest.fixture
async def users(db_session):
    return await seed_users(db_session, 23)


@pytest.fixture
def course_factory(db_session):
    """Async factory: ``await course_factory(user, count, prefix)``."""

    async def _make(user: User, count: int, prefix: str = "course") -> list[Course]:
        return await seed_courses(db_session, user, count, prefix)

    return _make
