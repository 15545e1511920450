"""
Shared fixtures.

Every test gets its own in-memory SQLite database with the full schema and
foreign keys enforced. API tests talk to the real application through
httpx with get_db overridden to use that database.
"""

from typing import Optional

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from src.api.dependencies.database import get_db
from src.api.main import app
from src.shared.models import Base, Link, User
from src.shared.services import LinkService, UserService


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def enable_foreign_keys(dbapi_connection, _connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(session):
    async def _make_user(username: str = "alice", **kwargs) -> User:
        kwargs.setdefault("email", f"{username}@mail.com")
        return await UserService(session).create_user(username=username, **kwargs)

    return _make_user


@pytest.fixture
def make_link(session):
    async def _make_link(
        user: User,
        title: str,
        url: Optional[str] = None,
        **kwargs,
    ) -> Link:
        url = url or f"https://{title.lower().replace(' ', '-')}.example.com"
        return await LinkService(session).create_link(user.id, title=title, url=url, **kwargs)

    return _make_link
