"""
Database Dependency

FastAPI dependency for database sessions.

The session is committed when the handler returns and rolled back if it
raises. Tests override get_db through app.dependency_overrides.

Usage:
======
    from src.api.dependencies.database import get_db

    @router.get("/users/{user_id}/links")
    async def list_links(user_id: UUID, db: AsyncSession = Depends(get_db)):
        return await LinkRepository(db).list_by_user(user_id)
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.db import get_db as _get_db

# Entering through a context manager forwards handler exceptions into
# _get_db so its rollback branch runs.
_session_scope = asynccontextmanager(_get_db)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for database sessions.

    Yields:
        AsyncSession: Database session for the current request
    """
    async with _session_scope() as session:
        yield session
