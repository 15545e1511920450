"""
Database Module

Database connectivity and session management for Linkbio.

Architecture Overview:
======================
┌─────────────────────────────────────────────────────────────────────────────┐
│                        DATABASE LAYER                                       │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   FastAPI Route                                                             │
│       │                                                                     │
│       │  Dependency Injection: get_db()                                     │
│       ▼                                                                     │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │              AsyncSession (from session.py)                 │          │
│   │  - One session per request                                  │          │
│   │  - Commit on success, rollback on exception                 │          │
│   └─────────────────────────────────────────────────────────────┘          │
│       │                                                                     │
│       │  Passed to Service → Repository                                     │
│       ▼                                                                     │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │              Repository (from repositories/)                │          │
│   │  - UserRepository                                           │          │
│   │  - LinkRepository                                           │          │
│   └─────────────────────────────────────────────────────────────┘          │
│       │                                                                     │
│       ▼                                                                     │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │              PostgreSQL Database                            │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Usage in FastAPI:
=================
    from fastapi import Depends
    from src.shared.db import get_db
    from src.shared.services import LinkService

    @router.get("/users/{user_id}/links")
    async def list_links(user_id: UUID, db: AsyncSession = Depends(get_db)):
        return await LinkService(db).list_links(user_id)
"""

from src.shared.db.session import (
    get_db,
    init_db,
    close_db,
    ping_db,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    "get_db",  # FastAPI dependency for getting a database session
    "init_db",  # Initialize database on app startup
    "close_db",  # Close database on app shutdown
    "ping_db",  # Readiness probe
    "AsyncSessionLocal",  # Session factory for manual session creation
    "engine",  # Database engine (for migrations, etc.)
]
