"""
Repository Pattern Implementations

Repositories encapsulate database queries and provide a clean API for data access.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]   ← Generic CRUD operations
         │
         ├── UserRepository     ← Lookups by username/email
         └── LinkRepository     ← Ordering, renumbering, click counting

Usage Example:
==============
    from src.shared.repositories import UserRepository, LinkRepository

    async def next_position(db: AsyncSession, user_id: UUID) -> int:
        current_max = await LinkRepository(db).get_max_position(user_id)
        return 0 if current_max is None else current_max + 1
"""

from src.shared.repositories.base import BaseRepository
from src.shared.repositories.user_repository import UserRepository
from src.shared.repositories.link_repository import LinkRepository

__all__ = [
    # Base class
    "BaseRepository",
    # Entity-specific repositories
    "UserRepository",
    "LinkRepository",
]
