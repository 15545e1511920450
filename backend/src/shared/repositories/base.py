"""
Base Repository

Generic base repository with the CRUD operations shared by every model.
Entity-specific repositories inherit from this class.

What This Provides:
===================
- get(id)        → Fetch single record by UUID
- exists()       → Check if record exists
- create()       → Create new record
- update()       → Apply a partial update to a record
- delete()       → Hard delete record

Generic Type Pattern:
=====================
    class LinkRepository(BaseRepository[Link]):
        ...

    repo = LinkRepository(db)
    link = await repo.get(link_id)  # typed as Link

flush() vs commit():
====================
Repository methods only flush(). The request-scoped get_db() dependency
commits once the handler returns, so a request that raises leaves no
partial writes behind.
"""

from typing import Any, Generic, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from src.shared.models.base import Base, utc_now


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Type Parameter:
        ModelType: The SQLAlchemy model class this repository manages

    Attributes:
        model: The SQLAlchemy model class
        session: The async database session
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        """
        Initialize the repository.

        Args:
            model: SQLAlchemy model class (e.g., User, Link)
            session: Async database session from get_db()
        """
        self.model = model
        self.session = session

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: UUID) -> Optional[ModelType]:
        """
        Get a single record by its UUID.

        Args:
            record_id: The UUID of the record to fetch

        Returns:
            The model instance if found, None otherwise

        SQL Generated:
            SELECT * FROM links WHERE id = '550e8400-...'
        """
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def exists(self, record_id: UUID) -> bool:
        """Check if a record exists without loading it."""
        result = await self.session.execute(
            select(sql_count()).select_from(self.model).where(self.model.id == record_id)
        )
        return (result.scalar() or 0) > 0

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new record.

        Adds the instance to the session, flushes to run the INSERT and
        refreshes it so DB-generated values are loaded.

        Args:
            **kwargs: Field values for the new record

        Returns:
            The created model instance with all DB-generated values
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    # ═══════════════════════════════════════════════════════════════════════════
    # UPDATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def update(
        self,
        record_id: UUID,
        **kwargs: Any,
    ) -> Optional[ModelType]:
        """
        Apply a partial update to a record.

        Every keyword given is written, None included, so callers pass only
        the fields the client actually sent. updated_at is refreshed even
        when no other field changes.

        Args:
            record_id: UUID of the record to update
            **kwargs: Fields to set

        Returns:
            Updated model instance, or None if not found

        SQL Generated:
            UPDATE links SET title = 'New', updated_at = '...' WHERE id = '...'
        """
        instance = await self.get(record_id)
        if not instance:
            return None

        for field, value in kwargs.items():
            if hasattr(instance, field):
                setattr(instance, field, value)

        if hasattr(instance, "updated_at"):
            instance.updated_at = utc_now()

        await self.session.flush()
        await self.session.refresh(instance)

        return instance

    # ═══════════════════════════════════════════════════════════════════════════
    # DELETE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def delete(self, record_id: UUID) -> bool:
        """
        Hard delete a record by ID.

        Returns:
            True if deleted, False if not found

        SQL Generated:
            DELETE FROM links WHERE id = '...'
        """
        instance = await self.get(record_id)
        if not instance:
            return False

        await self.session.delete(instance)
        await self.session.flush()
        return True
