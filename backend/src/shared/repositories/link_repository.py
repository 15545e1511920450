"""
Link Repository

Database operations specific to the Link model.

Common Operations:
==================
- list_by_user()            → Owner's links in display order
- get_max_position()        → Highest position used by an owner
- get_owned()               → Subset of ids that belong to an owner
- shift_positions_after()   → Close the gap left by a deleted link
- set_position()            → Direct per-row position write
- increment_click_count()   → Atomic click_count + 1

Statements that must not race (click counting, renumbering) are issued as
single UPDATE statements evaluated by the database, never as
read-modify-write in Python.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.repositories.base import BaseRepository
from src.shared.models.base import utc_now
from src.shared.models.link import Link


class LinkRepository(BaseRepository[Link]):
    """
    Repository for Link database operations.

    Owns the queries behind position assignment, renumbering,
    reordering and click counting.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize LinkRepository.

        Args:
            session: Async database session
        """
        super().__init__(Link, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_by_user(
        self,
        user_id: UUID,
        active_only: bool = False,
    ) -> list[Link]:
        """
        Get an owner's links in display order.

        Args:
            user_id: Owner's UUID
            active_only: Only return links visible on the public profile

        Returns:
            Links ordered by position, then created_at, then id

        SQL Generated:
            SELECT * FROM links
            WHERE user_id = '...' [AND is_active = true]
            ORDER BY position ASC, created_at ASC, id ASC
        """
        query = select(Link).where(Link.user_id == user_id)
        if active_only:
            query = query.where(Link.is_active.is_(True))

        query = query.order_by(Link.position.asc(), Link.created_at.asc(), Link.id.asc())

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_max_position(self, user_id: UUID) -> Optional[int]:
        """
        Get the highest position among an owner's links.

        Returns:
            The maximum position, or None if the owner has no links

        SQL Generated:
            SELECT max(position) FROM links WHERE user_id = '...'
        """
        result = await self.session.execute(
            select(func.max(Link.position)).where(Link.user_id == user_id)
        )
        return result.scalar()

    async def get_owned(self, user_id: UUID, link_ids: list[UUID]) -> list[Link]:
        """
        Get the links among link_ids that exist and belong to user_id.

        SQL Generated:
            SELECT * FROM links WHERE user_id = '...' AND id IN (...)
        """
        if not link_ids:
            return []

        result = await self.session.execute(
            select(Link).where(Link.user_id == user_id, Link.id.in_(link_ids))
        )
        return list(result.scalars().all())

    # ═══════════════════════════════════════════════════════════════════════════
    # ORDERING METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def shift_positions_after(self, user_id: UUID, position: int) -> int:
        """
        Move every link of an owner above `position` down by one.

        Args:
            user_id: Owner's UUID
            position: Position that was just vacated

        Returns:
            Number of links shifted

        SQL Generated:
            UPDATE links SET position = position - 1, updated_at = '...'
            WHERE user_id = '...' AND position > 2
        """
        result = await self.session.execute(
            update(Link)
            .where(Link.user_id == user_id, Link.position > position)
            .values(position=Link.position - 1, updated_at=utc_now())
        )
        return result.rowcount or 0

    async def set_position(self, link_id: UUID, user_id: UUID, position: int) -> bool:
        """
        Overwrite one link's position, scoped to its owner.

        Returns:
            True if a row was updated

        SQL Generated:
            UPDATE links SET position = 5, updated_at = '...'
            WHERE id = '...' AND user_id = '...'
        """
        result = await self.session.execute(
            update(Link)
            .where(Link.id == link_id, Link.user_id == user_id)
            .values(position=position, updated_at=utc_now())
        )
        return (result.rowcount or 0) > 0

    # ═══════════════════════════════════════════════════════════════════════════
    # ANALYTICS METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def increment_click_count(self, link_id: UUID) -> bool:
        """
        Add one to a link's click counter.

        The increment is evaluated by the database, so concurrent clicks on
        the same link are never lost.

        Returns:
            True if the link exists and was incremented, False otherwise

        SQL Generated:
            UPDATE links SET click_count = click_count + 1, updated_at = '...'
            WHERE id = '...'
        """
        result = await self.session.execute(
            update(Link)
            .where(Link.id == link_id)
            .values(click_count=Link.click_count + 1, updated_at=utc_now())
        )
        return (result.rowcount or 0) > 0
