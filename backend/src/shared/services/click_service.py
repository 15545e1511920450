"""
Click Service

Counts link clicks for basic analytics.

A click on an unknown link is reported as success=False rather than an
error: click tracking runs on the visitor's way to the destination and
must never stand in its way.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.core.logging import logger
from src.shared.repositories.link_repository import LinkRepository


class ClickService:
    """Service for click counting."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.link_repo = LinkRepository(session)

    async def track_click(self, link_id: UUID) -> bool:
        """
        Add one click to a link.

        Args:
            link_id: Link UUID

        Returns:
            True if the click was counted, False if the link does not exist
        """
        counted = await self.link_repo.increment_click_count(link_id)
        if not counted:
            logger.info("Click on unknown link ignored", link_id=str(link_id))
        return counted
