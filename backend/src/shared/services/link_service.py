"""
Link Service

Business logic for a user's ordered list of links.

ORDERING RULES:
- A new link without an explicit position goes after the owner's highest
  position (max + 1), or at 0 for the first link. Each owner has an
  independent sequence.
- An explicit position on create or update is written verbatim. Nothing
  else moves and duplicates are allowed.
- Deleting a link moves every later link of the same owner down by one.
  This repairs a dense 0..n-1 order but doesn't recompute one: if
  positions already had gaps or duplicates, those remain.
- Reorder validates ownership of the whole batch first, then writes each
  position with its own UPDATE. Duplicate targets are allowed.

Usage:
======
    from src.shared.services.link_service import LinkService

    service = LinkService(db)
    link = await service.create_link(user_id, title="Blog", url="https://a.dev")
    await service.reorder_links(user_id, [(link.id, 3)])
"""

from typing import Any, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.core.exceptions import (
    InvalidArgumentError,
    LinkNotFoundError,
    UserNotFoundError,
)
from src.shared.core.logging import logger
from src.shared.models.link import Link
from src.shared.repositories.link_repository import LinkRepository
from src.shared.repositories.user_repository import UserRepository

# click_count only moves through track_click; user_id is fixed at creation
UPDATABLE_FIELDS = frozenset({"title", "url", "description", "icon", "position", "is_active"})


class LinkService:
    """
    Service for link CRUD and position management.

    Handles:
    - Position assignment on create
    - Renumbering on delete
    - Batch reorder with ownership validation
    - Partial updates (direct position overwrite)
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize LinkService.

        Args:
            session: Async database session
        """
        self.session = session
        self.link_repo = LinkRepository(session)
        self.user_repo = UserRepository(session)

    async def create_link(
        self,
        user_id: UUID,
        title: str,
        url: str,
        description: Optional[str] = None,
        icon: Optional[str] = None,
        position: Optional[int] = None,
    ) -> Link:
        """
        Add a link to a user's profile.

        Args:
            user_id: Owner's UUID
            title: Link label
            url: Destination URL
            description: Optional subtitle
            icon: Optional emoji or icon name
            position: Explicit position; appended after the last link if None

        Returns:
            The created link

        Raises:
            UserNotFoundError: If the owner does not exist
        """
        if not await self.user_repo.exists(user_id):
            raise UserNotFoundError(str(user_id))

        if position is None:
            position = await self.next_position(user_id)

        link = await self.link_repo.create(
            user_id=user_id,
            title=title,
            url=url,
            description=description,
            icon=icon,
            position=position,
        )

        logger.info(
            "Link created",
            link_id=str(link.id),
            user_id=str(user_id),
            position=position,
        )
        return link

    async def next_position(self, user_id: UUID) -> int:
        """Position a new link takes when none is given."""
        current_max = await self.link_repo.get_max_position(user_id)
        return 0 if current_max is None else current_max + 1

    async def update_link(self, link_id: UUID, **changes: Any) -> Link:
        """
        Apply a partial update to a link.

        updated_at is refreshed even when nothing else changes. A position
        given here overwrites the link's position without shifting others.

        Args:
            link_id: Link UUID
            **changes: Only the fields the client sent; None clears a field

        Returns:
            The updated link

        Raises:
            InvalidArgumentError: If a field outside UPDATABLE_FIELDS is given
            LinkNotFoundError: If the link does not exist
        """
        rejected = set(changes) - UPDATABLE_FIELDS
        if rejected:
            raise InvalidArgumentError(
                "These link fields cannot be updated",
                details={"fields": sorted(rejected)},
            )

        link = await self.link_repo.update(link_id, **changes)
        if not link:
            raise LinkNotFoundError(str(link_id))

        logger.info("Link updated", link_id=str(link_id), fields=sorted(changes))
        return link

    async def delete_link(self, link_id: UUID) -> bool:
        """
        Delete a link and close the gap it leaves in its owner's order.

        Args:
            link_id: Link UUID

        Returns:
            True once the link is deleted

        Raises:
            LinkNotFoundError: If the link does not exist (nothing is renumbered)
        """
        link = await self.link_repo.get(link_id)
        if not link:
            raise LinkNotFoundError(str(link_id))

        user_id, position = link.user_id, link.position

        if not await self.link_repo.delete(link_id):
            raise LinkNotFoundError(str(link_id))

        shifted = await self.link_repo.shift_positions_after(user_id, position)

        logger.info(
            "Link deleted",
            link_id=str(link_id),
            user_id=str(user_id),
            position=position,
            shifted=shifted,
        )
        return True

    async def reorder_links(
        self,
        user_id: UUID,
        link_orders: Sequence[Tuple[UUID, int]],
    ) -> bool:
        """
        Assign new positions to a batch of one owner's links.

        Every link id must exist and belong to user_id, otherwise nothing
        is written. An empty batch succeeds without touching anything.

        Args:
            user_id: Owner's UUID
            link_orders: (link_id, new_position) pairs

        Returns:
            True once all positions are written

        Raises:
            InvalidArgumentError: If any id is unknown or owned by someone else
        """
        if not link_orders:
            return True

        link_ids = [link_id for link_id, _ in link_orders]
        owned = await self.link_repo.get_owned(user_id, link_ids)

        # A repeated id matches one row, so it fails the count check too
        if len(owned) != len(link_orders):
            owned_ids = {link.id for link in owned}
            raise InvalidArgumentError(
                "Some links do not exist or do not belong to the specified user",
                details={
                    "user_id": str(user_id),
                    "invalid_link_ids": sorted(
                        {str(link_id) for link_id in link_ids if link_id not in owned_ids}
                    ),
                },
            )

        for link_id, position in link_orders:
            await self.link_repo.set_position(link_id, user_id, position)

        logger.info("Links reordered", user_id=str(user_id), count=len(link_orders))
        return True

    async def list_links(self, user_id: UUID) -> list[Link]:
        """All of an owner's links, active or not, in display order."""
        return await self.link_repo.list_by_user(user_id)
