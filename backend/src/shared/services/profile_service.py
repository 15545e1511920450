"""
Profile Service

Assembles the public view of a creator: the user plus the links a visitor
may see, in display order.

Usage:
======
    from src.shared.services.profile_service import ProfileService

    profile = await ProfileService(db).get_public_profile("alice")
    if profile is None:
        ...  # unknown or inactive user
"""

from dataclasses import dataclass
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.models.link import Link
from src.shared.models.user import User
from src.shared.repositories.link_repository import LinkRepository
from src.shared.repositories.user_repository import UserRepository


@dataclass
class PublicProfile:
    """An active user and their active links ordered by position."""

    user: User
    links: List[Link]


class ProfileService:
    """
    Read-only service for the public profile page.

    Handles:
    - Resolving an active user by username
    - Selecting and ordering the user's visible links
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize ProfileService.

        Args:
            session: Async database session
        """
        self.session = session
        self.user_repo = UserRepository(session)
        self.link_repo = LinkRepository(session)

    async def get_public_profile(self, username: str) -> Optional[PublicProfile]:
        """
        Get the public profile for a username.

        Args:
            username: Creator's username

        Returns:
            PublicProfile with only active links (possibly none), or None if
            the user does not exist or is inactive
        """
        user = await self.user_repo.get_active_by_username(username)
        if not user:
            return None

        links = await self.link_repo.list_by_user(user.id, active_only=True)
        return PublicProfile(user=user, links=links)

    async def find_visible_link(self, username: str, link_id: UUID) -> Optional[Link]:
        """
        Find a link a visitor can follow from a public profile.

        Returns:
            The link if the profile is public and lists it, None otherwise
        """
        profile = await self.get_public_profile(username)
        if profile is None:
            return None

        return next((link for link in profile.links if link.id == link_id), None)
