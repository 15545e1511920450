"""
User Service

Business logic for creator registration and profile updates.

Usage:
======
    from src.shared.services.user_service import UserService

    service = UserService(db)
    user = await service.create_user(username="alice", email="alice@example.com")
"""

from typing import Any, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.core.exceptions import (
    DuplicateResourceError,
    InvalidArgumentError,
    UserNotFoundError,
)
from src.shared.core.logging import logger
from src.shared.models.enums import Theme
from src.shared.models.user import User
from src.shared.repositories.user_repository import UserRepository

# username and email are fixed at registration
UPDATABLE_FIELDS = frozenset({"display_name", "bio", "avatar_url", "theme", "is_active"})

DUPLICATE_MESSAGES = {
    "username": "Username already taken",
    "email": "Email already registered",
}


class UserService:
    """
    Service for creator profile business logic.

    Handles:
    - Registration with unique username and email
    - Partial profile updates
    - Lookup by username

    Attributes:
        session: Database session
        repo: UserRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize UserService.

        Args:
            session: Async database session
        """
        self.session = session
        self.repo = UserRepository(session)

    async def create_user(
        self,
        username: str,
        email: str,
        display_name: Optional[str] = None,
        bio: Optional[str] = None,
        avatar_url: Optional[str] = None,
        theme: Theme = Theme.MINIMAL,
    ) -> User:
        """
        Register a new creator.

        Args:
            username: Public handle, unique
            email: Contact address, unique
            display_name: Optional name shown on the profile
            bio: Optional biography
            avatar_url: Optional avatar URL
            theme: Profile theme (defaults to minimal)

        Returns:
            The created user, active

        Raises:
            DuplicateResourceError: If the username or email is taken
        """
        if await self.repo.username_exists(username):
            raise DuplicateResourceError(
                DUPLICATE_MESSAGES["username"], details={"field": "username"}
            )

        if await self.repo.email_exists(email):
            raise DuplicateResourceError(
                DUPLICATE_MESSAGES["email"], details={"field": "email"}
            )

        try:
            user = await self.repo.create(
                username=username,
                email=email,
                display_name=display_name,
                bio=bio,
                avatar_url=avatar_url,
                theme=theme,
                is_active=True,
            )
        except IntegrityError as e:
            # A concurrent registration won the unique index after our checks
            field = "username" if "username" in str(e.orig) else "email"
            logger.warning("Registration lost a uniqueness race", field=field)
            raise DuplicateResourceError(
                DUPLICATE_MESSAGES[field], details={"field": field}
            ) from e

        logger.info("User created", user_id=str(user.id), username=user.username)
        return user

    async def update_user(self, user_id: UUID, **changes: Any) -> User:
        """
        Apply a partial update to a creator profile.

        Args:
            user_id: User's UUID
            **changes: Only the fields the client sent; None clears a field

        Returns:
            The updated user

        Raises:
            InvalidArgumentError: If a field outside UPDATABLE_FIELDS is given
            UserNotFoundError: If the user does not exist
        """
        rejected = set(changes) - UPDATABLE_FIELDS
        if rejected:
            raise InvalidArgumentError(
                "These user fields cannot be updated",
                details={"fields": sorted(rejected)},
            )

        user = await self.repo.update(user_id, **changes)
        if not user:
            raise UserNotFoundError(str(user_id))

        logger.info("User updated", user_id=str(user_id), fields=sorted(changes))
        return user

    async def get_user_by_username(self, username: str) -> Optional[User]:
        """Get a user by username, active or not."""
        return await self.repo.get_by_username(username)
