"""
User Repository

Database operations specific to the User model.
Extends BaseRepository with user-specific query methods.

Common Operations:
==================
- get_by_username()         → Find user by public handle
- get_active_by_username()  → Same, but only if the profile is active
- get_by_email()            → Find user by email address
- username_exists() / email_exists() → Uniqueness checks for registration
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.repositories.base import BaseRepository
from src.shared.models.user import User


class UserRepository(BaseRepository[User]):
    """
    Repository for User database operations.

    Provides methods for common user queries beyond basic CRUD:
    - Looking up users by username or email
    - Checking username/email availability
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize UserRepository.

        Args:
            session: Async database session
        """
        super().__init__(User, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_by_username(self, username: str) -> Optional[User]:
        """
        Get user by username, whatever its active flag.

        SQL Generated:
            SELECT * FROM users WHERE username = 'alice'
        """
        result = await self.session.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def get_active_by_username(self, username: str) -> Optional[User]:
        """
        Get user by username only if the profile is active.

        Used by the public read path; inactive users look like missing ones.

        SQL Generated:
            SELECT * FROM users WHERE username = 'alice' AND is_active = true
        """
        result = await self.session.execute(
            select(User).where(User.username == username, User.is_active.is_(True))
        )
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address.

        SQL Generated:
            SELECT * FROM users WHERE email = 'alice@example.com'
        """
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def username_exists(self, username: str) -> bool:
        """Check if a username is already registered."""
        return await self.get_by_username(username) is not None

    async def email_exists(self, email: str) -> bool:
        """
        Check if email already exists.

        Example:
            if await repo.email_exists("new@example.com"):
                raise DuplicateResourceError("Email already registered")
        """
        return await self.get_by_email(email) is not None
