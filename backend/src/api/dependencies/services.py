"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per request around the request's session. They hold
no state of their own, so nothing is shared between requests.

Usage:
======
    from src.api.dependencies.services import get_link_service

    @router.delete("/{link_id}")
    async def delete_link(
        link_id: UUID,
        link_service: LinkService = Depends(get_link_service),
    ):
        return await link_service.delete_link(link_id)
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.dependencies.database import get_db
from src.shared.services.user_service import UserService
from src.shared.services.link_service import LinkService
from src.shared.services.click_service import ClickService
from src.shared.services.profile_service import ProfileService


async def get_user_service(
    db: AsyncSession = Depends(get_db),
) -> UserService:
    """Dependency to get UserService instance."""
    return UserService(db)


async def get_link_service(
    db: AsyncSession = Depends(get_db),
) -> LinkService:
    """Dependency to get LinkService instance."""
    return LinkService(db)


async def get_click_service(
    db: AsyncSession = Depends(get_db),
) -> ClickService:
    """Dependency to get ClickService instance."""
    return ClickService(db)


async def get_profile_service(
    db: AsyncSession = Depends(get_db),
) -> ProfileService:
    """Dependency to get ProfileService instance."""
    return ProfileService(db)
