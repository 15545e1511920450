"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories
and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database

Services should:
- Contain business logic (position assignment, ownership checks)
- Coordinate multiple repositories if needed
- Work inside the request's session (commit happens in get_db())
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- UserService: Creator registration and profile updates
- LinkService: Link CRUD and ordering
- ClickService: Click counting
- ProfileService: Public profile assembly

Usage:
======
    from src.shared.services import LinkService

    service = LinkService(db)
    await service.delete_link(link_id)
"""

from src.shared.services.user_service import UserService
from src.shared.services.link_service import LinkService
from src.shared.services.click_service import ClickService
from src.shared.services.profile_service import ProfileService, PublicProfile

__all__ = [
    "UserService",
    "LinkService",
    "ClickService",
    "ProfileService",
    "PublicProfile",
]
