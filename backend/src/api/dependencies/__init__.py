"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db()
- Services: get_*_service() functions

Usage:
======
    from src.api.dependencies import get_db, get_link_service
"""

from src.api.dependencies.database import (
    get_db,
)
from src.api.dependencies.services import (
    get_user_service,
    get_link_service,
    get_click_service,
    get_profile_service,
)

__all__ = [
    # Database
    "get_db",
    # Services
    "get_user_service",
    "get_link_service",
    "get_click_service",
    "get_profile_service",
]
