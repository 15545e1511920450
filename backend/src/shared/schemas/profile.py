"""
Public profile schemas.
"""

from typing import List

from pydantic import BaseModel

from src.shared.schemas.link import LinkResponse
from src.shared.schemas.user import UserResponse


class PublicProfileResponse(BaseModel):
    """An active user with their active links in display order."""

    user: UserResponse
    links: List[LinkResponse]
