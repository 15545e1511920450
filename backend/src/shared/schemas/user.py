"""
User Schemas

Request/response models for creator profile endpoints.
"""

from typing import ClassVar, Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator

from src.shared.models.enums import Theme
from src.shared.schemas.common import (
    BaseSchema,
    PartialUpdateSchema,
    TimestampMixin,
    validate_http_url,
)


class UserCreate(BaseModel):
    """Schema for creator registration."""

    username: str = Field(min_length=3, max_length=50)
    email: EmailStr
    display_name: Optional[str] = None
    bio: Optional[str] = Field(default=None, max_length=500)
    avatar_url: Optional[str] = None
    theme: Theme = Theme.MINIMAL

    @field_validator("avatar_url")
    @classmethod
    def check_avatar_url(cls, value: Optional[str]) -> Optional[str]:
        return validate_http_url(value)


class UserUpdate(PartialUpdateSchema):
    """
    Schema for partial profile updates.

    username and email are not accepted; they are fixed at registration.
    """

    NULLABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({"display_name", "bio", "avatar_url"})

    display_name: Optional[str] = None
    bio: Optional[str] = Field(default=None, max_length=500)
    avatar_url: Optional[str] = None
    theme: Optional[Theme] = None
    is_active: Optional[bool] = None

    @field_validator("avatar_url")
    @classmethod
    def check_avatar_url(cls, value: Optional[str]) -> Optional[str]:
        return validate_http_url(value)


class UserResponse(BaseSchema, TimestampMixin):
    """Schema for user response."""

    id: UUID
    username: str
    email: str
    display_name: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    theme: Theme
    is_active: bool
