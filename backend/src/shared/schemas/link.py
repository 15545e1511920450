"""
Link-related Pydantic schemas.
"""

from typing import ClassVar, List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.shared.schemas.common import (
    BaseSchema,
    PartialUpdateSchema,
    TimestampMixin,
    validate_http_url,
)


class LinkCreate(BaseModel):
    """
    Request to add a link to a user's profile.

    Leave position out to append the link after the owner's last one.
    """

    user_id: UUID
    title: str = Field(min_length=1, max_length=100)
    url: str
    description: Optional[str] = Field(default=None, max_length=200)
    icon: Optional[str] = None
    position: Optional[int] = Field(default=None, ge=0)

    @field_validator("url")
    @classmethod
    def check_url(cls, value: str) -> str:
        return validate_http_url(value)


class LinkUpdate(PartialUpdateSchema):
    """
    Partial link update.

    A position sent here is written as-is; other links are not shifted.
    """

    NULLABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({"description", "icon"})

    title: Optional[str] = Field(default=None, min_length=1, max_length=100)
    url: Optional[str] = None
    description: Optional[str] = Field(default=None, max_length=200)
    icon: Optional[str] = None
    position: Optional[int] = Field(default=None, ge=0)
    is_active: Optional[bool] = None

    @field_validator("url")
    @classmethod
    def check_url(cls, value: Optional[str]) -> Optional[str]:
        return validate_http_url(value)


class LinkOrder(BaseModel):
    """Target position for one link in a reorder batch."""

    id: UUID
    position: int = Field(ge=0)


class ReorderLinksRequest(BaseModel):
    """
    Batch of position assignments for one owner's links.

    Duplicate target positions are accepted.
    """

    link_orders: List[LinkOrder] = Field(default_factory=list)


class LinkResponse(BaseSchema, TimestampMixin):
    """Response for a link."""

    id: UUID
    user_id: UUID
    title: str
    url: str
    description: Optional[str] = None
    icon: Optional[str] = None
    position: int
    is_active: bool
    click_count: int
