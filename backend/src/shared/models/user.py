"""
User Entity Model

Represents a creator with a public link-in-bio profile.

Model Hierarchy:
================
    User
       └── links (Link[]) - Outbound links shown on the profile

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ username         │ "alice"                                                   │
│ email            │ "alice@example.com"                                       │
│ display_name     │ "Alice Liddell"                                           │
│ bio              │ "Down the rabbit hole"                                    │
│ avatar_url       │ "https://cdn.example.com/alice.png"                       │
│ theme            │ "minimal"                                                 │
│ is_active        │ true                                                      │
│ created_at       │ 2024-01-01T00:00:00Z                                      │
│ updated_at       │ 2024-01-15T10:30:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import Boolean, Enum as SQLEnum, String, Text, true
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.shared.models.base import Base, TimestampMixin
from src.shared.models.enums import Theme


if TYPE_CHECKING:
    from src.shared.models.link import Link


class User(Base, TimestampMixin):
    """
    User model representing a creator profile.

    Attributes:
        id: Unique identifier (UUID v4)
        username: Public handle, unique and fixed after creation
        email: Contact address (unique)
        display_name: Optional name shown on the profile
        bio: Optional short biography
        avatar_url: Optional avatar image URL
        theme: Profile page theme
        is_active: Inactive users have no public profile

    Relationships:
        links: All links owned by this user (deleted with the user)
    """

    __tablename__ = "users"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # IDENTITY
    # ═══════════════════════════════════════════════════════════════════════════

    username: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        nullable=False,
        index=True,
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # PROFILE
    # ═══════════════════════════════════════════════════════════════════════════

    display_name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    bio: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    avatar_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Stored by value ("light", "dark", ...) to match the migration's enum type
    theme: Mapped[Theme] = mapped_column(
        SQLEnum(
            Theme,
            name="theme",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        default=Theme.MINIMAL,
        server_default=Theme.MINIMAL.value,
    )

    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=true(),
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    # The database cascades link deletion; passive_deletes avoids loading them
    links: Mapped[list["Link"]] = relationship(
        "Link",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(id={self.id}, username={self.username})>"
