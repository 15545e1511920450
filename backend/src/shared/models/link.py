"""
Link Entity Model

One outbound link on a creator's profile.

Ordering:
=========
`position` is the only display-order signal. Links of one user are shown
by position ascending; ties fall back to created_at, then id. Positions
are kept dense (0..n-1) by create and delete, but reorder and direct
updates may leave duplicates or gaps.

SAMPLE LINK RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 770e8400-e29b-41d4-a716-446655440000                      │
│ user_id          │ 550e8400-e29b-41d4-a716-446655440000                      │
│ title            │ "My newsletter"                                           │
│ url              │ "https://alice.substack.com"                              │
│ description      │ "Weekly notes"                                            │
│ icon             │ "📬"                                                      │
│ position         │ 0                                                         │
│ is_active        │ true                                                      │
│ click_count      │ 42                                                        │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import Boolean, ForeignKey, Index, Integer, String, Text, true
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from src.shared.models.user import User


class Link(Base, TimestampMixin):
    """
    Link model - an ordered, clickable entry on a user's profile.

    Attributes:
        id: Unique identifier (UUID v4)
        user_id: Owner user ID, fixed after creation
        title: Label shown on the profile
        url: Destination URL
        description: Optional subtitle
        icon: Optional emoji or icon identifier
        position: Display order among the owner's links
        is_active: Hidden from the public profile when False
        click_count: Number of tracked clicks, only ever incremented

    Relationships:
        user: The user who owns this link
    """

    __tablename__ = "links"
    __table_args__ = (
        # Serves both ordered listing and max(position) lookups
        Index("ix_links_user_id_position", "user_id", "position"),
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # FOREIGN KEYS
    # ═══════════════════════════════════════════════════════════════════════════

    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # CONTENT
    # ═══════════════════════════════════════════════════════════════════════════

    title: Mapped[str] = mapped_column(String(100), nullable=False)

    url: Mapped[str] = mapped_column(Text, nullable=False)

    description: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)

    icon: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # ═══════════════════════════════════════════════════════════════════════════
    # ORDERING & VISIBILITY
    # ═══════════════════════════════════════════════════════════════════════════

    position: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default="0",
    )

    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=true(),
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # ANALYTICS
    # ═══════════════════════════════════════════════════════════════════════════

    click_count: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default="0",
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    user: Mapped["User"] = relationship(
        "User",
        back_populates="links",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Link(id={self.id}, title={self.title}, position={self.position})>"
