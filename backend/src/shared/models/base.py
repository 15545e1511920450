"""
Base Model Classes

This module provides the declarative base and the timestamp mixin shared by
all Linkbio models.

Model Hierarchy:
================
    Base                    ← SQLAlchemy declarative base
       │
       └── TimestampMixin   ← Automatic created_at/updated_at

Usage:
======
    from src.shared.models.base import Base, TimestampMixin

    class Link(Base, TimestampMixin):
        __tablename__ = "links"
        id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    All models in the application inherit from this class, either
    directly or together with TimestampMixin.
    """


class TimestampMixin:
    """
    Mixin that adds automatic timestamp tracking to models.

    Provides two timestamp columns:
    - created_at: Set when the record is first inserted
    - updated_at: Set on insert and refreshed on every ORM update

    Database Behavior:
    ==================
    - Both columns get a Python-side default (microsecond precision) and a
      CURRENT_TIMESTAMP server default for rows inserted outside the ORM.
    - Bulk UPDATE statements don't trigger onupdate for columns they don't
      name; repositories set updated_at explicitly in those statements.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        server_default=text("CURRENT_TIMESTAMP"),
        onupdate=utc_now,
        nullable=False,
    )
