"""
Linkbio SQLAlchemy Models

This package contains all database models for the Linkbio application.

Model Hierarchy:
================
    User
       └── links (Link[])   ← ordered by position, cascade-deleted with the user

Models Overview:
================
- Base: Declarative base and timestamp mixin
- User: Creator profile (username, theme, active flag)
- Link: Outbound link with display position and click counter

Usage:
======
    from src.shared.models import User, Link, Theme
"""

from src.shared.models.base import Base, TimestampMixin, utc_now
from src.shared.models.enums import Theme
from src.shared.models.user import User
from src.shared.models.link import Link

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    "utc_now",
    # Enums
    "Theme",
    # Core models
    "User",
    "Link",
]
