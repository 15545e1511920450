"""
Enums used across the application.
"""

from enum import Enum


class Theme(str, Enum):
    """Visual theme a creator picks for their public profile page."""

    LIGHT = "light"
    DARK = "dark"
    GRADIENT = "gradient"
    MINIMAL = "minimal"
