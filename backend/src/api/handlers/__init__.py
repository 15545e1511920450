"""
API Handlers

Route handlers for the Linkbio API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All business logic is delegated to the service layer.
"""

from src.api.handlers import (
    user_handler,
    link_handler,
    profile_handler,
    health_handler,
)

__all__ = [
    "user_handler",
    "link_handler",
    "profile_handler",
    "health_handler",
]
