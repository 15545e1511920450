"""
Pydantic Schemas

Request and response models for the API. Request schemas carry all shape
validation (lengths, URL and email format, enum membership, non-negative
positions); services only check existence and ownership.

Schema Categories:
==================
- common: Base schemas, partial-update base, error responses
- user: Creator registration and profile updates
- link: Link CRUD and reorder batches
- profile: Public profile view

Usage:
======
    from src.shared.schemas.link import LinkCreate, LinkResponse
    from src.shared.schemas.common import SuccessResponse, ErrorResponse
"""

from src.shared.schemas.common import (
    BaseSchema,
    PartialUpdateSchema,
    SuccessResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
    TimestampMixin,
    validate_http_url,
)
from src.shared.schemas.user import (
    UserCreate,
    UserUpdate,
    UserResponse,
)
from src.shared.schemas.link import (
    LinkCreate,
    LinkUpdate,
    LinkOrder,
    ReorderLinksRequest,
    LinkResponse,
)
from src.shared.schemas.profile import PublicProfileResponse

__all__ = [
    # Common
    "BaseSchema",
    "PartialUpdateSchema",
    "SuccessResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    "TimestampMixin",
    "validate_http_url",
    # User
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    # Link
    "LinkCreate",
    "LinkUpdate",
    "LinkOrder",
    "ReorderLinksRequest",
    "LinkResponse",
    # Profile
    "PublicProfileResponse",
]
