"""
Common Schemas

Shared schemas and validators used across the API.

Schema Types:
=============
- BaseSchema: Base with common config (from_attributes, populate_by_name)
- PartialUpdateSchema: Base for PATCH bodies (absent vs explicit null)
- Generic Responses: SuccessResponse, ErrorResponse
- Validators: validate_http_url()

Usage:
======
    from src.shared.schemas.common import BaseSchema, SuccessResponse

    class LinkResponse(BaseSchema):
        id: UUID
        title: str

    return SuccessResponse(success=True)
"""

from datetime import datetime, timezone
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, TypeAdapter, model_validator
from pydantic import ValidationError as PydanticValidationError


_http_url_adapter = TypeAdapter(HttpUrl)


def validate_http_url(value: Optional[str]) -> Optional[str]:
    """
    Check that value is a well-formed http(s) URL.

    The original string is returned untouched so stored URLs match what the
    creator typed (HttpUrl would append a trailing slash to bare hosts).

    Raises:
        ValueError: If value is not a valid http(s) URL
    """
    if value is None:
        return value
    try:
        _http_url_adapter.validate_python(value)
    except PydanticValidationError as e:
        raise ValueError("must be a valid http(s) URL") from e
    return value


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    All response schemas should inherit from this class.
    Provides:
    - from_attributes: Allow creating from ORM models
    - populate_by_name: Allow field population by name or alias
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class PartialUpdateSchema(BaseModel):
    """
    Base for partial update bodies.

    A field the client leaves out is absent from model_fields_set and must
    not be written. A field sent as null clears the column, which is only
    allowed for the names in NULLABLE_FIELDS.

    Example:
        payload = LinkUpdate.model_validate({"description": None})
        payload.changes()  # {"description": None}
    """

    model_config = ConfigDict(extra="forbid")

    NULLABLE_FIELDS: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_on_required(self) -> "PartialUpdateSchema":
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self.NULLABLE_FIELDS:
                raise ValueError(f"'{name}' cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        """Fields the client actually sent, explicit nulls included."""
        return self.model_dump(exclude_unset=True)


# ═══════════════════════════════════════════════════════════════════════════════
# STANDARD RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class SuccessResponse(BaseModel):
    """Outcome of a mutation that has no resource to return."""

    success: bool


class ErrorDetail(BaseModel):
    """Error detail structure in error responses."""

    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(
        default=None,
        description="Additional error context",
    )


class ErrorResponse(BaseModel):
    """
    Standard error response schema.

    Example:
        {
            "error": {
                "code": "NOT_FOUND",
                "message": "Link with id 'abc-123' not found",
                "details": {}
            }
        }
    """

    error: ErrorDetail


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH CHECK
# ═══════════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = "healthy"
    service: str = "linkbio"
    version: str = "1.0.0"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


# ═══════════════════════════════════════════════════════════════════════════════
# MIXINS
# ═══════════════════════════════════════════════════════════════════════════════


class TimestampMixin(BaseModel):
    """Mixin for timestamp fields in responses."""

    created_at: datetime
    updated_at: datetime
