"""
Error Handler Middleware

Global exception handling for the API.

Provides consistent error responses across all endpoints by catching
exceptions and converting them to standardized JSON responses.

Error Response Format:
======================
    {
        "error": {
            "code": "NOT_FOUND",
            "message": "Link with id 'abc-123' not found",
            "details": {}
        }
    }

Exception Handling:
===================
1. LinkbioException subclasses → Use their status_code and to_dict()
2. Request validation (bad body, path or query) → 400 VALIDATION_ERROR
3. Pydantic ValidationError raised outside request parsing → 400
4. Other exceptions → 500 with generic message (details hidden)

Usage:
======
    from src.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from typing import Any, Sequence

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from src.shared.core.exceptions import LinkbioException
from src.shared.core.logging import logger


def _clean_errors(errors: Sequence[Any]) -> list[dict[str, Any]]:
    """Drop the ctx entry (may hold exception objects) and make errors JSON-safe."""
    return jsonable_encoder(
        [{key: value for key, value in error.items() if key != "ctx"} for error in errors]
    )


def _validation_response(errors: list[dict[str, Any]]) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Request validation failed",
                "details": {"errors": errors},
            }
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Should be called during application initialization to register
    exception handlers for all routes.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(LinkbioException)
    async def linkbio_exception_handler(
        request: Request,
        exc: LinkbioException,
    ) -> JSONResponse:
        """
        Handle Linkbio-specific exceptions.

        All custom exceptions inherit from LinkbioException and include:
        - status_code: HTTP status code
        - error_code: Machine-readable error code
        - message: Human-readable message
        - details: Additional context
        """
        logger.warning(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """
        Handle request parsing errors.

        These occur when the body, path or query parameters don't match
        the expected schema, e.g. a malformed URL or a negative position.
        """
        errors = _clean_errors(exc.errors())
        logger.warning(
            "Request validation error",
            errors=errors,
            path=request.url.path,
        )
        return _validation_response(errors)

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: ValidationError,
    ) -> JSONResponse:
        """Handle Pydantic validation errors raised inside handlers."""
        errors = _clean_errors(exc.errors())
        logger.warning(
            "Validation error",
            errors=errors,
            path=request.url.path,
        )
        return _validation_response(errors)

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Catches any unhandled exception and returns a generic error.
        Full error details are logged but not exposed to clients.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                }
            },
        )
