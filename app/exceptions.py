# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors should tell HOW to fix, not just WHAT failed.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class DemoAppException(Exception):
    """
    Base exception for the demo API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "DEMO_APP_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Parameter Exceptions
# =============================================================================

class InvalidParameterError(DemoAppException):
    """Raised when a request parameter is missing or cannot be converted."""

    def __init__(self, errors: list[dict[str, Any]]):
        fields = [error["field"] for error in errors]
        super().__init__(
            message=f"Invalid request parameters: {', '.join(fields)}",
            code="VALIDATION_ERROR",
            status_code=400,
            suggestion="Check that every required parameter is present and has the expected type",
            details={"errors": errors},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def demo_exception_handler(
    request: Request,
    exc: DemoAppException
) -> JSONResponse:
    """
    Convert DemoAppException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


def _describe_validation_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Flatten pydantic errors into {field, location, message} entries."""
    described = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        described.append({
            "field": ".".join(loc[1:]) or (loc[0] if loc else "request"),
            "location": loc[0] if loc else "request",
            "message": error.get("msg", "Invalid value"),
        })
    return described


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request binding errors.

    Missing or unconvertible path, query and body values are client
    errors, so they are answered with 400 and the list of failing fields.
    """
    error = InvalidParameterError(_describe_validation_errors(exc))
    logger.debug(f"Rejected {request.method} {request.url.path}: {error.message}")
    return await demo_exception_handler(request, error)
