"""
Exception hierarchy for atlas-tools.

All exceptions inherit from AtlasToolsError for unified error handling.
Specific exceptions provide detailed context for debugging.
"""

from __future__ import annotations

from typing import Any


class AtlasToolsError(Exception):
    """
    Base exception for all atlas-tools errors.

    All custom exceptions inherit from this class, allowing callers
    to catch all atlas-tools errors with a single except clause.

    Attributes:
        message: Human-readable error description
        context: Optional dictionary with additional error context
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Argument Errors
# =============================================================================


class ArgumentError(AtlasToolsError):
    """
    A required call argument was missing or invalid.

    Raised locally, before any request is built or sent.

    Attributes:
        argument: Name of the offending argument (e.g. 'projectID')
        reason: Why the argument was rejected
    """

    def __init__(self, argument: str, reason: str):
        super().__init__(f"{argument} is invalid because {reason}")
        self.argument = argument
        self.reason = reason


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(AtlasToolsError):
    """
    Error in configuration parsing or validation.

    Raised when:
    - Required settings are missing
    - Field values fail validation
    """

    pass


class ConfigValidationError(ConfigurationError):
    """
    Configuration validation failed.

    Attributes:
        field: The field that failed validation
        value: The invalid value
        reason: Why validation failed
    """

    def __init__(self, field: str, value: Any, reason: str):
        super().__init__(
            f"Validation failed for '{field}': {reason}",
            context={"field": field, "value": value, "reason": reason},
        )
        self.field = field
        self.value = value
        self.reason = reason


# =============================================================================
# Authentication Errors
# =============================================================================


class AuthenticationError(AtlasToolsError):
    """Base class for authentication errors."""

    pass


class InvalidCredentialsError(AuthenticationError):
    """API key pair is invalid, expired, or lacks access to the project."""

    def __init__(self, message: str = "Invalid API credentials"):
        super().__init__(message)


class MissingCredentialsError(AuthenticationError):
    """Required credentials not configured."""

    def __init__(self, missing_fields: list[str] | None = None):
        fields = missing_fields or ["credentials"]
        super().__init__(
            f"Missing required credentials: {', '.join(fields)}",
            context={"missing_fields": fields},
        )


# =============================================================================
# API Client Errors
# =============================================================================


class APIError(AtlasToolsError):
    """
    Base class for API-related errors.

    Attributes:
        status_code: HTTP status code (if applicable)
        response_data: Raw response data from API
        error_code: Atlas error code (e.g. 'GROUP_NOT_FOUND'), when reported
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_data: dict[str, Any] | None = None,
        error_code: str | None = None,
    ):
        context: dict[str, Any] = {"status_code": status_code}
        if error_code:
            context["error_code"] = error_code
        super().__init__(message, context=context)
        self.status_code = status_code
        self.response_data = response_data or {}
        self.error_code = error_code


class APIConnectionError(APIError):
    """Failed to connect to API endpoint."""

    pass


class APITimeoutError(APIError):
    """API request timed out."""

    pass


class APIRateLimitError(APIError):
    """API rate limit exceeded."""

    def __init__(self, retry_after: int | None = None, message: str = "Rate limit exceeded"):
        super().__init__(message, status_code=429)
        self.retry_after = retry_after


class APINotFoundError(APIError):
    """Requested resource does not exist."""

    def __init__(
        self,
        identifier: str,
        message: str | None = None,
        response_data: dict[str, Any] | None = None,
        error_code: str | None = None,
    ):
        super().__init__(
            message or f"Resource not found: {identifier}",
            status_code=404,
            response_data=response_data,
            error_code=error_code,
        )
        self.identifier = identifier


class APIValidationError(APIError):
    """API request validation failed."""

    pass


class APIDecodeError(APIError):
    """Response body could not be decoded into the expected structure."""

    pass
