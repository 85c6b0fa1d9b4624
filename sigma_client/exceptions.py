"""Central exception hierarchy for the Sigma client.

All errors raised by this package inherit from SigmaError and carry structured
context (component, operation, details, retry guidance and an error code).

Exception Hierarchy:
    SigmaError (base)
    ├── ConfigurationError
    ├── NotAuthenticatedError
    ├── APIError
    │   ├── AuthenticationError
    │   └── AuthorizationError
    ├── TransportError
    │   └── RequestTimeoutError
    └── DecodingError

Usage:
    from sigma_client.exceptions import APIError, NotAuthenticatedError

    try:
        person = await client.search_standard_dni("4211928")
    except NotAuthenticatedError:
        await client.login(username, password)
    except APIError as e:
        logger.error(f"Sigma rejected the request: {e.message}", extra=e.to_dict())
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Error codes for programmatic handling.

    Categories:
        1xxx - Configuration errors
        2xxx - Session errors
        3xxx - Remote API errors
        4xxx - Transport errors
        5xxx - Decoding errors
    """

    CONFIG_LOAD_FAILED = 1001
    CONFIG_VALIDATION_FAILED = 1002
    CONFIG_MISSING_REQUIRED = 1003

    NOT_AUTHENTICATED = 2001

    API_REQUEST_FAILED = 3101
    API_AUTHENTICATION_FAILED = 3103
    API_AUTHORIZATION_FAILED = 3104

    TRANSPORT_FAILED = 4001
    TRANSPORT_TIMEOUT = 4002

    DECODING_FAILED = 5001


RETRYABLE_HTTP_STATUSES = (408, 429, 500, 502, 503, 504)


class SigmaError(Exception):
    """Base exception for all Sigma client errors.

    Attributes:
        message: Human-readable error description
        component: Component that raised the error (e.g., "transport")
        operation: Operation being performed (e.g., "get_data_from_dni")
        details: Additional context as dictionary
        retryable: Whether the caller may reasonably retry
        status_code: Numeric error code from ErrorCode enum
        cause: Original exception if wrapping another error
    """

    def __init__(
        self,
        message: str,
        component: str | None = None,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
        retryable: bool = False,
        status_code: ErrorCode | None = None,
        cause: Exception | None = None,
    ):
        self.message = message
        self.component = component or self.__class__.__module__
        self.operation = operation
        self.details = details or {}
        self.retryable = retryable
        self.status_code = status_code
        self.cause = cause

        parts = [message]
        if component:
            parts.append(f"[component={component}]")
        if operation:
            parts.append(f"[operation={operation}]")
        if status_code:
            parts.append(f"[code={status_code}]")

        super().__init__(" ".join(parts))

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for logging/serialization.

        Example:
            {
                "error_type": "AuthorizationError",
                "message": "Sigma API rejected the request",
                "component": "api.sigma",
                "operation": "get_names",
                "details": {"endpoint": "/nombre", "http_status": 403},
                "retryable": false,
                "status_code": 3104,
                "cause": null
            }
        """
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "component": self.component,
            "operation": self.operation,
            "details": self.details,
            "retryable": self.retryable,
            "status_code": self.status_code.value if self.status_code else None,
            "cause": str(self.cause) if self.cause else None,
        }


class ConfigurationError(SigmaError):
    """Configuration loading or validation failed.

    Not retryable as configuration issues must be fixed manually. Also raised
    when the credentials environment variables are missing.
    """

    def __init__(self, message: str, config_key: str | None = None, **kwargs: Any):
        details = kwargs.pop("details", {})
        if config_key:
            details["config_key"] = config_key

        component = kwargs.pop("component", "config")

        super().__init__(
            message,
            component=component,
            details=details,
            status_code=kwargs.pop("status_code", ErrorCode.CONFIG_VALIDATION_FAILED),
            retryable=False,
            **kwargs,
        )


class NotAuthenticatedError(SigmaError):
    """A lookup was attempted before a successful login.

    Raised before any request is sent.
    """

    def __init__(self, message: str = "Client is not authenticated, call login() first", **kwargs: Any):
        component = kwargs.pop("component", "transport")
        super().__init__(
            message,
            component=component,
            status_code=ErrorCode.NOT_AUTHENTICATED,
            retryable=False,
            **kwargs,
        )


class APIError(SigmaError):
    """The Sigma API answered with a non-success status.

    408, 429 and 5xx responses are marked retryable. The client never retries
    on its own; the flag is guidance for callers.

    Example:
        raise APIError(
            "Sigma API request failed",
            api_name="sigma",
            endpoint="/dni/standard",
            http_status=503,
        )
    """

    def __init__(
        self,
        message: str,
        api_name: str | None = None,
        endpoint: str | None = None,
        http_status: int | None = None,
        response_text: str | None = None,
        **kwargs: Any,
    ):
        details = kwargs.pop("details", {})
        if endpoint:
            details["endpoint"] = endpoint
        if http_status:
            details["http_status"] = http_status
        if response_text:
            details["response_text"] = response_text

        if "retryable" not in kwargs and http_status:
            kwargs["retryable"] = http_status in RETRYABLE_HTTP_STATUSES

        self.http_status = http_status
        component = kwargs.pop("component", f"api.{api_name}" if api_name else "api")

        super().__init__(
            message,
            component=component,
            details=details,
            status_code=kwargs.pop("status_code", ErrorCode.API_REQUEST_FAILED),
            **kwargs,
        )


class AuthenticationError(APIError):
    """Login rejected by the remote service (bad credentials)."""

    def __init__(self, message: str, **kwargs: Any):
        super().__init__(
            message,
            status_code=ErrorCode.API_AUTHENTICATION_FAILED,
            retryable=False,
            **kwargs,
        )


class AuthorizationError(APIError):
    """A lookup was rejected with 401/403.

    Covers expired tokens and plan-tier restrictions, both enforced server-side.
    """

    def __init__(self, message: str, **kwargs: Any):
        super().__init__(
            message,
            status_code=ErrorCode.API_AUTHORIZATION_FAILED,
            retryable=False,
            **kwargs,
        )


class TransportError(SigmaError):
    """Network, connectivity or TLS failure before a response was received."""

    def __init__(self, message: str, endpoint: str | None = None, **kwargs: Any):
        details = kwargs.pop("details", {})
        if endpoint:
            details["endpoint"] = endpoint

        component = kwargs.pop("component", "transport")

        super().__init__(
            message,
            component=component,
            details=details,
            status_code=kwargs.pop("status_code", ErrorCode.TRANSPORT_FAILED),
            retryable=kwargs.pop("retryable", True),
            **kwargs,
        )


class RequestTimeoutError(TransportError):
    """The request did not complete within the configured timeout."""

    def __init__(self, message: str, **kwargs: Any):
        super().__init__(message, status_code=ErrorCode.TRANSPORT_TIMEOUT, **kwargs)


class DecodingError(SigmaError):
    """Response body is not JSON or does not match the expected record shape."""

    def __init__(
        self,
        message: str,
        endpoint: str | None = None,
        model: str | None = None,
        **kwargs: Any,
    ):
        details = kwargs.pop("details", {})
        if endpoint:
            details["endpoint"] = endpoint
        if model:
            details["model"] = model

        component = kwargs.pop("component", "transport")

        super().__init__(
            message,
            component=component,
            details=details,
            status_code=ErrorCode.DECODING_FAILED,
            retryable=False,
            **kwargs,
        )


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================


def wrap_exception(
    original: Exception,
    error_class: type[SigmaError],
    message: str | None = None,
    **kwargs: Any,
) -> SigmaError:
    """Wrap a generic exception in a structured Sigma exception.

    Example:
        try:
            response = await http.get(url)
        except httpx.ConnectError as e:
            raise wrap_exception(e, TransportError, endpoint=url) from e
    """
    return error_class(message or str(original), cause=original, **kwargs)


def is_retryable(error: Exception) -> bool:
    """Return the retry guidance for an exception (False for foreign exceptions)."""
    if isinstance(error, SigmaError):
        return error.retryable
    return False


def get_error_code(error: Exception) -> ErrorCode | None:
    """Return the ErrorCode carried by an exception, if any."""
    if isinstance(error, SigmaError):
        return error.status_code
    return None


__all__ = [
    "APIError",
    "AuthenticationError",
    "AuthorizationError",
    "ConfigurationError",
    "DecodingError",
    "ErrorCode",
    "NotAuthenticatedError",
    "RequestTimeoutError",
    "SigmaError",
    "TransportError",
    "get_error_code",
    "is_retryable",
    "wrap_exception",
]
