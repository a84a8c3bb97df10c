"""Exception types raised by the Todoist MCP server.

Only pipeline-fatal conditions are raised. Per-command failures reported by
the sync endpoint are carried as data (see ``models.bulk.SyncFailed``).
"""

from typing import Any

from todoist_mcp.enums import ErrorCode


class TodoistError(Exception):
    """Base class for all errors raised by this package."""

    default_code = ErrorCode.UNKNOWN_ERROR
    retryable = False

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode | None = None,
        http_status: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.http_status = http_status
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "code": self.code.value,
            "message": self.message,
            "retryable": self.retryable,
        }
        if self.http_status is not None:
            data["http_status"] = self.http_status
        return data


class ConfigurationError(TodoistError):
    """Missing or invalid environment configuration."""

    default_code = ErrorCode.CONFIGURATION_ERROR


class ValidationError(TodoistError):
    """Malformed or structurally incomplete request. Never retryable."""

    default_code = ErrorCode.VALIDATION_ERROR


class TransportError(TodoistError):
    """The remote endpoint could not be reached."""

    default_code = ErrorCode.NETWORK_ERROR
    retryable = True


class UpstreamError(TodoistError):
    """The remote endpoint rejected the request as a whole."""

    default_code = ErrorCode.SYNC_ERROR

    def __init__(
        self,
        message: str,
        *,
        body: Any = None,
        code: ErrorCode | None = None,
        http_status: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code=code, http_status=http_status, details=details)
        self.body = body

    @property
    def retryable(self) -> bool:  # type: ignore[override]
        if self.http_status is None:
            return False
        return self.http_status >= 500 or self.http_status == 429


class AuthenticationError(UpstreamError):
    """401/403 from the API."""

    default_code = ErrorCode.INVALID_TOKEN


class NotFoundError(UpstreamError):
    """404 from the API."""

    default_code = ErrorCode.RESOURCE_NOT_FOUND


class RateLimitError(UpstreamError):
    """429 from the API."""

    default_code = ErrorCode.RATE_LIMIT_EXCEEDED

    def __init__(self, message: str, *, retry_after: int | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.retry_after = retry_after

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.retry_after is not None:
            data["retry_after"] = self.retry_after
        return data


class ServiceUnavailableError(UpstreamError):
    """5xx from the API."""

    default_code = ErrorCode.SERVICE_UNAVAILABLE
