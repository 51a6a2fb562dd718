from __future__ import annotations

from typing import Any


class UpdownError(Exception):
    """Base exception for everything raised by this package."""


class TokenNotFoundError(UpdownError):
    """No check carries the requested alias, even after a fresh list fetch."""

    def __init__(self, alias: str) -> None:
        super().__init__(f"no check token found for alias {alias!r}")
        self.alias = alias


class TransportError(UpdownError):
    """The request never produced an HTTP response (DNS, connect, timeout...)."""


class DecodeError(UpdownError):
    """The response body could not be decoded as JSON."""


class ApiError(UpdownError):
    """Non-success HTTP status returned by the API."""

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        body: Any = None,
        method: str = "",
        url: str = "",
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.method = method
        self.url = url


class NotFoundError(ApiError):
    """Resource not found (404)."""


class AuthError(ApiError):
    """API key missing or invalid (401/403)."""


class ValidationError(ApiError):
    """Invalid input (400/422)."""


class RateLimitError(ApiError):
    """Rate limited (429). Check retry_after."""

    def __init__(self, message: str, retry_after: float | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


def error_for_status(status: int) -> type[ApiError]:
    if status == 404:
        return NotFoundError
    if status in (401, 403):
        return AuthError
    if status in (400, 422):
        return ValidationError
    if status == 429:
        return RateLimitError
    return ApiError
