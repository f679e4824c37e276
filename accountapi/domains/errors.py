"""
Error taxonomy for the account API client.

Every failure crosses the library boundary as an AccountAPIError subclass.
Callers distinguish kinds with `except`/`isinstance`; `status_code` carries
the raw HTTP status wherever a response was received.
"""

from __future__ import annotations


class AccountAPIError(Exception):
    """Base exception for account API client errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class RequestConstructionError(AccountAPIError):
    """Raised when the request URL cannot be resolved or the body cannot be serialized."""


class DecodeError(AccountAPIError):
    """Raised when a successful response body does not match the expected shape."""


class TransportError(AccountAPIError):
    """Raised on network-level failures: connection refused, DNS, TLS."""


class RequestTimeoutError(TransportError):
    """Raised when the request deadline elapses before the response arrives."""


class RequestCancelledError(TransportError):
    """Raised when the request context is cancelled before the response arrives."""


class StatusError(AccountAPIError):
    """Raised for a non-2xx response status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message, status_code=status_code)


class ContentNotFoundError(StatusError):
    """Resource does not exist (404)."""


class BadRequestError(StatusError):
    """Server rejected the request arguments (400)."""


class NotAuthorizedError(StatusError):
    """Access denied (403)."""


class InternalServerError(StatusError):
    """Any non-2xx status without a more specific kind."""


class VersionConflictError(StatusError):
    """Delete was attempted against a stale account version (409)."""
