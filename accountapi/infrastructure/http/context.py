"""
Request execution context: an optional deadline plus a cancellation flag.

A context may be shared between threads; `cancel()` from one thread makes
every operation using it fail promptly with RequestCancelledError.
"""

from __future__ import annotations

import threading
import time

from accountapi.domains.errors import RequestCancelledError, RequestTimeoutError


class RequestContext:
    """
    Deadline and cancellation for one or more client calls.

    Args:
        timeout: Seconds from now until the deadline. None means no deadline.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self._deadline = time.monotonic() + timeout if timeout is not None else None
        self._cancelled = threading.Event()

    @classmethod
    def background(cls) -> RequestContext:
        """Context with no deadline that is never cancelled unless asked to."""
        return cls()

    @classmethod
    def with_timeout(cls, seconds: float) -> RequestContext:
        """Context whose deadline is `seconds` from now."""
        return cls(timeout=seconds)

    def cancel(self) -> None:
        """Abandon every call using this context; safe to call from any thread."""
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def expired(self) -> bool:
        return self._deadline is not None and time.monotonic() >= self._deadline

    def remaining(self) -> float | None:
        """Seconds left before the deadline, or None when there is no deadline."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def raise_if_done(self) -> None:
        """
        Raises:
            RequestCancelledError: If cancel() was called.
            RequestTimeoutError: If the deadline has elapsed.
        """
        if self.cancelled:
            raise RequestCancelledError("request context cancelled")
        if self.expired:
            raise RequestTimeoutError("request context deadline exceeded")
