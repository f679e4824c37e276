"""
Tests for RequestContext: deadlines and cancellation.
"""

from __future__ import annotations

import threading

import pytest

from accountapi.domains.errors import RequestCancelledError, RequestTimeoutError, TransportError
from accountapi.infrastructure.http.context import RequestContext


def test_background_context_never_expires() -> None:
    ctx = RequestContext.background()
    assert ctx.remaining() is None
    assert not ctx.expired
    assert not ctx.cancelled
    ctx.raise_if_done()


def test_remaining_counts_down_from_timeout() -> None:
    ctx = RequestContext.with_timeout(30)
    assert 0 < ctx.remaining() <= 30


def test_elapsed_deadline_raises_timeout() -> None:
    ctx = RequestContext.with_timeout(0)
    assert ctx.expired
    assert ctx.remaining() == 0.0
    with pytest.raises(RequestTimeoutError):
        ctx.raise_if_done()


def test_cancel_from_another_thread() -> None:
    ctx = RequestContext.with_timeout(30)
    t = threading.Thread(target=ctx.cancel)
    t.start()
    t.join()
    assert ctx.cancelled
    with pytest.raises(RequestCancelledError):
        ctx.raise_if_done()


def test_cancellation_is_a_transport_failure() -> None:
    ctx = RequestContext.background()
    ctx.cancel()
    with pytest.raises(TransportError):
        ctx.raise_if_done()
