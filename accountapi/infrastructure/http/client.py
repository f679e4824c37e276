"""
HTTP transport for the account service: builds JSON:API requests, sends them,
classifies response status codes and decodes response bodies.
"""

from __future__ import annotations

import json
import threading
from dataclasses import dataclass, field
from typing import Any, Callable
from urllib.parse import urljoin

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError

from accountapi.domains.errors import (
    BadRequestError,
    ContentNotFoundError,
    DecodeError,
    InternalServerError,
    NotAuthorizedError,
    RequestCancelledError,
    RequestConstructionError,
    RequestTimeoutError,
    StatusError,
    TransportError,
)
from accountapi.infrastructure.http.context import RequestContext
from accountapi.utils.config import DEFAULT_BASE_URL, account_api_base_url, account_api_timeout
from accountapi.utils.logger import get_logger

logger = get_logger()

JSON_API_CONTENT_TYPE = "application/vnd.api+json"
CHUNK_SIZE = 8192
_POLL_SECONDS = 0.05

# Status code -> error kind. Unlisted non-2xx codes map to InternalServerError.
STATUS_ERRORS: dict[int, tuple[type[StatusError], str]] = {
    400: (BadRequestError, "bad request"),
    403: (NotAuthorizedError, "not authorized"),
    404: (ContentNotFoundError, "content not found"),
}

__all__ = [
    "DEFAULT_BASE_URL",
    "JSON_API_CONTENT_TYPE",
    "STATUS_ERRORS",
    "HTTPClient",
    "HTTPResponse",
    "classify_status",
]


@dataclass
class HTTPResponse:
    """Outcome of a successful request: raw status plus the decoded body, if any."""

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    data: Any = None


def classify_status(status_code: int) -> StatusError | None:
    """Return None for 2xx, otherwise the error matching the status code."""
    if 200 <= status_code < 300:
        return None
    kind, message = STATUS_ERRORS.get(status_code, (InternalServerError, "internal server error"))
    return kind(message, status_code=status_code)


def _encode_body(body: Any) -> bytes:
    if isinstance(body, BaseModel):
        return body.model_dump_json(by_alias=True, exclude_unset=True).encode("utf-8")
    return json.dumps(body).encode("utf-8")


def _decode_body(raw: bytes, target: Any) -> Any:
    return TypeAdapter(target).validate_json(raw)


class HTTPClient:
    """
    Executes requests against a fixed base URL.

    Connection pooling is left to the underlying requests.Session; the client
    itself holds no per-call state and is safe to share between threads.

    Each call runs its send and body read on a worker thread while the caller
    watches the RequestContext, so a cancelled or expired call returns
    promptly. The abandoned worker stops at its next body chunk or when the
    per-read socket timeout fires, and closes its response.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url or account_api_base_url()
        self.timeout = timeout if timeout is not None else account_api_timeout()
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        self._session = session or requests.Session()

    def create_request(self, method: str, path: str, body: Any = None) -> requests.PreparedRequest:
        """
        Build a request for `path` resolved against the base URL.

        When `body` is given it is JSON encoded and the JSON:API content type
        is set; otherwise the request has neither body nor content type.

        Raises:
            RequestConstructionError: If the URL or the body is invalid.
        """
        try:
            url = urljoin(self.base_url, path)
            headers = {"Accept": JSON_API_CONTENT_TYPE}
            data = None
            if body is not None:
                data = _encode_body(body)
                headers["Content-Type"] = JSON_API_CONTENT_TYPE
            return requests.Request(method, url, headers=headers, data=data).prepare()
        except (TypeError, ValueError, requests.RequestException) as e:
            raise RequestConstructionError(f"unexpected error creating request: {e}") from e

    def do(self, ctx: RequestContext, request: requests.PreparedRequest, target: Any = None) -> HTTPResponse:
        """
        Send `request` and classify the response.

        Args:
            ctx: Cancellation and deadline for this call, enforced until the
                whole body has been read.
            request: Request built by create_request.
            target: Type to decode a successful body into (a pydantic model,
                dict, list[...]). None skips decoding.

        Returns:
            HTTPResponse with the raw status code and the decoded body.

        Raises:
            StatusError: Non-2xx status; the raw code is on `status_code`.
            DecodeError: 2xx status but the body does not match `target`.
            TransportError: Network failure, timeout or cancellation.
        """
        timeout = self._effective_timeout(ctx)

        logger.debug("%s %s", request.method, request.url)
        try:
            status_code, headers, raw = self._supervise(ctx, lambda: self._exchange(ctx, request, timeout))
        except RequestTimeoutError:
            logger.warning("Request %s %s exceeded its deadline", request.method, request.url)
            raise
        except RequestCancelledError:
            logger.info("Request %s %s cancelled", request.method, request.url)
            raise
        except requests.Timeout as e:
            logger.warning("Request %s %s timed out after %.2fs", request.method, request.url, timeout)
            raise RequestTimeoutError(f"request timed out: {e}") from e
        except requests.RequestException as e:
            logger.exception("Request %s %s failed: %s", request.method, request.url, e)
            raise TransportError(f"unexpected error executing http request: {e}") from e
        logger.debug("%s %s -> %s", request.method, request.url, status_code)

        err = classify_status(status_code)
        if err is not None:
            logger.warning("%s %s returned status %s", request.method, request.url, status_code)
            raise err

        data = None
        if target is not None:
            try:
                data = _decode_body(raw, target)
            except ValidationError as e:
                logger.warning("Could not decode response body of %s %s: %s", request.method, request.url, e)
                raise DecodeError(f"unexpected response body: {e}", status_code=status_code) from e
        return HTTPResponse(status_code=status_code, headers=headers, data=data)

    def _effective_timeout(self, ctx: RequestContext) -> float:
        """Per-read socket timeout: the client timeout capped at the context deadline."""
        ctx.raise_if_done()
        timeout = self.timeout
        remaining = ctx.remaining()
        if remaining is not None:
            timeout = min(timeout, remaining)
        if timeout <= 0:
            raise RequestTimeoutError("request context deadline exceeded")
        return timeout

    def _exchange(
        self,
        ctx: RequestContext,
        request: requests.PreparedRequest,
        timeout: float,
    ) -> tuple[int, dict[str, str], bytes]:
        response = self._session.send(request, timeout=timeout, stream=True)
        try:
            chunks = []
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                ctx.raise_if_done()
                chunks.append(chunk)
            ctx.raise_if_done()
            return response.status_code, dict(response.headers), b"".join(chunks)
        finally:
            response.close()

    @staticmethod
    def _supervise(ctx: RequestContext, fn: Callable[[], Any]) -> Any:
        """Run `fn` on a worker thread; raise as soon as `ctx` is cancelled or expires."""
        outcome: dict[str, Any] = {}
        finished = threading.Event()

        def run() -> None:
            try:
                outcome["value"] = fn()
            except BaseException as e:
                outcome["error"] = e
            finally:
                finished.set()

        threading.Thread(target=run, name="accountapi-request", daemon=True).start()
        while not finished.wait(_POLL_SECONDS):
            ctx.raise_if_done()
        if "error" in outcome:
            raise outcome["error"]
        return outcome["value"]
