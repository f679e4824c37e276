"""
Account client: create, fetch, list and delete accounts over the HTTP transport.

Each call is a single stateless request/response cycle. Nothing is retried;
every error reaches the caller as an AccountAPIError subclass.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, Protocol

from accountapi.domains.accounts import Account, AccountList, Pagination
from accountapi.domains.errors import InternalServerError, StatusError, VersionConflictError
from accountapi.infrastructure.http.client import HTTPClient, HTTPResponse
from accountapi.infrastructure.http.context import RequestContext
from accountapi.utils.logger import get_logger

logger = get_logger()

API_VERSION = "v1"
ACCOUNTS_PATH = f"{API_VERSION}/organisation/accounts"


class HTTPTransport(Protocol):
    """The two operations the account client needs from a transport."""

    def create_request(self, method: str, path: str, body: Any = None) -> Any:
        ...

    def do(self, ctx: RequestContext, request: Any, target: Any = None) -> HTTPResponse:
        ...


class AccountClient:
    def __init__(self, http: HTTPTransport | None = None) -> None:
        self._http = http if http is not None else HTTPClient()

    def create(self, account: Account, ctx: RequestContext | None = None) -> Account:
        """
        Create an account. Only 201 Created counts as success.

        Returns:
            The account as echoed by the service.

        Raises:
            InternalServerError: For any successful status other than 201.
        """
        ctx = ctx or RequestContext.background()
        logger.info("Creating account %s", account.data.id)
        req = self._http.create_request("POST", ACCOUNTS_PATH, account)
        resp = self._http.do(ctx, req, Account)
        if resp.status_code != HTTPStatus.CREATED:
            raise InternalServerError(
                f"unexpected status {resp.status_code} creating account",
                status_code=resp.status_code,
            )
        return resp.data

    def fetch(self, account_id: str, ctx: RequestContext | None = None) -> Account:
        """Fetch one account by id. Transport errors propagate unchanged."""
        ctx = ctx or RequestContext.background()
        logger.info("Fetching account %s", account_id)
        req = self._http.create_request("GET", f"{ACCOUNTS_PATH}/{account_id}")
        return self._http.do(ctx, req, Account).data

    def list(self, pagination: Pagination, ctx: RequestContext | None = None) -> AccountList:
        ctx = ctx or RequestContext.background()
        logger.info("Listing accounts page=%s size=%s", pagination.page, pagination.size)
        req = self._http.create_request("GET", f"{ACCOUNTS_PATH}?{pagination.query_string()}")
        return self._http.do(ctx, req, AccountList).data

    def delete(self, account_id: str, version: int, ctx: RequestContext | None = None) -> None:
        """
        Delete an account at the version the caller last observed.

        The raw status decides first: 204 is success and 409 means the
        version is stale. Anything else falls back to the transport error.

        Raises:
            VersionConflictError: The account changed since `version`.
            ContentNotFoundError: No account with `account_id`.
        """
        ctx = ctx or RequestContext.background()
        logger.info("Deleting account %s at version %s", account_id, version)
        req = self._http.create_request("DELETE", f"{ACCOUNTS_PATH}/{account_id}?version={version}")
        try:
            resp = self._http.do(ctx, req)
        except StatusError as e:
            if e.status_code == HTTPStatus.CONFLICT:
                logger.warning("Version conflict deleting account %s at version %s", account_id, version)
                raise VersionConflictError("version conflict", status_code=e.status_code) from e
            raise

        if resp.status_code == HTTPStatus.NO_CONTENT:
            return
        logger.debug("Account %s deleted with status %s", account_id, resp.status_code)
