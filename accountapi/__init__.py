"""Client library for the account-management REST service."""

from accountapi.domains.accounts import (
    Account,
    AccountData,
    AccountList,
    Actor,
    Attributes,
    LinkList,
    OrganisationIdentification,
    Pagination,
    PrivateIdentification,
    RelationshipData,
    Relationships,
    ResourceIdentifier,
    new_pagination,
)
from accountapi.domains.errors import (
    AccountAPIError,
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
    VersionConflictError,
)
from accountapi.infrastructure.http import HTTPClient, HTTPResponse, RequestContext
from accountapi.services import AccountClient

__all__ = [
    "Account",
    "AccountAPIError",
    "AccountClient",
    "AccountData",
    "AccountList",
    "Actor",
    "Attributes",
    "BadRequestError",
    "ContentNotFoundError",
    "DecodeError",
    "HTTPClient",
    "HTTPResponse",
    "InternalServerError",
    "LinkList",
    "NotAuthorizedError",
    "OrganisationIdentification",
    "Pagination",
    "PrivateIdentification",
    "RelationshipData",
    "Relationships",
    "RequestCancelledError",
    "RequestConstructionError",
    "RequestContext",
    "RequestTimeoutError",
    "ResourceIdentifier",
    "StatusError",
    "TransportError",
    "VersionConflictError",
    "new_pagination",
]
