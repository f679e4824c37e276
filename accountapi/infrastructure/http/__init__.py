"""HTTP transport: request building, execution context, status classification."""

from accountapi.infrastructure.http.client import (
    JSON_API_CONTENT_TYPE,
    STATUS_ERRORS,
    HTTPClient,
    HTTPResponse,
    classify_status,
)
from accountapi.infrastructure.http.context import RequestContext

__all__ = [
    "JSON_API_CONTENT_TYPE",
    "STATUS_ERRORS",
    "HTTPClient",
    "HTTPResponse",
    "RequestContext",
    "classify_status",
]
