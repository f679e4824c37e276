"""Account resources and listing parameters."""

from accountapi.domains.accounts.models import (
    Account,
    AccountData,
    AccountList,
    Actor,
    Attributes,
    LinkList,
    OrganisationIdentification,
    PrivateIdentification,
    RelationshipData,
    Relationships,
    ResourceIdentifier,
)
from accountapi.domains.accounts.pagination import Pagination, new_pagination

__all__ = [
    "Account",
    "AccountData",
    "AccountList",
    "Actor",
    "Attributes",
    "LinkList",
    "OrganisationIdentification",
    "Pagination",
    "PrivateIdentification",
    "RelationshipData",
    "Relationships",
    "ResourceIdentifier",
    "new_pagination",
]
