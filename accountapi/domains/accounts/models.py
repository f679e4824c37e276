"""
JSON:API account resources using Pydantic v2.

Single resources travel as `{"data": {...}}`; lists as
`{"data": [...], "links": {...}}`. Every dump uses `exclude_unset`, so a
field is written only when it was present in the decoded source or passed
explicitly by the caller. Decoding then encoding keeps the same keys.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Resource(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_unset=True)


class PrivateIdentification(_Resource):
    """Details of an individual account owner."""

    birth_date: Optional[str] = None
    birth_country: Optional[str] = None
    identification: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None


class Actor(_Resource):
    name: Optional[list[str]] = None
    birth_date: Optional[str] = None
    residency: Optional[str] = None


class OrganisationIdentification(_Resource):
    """Details of an owning organisation and the people acting for it."""

    identification: Optional[str] = None
    actors: Optional[list[Actor]] = None
    address: Optional[list[str]] = None
    city: Optional[str] = None
    country: Optional[str] = None


class Attributes(_Resource):
    country: str
    base_currency: Optional[str] = None
    account_number: Optional[str] = None
    bank_id: Optional[str] = None
    bank_id_code: Optional[str] = None
    bic: Optional[str] = None
    iban: Optional[str] = None
    name: Optional[list[str]] = None
    alternative_names: Optional[list[str]] = None
    account_classification: Optional[str] = None
    joint_account: Optional[bool] = None
    account_matching_opt_out: Optional[bool] = None
    secondary_identification: Optional[str] = None
    switched: Optional[bool] = None
    private_identification: Optional[PrivateIdentification] = None
    organisation_identification: Optional[OrganisationIdentification] = None
    status: Optional[str] = None


class ResourceIdentifier(_Resource):
    """Identity-only pointer to another resource."""

    type: str
    id: str


class RelationshipData(_Resource):
    data: list[ResourceIdentifier] = []


class Relationships(_Resource):
    master_account: Optional[RelationshipData] = None
    account_events: Optional[RelationshipData] = None


class AccountData(_Resource):
    type: str = "accounts"
    id: str
    organisation_id: str
    version: int = 0
    attributes: Optional[Attributes] = None
    relationships: Optional[Relationships] = None

    def model_post_init(self, __context: Any) -> None:
        # type and version are always written, even when left at their defaults
        self.__pydantic_fields_set__.update({"type", "version"})


class Account(_Resource):
    """Single account envelope: `{"data": AccountData}`."""

    data: AccountData

    @classmethod
    def from_json(cls, raw: str | bytes) -> Account:
        return cls.model_validate_json(raw)


class LinkList(_Resource):
    """Pagination links returned with a page of accounts."""

    first: Optional[str] = None
    last: Optional[str] = None
    self_: Optional[str] = Field(default=None, alias="self")
    next: Optional[str] = None
    prev: Optional[str] = None


class AccountList(_Resource):
    data: list[AccountData] = []
    links: Optional[LinkList] = None

    @property
    def accounts(self) -> list[AccountData]:
        return self.data

    @classmethod
    def from_json(cls, raw: str | bytes) -> AccountList:
        return cls.model_validate_json(raw)
