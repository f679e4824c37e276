"""
Tests for account resources: decoding the full wire shape, omitted optional
fields and decode/encode stability.
"""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from accountapi.domains.accounts import (
    Account,
    AccountData,
    AccountList,
    Attributes,
    LinkList,
    Pagination,
    new_pagination,
)

RAW_ACCOUNT = """
{
  "data": {
    "type": "accounts",
    "id": "ad27e265-9605-4b4b-a0e5-3003ea9cc4dc",
    "organisation_id": "eb0bd6f5-c3f5-44b2-b677-acd23cdde73c",
    "version": 0,
    "attributes": {
      "country": "GB",
      "base_currency": "GBP",
      "account_number": "41426819",
      "bank_id": "400300",
      "bank_id_code": "GBDSC",
      "bic": "NWBKGB22",
      "iban": "GB11NWBK40030041426819",
      "name": ["Samantha Holder"],
      "alternative_names": ["Sam Holder"],
      "account_classification": "Personal",
      "joint_account": false,
      "account_matching_opt_out": false,
      "secondary_identification": "A1B2C3D4",
      "switched": false,
      "private_identification": {
        "birth_date": "2017-07-23",
        "birth_country": "GB",
        "identification": "13YH458762",
        "address": "[10 Avenue des Champs]",
        "city": "London",
        "country": "GB"
      },
      "organisation_identification": {
        "identification": "123654",
        "actors": [
          {"name": ["Jeff Page"], "birth_date": "1970-01-01", "residency": "GB"}
        ],
        "address": ["10 Avenue des Champs"],
        "city": "London",
        "country": "GB"
      },
      "status": "confirmed"
    },
    "relationships": {
      "master_account": {
        "data": [{"type": "accounts", "id": "a52d13a4-f435-4c00-cfad-f5e7ac5972df"}]
      },
      "account_events": {
        "data": [
          {"type": "account_events", "id": "c1023677-70ee-417a-9a6a-e211241f1e9c"},
          {"type": "account_events", "id": "437284fa-62a6-4f1d-893d-2959c9780288"}
        ]
      }
    }
  }
}
"""

RAW_LIST = """
{
  "data": [
    {"type": "accounts", "id": "u1", "organisation_id": "o1", "version": 0,
     "attributes": {"country": "GB"}},
    {"type": "accounts", "id": "u2", "organisation_id": "o1", "version": 3},
    {"type": "accounts", "id": "u3", "organisation_id": "o2", "version": 1}
  ],
  "links": {
    "first": "/v1/organisation/accounts?page%5Bnumber%5D=first",
    "last": "/v1/organisation/accounts?page%5Bnumber%5D=last",
    "self": "/v1/organisation/accounts"
  }
}
"""


@pytest.fixture
def account() -> Account:
    return Account.from_json(RAW_ACCOUNT)


def test_decode_account_data(account: Account) -> None:
    d = account.data
    assert d.type == "accounts"
    assert d.id == "ad27e265-9605-4b4b-a0e5-3003ea9cc4dc"
    assert d.organisation_id == "eb0bd6f5-c3f5-44b2-b677-acd23cdde73c"
    assert d.version == 0


def test_decode_attributes(account: Account) -> None:
    attr = account.data.attributes
    assert attr is not None
    assert attr.country == "GB"
    assert attr.base_currency == "GBP"
    assert attr.account_number == "41426819"
    assert attr.bank_id == "400300"
    assert attr.bank_id_code == "GBDSC"
    assert attr.bic == "NWBKGB22"
    assert attr.iban == "GB11NWBK40030041426819"
    assert attr.name == ["Samantha Holder"]
    assert attr.alternative_names == ["Sam Holder"]
    assert attr.account_classification == "Personal"
    assert attr.joint_account is False
    assert attr.account_matching_opt_out is False
    assert attr.secondary_identification == "A1B2C3D4"
    assert attr.switched is False
    assert attr.status == "confirmed"


def test_decode_private_identification(account: Account) -> None:
    pid = account.data.attributes.private_identification
    assert pid is not None
    assert pid.birth_date == "2017-07-23"
    assert pid.birth_country == "GB"
    assert pid.identification == "13YH458762"
    assert pid.address == "[10 Avenue des Champs]"
    assert pid.city == "London"
    assert pid.country == "GB"


def test_decode_organisation_identification(account: Account) -> None:
    org = account.data.attributes.organisation_identification
    assert org is not None
    assert org.identification == "123654"
    assert len(org.actors) == 1
    assert org.actors[0].name == ["Jeff Page"]
    assert org.actors[0].birth_date == "1970-01-01"
    assert org.actors[0].residency == "GB"
    assert org.address == ["10 Avenue des Champs"]
    assert org.city == "London"
    assert org.country == "GB"


def test_decode_relationships(account: Account) -> None:
    rel = account.data.relationships
    assert rel is not None
    assert [(r.type, r.id) for r in rel.master_account.data] == [
        ("accounts", "a52d13a4-f435-4c00-cfad-f5e7ac5972df"),
    ]
    assert [r.id for r in rel.account_events.data] == [
        "c1023677-70ee-417a-9a6a-e211241f1e9c",
        "437284fa-62a6-4f1d-893d-2959c9780288",
    ]


def test_full_account_survives_decode_encode_decode(account: Account) -> None:
    again = Account.from_json(account.to_json())
    assert again == account
    assert account.to_dict() == json.loads(RAW_ACCOUNT)


def test_unset_optional_attributes_are_omitted() -> None:
    acc = Account(
        data=AccountData(
            id="u1",
            organisation_id="o1",
            attributes=Attributes(country="ES", base_currency="EUR"),
        )
    )
    out = acc.to_dict()
    assert out == {
        "data": {
            "type": "accounts",
            "id": "u1",
            "organisation_id": "o1",
            "version": 0,
            "attributes": {"country": "ES", "base_currency": "EUR"},
        }
    }


def test_false_flags_present_in_source_are_kept() -> None:
    raw = '{"data": {"type": "accounts", "id": "u1", "organisation_id": "o1", "version": 2,' \
          ' "attributes": {"country": "GB", "switched": false}}}'
    out = Account.from_json(raw).to_dict()
    assert out["data"]["attributes"] == {"country": "GB", "switched": False}
    assert out["data"]["version"] == 2


def test_country_is_required() -> None:
    with pytest.raises(ValidationError):
        Attributes()


def test_accounts_are_immutable(account: Account) -> None:
    with pytest.raises(ValidationError):
        account.data.id = "other"


def test_decode_account_list_keeps_order_and_links() -> None:
    lst = AccountList.from_json(RAW_LIST)
    assert [a.id for a in lst.accounts] == ["u1", "u2", "u3"]
    assert lst.links is not None
    assert lst.links.self_ == "/v1/organisation/accounts"
    assert lst.links.first.endswith("first")
    assert lst.to_dict() == json.loads(RAW_LIST)


def test_link_list_accepts_self_by_alias() -> None:
    links = LinkList.model_validate({"self": "/here"})
    assert links.self_ == "/here"
    assert links.to_dict() == {"self": "/here"}


def test_pagination_query_string() -> None:
    assert Pagination(page=1, size=10).query_string() == "page[number]=1&page[size]=10"
    assert new_pagination(0, 100) == Pagination(page=0, size=100)
