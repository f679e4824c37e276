"""Request-side pagination for account listing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Pagination:
    """Zero-based page number and page size. Values are passed through as given."""

    page: int
    size: int

    def query_string(self) -> str:
        return f"page[number]={self.page}&page[size]={self.size}"


def new_pagination(page: int, size: int) -> Pagination:
    return Pagination(page=page, size=size)
