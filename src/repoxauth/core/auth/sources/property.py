"""Build property token source."""

from __future__ import annotations

from dataclasses import dataclass

from repoxauth.core.auth.base import TokenSource
from repoxauth.core.contracts.lookup import LookupDomain, ValueLookup


@dataclass(frozen=True)
class PropertyTokenSource(TokenSource):
    key: str

    def fetch(self, lookup: ValueLookup) -> str | None:
        value = (lookup.lookup(self.key, LookupDomain.PROPERTY) or "").strip()
        return value or None

    def describe(self) -> str:
        return f"property '{self.key}'"
