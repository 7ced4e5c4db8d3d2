"""Environment variable token source."""

from __future__ import annotations

from dataclasses import dataclass

from repoxauth.core.auth.base import TokenSource
from repoxauth.core.contracts.lookup import LookupDomain, ValueLookup


@dataclass(frozen=True)
class EnvTokenSource(TokenSource):
    name: str
    deprecated: bool = False

    def fetch(self, lookup: ValueLookup) -> str | None:
        value = (lookup.lookup(self.name, LookupDomain.ENVIRONMENT) or "").strip()
        return value or None

    def describe(self) -> str:
        return f"environment variable {self.name}"
