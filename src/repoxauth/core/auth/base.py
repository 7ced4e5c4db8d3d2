"""Token source interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod

from repoxauth.core.contracts.lookup import ValueLookup


class TokenSource(ABC):
    deprecated: bool = False

    @abstractmethod
    def fetch(self, lookup: ValueLookup) -> str | None:
        """Return the token held by this source, or ``None`` when unset or blank."""

    @abstractmethod
    def describe(self) -> str:
        """Human-readable name of the source, used in log messages."""
