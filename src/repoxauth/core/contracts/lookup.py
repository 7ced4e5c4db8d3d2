"""Property and environment lookup contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import StrEnum


class LookupDomain(StrEnum):
    PROPERTY = "property"
    ENVIRONMENT = "environment"


class ValueLookup(ABC):
    @abstractmethod
    def lookup(self, key: str, domain: LookupDomain) -> str | None:
        """Return the raw value stored under ``key`` in ``domain``, if any."""
