"""Lookup backed by plain mappings."""

from __future__ import annotations

import os
from collections.abc import Mapping

from repoxauth.core.contracts.lookup import LookupDomain, ValueLookup


class MappingLookup(ValueLookup):
    def __init__(
        self,
        properties: Mapping[str, str] | None = None,
        environment: Mapping[str, str] | None = None,
    ) -> None:
        self._properties = dict(properties or {})
        self._environment = os.environ if environment is None else environment

    def lookup(self, key: str, domain: LookupDomain) -> str | None:
        if domain is LookupDomain.PROPERTY:
            return self._properties.get(key)
        return self._environment.get(key)
