"""Ordered credential resolution."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from repoxauth.core.auth.base import TokenSource
from repoxauth.core.contracts.lookup import ValueLookup

_LOG = logging.getLogger(__name__)

SourcesFactory = Callable[[str], Sequence[TokenSource]]


class CredentialResolver:
    """Resolve a repository token from the first source that holds one.

    Sources are queried strictly in order and querying stops at the first
    non-blank value.
    """

    def __init__(self, lookup: ValueLookup, sources_for: SourcesFactory, *, replacement: str | None = None) -> None:
        self._lookup = lookup
        self._sources_for = sources_for
        self._replacement = replacement

    def resolve(self, repository_name: str) -> str | None:
        for source in self._sources_for(repository_name):
            token = source.fetch(self._lookup)
            if token is None:
                continue
            if source.deprecated:
                _LOG.warning(
                    "Token for '%s' repository comes from deprecated %s; use %s instead",
                    repository_name,
                    source.describe(),
                    self._replacement or "a supported credential source",
                )
            else:
                _LOG.debug("Token for '%s' repository comes from %s", repository_name, source.describe())
            return token
        return None
