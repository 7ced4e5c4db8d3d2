"""Keep-policies deciding which repositories survive reconciliation."""

from __future__ import annotations

from collections.abc import Callable

from repoxauth.core.contracts.config import CanonicalConfig, KeepPolicy
from repoxauth.core.contracts.repository import Repository

KeepPredicate = Callable[[Repository, CanonicalConfig], bool]

LOCAL_SCHEMES = frozenset({"file"})


def is_canonical_host(repository: Repository, config: CanonicalConfig) -> bool:
    return repository.host == config.host


def is_local(repository: Repository) -> bool:
    # Repositories without a URL (flat directories) are local sources.
    return repository.url is None or repository.scheme in LOCAL_SCHEMES


def points_at_canonical_url(repository: Repository, config: CanonicalConfig) -> bool:
    canonical_url = config.canonical_repository_url
    return canonical_url is not None and repository.normalized_url == canonical_url


def keep_permissive(repository: Repository, config: CanonicalConfig) -> bool:
    return (
        is_canonical_host(repository, config)
        or is_local(repository)
        or points_at_canonical_url(repository, config)
    )


def keep_strict(repository: Repository, config: CanonicalConfig) -> bool:
    return is_canonical_host(repository, config)


KEEP_POLICIES: dict[KeepPolicy, KeepPredicate] = {
    KeepPolicy.PERMISSIVE: keep_permissive,
    KeepPolicy.STRICT: keep_strict,
}
