"""Repository set reconciliation."""

from __future__ import annotations

import logging
from collections.abc import MutableSequence

from repoxauth.core.config import defaults
from repoxauth.core.contracts.config import CanonicalConfig
from repoxauth.core.contracts.exceptions import ConfigError, EndpointNotConfiguredError
from repoxauth.core.contracts.repository import Repository
from repoxauth.core.contracts.result import ReconcileResult
from repoxauth.core.reconcile.policy import KEEP_POLICIES, is_canonical_host, points_at_canonical_url

_LOG = logging.getLogger(__name__)


class RepositoryReconciler:
    """Remove unauthorized repositories and make sure the canonical one exists.

    The whole plan (removals and the optional insertion) is computed before
    the list is touched, so a failing pass leaves the list as it was.
    Re-running on a reconciled list removes and adds nothing.
    """

    def __init__(self, config: CanonicalConfig) -> None:
        self._config = config
        self._keep = KEEP_POLICIES[config.keep_policy]

    def reconcile(self, repositories: MutableSequence[Repository]) -> ReconcileResult:
        survivors = [repo for repo in repositories if self._keep(repo, self._config)]
        doomed = [repo for repo in repositories if not any(repo is kept for kept in survivors)]
        addition = None
        if not any(self._is_canonical(repo) for repo in survivors):
            addition = self._canonical_repository()

        for repo in doomed:
            _remove_identity(repositories, repo)
            _LOG.warning("Removed '%s' repository: %s", repo.name, repo.describe())
        for repo in survivors:
            self._log_kept(repo)
        if addition is not None:
            repositories.append(addition)
            _LOG.info("Added '%s' repository: '%s'", addition.name, addition.url)

        return ReconcileResult(
            kept=[repo.name for repo in survivors],
            removed=[repo.name for repo in doomed],
            added=addition.name if addition is not None else None,
        )

    def _canonical_repository(self) -> Repository:
        url = self._config.canonical_repository_url
        if url is None:
            raise EndpointNotConfiguredError(
                env_var=defaults.ARTIFACTORY_URL_ENV,
                property_name=defaults.ARTIFACTORY_URL_PROPERTY,
            )
        repository = Repository.maven(self._config.repository_name, url)
        if not self._keep(repository, self._config):
            raise ConfigError(
                f"canonical repository url {url} is not on host {self._config.host} "
                f"and would not survive the {self._config.keep_policy} keep-policy"
            )
        return repository

    def _is_canonical(self, repo: Repository) -> bool:
        # A repository at the canonical url counts as present even off the canonical host.
        return is_canonical_host(repo, self._config) or points_at_canonical_url(repo, self._config)

    def _log_kept(self, repo: Repository) -> None:
        if not is_canonical_host(repo, self._config) and repo.normalized_url == self._config.canonical_repository_url:
            _LOG.debug("Kept '%s' repository pointing at the canonical url: %s", repo.name, repo.describe())
            return
        _LOG.info("Kept '%s' repository: %s", repo.name, repo.describe())


def _remove_identity(repositories: MutableSequence[Repository], target: Repository) -> None:
    # list.remove compares with ==, which would match an equal but distinct handle.
    for index, repo in enumerate(repositories):
        if repo is target:
            del repositories[index]
            return
