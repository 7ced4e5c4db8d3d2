"""One reconciliation pass over a repository list."""

from __future__ import annotations

from collections.abc import MutableSequence

from repoxauth.core.auth.factory import create_credential_resolver
from repoxauth.core.binding.binder import AuthenticationBinder
from repoxauth.core.config.loader import load_canonical_config
from repoxauth.core.contracts.config import KeepPolicy
from repoxauth.core.contracts.lookup import ValueLookup
from repoxauth.core.contracts.repository import Repository
from repoxauth.core.contracts.result import PassResult
from repoxauth.core.reconcile.reconciler import RepositoryReconciler


class RepoxConfigurator:
    """Reconcile a repository list, then bind authentication to it.

    Holds only the lookup and the keep-policy; configuration is re-read on
    every call, so any number of calls on the same list converge.
    """

    def __init__(self, lookup: ValueLookup, *, policy: KeepPolicy = KeepPolicy.PERMISSIVE) -> None:
        self._lookup = lookup
        self._policy = policy

    def configure(
        self,
        repositories: MutableSequence[Repository],
        *,
        checkpoint: str | None = None,
        label: str | None = None,
    ) -> PassResult:
        config = load_canonical_config(self._lookup, policy=self._policy)
        reconcile_result = RepositoryReconciler(config).reconcile(repositories)
        resolver = create_credential_resolver(config, self._lookup)
        bind_result = AuthenticationBinder(config, resolver).bind(repositories)
        return PassResult(checkpoint=checkpoint, label=label, reconcile=reconcile_result, bind=bind_result)
