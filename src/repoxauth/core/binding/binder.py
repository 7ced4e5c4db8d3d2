"""Bearer header authentication binding."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from repoxauth.core.auth.header import format_header_value
from repoxauth.core.auth.resolver import CredentialResolver
from repoxauth.core.contracts.config import CanonicalConfig
from repoxauth.core.contracts.exceptions import CredentialsConflictError
from repoxauth.core.contracts.repository import AuthenticationKind, HeaderCredentials, Repository
from repoxauth.core.contracts.result import BindResult
from repoxauth.core.reconcile.policy import is_canonical_host

_LOG = logging.getLogger(__name__)


class AuthenticationBinder:
    def __init__(self, config: CanonicalConfig, resolver: CredentialResolver) -> None:
        self._config = config
        self._resolver = resolver

    def bind(self, repositories: Iterable[Repository]) -> BindResult:
        """Attach bearer header authentication to every canonical-host repository.

        Repositories that already use header authentication are left alone.
        Credentials are set first and the header mechanism is then enabled;
        both steps are needed for the host to send the header.
        """
        result = BindResult()
        for repo in repositories:
            if not is_canonical_host(repo, self._config):
                continue
            if not repo.supports_header_auth:
                result.unsupported.append(repo.name)
                continue
            if repo.has_header_authentication:
                result.already_authenticated.append(repo.name)
                continue

            token = self._resolver.resolve(repo.name)
            if token is None:
                _LOG.info("No credentials found for '%s' repository, leaving it unauthenticated", repo.name)
                result.missing_credentials.append(repo.name)
                continue

            credentials = HeaderCredentials(
                name=self._config.header_name,
                value=format_header_value(token, self._config.auth_scheme),
            )
            try:
                repo.set_header_credentials(credentials)
            except CredentialsConflictError as exc:
                _LOG.debug("Skipped '%s' auth for '%s' repository: %s", self._config.auth_type, repo.name, exc)
                result.conflicting.append(repo.name)
                continue
            repo.enable_authentication(AuthenticationKind.HEADER)
            _LOG.debug("Set '%s' auth for '%s' repository", self._config.auth_type, repo.name)
            result.authenticated.append(repo.name)
        return result
