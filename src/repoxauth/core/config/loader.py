"""Canonical configuration loading."""

from __future__ import annotations

import logging
from urllib.parse import urlparse

from repoxauth.core.config import defaults
from repoxauth.core.contracts.config import CanonicalConfig, KeepPolicy
from repoxauth.core.contracts.exceptions import ConfigError
from repoxauth.core.contracts.lookup import LookupDomain, ValueLookup

_LOG = logging.getLogger(__name__)


def _non_blank(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()


def _resolve_base_endpoint(lookup: ValueLookup, policy: KeepPolicy) -> tuple[str | None, str]:
    override = _non_blank(lookup.lookup(defaults.ARTIFACTORY_URL_ENV, LookupDomain.ENVIRONMENT))
    if override is not None:
        return override, f"{defaults.ARTIFACTORY_URL_ENV} environment variable"
    if policy is KeepPolicy.STRICT:
        value = _non_blank(lookup.lookup(defaults.ARTIFACTORY_URL_PROPERTY, LookupDomain.PROPERTY))
        return value, f"'{defaults.ARTIFACTORY_URL_PROPERTY}' property"
    return defaults.DEFAULT_ARTIFACTORY_URL, "default endpoint"


def _validate_endpoint(endpoint: str, source: str) -> None:
    parsed = urlparse(endpoint)
    if not parsed.scheme or not parsed.hostname:
        raise ConfigError(f"{source} must be an absolute URL with a scheme and host, got: {endpoint!r}")


def load_canonical_config(lookup: ValueLookup, *, policy: KeepPolicy = KeepPolicy.PERMISSIVE) -> CanonicalConfig:
    """Build the configuration for one pass from the current lookup state.

    Nothing is cached: every call re-reads the override variables. The host is
    always the Repox host, even when the endpoint is overridden. Under the
    strict policy ``base_endpoint`` stays ``None`` when no override is set;
    the reconciler fails only if it actually needs the canonical URL.
    """
    base_endpoint, source = _resolve_base_endpoint(lookup, policy)
    if base_endpoint is not None:
        _validate_endpoint(base_endpoint, source)
    repository_path = (
        _non_blank(lookup.lookup(defaults.REPOSITORY_PATH_ENV, LookupDomain.ENVIRONMENT))
        or defaults.DEFAULT_REPOSITORY_PATH
    )
    config = CanonicalConfig(
        host=defaults.REPOX_HOST,
        base_endpoint=base_endpoint,
        repository_path=repository_path.strip("/"),
        repository_name=defaults.REPOX_REPOSITORY_NAME,
        header_name=defaults.AUTH_HEADER_NAME,
        auth_scheme=defaults.AUTH_VALUE_SCHEME,
        auth_type=defaults.AUTH_TYPE,
        credential_env_vars=defaults.CREDENTIAL_ENV_VARS,
        keep_policy=policy,
    )
    _LOG.debug("Loaded %s config, canonical repository: %s", policy, config.canonical_repository_url)
    return config
