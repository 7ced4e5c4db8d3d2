"""Credential resolver factory."""

from __future__ import annotations

from repoxauth.core.auth.base import TokenSource
from repoxauth.core.auth.resolver import CredentialResolver
from repoxauth.core.auth.sources.env import EnvTokenSource
from repoxauth.core.auth.sources.property import PropertyTokenSource
from repoxauth.core.config import defaults
from repoxauth.core.contracts.config import CanonicalConfig
from repoxauth.core.contracts.lookup import ValueLookup


def token_sources_for(repository_name: str, config: CanonicalConfig) -> list[TokenSource]:
    sources: list[TokenSource] = [
        PropertyTokenSource(f"{repository_name}{defaults.HEADER_VALUE_PROPERTY_SUFFIX}"),
        PropertyTokenSource(f"{repository_name}{defaults.ACCESS_TOKEN_PROPERTY_SUFFIX}"),
        PropertyTokenSource(defaults.PASSWORD_PROPERTY),
    ]
    sources.extend(EnvTokenSource(name=env.name, deprecated=env.deprecated) for env in config.credential_env_vars)
    return sources


def create_credential_resolver(config: CanonicalConfig, lookup: ValueLookup) -> CredentialResolver:
    replacement = next((env.name for env in config.credential_env_vars if not env.deprecated), None)
    return CredentialResolver(
        lookup,
        lambda repository_name: token_sources_for(repository_name, config),
        replacement=replacement,
    )
