"""Canonical repository configuration contracts."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class KeepPolicy(StrEnum):
    """Which existing repositories survive reconciliation.

    ``PERMISSIVE`` also keeps local file repositories and repositories already
    pointing at the canonical URL under another name. ``STRICT`` keeps only
    repositories on the canonical host.
    """

    PERMISSIVE = "permissive"
    STRICT = "strict"


class CredentialEnvVar(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    deprecated: bool = False


class CanonicalConfig(BaseModel):
    """Settings for one reconciliation pass.

    Attributes:
        host: Trusted artifact server host name.
        base_endpoint: Artifact server base URL; ``None`` when the strict
            policy found no override.
        repository_path: Path segment appended to ``base_endpoint``.
        repository_name: Name given to an inserted canonical repository.
        header_name: HTTP header carrying the credential.
        auth_scheme: Scheme prefixed to every token.
        auth_type: Name of the authentication mechanism enabled on a repository.
        credential_env_vars: Environment variables tried for a token, in order.
        keep_policy: Policy deciding which repositories are kept.
    """

    model_config = ConfigDict(frozen=True)

    host: str
    base_endpoint: str | None
    repository_path: str
    repository_name: str
    header_name: str
    auth_scheme: str
    auth_type: str
    credential_env_vars: tuple[CredentialEnvVar, ...]
    keep_policy: KeepPolicy = KeepPolicy.PERMISSIVE

    @property
    def canonical_repository_url(self) -> str | None:
        if self.base_endpoint is None:
            return None
        return f"{self.base_endpoint.rstrip('/')}/{self.repository_path}"
