"""Repository handle contracts.

A :class:`Repository` models one entry of the host's repository list. The kind
set is closed, and capabilities are derived from the kind rather than from
runtime type inspection.
"""

from __future__ import annotations

from enum import StrEnum
from urllib.parse import urlparse

from pydantic import BaseModel, Field, model_validator

from repoxauth.core.contracts.exceptions import CredentialsConflictError


class RepositoryKind(StrEnum):
    MAVEN = "maven"
    IVY = "ivy"
    MAVEN_LOCAL = "maven-local"
    FLAT_DIR = "flat-dir"


class AuthenticationKind(StrEnum):
    HEADER = "header"
    BASIC = "basic"
    DIGEST = "digest"


_URL_KINDS = frozenset({RepositoryKind.MAVEN, RepositoryKind.IVY, RepositoryKind.MAVEN_LOCAL})
_HEADER_AUTH_KINDS = frozenset({RepositoryKind.MAVEN, RepositoryKind.IVY})


class HeaderCredentials(BaseModel):
    name: str
    value: str


class PasswordCredentials(BaseModel):
    username: str | None = None
    password: str | None = None


class Repository(BaseModel):
    kind: RepositoryKind
    name: str
    url: str | None = None
    credentials: HeaderCredentials | PasswordCredentials | None = None
    authentication: list[AuthenticationKind] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_url_matches_kind(self) -> Repository:
        if self.kind in _URL_KINDS and not self.url:
            raise ValueError(f"{self.kind} repository '{self.name}' requires a url")
        if self.kind not in _URL_KINDS and self.url is not None:
            raise ValueError(f"{self.kind} repository '{self.name}' does not take a url")
        return self

    @classmethod
    def maven(cls, name: str, url: str) -> Repository:
        return cls(kind=RepositoryKind.MAVEN, name=name, url=url)

    @classmethod
    def ivy(cls, name: str, url: str) -> Repository:
        return cls(kind=RepositoryKind.IVY, name=name, url=url)

    @classmethod
    def maven_local(cls, url: str, name: str = "MavenLocal") -> Repository:
        return cls(kind=RepositoryKind.MAVEN_LOCAL, name=name, url=url)

    @classmethod
    def flat_dir(cls, name: str = "flatDir") -> Repository:
        return cls(kind=RepositoryKind.FLAT_DIR, name=name)

    @property
    def host(self) -> str | None:
        if self.url is None:
            return None
        return urlparse(self.url).hostname

    @property
    def scheme(self) -> str | None:
        if self.url is None:
            return None
        return urlparse(self.url).scheme.lower()

    @property
    def normalized_url(self) -> str | None:
        if self.url is None:
            return None
        return self.url.rstrip("/")

    @property
    def supports_header_auth(self) -> bool:
        return self.kind in _HEADER_AUTH_KINDS

    @property
    def has_header_authentication(self) -> bool:
        return AuthenticationKind.HEADER in self.authentication

    def describe(self) -> str:
        return self.normalized_url or f"kind: {self.kind}"

    def set_header_credentials(self, credentials: HeaderCredentials) -> None:
        if self.credentials is not None and not isinstance(self.credentials, HeaderCredentials):
            raise CredentialsConflictError(
                f"repository '{self.name}' already has {type(self.credentials).__name__}"
            )
        self.credentials = credentials

    def enable_authentication(self, kind: AuthenticationKind) -> None:
        if kind not in self.authentication:
            self.authentication.append(kind)
