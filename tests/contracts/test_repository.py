"""Tests for repository handle contracts."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from repoxauth.core.contracts.exceptions import CredentialsConflictError
from repoxauth.core.contracts.repository import (
    AuthenticationKind,
    HeaderCredentials,
    PasswordCredentials,
    Repository,
    RepositoryKind,
)


class TestRepositoryShape:
    def test_url_kinds_require_url(self) -> None:
        with pytest.raises(ValidationError):
            Repository(kind=RepositoryKind.MAVEN, name="r")

    def test_flat_dir_rejects_url(self) -> None:
        with pytest.raises(ValidationError):
            Repository(kind=RepositoryKind.FLAT_DIR, name="r", url="file:///libs")

    def test_derived_url_parts(self) -> None:
        repo = Repository.maven("r", "HTTPS://Repox.JFrog.io/artifactory/sonarsource/")

        assert repo.host == "repox.jfrog.io"
        assert repo.scheme == "https"
        assert repo.normalized_url == "HTTPS://Repox.JFrog.io/artifactory/sonarsource"

    def test_flat_dir_has_no_url_parts(self) -> None:
        repo = Repository.flat_dir()

        assert repo.host is None
        assert repo.scheme is None
        assert repo.describe() == "kind: flat-dir"

    @pytest.mark.parametrize(
        ("repo", "expected"),
        [
            (Repository.maven("m", "https://h/"), True),
            (Repository.ivy("i", "https://h/"), True),
            (Repository.maven_local("file:///m2"), False),
            (Repository.flat_dir(), False),
        ],
    )
    def test_header_auth_capability(self, repo: Repository, expected: bool) -> None:
        assert repo.supports_header_auth is expected


class TestRepositoryMutation:
    def test_enable_authentication_is_idempotent(self) -> None:
        repo = Repository.maven("m", "https://h/")

        repo.enable_authentication(AuthenticationKind.HEADER)
        repo.enable_authentication(AuthenticationKind.HEADER)

        assert repo.authentication == [AuthenticationKind.HEADER]
        assert repo.has_header_authentication

    def test_header_credentials_replace_header_credentials(self) -> None:
        repo = Repository.maven("m", "https://h/")
        repo.set_header_credentials(HeaderCredentials(name="Authorization", value="Bearer a"))

        repo.set_header_credentials(HeaderCredentials(name="Authorization", value="Bearer b"))

        assert repo.credentials == HeaderCredentials(name="Authorization", value="Bearer b")

    def test_header_credentials_conflict_with_password(self) -> None:
        repo = Repository.maven("m", "https://h/")
        repo.credentials = PasswordCredentials(username="u", password="p")

        with pytest.raises(CredentialsConflictError, match="PasswordCredentials"):
            repo.set_header_credentials(HeaderCredentials(name="Authorization", value="Bearer a"))


def test_repository_round_trips_through_json() -> None:
    payload = {
        "kind": "maven",
        "name": "Repox",
        "url": "https://repox.jfrog.io/artifactory/sonarsource",
        "credentials": {"name": "Authorization", "value": "Bearer t"},
        "authentication": ["header"],
    }

    repo = Repository.model_validate(payload)

    assert isinstance(repo.credentials, HeaderCredentials)
    assert repo.has_header_authentication
