"""Shared test fixtures for repoxauth tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from repoxauth.core.config import load_canonical_config
from repoxauth.core.contracts.config import CanonicalConfig, KeepPolicy
from repoxauth.core.contracts.repository import Repository
from tests.fakes.lookup import RecordingLookup

LookupFactory = Callable[..., RecordingLookup]


@pytest.fixture
def make_lookup() -> LookupFactory:
    """Build a lookup from explicit property and environment mappings."""

    def _make(properties: dict[str, str] | None = None, environment: dict[str, str] | None = None) -> RecordingLookup:
        return RecordingLookup(properties=properties or {}, environment=environment or {})

    return _make


@pytest.fixture
def permissive_config() -> CanonicalConfig:
    """Config with the default endpoint and the permissive policy."""
    return load_canonical_config(RecordingLookup(), policy=KeepPolicy.PERMISSIVE)


@pytest.fixture
def strict_config() -> CanonicalConfig:
    """Config with an explicit endpoint and the strict policy."""
    lookup = RecordingLookup(environment={"ARTIFACTORY_URL": "https://repox.jfrog.io/artifactory"})
    return load_canonical_config(lookup, policy=KeepPolicy.STRICT)


@pytest.fixture
def repox_repo() -> Repository:
    return Repository.maven("sonarsource", "https://repox.jfrog.io/artifactory/sonarsource")


@pytest.fixture
def central_repo() -> Repository:
    return Repository.maven("MavenRepo", "https://repo.maven.apache.org/maven2/")
