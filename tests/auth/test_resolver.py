import logging

import pytest

from repoxauth.core.auth.factory import create_credential_resolver, token_sources_for
from repoxauth.core.auth.sources.env import EnvTokenSource
from repoxauth.core.auth.sources.property import PropertyTokenSource
from repoxauth.core.contracts.config import CanonicalConfig
from repoxauth.core.contracts.lookup import LookupDomain
from tests.fakes.lookup import RecordingLookup


def test_sources_follow_declared_order(permissive_config: CanonicalConfig) -> None:
    sources = token_sources_for("Repox", permissive_config)

    assert sources[:3] == [
        PropertyTokenSource("RepoxAuthHeaderValue"),
        PropertyTokenSource("RepoxAuthAccessToken"),
        PropertyTokenSource("artifactoryPassword"),
    ]
    assert [source.name for source in sources[3:] if isinstance(source, EnvTokenSource)] == [
        "ARTIFACTORY_ACCESS_TOKEN",
        "ARTIFACTORY_DEPLOY_ACCESS_TOKEN",
        "ARTIFACTORY_PASSWORD",
        "ARTIFACTORY_PRIVATE_READER_TOKEN",
        "ARTIFACTORY_PRIVATE_PASSWORD",
        "ARTIFACTORY_DEPLOY_PASSWORD",
    ]


def test_repository_property_wins_over_environment(permissive_config: CanonicalConfig) -> None:
    lookup = RecordingLookup(
        properties={"RepoxAuthAccessToken": "from-property"},
        environment={"ARTIFACTORY_ACCESS_TOKEN": "from-env"},
    )

    assert create_credential_resolver(permissive_config, lookup).resolve("Repox") == "from-property"


def test_header_value_property_wins_over_access_token(permissive_config: CanonicalConfig) -> None:
    lookup = RecordingLookup(properties={"RepoxAuthHeaderValue": "header", "RepoxAuthAccessToken": "access"})

    assert create_credential_resolver(permissive_config, lookup).resolve("Repox") == "header"


def test_properties_are_scoped_by_repository_name(permissive_config: CanonicalConfig) -> None:
    lookup = RecordingLookup(properties={"OtherAuthAccessToken": "other", "artifactoryPassword": "generic"})

    assert create_credential_resolver(permissive_config, lookup).resolve("Repox") == "generic"


def test_resolution_stops_at_first_hit(permissive_config: CanonicalConfig) -> None:
    lookup = RecordingLookup(properties={"artifactoryPassword": "generic"})

    create_credential_resolver(permissive_config, lookup).resolve("Repox")

    assert lookup.calls == [
        ("RepoxAuthHeaderValue", LookupDomain.PROPERTY),
        ("RepoxAuthAccessToken", LookupDomain.PROPERTY),
        ("artifactoryPassword", LookupDomain.PROPERTY),
    ]


def test_blank_values_are_skipped(permissive_config: CanonicalConfig) -> None:
    lookup = RecordingLookup(
        properties={"RepoxAuthHeaderValue": "   "},
        environment={"ARTIFACTORY_ACCESS_TOKEN": "", "ARTIFACTORY_DEPLOY_ACCESS_TOKEN": "deploy"},
    )

    assert create_credential_resolver(permissive_config, lookup).resolve("Repox") == "deploy"


def test_returns_none_when_no_source_is_set(permissive_config: CanonicalConfig) -> None:
    lookup = RecordingLookup()

    assert create_credential_resolver(permissive_config, lookup).resolve("Repox") is None
    assert len(lookup.calls) == 3 + len(permissive_config.credential_env_vars)


def test_deprecated_variable_still_resolves_and_warns(
    permissive_config: CanonicalConfig, caplog: pytest.LogCaptureFixture
) -> None:
    lookup = RecordingLookup(environment={"ARTIFACTORY_PRIVATE_PASSWORD": "s3cret"})

    with caplog.at_level(logging.WARNING):
        token = create_credential_resolver(permissive_config, lookup).resolve("Repox")

    assert token == "s3cret"
    assert any("deprecated environment variable ARTIFACTORY_PRIVATE_PASSWORD" in msg for msg in caplog.messages)
    assert any("ARTIFACTORY_ACCESS_TOKEN" in msg for msg in caplog.messages)
    assert all("s3cret" not in msg for msg in caplog.messages)


def test_deprecated_variable_does_not_change_order(permissive_config: CanonicalConfig) -> None:
    lookup = RecordingLookup(
        environment={"ARTIFACTORY_PASSWORD": "deprecated", "ARTIFACTORY_DEPLOY_ACCESS_TOKEN": "current"}
    )

    assert create_credential_resolver(permissive_config, lookup).resolve("Repox") == "current"

    lookup = RecordingLookup(environment={"ARTIFACTORY_PASSWORD": "deprecated", "ARTIFACTORY_DEPLOY_PASSWORD": "later"})

    assert create_credential_resolver(permissive_config, lookup).resolve("Repox") == "deprecated"


def test_custom_env_var_list_is_honoured(permissive_config: CanonicalConfig) -> None:
    config = permissive_config.model_copy(update={"credential_env_vars": ()})
    lookup = RecordingLookup(environment={"ARTIFACTORY_ACCESS_TOKEN": "tok"})

    assert create_credential_resolver(config, lookup).resolve("Repox") is None

