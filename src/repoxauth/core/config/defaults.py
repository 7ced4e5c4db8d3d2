"""Fixed values for the Repox artifact server."""

from __future__ import annotations

from repoxauth.core.contracts.config import CredentialEnvVar

REPOX_HOST = "repox.jfrog.io"
DEFAULT_ARTIFACTORY_URL = "https://repox.jfrog.io/artifactory"
ARTIFACTORY_URL_ENV = "ARTIFACTORY_URL"
ARTIFACTORY_URL_PROPERTY = "artifactoryUrl"

REPOSITORY_PATH_ENV = "SONARSOURCE_REPOSITORY"
DEFAULT_REPOSITORY_PATH = "sonarsource"
REPOX_REPOSITORY_NAME = "Repox"

AUTH_TYPE = "header"
AUTH_HEADER_NAME = "Authorization"
AUTH_VALUE_SCHEME = "Bearer"

HEADER_VALUE_PROPERTY_SUFFIX = "AuthHeaderValue"
ACCESS_TOKEN_PROPERTY_SUFFIX = "AuthAccessToken"
PASSWORD_PROPERTY = "artifactoryPassword"

CREDENTIAL_ENV_VARS: tuple[CredentialEnvVar, ...] = (
    CredentialEnvVar(name="ARTIFACTORY_ACCESS_TOKEN"),
    CredentialEnvVar(name="ARTIFACTORY_DEPLOY_ACCESS_TOKEN"),
    CredentialEnvVar(name="ARTIFACTORY_PASSWORD", deprecated=True),
    CredentialEnvVar(name="ARTIFACTORY_PRIVATE_READER_TOKEN", deprecated=True),
    CredentialEnvVar(name="ARTIFACTORY_PRIVATE_PASSWORD", deprecated=True),
    CredentialEnvVar(name="ARTIFACTORY_DEPLOY_PASSWORD", deprecated=True),
)
