"""Core contracts-domain exports."""

from repoxauth.core.contracts.config import CanonicalConfig, CredentialEnvVar, KeepPolicy
from repoxauth.core.contracts.exceptions import (
    ConfigError,
    CredentialsConflictError,
    EndpointNotConfiguredError,
    PropertiesFileError,
    RepoxAuthError,
)
from repoxauth.core.contracts.lookup import LookupDomain, ValueLookup
from repoxauth.core.contracts.repository import (
    AuthenticationKind,
    HeaderCredentials,
    PasswordCredentials,
    Repository,
    RepositoryKind,
)
from repoxauth.core.contracts.result import BindResult, PassResult, ReconcileResult

__all__ = [
    "AuthenticationKind",
    "BindResult",
    "CanonicalConfig",
    "ConfigError",
    "CredentialEnvVar",
    "CredentialsConflictError",
    "EndpointNotConfiguredError",
    "HeaderCredentials",
    "KeepPolicy",
    "LookupDomain",
    "PassResult",
    "PasswordCredentials",
    "PropertiesFileError",
    "ReconcileResult",
    "Repository",
    "RepositoryKind",
    "RepoxAuthError",
    "ValueLookup",
]
