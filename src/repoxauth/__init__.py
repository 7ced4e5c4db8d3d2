"""Public API surface for repoxauth."""

__version__ = "1.0.0"

from repoxauth.core.auth import CredentialResolver, create_credential_resolver, format_header_value
from repoxauth.core.binding import AuthenticationBinder
from repoxauth.core.config import load_canonical_config
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
from repoxauth.core.engine import Checkpoint, LifecycleHost, RepositoryScope, RepoxConfigurator, install_hooks
from repoxauth.core.lookup import GradleLookup, MappingLookup
from repoxauth.core.reconcile import RepositoryReconciler

__all__ = [
    "AuthenticationBinder",
    "AuthenticationKind",
    "BindResult",
    "CanonicalConfig",
    "Checkpoint",
    "ConfigError",
    "CredentialEnvVar",
    "CredentialResolver",
    "CredentialsConflictError",
    "EndpointNotConfiguredError",
    "GradleLookup",
    "HeaderCredentials",
    "KeepPolicy",
    "LifecycleHost",
    "LookupDomain",
    "MappingLookup",
    "PassResult",
    "PasswordCredentials",
    "PropertiesFileError",
    "ReconcileResult",
    "Repository",
    "RepositoryKind",
    "RepositoryReconciler",
    "RepositoryScope",
    "RepoxAuthError",
    "RepoxConfigurator",
    "ValueLookup",
    "__version__",
    "create_credential_resolver",
    "format_header_value",
    "install_hooks",
    "load_canonical_config",
]
