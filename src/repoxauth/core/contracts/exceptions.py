"""Exception hierarchy for repoxauth.

All repoxauth exceptions inherit from :class:`RepoxAuthError`, so a host can
catch any library failure with a single ``except`` clause while still handling
specific failure modes.
"""

from __future__ import annotations

from pathlib import Path


class RepoxAuthError(Exception):
    """Base exception for all repoxauth errors."""


class ConfigError(RepoxAuthError):
    """Configuration loading or validation failure."""


class EndpointNotConfiguredError(ConfigError):
    """The artifact server endpoint cannot be determined.

    Raised by the strict keep-policy when the canonical repository has to be
    inserted but neither the override environment variable nor the fallback
    property is set. Not retryable within one build.

    Attributes:
        env_var: Name of the environment variable that was looked up.
        property_name: Name of the build property that was looked up.
    """

    def __init__(self, *, env_var: str, property_name: str) -> None:
        self.env_var = env_var
        self.property_name = property_name
        super().__init__(
            "Repox endpoint is not configured: "
            f"set the {env_var} environment variable or the '{property_name}' property"
        )


class PropertiesFileError(ConfigError):
    """A properties file exists but cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"failed reading properties file {path}: {reason}")


class CredentialsConflictError(RepoxAuthError):
    """A repository already holds credentials of a different type."""
