"""Lookup over Gradle's project-property sources."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from functools import cached_property
from pathlib import Path

from repoxauth.core.contracts.lookup import LookupDomain, ValueLookup
from repoxauth.core.lookup.properties import load_properties

_LOG = logging.getLogger(__name__)

SYSTEM_PROPERTY_PREFIX = "org.gradle.project."
ENV_PROPERTY_PREFIX = "ORG_GRADLE_PROJECT_"
PROPERTIES_FILE_NAME = "gradle.properties"


def default_gradle_user_home(environment: Mapping[str, str]) -> Path:
    configured = environment.get("GRADLE_USER_HOME")
    if configured:
        return Path(configured).expanduser()
    return Path.home() / ".gradle"


class GradleLookup(ValueLookup):
    """Resolve project properties the way a Gradle build sees them.

    Property sources are tried in this order, first hit wins:

    1. ``-P`` command-line properties
    2. ``-Dorg.gradle.project.<key>`` system properties
    3. ``ORG_GRADLE_PROJECT_<key>`` environment variables
    4. ``gradle.properties`` in the Gradle user home
    5. ``gradle.properties`` in the project directory

    Properties files are read on the first property lookup and cached for the
    lifetime of this instance.
    """

    def __init__(
        self,
        *,
        command_line_properties: Mapping[str, str] | None = None,
        system_properties: Mapping[str, str] | None = None,
        environment: Mapping[str, str] | None = None,
        gradle_user_home: Path | None = None,
        project_dir: Path | None = None,
    ) -> None:
        self._command_line = dict(command_line_properties or {})
        self._system = dict(system_properties or {})
        self._environment = os.environ if environment is None else environment
        self._gradle_user_home = gradle_user_home
        self._project_dir = project_dir

    @cached_property
    def _file_sources(self) -> tuple[dict[str, str], ...]:
        user_home = self._gradle_user_home or default_gradle_user_home(self._environment)
        paths = [user_home / PROPERTIES_FILE_NAME]
        if self._project_dir is not None:
            paths.append(self._project_dir / PROPERTIES_FILE_NAME)
        sources = tuple(load_properties(path) for path in paths)
        _LOG.debug("Read properties from %s", ", ".join(str(path) for path in paths))
        return sources

    def _project_property(self, key: str) -> str | None:
        if key in self._command_line:
            return self._command_line[key]
        system_key = f"{SYSTEM_PROPERTY_PREFIX}{key}"
        if system_key in self._system:
            return self._system[system_key]
        env_key = f"{ENV_PROPERTY_PREFIX}{key}"
        if env_key in self._environment:
            return self._environment[env_key]
        for source in self._file_sources:
            if key in source:
                return source[key]
        return None

    def lookup(self, key: str, domain: LookupDomain) -> str | None:
        if domain is LookupDomain.PROPERTY:
            return self._project_property(key)
        return self._environment.get(key)
