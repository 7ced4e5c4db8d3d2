"""Lifecycle checkpoint wiring."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import MutableSequence
from enum import StrEnum
from typing import Protocol

from repoxauth.core.contracts.repository import Repository
from repoxauth.core.contracts.result import PassResult
from repoxauth.core.engine.configurator import RepoxConfigurator

_LOG = logging.getLogger(__name__)


class Checkpoint(StrEnum):
    BEFORE_SETTINGS = "before-settings"
    EACH_PLUGIN = "each-plugin"
    SETTINGS_EVALUATED = "settings-evaluated"
    BEFORE_EVALUATE = "before-evaluate"
    AFTER_EVALUATE = "after-evaluate"


class RepositoryScope(StrEnum):
    PLUGIN_MANAGEMENT = "plugin-management"
    DEPENDENCY_RESOLUTION = "dependency-resolution"
    PROJECT = "project"


CHECKPOINT_SCOPES: dict[Checkpoint, tuple[RepositoryScope, ...]] = {
    Checkpoint.BEFORE_SETTINGS: (RepositoryScope.PLUGIN_MANAGEMENT, RepositoryScope.DEPENDENCY_RESOLUTION),
    Checkpoint.EACH_PLUGIN: (RepositoryScope.PLUGIN_MANAGEMENT,),
    Checkpoint.SETTINGS_EVALUATED: (RepositoryScope.PLUGIN_MANAGEMENT, RepositoryScope.DEPENDENCY_RESOLUTION),
    Checkpoint.BEFORE_EVALUATE: (RepositoryScope.PROJECT,),
    Checkpoint.AFTER_EVALUATE: (RepositoryScope.PROJECT,),
}

_DESCRIPTIONS: dict[Checkpoint, str] = {
    Checkpoint.BEFORE_SETTINGS: "before settings evaluation",
    Checkpoint.EACH_PLUGIN: "before plugin resolution",
    Checkpoint.SETTINGS_EVALUATED: "after settings evaluation",
    Checkpoint.BEFORE_EVALUATE: "before project '{label}' evaluation",
    Checkpoint.AFTER_EVALUATE: "after project '{label}' evaluation",
}


class CheckpointCallback(Protocol):
    def __call__(
        self,
        repositories: MutableSequence[Repository],
        scope: RepositoryScope,
        label: str | None = None,
    ) -> PassResult: ...  # pragma: no cover


class LifecycleHost(ABC):
    """Registration surface of the host build tool.

    The host calls each registered callback once per repository list the
    checkpoint covers (see ``CHECKPOINT_SCOPES``).
    """

    @abstractmethod
    def register(self, checkpoint: Checkpoint, callback: CheckpointCallback) -> None: ...  # pragma: no cover


def _checkpoint_callback(configurator: RepoxConfigurator, checkpoint: Checkpoint) -> CheckpointCallback:
    def callback(
        repositories: MutableSequence[Repository],
        scope: RepositoryScope,
        label: str | None = None,
    ) -> PassResult:
        if scope not in CHECKPOINT_SCOPES[checkpoint]:
            raise ValueError(f"checkpoint {checkpoint} does not cover {scope} repositories")
        _LOG.debug(
            "Applying Repox configuration %s to %s repositories",
            _DESCRIPTIONS[checkpoint].format(label=label or "?"),
            scope,
        )
        return configurator.configure(repositories, checkpoint=checkpoint.value, label=label)

    return callback


def install_hooks(host: LifecycleHost, configurator: RepoxConfigurator) -> list[Checkpoint]:
    """Register a full reconciliation pass at every lifecycle checkpoint."""
    installed: list[Checkpoint] = []
    for checkpoint in Checkpoint:
        host.register(checkpoint, _checkpoint_callback(configurator, checkpoint))
        installed.append(checkpoint)
    return installed
