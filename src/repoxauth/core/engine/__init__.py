"""Reconciliation engine exports."""

from repoxauth.core.engine.configurator import RepoxConfigurator
from repoxauth.core.engine.hooks import (
    CHECKPOINT_SCOPES,
    Checkpoint,
    CheckpointCallback,
    LifecycleHost,
    RepositoryScope,
    install_hooks,
)

__all__ = [
    "CHECKPOINT_SCOPES",
    "Checkpoint",
    "CheckpointCallback",
    "LifecycleHost",
    "RepositoryScope",
    "RepoxConfigurator",
    "install_hooks",
]
