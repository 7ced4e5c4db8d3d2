"""Outcome contracts for a reconciliation pass."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ReconcileResult(BaseModel):
    kept: list[str] = Field(default_factory=list)
    removed: list[str] = Field(default_factory=list)
    added: str | None = None

    @property
    def changed(self) -> bool:
        return bool(self.removed) or self.added is not None


class BindResult(BaseModel):
    authenticated: list[str] = Field(default_factory=list)
    already_authenticated: list[str] = Field(default_factory=list)
    missing_credentials: list[str] = Field(default_factory=list)
    unsupported: list[str] = Field(default_factory=list)
    conflicting: list[str] = Field(default_factory=list)


class PassResult(BaseModel):
    checkpoint: str | None = None
    label: str | None = None
    reconcile: ReconcileResult
    bind: BindResult
