"""Concrete token sources."""

from repoxauth.core.auth.sources.env import EnvTokenSource
from repoxauth.core.auth.sources.property import PropertyTokenSource

__all__ = ["EnvTokenSource", "PropertyTokenSource"]
