"""Core config exports."""

from repoxauth.core.config.loader import load_canonical_config

__all__ = ["load_canonical_config"]
