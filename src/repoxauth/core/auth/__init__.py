"""Auth module public exports."""

from repoxauth.core.auth.base import TokenSource
from repoxauth.core.auth.factory import create_credential_resolver, token_sources_for
from repoxauth.core.auth.header import format_header_value
from repoxauth.core.auth.resolver import CredentialResolver

__all__ = [
    "CredentialResolver",
    "TokenSource",
    "create_credential_resolver",
    "format_header_value",
    "token_sources_for",
]
