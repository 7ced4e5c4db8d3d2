"""Authorization header value formatting."""

from __future__ import annotations


def format_header_value(token: str, scheme: str) -> str:
    """Prefix ``token`` with ``scheme``, dropping any scheme it already carries.

    Everything up to and including the first space is discarded, so
    ``"Bearer abc"`` and ``"abc"`` both become ``"Bearer abc"``.
    """
    _, separator, remainder = token.partition(" ")
    credential = remainder if separator else token
    return f"{scheme} {credential}"
