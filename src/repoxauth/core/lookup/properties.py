"""Java ``.properties`` file parsing.

Supports the subset of the format found in ``gradle.properties`` files:
``#``/``!`` comment lines, ``=``, ``:`` or whitespace separators, backslash
line continuations and the usual escapes including ``\\uXXXX``.
"""

from __future__ import annotations

from pathlib import Path

from repoxauth.core.contracts.exceptions import PropertiesFileError

_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_SEPARATORS = "=:"
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _logical_lines(text: str) -> list[str]:
    lines: list[str] = []
    pending: str | None = None
    for raw in text.splitlines():
        line = raw.lstrip() if pending is not None else raw
        if pending is None and (not line.strip() or line.lstrip()[0] in "#!"):
            continue
        trailing = len(line) - len(line.rstrip("\\"))
        continued = trailing % 2 == 1
        if continued:
            line = line[:-1]
        pending = line if pending is None else pending + line
        if not continued:
            lines.append(pending)
            pending = None
    if pending is not None:
        lines.append(pending)
    return lines


def _unescape(value: str) -> str:
    out: list[str] = []
    index = 0
    while index < len(value):
        char = value[index]
        if char != "\\" or index + 1 >= len(value):
            out.append(char)
            index += 1
            continue
        nxt = value[index + 1]
        digits = value[index + 2 : index + 6]
        if nxt == "u" and len(digits) == 4 and all(c in _HEX_DIGITS for c in digits):
            out.append(chr(int(digits, 16)))
            index += 6
            continue
        out.append(_ESCAPES.get(nxt, nxt))
        index += 2
    return "".join(out)


def _split_entry(line: str) -> tuple[str, str]:
    line = line.lstrip()
    index = 0
    while index < len(line):
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in _SEPARATORS or char.isspace():
            break
        index += 1
    key = line[:index]
    rest = line[index:].lstrip()
    if rest[:1] and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip()
    return _unescape(key), _unescape(rest)


def parse_properties(text: str) -> dict[str, str]:
    entries: dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_entry(line)
        if key:
            entries[key] = value
    return entries


def load_properties(path: Path) -> dict[str, str]:
    """Read ``path`` as an ISO-8859-1 properties file; a missing file yields no entries."""
    if not path.is_file():
        return {}
    try:
        text = path.read_text(encoding="iso-8859-1")
    except OSError as exc:
        raise PropertiesFileError(path, str(exc)) from exc
    return parse_properties(text)
