from __future__ import annotations

import logging
from pathlib import Path

from remarc.core.errors import DirectoryPropertiesError
from remarc.domain.models.item import DirectoryAttributes

logger = logging.getLogger(__name__)

_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_SEPARATORS = "=:"
_WHITESPACE = " \t\f"


class PropertiesParserError(ValueError):
    pass


def parse_properties(text: str) -> dict[str, str]:
    """Parse text in the Java ``.properties`` format.

    Supports ``#``/``!`` comment lines, ``=``, ``:`` or whitespace key
    separators, trailing-backslash continuations and backslash escapes
    including ``\\uXXXX``. Later keys replace earlier ones.
    """
    values: dict[str, str] = {}
    for logical_line in _logical_lines(text):
        key, value = _split_entry(logical_line)
        values[_unescape(key)] = _unescape(value)
    return values


def _logical_lines(text: str) -> list[str]:
    lines: list[str] = []
    pending: str | None = None

    for raw in text.splitlines():
        line = raw.lstrip(_WHITESPACE)
        if pending is None:
            if not line or line[0] in "#!":
                continue
        if _ends_with_continuation(line):
            pending = (pending or "") + line[:-1]
            continue
        lines.append((pending or "") + line)
        pending = None

    if pending:
        lines.append(pending)
    return lines


def _ends_with_continuation(line: str) -> bool:
    backslashes = len(line) - len(line.rstrip("\\"))
    return backslashes % 2 == 1


def _split_entry(line: str) -> tuple[str, str]:
    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if ch == "\\":
            i += 2
            continue
        if ch in _SEPARATORS or ch in _WHITESPACE:
            break
        i += 1

    key = line[:i]
    while i < n and line[i] in _WHITESPACE:
        i += 1
    if i < n and line[i] in _SEPARATORS:
        i += 1
    while i < n and line[i] in _WHITESPACE:
        i += 1
    return key, line[i:]


def _unescape(text: str) -> str:
    if "\\" not in text:
        return text

    out: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch != "\\":
            out.append(ch)
            i += 1
            continue
        if i + 1 >= n:
            i += 1
            continue
        nxt = text[i + 1]
        if nxt == "u":
            digits = text[i + 2 : i + 6]
            if len(digits) != 4 or any(c not in "0123456789abcdefABCDEF" for c in digits):
                raise PropertiesParserError(f"Malformed \\uXXXX escape: \\u{digits}")
            out.append(chr(int(digits, 16)))
            i += 6
            continue
        out.append(_ESCAPES.get(nxt, nxt))
        i += 2
    return "".join(out)


def _decode_properties(raw: bytes) -> str:
    # .properties files are traditionally ISO-8859-1; UTF-8 is accepted first.
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return raw.decode("latin-1")


def load_directory_attributes(properties_file: Path | None) -> DirectoryAttributes:
    """Load theme/decade for a directory or raise ``DirectoryPropertiesError``."""
    if properties_file is None:
        raise DirectoryPropertiesError("Upload did not contain a properties file")

    try:
        values = parse_properties(_decode_properties(properties_file.read_bytes()))
    except (OSError, PropertiesParserError) as exc:
        raise DirectoryPropertiesError(
            f"Unable to load properties file {properties_file.name}: {exc}"
        ) from exc

    theme = values.pop("theme", None)
    decade = values.pop("decade", None)
    if theme is None and decade is None:
        raise DirectoryPropertiesError(
            f"Properties file {properties_file.name} contained neither theme nor decade"
        )

    logger.debug("Loaded %s: theme=%r decade=%r", properties_file, theme, decade)
    return DirectoryAttributes(theme=theme, decade=decade, extra=values)
