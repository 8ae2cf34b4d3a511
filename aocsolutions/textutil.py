"""String and file helpers shared by the puzzle solvers."""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")

_INT32_RANGE = range(-(2**31), 2**31)
_INT64_RANGE = range(-(2**63), 2**63)


def _parse_int(text: str, valid: range) -> int:
    """Parse the integer at the start of ``text``, ignoring anything after it."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no integer at the start of {text!r}")
    value = int(match.group(1))
    if value not in valid:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def load_file(path: str | Path) -> list[str]:
    """Return the lines of a text file, without their line endings."""
    text = Path(path).read_text(encoding="utf-8")
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def to_int(s: str) -> int:
    """Parse a 32-bit integer from the start of ``s``."""
    return _parse_int(s, _INT32_RANGE)


def replace_string(subject: str, search: str, replace: str) -> str:
    """Replace every occurrence of ``search`` in ``subject``, left to right."""
    if not search:
        raise ValueError("search string must not be empty")
    return subject.replace(search, replace)


def remove_before(subject: str, marker: str) -> str:
    """Drop everything up to and including the first character of ``marker``.

    If ``marker`` does not occur, ``subject`` is returned unchanged.
    """
    pos = subject.find(marker)
    if pos < 0:
        return subject
    return subject[pos + 1 :]


def split(s: str, delimiter: str) -> list[str]:
    """Split on ``delimiter``; a trailing delimiter yields no final empty field."""
    parts = s.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts


def split_no_empty(s: str, delimiter: str) -> list[str]:
    """Split on ``delimiter`` and drop empty fields."""
    return [part for part in split(s, delimiter) if part]


def split_ints(s: str, delimiter: str) -> list[int]:
    """Split on ``delimiter`` and parse every non-empty field as an integer."""
    return [_parse_int(part, _INT64_RANGE) for part in split(s, delimiter) if part]


def split_chars(s: str, delimiter: str) -> list[str]:
    """Split on ``delimiter`` and keep the first character of every field."""
    return [part[0] if part else "\0" for part in split(s, delimiter)]


def remove_all(target: str, search: str) -> str:
    """Remove every occurrence of ``search`` from ``target``."""
    if not search:
        raise ValueError("search string must not be empty")
    return target.replace(search, "")


def trim(target: str, chars: str = " ") -> str:
    """Strip any of ``chars`` from both ends of ``target``."""
    return target.strip(chars)


def is_all_unique(items: Iterable) -> bool:
    """Return True if no two elements of ``items`` are equal."""
    ordered = sorted(items)
    return all(a != b for a, b in zip(ordered, ordered[1:]))