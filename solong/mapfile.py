"""Reading and checking ``.ber`` map files."""

from __future__ import annotations

import os
from typing import Iterable

__all__ = [
    "MapError",
    "check_extension",
    "check_newlines",
    "parse_map",
    "read_map",
    "validate_map",
]

_VALID_CHARS = frozenset("10CEPHVU")


class MapError(ValueError):
    """Raised when a map file or its contents are not acceptable."""


def check_extension(path: str | os.PathLike) -> None:
    """Raise :class:`MapError` unless ``path`` ends in ``.ber``."""
    if not os.fspath(path).endswith(".ber"):
        raise MapError("invalid extension")


def check_newlines(text: str) -> None:
    """Reject text with a leading, trailing or doubled newline."""
    if text.startswith("\n") or "\n\n" in text or text.endswith("\n"):
        raise MapError("invalid format")


def parse_map(text: str) -> list[str]:
    """Split map text into rows after checking its line structure."""
    check_newlines(text)
    return [row for row in text.split("\n") if row]


def read_map(path: str | os.PathLike) -> list[str]:
    """Read the map file at ``path`` and return its rows."""
    check_extension(path)
    with open(path, encoding="latin-1", newline="") as handle:
        text = handle.read()
    return parse_map(text)


def validate_map(rows: Iterable[str]) -> list[str]:
    """Check that ``rows`` form a playable map and return them as a list."""
    rows = list(rows)
    if not rows:
        raise MapError("the map is empty")
    width = len(rows[0])
    height = len(rows)
    has_player = has_exit = has_collectable = False

    for y, row in enumerate(rows):
        if len(row) != width:
            raise MapError("the map is not rectangular")
        for x, char in enumerate(row):
            if char not in _VALID_CHARS:
                raise MapError("invalid characters in the map")
            if char == "P":
                if has_player:
                    raise MapError("there must be only one 'P'")
                has_player = True
            if char == "E":
                has_exit = True
            on_border = y in (0, height - 1) or x in (0, width - 1)
            if on_border and char != "1":
                raise MapError("the map must be surrounded by '1'")
            if char == "C":
                has_collectable = True

    if not (has_player and has_exit and has_collectable):
        raise MapError("there must be a 'P', an 'E' and at least one 'C'")
    return rows