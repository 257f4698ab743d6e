"""Loading XPM pixmaps into images."""

from __future__ import annotations

import os
import re
from typing import Iterable, Iterator, Optional

from solong.colors import NONE_COLOR, color_by_name
from solong.image import Image

__all__ = [
    "XpmError",
    "str_str",
    "str_str_quoted",
    "split_words",
    "strip_comments",
    "lookup_color",
    "xpm_to_image",
    "xpm_text_to_image",
    "xpm_file_to_image",
]

_TRANSPARENT = 0xFF000000
_COLOR_NAME_LIMIT = 63
_WORD_SEPARATORS = re.compile(r"[ \t]+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_HEX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


def str_str(text: str, find: str) -> int:
    """Return the index of the first ``find`` in ``text``, or -1."""
    return text.find(find)


def str_str_quoted(text: str, find: str) -> int:
    """Like :func:`str_str`, skipping matches inside double-quoted strings."""
    inside = False
    for pos in range(len(text) - len(find) + 1):
        if text[pos] == '"':
            inside = not inside
        if not inside and text.startswith(find, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _blank(text: str, start: int, count: int) -> str:
    count = max(0, min(count, len(text) - start))
    return text[:start] + " " * count + text[start + count:]


def strip_comments(text: str) -> str:
    """Replace C comments outside strings with spaces, keeping the length.

    A line comment is blanked together with the newline that ends it.
    """
    while (begin := str_str_quoted(text, "/*")) != -1:
        end = str_str(text[begin + 2:], "*/")
        text = _blank(text, begin, end + 4)
    while (begin := str_str_quoted(text, "//")) != -1:
        end = str_str(text[begin + 2:], "\n")
        text = _blank(text, begin, end + 3)
    return text


def _parse_hex(text: str) -> int:
    match = _LEADING_HEX.match(text)
    digits = match.group(2)
    if not digits:
        return 0
    value = int(digits, 16)
    return -value if match.group(1) == "-" else value


def lookup_color(name: str, end: Optional[str] = None) -> int:
    """Resolve an XPM colour: ``#RRGGBB`` or a colour name, 0 if unknown.

    ``end`` is the word after the name; it is joined to it to form
    two-word names such as ``dark slate``.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if end is not None:
        name = f"{name} {end}"[:_COLOR_NAME_LIMIT]
    try:
        return color_by_name(name)
    except KeyError:
        return 0


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _parse_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError("incomplete header")
    values = tuple(_atoi(word) for word in words[:4])
    if not all(values):
        raise XpmError("invalid header")
    return values  # type: ignore[return-value]


def _parse_color(line: str, cpp: int) -> tuple[str, int]:
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError("colour line without a 'c' key") from None
    if index >= len(words):
        raise XpmError("colour line without a colour")
    end = words[index + 1] if index + 1 < len(words) else None
    return line[:cpp], lookup_color(words[index], end)


def xpm_to_image(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM: header, colours, pixels."""
    lines = iter(lines)
    width, height, ncolors, cpp = _parse_header(_next_line(lines, "header"))

    colors: dict[str, int] = {}
    for _ in range(ncolors):
        key, color = _parse_color(_next_line(lines, "colour line"), cpp)
        # Keys of up to two characters take their last definition,
        # longer ones their first.
        if cpp <= 2:
            colors[key] = color
        else:
            colors.setdefault(key, color)

    try:
        image = Image(width, height)
    except ValueError as exc:
        raise XpmError(str(exc)) from None

    for y in range(height):
        line = _next_line(lines, "pixel line")
        if len(line) < width * cpp:
            raise XpmError(f"pixel line {y} is too short")
        for x in range(width):
            color = colors.get(line[x * cpp:(x + 1) * cpp], 0)
            if color == NONE_COLOR:
                color = _TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while (start := text.find('"', pos)) != -1:
        stop = text.find('"', start + 1)
        if stop == -1:
            return
        yield text[start + 1:stop]
        pos = stop + 1


def xpm_text_to_image(text: str) -> Image:
    """Build an image from the source text of an XPM file."""
    return xpm_to_image(_quoted_strings(strip_comments(text)))


def xpm_file_to_image(path: str | os.PathLike) -> Image:
    """Load the XPM file at ``path`` into an image."""
    with open(path, encoding="latin-1") as handle:
        return xpm_text_to_image(handle.read())