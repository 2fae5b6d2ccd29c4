"""Value tokenizer - Recognizes the three DOT value shapes.

A DOT value is one of:
- Quoted: "anything but a double quote"
- Bracketed: <html-like label>
- Bare: a run of letters, digits, underscore, hyphen and dot

Values compare and display by their decoded text only; the delimiters are
kept as a ValueShape tag so callers can tell the shapes apart.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


class ValueShape(Enum):
    """The syntactic shape a value was written in."""

    BARE = "bare"
    QUOTED = "quoted"
    BRACKETED = "bracketed"


QUOTED_PATTERN = re.compile(r'"([^"]*)"')

# An angle-bracketed value runs to the closing '>' that ends the value, so
# '<b>x</b>' decodes to 'b>x</b'. Nesting is not tracked.
BRACKETED_PATTERN = re.compile(r"<([^\n]*?)>(?=\s*(?:[,;\]]|$)|\s+\w+\s*=)")
BRACKETED_SHORT_PATTERN = re.compile(r"<([^>]*)>")

BARE_PATTERN = re.compile(r"[A-Za-z0-9_\-.]+")


@dataclass(frozen=True, eq=False)
class DotValue:
    """A decoded DOT value.

    Attributes:
        text: The value without its delimiters.
        shape: How the value was written.
    """

    text: str
    shape: ValueShape = ValueShape.BARE

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DotValue):
            return self.text == other.text
        if isinstance(other, str):
            return self.text == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.text)

    def __str__(self) -> str:
        return self.text

    def quoted(self) -> str:
        """Render the value back in its original delimiters."""
        if self.shape == ValueShape.QUOTED:
            return f'"{self.text}"'
        if self.shape == ValueShape.BRACKETED:
            return f"<{self.text}>"
        return self.text


def read_value(text: str, pos: int = 0) -> tuple[DotValue, int] | None:
    """Read one value starting exactly at ``pos``.

    Shapes are tried in order: quoted, bracketed, bare. An unterminated
    quote or angle bracket does not match its shape and falls through to
    the next one.

    Args:
        text: Text containing the value.
        pos: Offset where the value is expected to start.

    Returns:
        Tuple of (value, characters consumed), or None if no shape matches.
    """
    if pos >= len(text):
        return None

    match = QUOTED_PATTERN.match(text, pos)
    if match:
        return DotValue(match.group(1), ValueShape.QUOTED), match.end() - pos

    match = BRACKETED_PATTERN.match(text, pos) or BRACKETED_SHORT_PATTERN.match(text, pos)
    if match:
        return DotValue(match.group(1), ValueShape.BRACKETED), match.end() - pos

    match = BARE_PATTERN.match(text, pos)
    if match:
        return DotValue(match.group(0), ValueShape.BARE), match.end() - pos

    return None


def tokenize(text: str) -> DotValue | None:
    """Read the value at the start of ``text`` (leading whitespace ignored)."""
    stripped = text.lstrip()
    result = read_value(stripped)
    return result[0] if result else None
