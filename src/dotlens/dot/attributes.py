"""Attribute extractor - Ordered key/value pairs from DOT attribute lists.

An attribute list is the text between '[' and ']' of a statement:

    a -> b [label="calls", color=red weight=2]

Attributes are returned in the order they were written. Separators
(comma, semicolon, whitespace) are optional between pairs. Anything that
does not look like ``key = value`` is skipped, never reported.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from dotlens.dot.values import DotValue, ValueShape, read_value

KEY_PATTERN = re.compile(r"(\w+)\s*=\s*")
SEPARATOR_PATTERN = re.compile(r"[\s,;]+")

# Unquoted values end at a separator or the list terminator, not at the
# characters a bare identifier allows, so '#ff0000' and '2.5' survive.
ATTRIBUTE_BARE_PATTERN = re.compile(r'[^\s,;\]"<][^\s,;\]]*')

# Skips one unrecognized token so the scan always moves forward.
GARBAGE_PATTERN = re.compile(r'[^\s,;]+|.', re.DOTALL)


@dataclass(frozen=True)
class Attribute:
    """A single ``key=value`` pair from an attribute list.

    ``span`` is the (start, end) of the whole pair within the parsed body,
    when known. It takes no part in equality.
    """

    key: str
    value: DotValue
    span: tuple[int, int] | None = field(default=None, compare=False)

    def __str__(self) -> str:
        return f"{self.key}={self.value.quoted()}"


def _read_attribute_value(body: str, pos: int) -> tuple[DotValue, int] | None:
    if pos < len(body) and body[pos] in '"<':
        return read_value(body, pos)

    match = ATTRIBUTE_BARE_PATTERN.match(body, pos)
    if match:
        return DotValue(match.group(0), ValueShape.BARE), match.end() - pos
    return None


def parse_attributes(body: str) -> list[Attribute]:
    """Parse an attribute-list body into ordered attributes.

    Args:
        body: Text between the outer '[' and ']' (brackets excluded).

    Returns:
        List of Attribute in source order. Pairs whose value has no
        recognizable shape are dropped.
    """
    attributes: list[Attribute] = []
    pos = 0
    length = len(body)

    while pos < length:
        sep = SEPARATOR_PATTERN.match(body, pos)
        if sep:
            pos = sep.end()
            continue

        key_match = KEY_PATTERN.match(body, pos)
        if not key_match:
            pos = GARBAGE_PATTERN.match(body, pos).end()
            continue

        pos = key_match.end()
        result = _read_attribute_value(body, pos)
        if result is None:
            continue

        value, consumed = result
        pos += consumed
        attributes.append(Attribute(key_match.group(1), value, (key_match.start(), pos)))

    return attributes


def attribute_span(text: str) -> tuple[int, int | None] | None:
    """Locate the first attribute list of a statement.

    Brackets are counted without regard to quoting, matching how statement
    blocks are collected.

    Returns:
        Tuple of (index of '[', index of the matching ']' or None when the
        list is never closed), or None if the text has no '['.
    """
    start = text.find("[")
    if start == -1:
        return None

    depth = 0
    for index in range(start, len(text)):
        char = text[index]
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
            if depth == 0:
                return start, index
    return start, None


def attribute_body(text: str) -> str | None:
    """Return the body of the first attribute list in ``text``.

    An unclosed list yields everything after the '['.
    """
    span = attribute_span(text)
    if span is None:
        return None
    start, end = span
    return text[start + 1 : end] if end is not None else text[start + 1 :]


def get_attribute(attributes: list[Attribute], key: str) -> DotValue | None:
    """Return the first value for ``key``, or None."""
    for attribute in attributes:
        if attribute.key == key:
            return attribute.value
    return None


def get_label(attributes: list[Attribute]) -> str | None:
    """Return the decoded ``label`` attribute, or None."""
    value = get_attribute(attributes, "label")
    return value.text if value is not None else None


def find_label(text: str) -> str | None:
    """Return the label of a statement's attribute list, or None."""
    body = attribute_body(text)
    if body is None:
        return None
    return get_label(parse_attributes(body))
