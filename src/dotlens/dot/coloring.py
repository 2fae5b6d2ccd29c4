"""Edge coloring - One color per distinct edge label.

Labels are sorted and mapped onto a fixed palette in order, wrapping around
when there are more labels than colors. The palette opens with the most
distinguishable colors, so small graphs get the clearest contrast.

Colors are written into each edge's attribute list:
- an existing ``color=`` attribute is replaced where it stands;
- otherwise ``color="..."`` is appended inside the existing list;
- an edge without a list gets ``[color="..."]`` after its target.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from dotlens.dot.attributes import attribute_span, parse_attributes
from dotlens.dot.labels import block_label, display_label, extract_labels
from dotlens.dot.statements import EDGE_CHAIN_PATTERN, StatementBlock, rewrite_statements

logger = logging.getLogger(__name__)

DEFAULT_PALETTE: tuple[str, ...] = (
    "#FF6B6B", "#4ECDC4", "#45B7D1", "#96CEB4", "#FECA57",
    "#FF9FF3", "#54A0FF", "#5F27CD", "#00D2D3", "#FF9F43",
    "#FF6348", "#2ED573", "#3742FA", "#A55EEA", "#26D0CE",
    "#FFA502", "#FF3838", "#1DD1A1", "#5352ED", "#FC427B",
    "#2F3542", "#40407A", "#706FD3", "#F8B500", "#B33771",
    "#3D5A80", "#EE6C4D", "#3A86FF", "#06FFA5", "#FFBE0B",
    "#FB8500", "#8ECAE6", "#219EBC", "#023047", "#FFB3C6",
    "#FB8B24", "#D62828", "#F77F00", "#FCBF49", "#003566",
)  # fmt: skip


def assign_colors(
    labels: Iterable[str], palette: Sequence[str] = DEFAULT_PALETTE
) -> dict[str, str]:
    """Map each distinct label to a palette color.

    Args:
        labels: Labels (NO_LABEL included) in any order; duplicates ignored.
        palette: Colors to draw from, reused cyclically.

    Returns:
        Mapping from label to color, in sorted label order. Empty when the
        palette is empty.
    """
    if not palette:
        return {}
    ordered = sorted(set(labels))
    return {label: palette[index % len(palette)] for index, label in enumerate(ordered)}


def color_statement(text: str, color: str) -> str:
    """Set the color attribute of one edge statement.

    Args:
        text: Raw text of an edge block.
        color: Color value to write.

    Returns:
        The rewritten statement, or ``text`` unchanged when there is no
        closed attribute list and no ``source -> target`` to attach one to.
    """
    attribute = f'color="{color}"'
    span = attribute_span(text)

    if span is not None:
        start, end = span
        if end is None:
            return text

        body = text[start + 1 : end]
        for existing in parse_attributes(body):
            if existing.key == "color" and existing.span is not None:
                first, last = existing.span
                return text[: start + 1 + first] + attribute + text[start + 1 + last :]

        content = body.rstrip()
        insert_at = start + 1 + len(content)
        if not content.strip():
            insert_at = end
            addition = attribute
        elif content.endswith((",", ";")):
            addition = f" {attribute}"
        else:
            addition = f", {attribute}"
        return text[:insert_at] + addition + text[insert_at:]

    match = EDGE_CHAIN_PATTERN.match(text)
    if not match:
        return text
    return f"{match.group('head')} [{attribute}]{match.group('rest')}"


def apply_colors(text: str, color_map: dict[str, str]) -> str:
    """Color every edge whose label has an entry in ``color_map``.

    Edges with an unmapped label, and all non-edge lines, are left as they
    are.
    """
    skipped: list[StatementBlock] = []

    def color_block(block: StatementBlock) -> str:
        if not block.is_edge:
            return block.raw_text
        color = color_map.get(block_label(block))
        if color is None:
            skipped.append(block)
            return block.raw_text
        return color_statement(block.raw_text, color)

    result = rewrite_statements(text, color_block)
    if skipped:
        logger.debug("Left %d edge(s) without a mapped color", len(skipped))
    return result


def color_edges(text: str, palette: Sequence[str] = DEFAULT_PALETTE) -> tuple[str, dict[str, str]]:
    """Assign colors to a document's labels and apply them.

    Returns:
        Tuple of (colored text, color map).
    """
    color_map = assign_colors(extract_labels(text), palette)
    if not color_map:
        return text, color_map
    return apply_colors(text, color_map), color_map


def legend(color_map: dict[str, str]) -> list[tuple[str, str]]:
    """Ordered (display name, color) pairs for a color map."""
    return [(display_label(label), color_map[label]) for label in sorted(color_map)]
