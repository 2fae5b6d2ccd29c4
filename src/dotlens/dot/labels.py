"""Label index and edge filter.

Edges are grouped by their ``label`` attribute. Edges without a label share
the NO_LABEL sentinel so they can be selected like any other label. The
ALL sentinel in a selection turns filtering off.

Filtering only ever removes whole edge statements; node statements, graph
directives, braces and comments pass through unchanged and in order. An
edge sharing a line with other statements is cut out of that line.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from dotlens.dot.attributes import find_label
from dotlens.dot.statements import StatementBlock, iter_edge_blocks, rewrite_statements

logger = logging.getLogger(__name__)

NO_LABEL = "__no_label__"
ALL = "all"


def block_label(block: StatementBlock) -> str:
    """Return the label of an edge block, or NO_LABEL."""
    label = find_label(block.raw_text)
    return NO_LABEL if label is None else label


def extract_labels(text: str) -> list[str]:
    """Collect the distinct edge labels of a document.

    Args:
        text: DOT document text.

    Returns:
        Sorted list of labels; NO_LABEL is included when any edge has no
        label.
    """
    labels = {block_label(block) for block in iter_edge_blocks(text)}
    return sorted(labels)


class LabelCache:
    """Memoizes extract_labels for the most recently seen document.

    The cache holds one entry and is replaced whenever the text changes.
    """

    def __init__(self) -> None:
        self._text: str | None = None
        self._labels: list[str] = []
        self.hits = 0
        self.misses = 0

    def get(self, text: str) -> list[str]:
        if self._text is not None and text == self._text:
            self.hits += 1
            return list(self._labels)

        self.misses += 1
        self._labels = extract_labels(text)
        self._text = text
        return list(self._labels)

    def clear(self) -> None:
        self._text = None
        self._labels = []


def is_unfiltered(selection: Iterable[str]) -> bool:
    """True when a selection means "show everything"."""
    selected = set(selection)
    return not selected or ALL in selected


def filter_by_labels(text: str, selection: Iterable[str]) -> str:
    """Keep only the edges whose label is selected.

    Args:
        text: DOT document text.
        selection: Labels to keep. May include NO_LABEL for unlabelled edges.
            An empty selection, or one containing ALL, returns ``text``
            unchanged.

    Returns:
        The filtered document. Non-edge lines are always kept.
    """
    selected = set(selection)
    if is_unfiltered(selected):
        return text

    dropped: list[StatementBlock] = []

    def keep_selected(block: StatementBlock) -> str | None:
        if block.is_edge and block_label(block) not in selected:
            dropped.append(block)
            return None
        return block.raw_text

    result = rewrite_statements(text, keep_selected)
    logger.debug("Filter removed %d edge statement(s)", len(dropped))
    return result


def count_edges(text: str) -> int:
    """Number of edge statements in a document."""
    return sum(1 for _ in iter_edge_blocks(text))


def describe_selection(selection: Iterable[str]) -> str:
    """Short human description of a filter selection."""
    selected = set(selection)
    if ALL in selected:
        return "Show All Edges"
    if not selected:
        return "No edges selected"
    if len(selected) == 1:
        (only,) = selected
        return "Edges without labels" if only == NO_LABEL else only
    return f"{len(selected)} edge types selected"


def display_label(label: str) -> str:
    """Display name of a label; NO_LABEL reads as 'No label'."""
    return "No label" if label == NO_LABEL else label
