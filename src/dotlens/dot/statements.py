"""Statement classifier and block collector.

DOT statements are found line by line with a small set of ordered pattern
checks rather than a grammar:

1. Blank lines and comments are OTHER.
2. Graph-level keywords (graph, digraph, subgraph, node, edge) and braces
   are OTHER, unless the same line also holds an edge statement.
3. A line opening with ``endpoint -> endpoint`` (or ``--``) before any '['
   is an EDGE.
4. ``key = value`` assignments, ``id [...]`` definitions and bare ``id``
   lines are NODE statements.
5. Everything else (braces, fragments) is OTHER.

A line can hold several statements, as in ``digraph { a -> b; c -> d; }``.
``split_statements`` cuts such a line at the braces and semicolons that sit
outside quotes and attribute lists, so each statement can be handled alone.

A NODE or EDGE statement may continue over several lines while its
attribute list is open. The collector counts every '[' and ']' on each line
without regard to quoting, so a label containing a literal ']' ends the
block early. That is a known limitation of the heuristic.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class StatementKind(Enum):
    """Classification of a line or block."""

    NODE = "node"
    EDGE = "edge"
    OTHER = "other"


# One endpoint: quoted id, <html> id, or bare id, with optional ':port' parts.
ENDPOINT = r'(?:"[^"]*"|<[^>]*>|[A-Za-z0-9_\-.]+)'
PORT = r'(?::(?:"[^"]*"|[A-Za-z0-9_]+))*'
CONNECTOR = r"(?:->|--)"

EDGE_PATTERN = re.compile(
    rf"^\s*(?P<source>{ENDPOINT}){PORT}\s*(?P<connector>{CONNECTOR})\s*"
    rf"(?P<target>{ENDPOINT}){PORT}"
)
EDGE_CHAIN_PATTERN = re.compile(
    rf"^(?P<head>\s*{ENDPOINT}{PORT}(?:\s*{CONNECTOR}\s*{ENDPOINT}{PORT})+)(?P<rest>.*)$",
    re.DOTALL,
)
NODE_DEFINITION_PATTERN = re.compile(rf"^\s*(?P<id>{ENDPOINT}){PORT}\s*\[")
NODE_SIMPLE_PATTERN = re.compile(rf"^\s*(?P<id>{ENDPOINT})\s*;?\s*$")
ATTRIBUTE_ASSIGNMENT_PATTERN = re.compile(r"^\s*\w+\s*=")
CONNECTOR_PATTERN = re.compile(CONNECTOR)
KEYWORD_LINE_PATTERN = re.compile(
    r"^(?:strict\s+)?(?:graph|digraph|subgraph|node|edge)(?=\s|\[|\{|;|$)",
    re.IGNORECASE,
)

COMMENT_PREFIXES = ("//", "#", "/*", "*")
KEYWORDS = frozenset({"graph", "digraph", "subgraph", "node", "edge"})


def is_keyword(identifier: str) -> bool:
    """Check if an identifier is a reserved DOT keyword."""
    return identifier.lower() in KEYWORDS


@dataclass(frozen=True)
class StatementBlock:
    """A contiguous span of lines holding one statement.

    Attributes:
        start_line: First line index (0-based).
        end_line: Last line index (0-based, inclusive).
        raw_text: The spanned lines joined with newlines, unmodified.
        kind: NODE, EDGE or OTHER.
    """

    start_line: int
    end_line: int
    raw_text: str
    kind: StatementKind

    @property
    def line_count(self) -> int:
        """Number of lines in this block."""
        return self.end_line - self.start_line + 1

    @property
    def is_edge(self) -> bool:
        return self.kind == StatementKind.EDGE

    @property
    def is_node(self) -> bool:
        return self.kind == StatementKind.NODE


def _unquoted_chars(text: str) -> Iterator[tuple[int, str, int]]:
    """Yield (index, char, bracket depth) for characters outside quotes."""
    in_quotes = False
    escaped = False
    depth = 0
    for index, char in enumerate(text):
        if in_quotes:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_quotes = False
            continue
        if char == '"':
            in_quotes = True
            continue
        yield index, char, depth
        if char == "[":
            depth += 1
        elif char == "]" and depth > 0:
            depth -= 1


def comment_start(text: str) -> int | None:
    """Index where a trailing ``//``, ``/*`` or ``#`` comment begins, or None.

    Only markers outside quotes and attribute lists count, so values like
    ``URL="http://x"`` or ``color=#ff0000`` are not comments.
    """
    for index, char, depth in _unquoted_chars(text):
        if depth == 0 and (char == "#" or text.startswith(("//", "/*"), index)):
            return index
    return None


def strip_comment(text: str) -> str:
    """Return ``text`` without its trailing comment."""
    index = comment_start(text)
    return text if index is None else text[:index]


def _classify_statement(line: str) -> StatementKind:
    stripped = line.strip()
    if not stripped or stripped.startswith(COMMENT_PREFIXES):
        return StatementKind.OTHER

    if KEYWORD_LINE_PATTERN.match(stripped):
        return StatementKind.OTHER

    edge_match = EDGE_PATTERN.match(stripped)
    if edge_match:
        bracket = stripped.find("[")
        if bracket == -1 or edge_match.start("connector") < bracket:
            return StatementKind.EDGE

    if ATTRIBUTE_ASSIGNMENT_PATTERN.match(stripped):
        return StatementKind.NODE

    if NODE_DEFINITION_PATTERN.match(stripped) or NODE_SIMPLE_PATTERN.match(stripped):
        return StatementKind.NODE

    if "=" in stripped and not CONNECTOR_PATTERN.search(stripped):
        return StatementKind.NODE

    return StatementKind.OTHER


def _opens_structure(line: str) -> bool:
    stripped = line.strip()
    return bool(KEYWORD_LINE_PATTERN.match(stripped)) or stripped.startswith(("{", "}"))


def classify_line(line: str) -> StatementKind:
    """Decide whether a line opens an edge statement, a node statement, or neither.

    A line led by a graph keyword or a brace is an EDGE when one of the
    statements it holds is an edge, e.g. ``digraph { a -> b; }``.

    Args:
        line: A single line (surrounding whitespace is ignored).

    Returns:
        The StatementKind the line opens.
    """
    kind = _classify_statement(line)
    if kind == StatementKind.OTHER and _opens_structure(line):
        if any(segment.is_edge for segment in split_statements(line)):
            return StatementKind.EDGE
    return kind


def _append_segment(segments: list[StatementBlock], chunk: str, line_index: int) -> None:
    if not chunk:
        return
    if chunk.count("[") > chunk.count("]"):
        # An attribute list running onto the next line is not a whole statement
        kind = StatementKind.OTHER
    else:
        kind = _classify_statement(chunk)
    segments.append(StatementBlock(line_index, line_index, chunk, kind))


def split_statements(line: str, line_index: int = 0) -> list[StatementBlock]:
    """Cut one line into its statements and the structure around them.

    The line is cut at '{', '}' and ';' outside quotes and attribute lists.
    A statement keeps its leading whitespace and its ';', so dropping it
    leaves the rest of the line tidy. Braces, keyword headers, whitespace and
    a trailing comment come back as OTHER segments.

    Args:
        line: A single line.
        line_index: Line number recorded on every segment.

    Returns:
        Segments whose raw_text concatenates back to ``line``.
    """
    comment_at = comment_start(line)
    code = line if comment_at is None else line[:comment_at]

    segments: list[StatementBlock] = []
    start = 0
    for index, char, depth in _unquoted_chars(code):
        if depth or char not in "{};":
            continue
        if char == ";":
            _append_segment(segments, code[start : index + 1], line_index)
        else:
            _append_segment(segments, code[start:index], line_index)
            segments.append(StatementBlock(line_index, line_index, char, StatementKind.OTHER))
        start = index + 1
    _append_segment(segments, code[start:], line_index)

    if comment_at is not None:
        segments.append(
            StatementBlock(line_index, line_index, line[comment_at:], StatementKind.OTHER)
        )
    return segments


def collect_block(lines: list[str], start: int) -> StatementBlock:
    """Collect the lines of the statement that begins at ``start``.

    Lines are appended while tracking bracket depth. The block closes when:
    - a '[' has been seen and the depth is back to zero, or
    - no '[' has been seen and the line ends with ';' or has no '='
      (comments ignored).

    While no '[' has been seen, the block only runs on into a following line
    that starts with '['. A line led by a keyword or a brace is always a
    block of its own. An attribute list left open runs to the end of the
    document.

    Args:
        lines: All lines of the document.
        start: Index of the line that opens the statement.

    Returns:
        StatementBlock for the statement.
    """
    kind = classify_line(lines[start])
    if kind == StatementKind.OTHER or _opens_structure(lines[start]):
        return StatementBlock(start, start, lines[start], kind)

    depth = 0
    opened = False
    end = start

    for index in range(start, len(lines)):
        line = lines[index]
        end = index
        depth += line.count("[") - line.count("]")
        if "[" in line:
            opened = True

        code = strip_comment(line).strip()
        if opened:
            if depth <= 0:
                break
        elif code.endswith(";") or "=" not in code:
            break
        elif index + 1 < len(lines) and not lines[index + 1].strip().startswith("["):
            break

    if opened and depth > 0:
        logger.debug("Unbalanced attribute list from line %d to end of document", start)

    return StatementBlock(start, end, "\n".join(lines[start : end + 1]), kind)


def split_lines(text: str) -> list[str]:
    """Split a document into lines, keeping it reconstructible with '\\n'.join."""
    return text.split("\n")


def iter_blocks(text: str) -> Iterator[StatementBlock]:
    """Walk a document, yielding one block per statement.

    Every line belongs to exactly one block, and blocks come out in document
    order, so joining their raw_text with newlines gives back ``text``.
    Lines that do not open a statement become single-line OTHER blocks.
    """
    lines = split_lines(text)
    index = 0
    while index < len(lines):
        if classify_line(lines[index]) == StatementKind.OTHER:
            yield StatementBlock(index, index, lines[index], StatementKind.OTHER)
            index += 1
            continue

        block = collect_block(lines, index)
        yield block
        index = block.end_line + 1


def expand_block(block: StatementBlock) -> list[StatementBlock]:
    """Split a one-line block holding several statements into segments.

    Returns ``[block]`` when the line holds at most one statement and no
    braces.
    """
    if block.line_count != 1:
        return [block]

    segments = split_statements(block.raw_text, block.start_line)
    statements = [segment for segment in segments if segment.kind != StatementKind.OTHER]
    has_brace = any(segment.raw_text in ("{", "}") for segment in segments)
    if not statements or (len(statements) == 1 and not has_brace):
        return [block]
    return segments


def iter_statements(text: str) -> Iterator[StatementBlock]:
    """Like iter_blocks, with compound lines broken into their segments."""
    for block in iter_blocks(text):
        yield from expand_block(block)


def iter_edge_blocks(text: str) -> Iterator[StatementBlock]:
    """Yield every edge statement of a document."""
    return (block for block in iter_statements(text) if block.is_edge)


def rewrite_statements(text: str, rewrite: Callable[[StatementBlock], str | None]) -> str:
    """Rebuild a document, passing each statement through ``rewrite``.

    ``rewrite`` returns the replacement text, or None to drop the statement.
    A dropped multi-line block takes its lines with it; a dropped segment of
    a compound line leaves the rest of the line in place.
    """
    lines: list[str] = []
    for block in iter_blocks(text):
        parts = expand_block(block)
        if len(parts) == 1:
            replacement = rewrite(block)
            if replacement is not None:
                lines.append(replacement)
            continue

        rewritten = (rewrite(part) for part in parts)
        lines.append("".join(piece for piece in rewritten if piece is not None))
    return "\n".join(lines)


def join_blocks(blocks: list[StatementBlock]) -> str:
    """Reassemble blocks into document text."""
    return "\n".join(block.raw_text for block in blocks)
