"""dot - Heuristic DOT text engine.

Line-oriented parsing and rewriting of Graphviz DOT documents without a
grammar. Every function takes text and returns new text or data; nothing
here raises on malformed input.

Exports:
- read_value, tokenize, DotValue, ValueShape: value tokenizer
- parse_attributes, find_label, Attribute: attribute extraction
- classify_line, collect_block, iter_blocks, iter_statements, split_statements,
  StatementBlock, StatementKind
- build_definitions, Definitions, EdgeIdentity: definition registry
- extract_labels, filter_by_labels, LabelCache, NO_LABEL, ALL
- assign_colors, apply_colors, color_edges, legend, DEFAULT_PALETTE
"""

from dotlens.dot.attributes import Attribute, find_label, parse_attributes
from dotlens.dot.coloring import (
    DEFAULT_PALETTE,
    apply_colors,
    assign_colors,
    color_edges,
    legend,
)
from dotlens.dot.labels import (
    ALL,
    NO_LABEL,
    LabelCache,
    describe_selection,
    extract_labels,
    filter_by_labels,
)
from dotlens.dot.registry import Definitions, EdgeIdentity, build_definitions
from dotlens.dot.statements import (
    StatementBlock,
    StatementKind,
    classify_line,
    collect_block,
    iter_blocks,
    iter_statements,
    split_statements,
)
from dotlens.dot.values import DotValue, ValueShape, read_value, tokenize

__all__ = [
    "ALL",
    "Attribute",
    "DEFAULT_PALETTE",
    "Definitions",
    "DotValue",
    "EdgeIdentity",
    "LabelCache",
    "NO_LABEL",
    "StatementBlock",
    "StatementKind",
    "ValueShape",
    "apply_colors",
    "assign_colors",
    "build_definitions",
    "classify_line",
    "collect_block",
    "color_edges",
    "describe_selection",
    "extract_labels",
    "filter_by_labels",
    "find_label",
    "iter_blocks",
    "iter_statements",
    "legend",
    "parse_attributes",
    "read_value",
    "split_statements",
    "tokenize",
]
