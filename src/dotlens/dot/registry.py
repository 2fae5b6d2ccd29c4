"""Definition registry - Lookup of node and edge definition text.

Builds two maps from a document:

- nodes: node id -> definition text
- edges: several keys per edge -> definition text

Each edge is described by one EdgeIdentity from which all of its lookup keys
are derived. The label-qualified triplet key ``source-label-target`` tells
parallel edges apart. The fallback keys ``source->target``,
``source target`` and ``source<connector>target`` are claimed by the first
edge that registers them; later edges never overwrite them.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from dotlens.dot.attributes import Attribute, attribute_body, find_label, parse_attributes
from dotlens.dot.statements import (
    ATTRIBUTE_ASSIGNMENT_PATTERN,
    EDGE_PATTERN,
    NODE_DEFINITION_PATTERN,
    NODE_SIMPLE_PATTERN,
    StatementBlock,
    is_keyword,
    iter_statements,
)
from dotlens.dot.values import tokenize

logger = logging.getLogger(__name__)

WHITESPACE_PATTERN = re.compile(r"\s+")


def _decode_endpoint(raw: str) -> str:
    value = tokenize(raw)
    return value.text if value is not None else raw


@dataclass(frozen=True)
class EdgeIdentity:
    """Identity of one edge statement.

    Attributes:
        source: Decoded source node id.
        connector: The connector as written ('->' or '--').
        target: Decoded target node id.
        label: Decoded label, or None when the edge has none.
    """

    source: str
    connector: str
    target: str
    label: str | None = None

    @classmethod
    def from_text(cls, text: str) -> EdgeIdentity | None:
        """Derive the identity of an edge statement, or None if it is not one."""
        match = EDGE_PATTERN.match(text)
        if not match:
            return None
        return cls(
            source=_decode_endpoint(match.group("source")),
            connector=match.group("connector"),
            target=_decode_endpoint(match.group("target")),
            label=find_label(text),
        )

    @property
    def triplet_key(self) -> str | None:
        """The ``source-label-target`` key, when the edge is labelled."""
        if self.label is None:
            return None
        return f"{self.source}-{self.label}-{self.target}"

    def fallback_keys(self) -> list[str]:
        """Unlabelled keys, in registration priority order."""
        keys: list[str] = []
        for key in (
            f"{self.source}->{self.target}",
            f"{self.source} {self.target}",
            f"{self.source}{self.connector}{self.target}",
        ):
            if key not in keys:
                keys.append(key)
        return keys

    def keys(self) -> list[str]:
        """All lookup keys, most specific first."""
        triplet = self.triplet_key
        return ([triplet] if triplet else []) + self.fallback_keys()


def clean_definition(raw_text: str) -> str:
    """Normalize block text for display: trimmed lines, no trailing ';'."""
    lines = [line.strip() for line in raw_text.split("\n")]
    text = "\n".join(line for line in lines if line)
    return text[:-1].rstrip() if text.endswith(";") else text


def normalize_edge_key(key: str) -> str:
    """Collapse spacing and connector style so rendered titles match keys."""
    return WHITESPACE_PATTERN.sub("", key).replace("--", "->")


@dataclass
class Definitions:
    """Definition text for the nodes and edges of one document.

    Attributes:
        nodes: Node id -> definition text.
        edges: Edge key -> definition text (several keys per edge).
        identities: Edge identities in document order.
    """

    nodes: dict[str, str] = field(default_factory=dict)
    edges: dict[str, str] = field(default_factory=dict)
    identities: list[EdgeIdentity] = field(default_factory=list)

    def lookup_node(self, node_id: str) -> str | None:
        return self.nodes.get(node_id.strip())

    def lookup_edge(self, title: str) -> str | None:
        """Find an edge definition by key or by a rendered edge title.

        Exact keys are tried first, then keys compared after removing
        whitespace and treating '--' as '->'.
        """
        title = title.strip()
        if title in self.edges:
            return self.edges[title]

        wanted = normalize_edge_key(title)
        for key, definition in self.edges.items():
            if normalize_edge_key(key) == wanted:
                return definition
        return None


def _node_id(block: StatementBlock) -> tuple[str, bool] | None:
    """Return (node id, has attribute list) for a registrable node block."""
    first_line = block.raw_text.split("\n", 1)[0]
    if ATTRIBUTE_ASSIGNMENT_PATTERN.match(first_line):
        return None

    match = NODE_DEFINITION_PATTERN.match(first_line)
    has_attributes = match is not None
    if match is None:
        match = NODE_SIMPLE_PATTERN.match(first_line)
    if match is None:
        return None

    node_id = _decode_endpoint(match.group("id"))
    if is_keyword(node_id):
        return None
    return node_id, has_attributes


def build_definitions(text: str) -> Definitions:
    """Scan a document once and build the node and edge maps.

    Nodes register under their id. A definition carrying an attribute list
    replaces an earlier bare mention of the same node; otherwise the first
    definition stays. Edges register under their triplet key and fallback
    keys, first-registered-wins for every key.

    Args:
        text: DOT document text.

    Returns:
        Definitions for the document.
    """
    definitions = Definitions()
    detailed_nodes: set[str] = set()

    for block in iter_statements(text):
        if block.is_edge:
            identity = EdgeIdentity.from_text(block.raw_text)
            if identity is None:
                continue
            definitions.identities.append(identity)
            definition = clean_definition(block.raw_text)
            for key in identity.keys():
                definitions.edges.setdefault(key, definition)

        elif block.is_node:
            found = _node_id(block)
            if found is None:
                continue
            node_id, has_attributes = found
            if node_id in detailed_nodes:
                continue
            if has_attributes:
                detailed_nodes.add(node_id)
                definitions.nodes[node_id] = clean_definition(block.raw_text)
            else:
                definitions.nodes.setdefault(node_id, clean_definition(block.raw_text))

    logger.debug(
        "Registered %d node(s) and %d edge(s) under %d edge key(s)",
        len(definitions.nodes),
        len(definitions.identities),
        len(definitions.edges),
    )
    return definitions


@dataclass
class DefinitionSummary:
    """Display form of one definition: its id and its attributes."""

    id: str
    definition: str
    attributes: list[Attribute] = field(default_factory=list)


def summarize_definition(definition: str) -> DefinitionSummary:
    """Break a node or edge definition into id and attributes for display."""
    first_line = definition.strip().split("\n", 1)[0]

    identity = EdgeIdentity.from_text(first_line)
    if identity is not None:
        item_id = f"{identity.source}{identity.connector}{identity.target}"
    else:
        match = NODE_DEFINITION_PATTERN.match(first_line) or NODE_SIMPLE_PATTERN.match(
            first_line
        )
        item_id = _decode_endpoint(match.group("id")) if match else "Unknown"

    body = attribute_body(definition)
    attributes = [
        attribute
        for attribute in (parse_attributes(body) if body is not None else [])
        if attribute.value.text.strip()
    ]
    return DefinitionSummary(
        id=item_id,
        definition=clean_definition(definition),
        attributes=attributes,
    )
