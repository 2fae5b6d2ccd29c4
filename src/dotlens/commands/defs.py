"""
dotlens.commands.defs - Show node and edge definitions.

Prints the definition registry used for tooltips, or looks up one key:

    dotlens defs graph.dot --key "a->b"
    dotlens defs graph.dot --edges -j
"""

from __future__ import annotations

import argparse
import json
import sys

from dotlens.config import get_config
from dotlens.dot.registry import Definitions, build_definitions, summarize_definition
from dotlens.utilities.documents import load_document


def run(args: argparse.Namespace) -> int:
    """Run the defs command."""
    config = get_config(getattr(args, "config", None))
    text = load_document(args.file, config)
    definitions = build_definitions(text)

    key = getattr(args, "key", None)
    if key:
        return _lookup(definitions, key, args)

    show_nodes = not getattr(args, "edges", False)
    show_edges = not getattr(args, "nodes", False)

    if getattr(args, "json", False):
        data: dict[str, dict[str, str]] = {}
        if show_nodes:
            data["nodes"] = definitions.nodes
        if show_edges:
            data["edges"] = definitions.edges
        print(json.dumps(data, indent=2))
        return 0

    if show_nodes:
        print(f"Nodes ({len(definitions.nodes)}):")
        for node_id, definition in definitions.nodes.items():
            print(f"  {node_id}: {_one_line(definition)}")
    if show_edges:
        print(f"Edges ({len(definitions.identities)}):")
        for edge_key, definition in definitions.edges.items():
            print(f"  {edge_key}: {_one_line(definition)}")
    return 0


def _lookup(definitions: Definitions, key: str, args: argparse.Namespace) -> int:
    definition = definitions.lookup_node(key) or definitions.lookup_edge(key)
    if definition is None:
        print(f"No definition found for '{key}'", file=sys.stderr)
        return 1

    summary = summarize_definition(definition)
    if getattr(args, "json", False):
        print(
            json.dumps(
                {
                    "id": summary.id,
                    "definition": summary.definition,
                    "attributes": [
                        {"key": attr.key, "value": attr.value.text}
                        for attr in summary.attributes
                    ],
                },
                indent=2,
            )
        )
        return 0

    print(summary.id)
    for attr in summary.attributes:
        print(f"  {attr.key}: {attr.value.text}")
    return 0


def _one_line(definition: str) -> str:
    return " ".join(definition.split())
