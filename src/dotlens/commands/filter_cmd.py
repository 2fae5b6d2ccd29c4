"""
dotlens.commands.filter_cmd - Keep only edges with selected labels.

    dotlens filter graph.dot -l calls -l returns --no-label -o out.dot
"""

from __future__ import annotations

import argparse
import sys

from dotlens.config import get_config
from dotlens.dot.labels import NO_LABEL, count_edges, describe_selection, filter_by_labels
from dotlens.utilities.documents import load_document, write_output


def build_selection(args: argparse.Namespace) -> set[str]:
    """Collect the label selection from --label and --no-label options."""
    selection = set(getattr(args, "label", None) or [])
    if getattr(args, "no_label", False):
        selection.add(NO_LABEL)
    return selection


def run(args: argparse.Namespace) -> int:
    """Run the filter command."""
    config = get_config(getattr(args, "config", None))
    text = load_document(args.file, config)

    selection = build_selection(args)
    filtered = filter_by_labels(text, selection)

    if not args.quiet:
        print(f"Filter: {describe_selection(selection)}", file=sys.stderr)
        if count_edges(text) and not count_edges(filtered):
            print("No edges match the selected labels", file=sys.stderr)

    write_output(filtered, args.output)
    return 0
