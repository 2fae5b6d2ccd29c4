"""
dotlens.commands.labels - List the distinct edge labels of a document.
"""

from __future__ import annotations

import argparse
import json

from dotlens.config import get_config
from dotlens.dot.labels import NO_LABEL, count_edges, extract_labels
from dotlens.utilities.documents import load_document


def run(args: argparse.Namespace) -> int:
    """Run the labels command."""
    config = get_config(getattr(args, "config", None))
    text = load_document(args.file, config)

    labels = extract_labels(text)

    if getattr(args, "json", False):
        print(json.dumps({"labels": labels, "edges": count_edges(text)}, indent=2))
        return 0

    if not labels:
        if not args.quiet:
            print("No edges found")
        return 0

    for label in labels:
        print("(no label)" if label == NO_LABEL else label)
    return 0
