"""
dotlens.commands.render_cmd - Filter, color and render a document.

The document is filtered first (when labels are given), then colored
(with --color), then handed to Graphviz.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotlens.commands.color_cmd import palette_from_config, print_legend
from dotlens.commands.filter_cmd import build_selection
from dotlens.config import get_config
from dotlens.dot.coloring import color_edges
from dotlens.dot.labels import filter_by_labels
from dotlens.utilities.documents import load_document, write_output
from dotlens.utilities.render import generate_filename, render


def run(args: argparse.Namespace) -> int:
    """Run the render command."""
    config = get_config(getattr(args, "config", None))
    render_config = config.get("render", {})
    text = load_document(args.file, config)

    text = filter_by_labels(text, build_selection(args))

    if getattr(args, "color", False):
        text, color_map = color_edges(text, palette_from_config(config))
        if not args.quiet:
            print_legend(color_map)

    engine = args.engine or render_config.get("engine", "dot")
    output_format = args.format or render_config.get("format", "svg")

    image = render(
        text,
        engine=engine,
        output_format=output_format,
        binary=render_config.get("binary", "dot"),
        timeout=render_config.get("timeout", 30),
    )

    output = args.output
    if output is None and not args.stdout:
        output = Path(generate_filename(engine, output_format))

    write_output(image, output)
    if output is not None and not args.quiet:
        print(f"Graph rendered to {output}", file=sys.stderr)
    return 0
