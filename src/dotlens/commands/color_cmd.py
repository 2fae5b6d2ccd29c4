"""
dotlens.commands.color_cmd - Color edges by label.
"""

from __future__ import annotations

import argparse
import sys

from dotlens.config import get_config
from dotlens.dot.coloring import DEFAULT_PALETTE, color_edges, legend
from dotlens.utilities.documents import load_document, write_output


def palette_from_config(config: dict) -> list[str]:
    """The configured palette, or the built-in one when none is set."""
    palette = config.get("coloring", {}).get("palette") or []
    return list(palette) if palette else list(DEFAULT_PALETTE)


def print_legend(color_map: dict[str, str]) -> None:
    print("Edge Colors by Type", file=sys.stderr)
    for name, color in legend(color_map):
        print(f"  {color}  {name}", file=sys.stderr)


def run(args: argparse.Namespace) -> int:
    """Run the color command."""
    config = get_config(getattr(args, "config", None))
    text = load_document(args.file, config)

    colored, color_map = color_edges(text, palette_from_config(config))

    if getattr(args, "legend", False):
        print_legend(color_map)
    elif not args.quiet:
        print(f"Edge coloring applied to {len(color_map)} edge types", file=sys.stderr)

    write_output(colored, args.output)
    return 0
