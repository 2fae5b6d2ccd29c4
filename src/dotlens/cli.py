"""
dotlens.cli - Command-line interface.

Main entry point for the dotlens CLI tool.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotlens import __version__
from dotlens.commands import color_cmd, defs, filter_cmd, labels, render_cmd
from dotlens.utilities.render import SUPPORTED_FORMATS, SUPPORTED_LAYOUTS


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="dotlens",
        description="Label-aware filtering and coloring for Graphviz DOT files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dotlens labels graph.dot               # List edge labels
  dotlens filter graph.dot -l calls      # Keep only edges labelled "calls"
  dotlens filter graph.dot --no-label    # Keep only unlabelled edges
  dotlens color graph.dot --legend       # Color edges by label
  dotlens defs graph.dot --key "a->b"    # Show an edge definition
  dotlens render graph.dot --color       # Render a colored SVG

Use '-' as FILE to read from stdin.

Configuration:
  dotlens looks for .dotlens.toml in the current directory or a parent.
  Values can be overridden with DOTLENS_<SECTION>_<KEY>, e.g.
  DOTLENS_RENDER_ENGINE=neato.

For detailed command help: dotlens <command> --help
        """,
    )

    # Global options
    parser.add_argument(
        "--version",
        action="version",
        version=f"dotlens {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
        metavar="PATH",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress non-error output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # labels command
    labels_parser = subparsers.add_parser(
        "labels",
        help="List distinct edge labels",
    )
    labels_parser.add_argument("file", help="DOT file ('-' for stdin)", metavar="FILE")
    labels_parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output labels as JSON",
    )

    # filter command
    filter_parser = subparsers.add_parser(
        "filter",
        help="Keep only edges with the selected labels",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Node statements, graph attributes and comments are always kept.
With no --label and no --no-label the document is returned unchanged.
""",
    )
    filter_parser.add_argument("file", help="DOT file ('-' for stdin)", metavar="FILE")
    filter_parser.add_argument(
        "-l",
        "--label",
        action="append",
        help="Edge label to keep (can be repeated; 'all' disables filtering)",
        metavar="LABEL",
    )
    filter_parser.add_argument(
        "--no-label",
        action="store_true",
        help="Keep edges that have no label",
    )
    filter_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output file path (default: stdout)",
        metavar="PATH",
    )

    # color command
    color_parser = subparsers.add_parser(
        "color",
        help="Color edges by label",
    )
    color_parser.add_argument("file", help="DOT file ('-' for stdin)", metavar="FILE")
    color_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output file path (default: stdout)",
        metavar="PATH",
    )
    color_parser.add_argument(
        "--legend",
        action="store_true",
        help="Print the label/color legend to stderr",
    )

    # defs command
    defs_parser = subparsers.add_parser(
        "defs",
        help="Show node and edge definitions",
    )
    defs_parser.add_argument("file", help="DOT file ('-' for stdin)", metavar="FILE")
    defs_group = defs_parser.add_mutually_exclusive_group()
    defs_group.add_argument(
        "--nodes",
        action="store_true",
        help="Only show node definitions",
    )
    defs_group.add_argument(
        "--edges",
        action="store_true",
        help="Only show edge definitions",
    )
    defs_parser.add_argument(
        "--key",
        help="Look up one node id or edge key (e.g. 'a->b', 'a-calls-b')",
        metavar="KEY",
    )
    defs_parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output as JSON",
    )

    # render command
    render_parser = subparsers.add_parser(
        "render",
        help="Render a document with Graphviz",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Requires the Graphviz 'dot' executable on PATH (or [render] binary in
.dotlens.toml). Without -o the image is saved as graph-<engine>-<time>.<format>.
""",
    )
    render_parser.add_argument("file", help="DOT file ('-' for stdin)", metavar="FILE")
    render_parser.add_argument(
        "-e",
        "--engine",
        choices=SUPPORTED_LAYOUTS,
        help="Layout engine (default from config: dot)",
    )
    render_parser.add_argument(
        "-f",
        "--format",
        choices=SUPPORTED_FORMATS,
        help="Output format (default from config: svg)",
    )
    render_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output file path",
        metavar="PATH",
    )
    render_parser.add_argument(
        "--stdout",
        action="store_true",
        help="Write the image to stdout",
    )
    render_parser.add_argument(
        "-l",
        "--label",
        action="append",
        help="Only render edges with this label (can be repeated)",
        metavar="LABEL",
    )
    render_parser.add_argument(
        "--no-label",
        action="store_true",
        help="Include edges that have no label in the selection",
    )
    render_parser.add_argument(
        "--color",
        action="store_true",
        help="Color edges by label before rendering",
    )

    return parser


def configure_logging(args: argparse.Namespace) -> None:
    """Set the root log level from -v/-q."""
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(name)s: %(message)s")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()

    # Enable shell tab-completion if argcomplete is installed
    # Install with: pip install dotlens[completion]
    try:
        import argcomplete

        argcomplete.autocomplete(parser)
    except ImportError:
        pass

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    configure_logging(args)

    try:
        if args.command == "labels":
            return labels.run(args)
        elif args.command == "filter":
            return filter_cmd.run(args)
        elif args.command == "color":
            return color_cmd.run(args)
        elif args.command == "defs":
            return defs.run(args)
        elif args.command == "render":
            return render_cmd.run(args)
        else:
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except Exception as e:
        if args.verbose:
            raise
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
