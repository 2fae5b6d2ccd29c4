"""
dotlens - Label-aware filtering and coloring for Graphviz DOT files

dotlens reads DOT text with a line-oriented heuristic parser, indexes node
and edge definitions, filters edges by label and colors edges by label,
all without rewriting anything it does not understand.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("dotlens")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from dotlens.dot import (
    ALL,
    NO_LABEL,
    apply_colors,
    assign_colors,
    build_definitions,
    extract_labels,
    filter_by_labels,
)

__all__ = [
    "__version__",
    "ALL",
    "NO_LABEL",
    "apply_colors",
    "assign_colors",
    "build_definitions",
    "extract_labels",
    "filter_by_labels",
]
