"""
dotlens.commands - CLI command implementations
"""

__all__ = [
    "color_cmd",
    "defs",
    "filter_cmd",
    "labels",
    "render_cmd",
]
