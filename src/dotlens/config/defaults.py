"""
dotlens.config.defaults - Default configuration values.
"""

DEFAULT_CONFIG = {
    "render": {
        "engine": "dot",
        "format": "svg",
        "timeout": 30,
        "binary": "dot",
    },
    "files": {
        "extensions": [".dot", ".gv"],
        "max_file_size": 10 * 1024 * 1024,
    },
    "coloring": {
        # Empty means the built-in palette
        "palette": [],
    },
}
