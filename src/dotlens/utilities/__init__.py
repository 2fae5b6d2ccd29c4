"""dotlens.utilities - File loading and rendering helpers used by the CLI."""
