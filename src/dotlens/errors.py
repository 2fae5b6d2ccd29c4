"""
dotlens.errors - Exceptions raised outside the text engine.

The DOT engine itself never raises on document content; these cover file
loading, configuration and rendering.
"""


class DotlensError(Exception):
    """Base class for dotlens errors."""


class ConfigError(DotlensError):
    """Configuration file could not be read or parsed."""


class DocumentLoadError(DotlensError):
    """A DOT document could not be loaded."""


class RenderError(DotlensError):
    """The layout engine failed to render a document."""
