"""
dotlens.utilities.documents - Load and save DOT documents.

Loading checks that the file has a known extension, is not empty and is
below the size limit. Content that does not look like a DOT
graph is still loaded, with a warning.
"""

from __future__ import annotations

import logging
import re
import sys
from pathlib import Path
from typing import Any

from dotlens.config import DEFAULT_CONFIG
from dotlens.errors import DocumentLoadError

logger = logging.getLogger(__name__)

GRAPH_KEYWORD_PATTERN = re.compile(r"\b(graph|digraph)\b", re.IGNORECASE)

STDIN_NAME = "-"


def is_valid_dot_content(content: str) -> bool:
    """Basic structural check: a graph keyword and a pair of braces."""
    if not content:
        return False
    trimmed = content.strip()
    return bool(GRAPH_KEYWORD_PATTERN.search(trimmed)) and "{" in trimmed and "}" in trimmed


def load_document(path: str | Path, config: dict[str, Any] | None = None) -> str:
    """Read a DOT document from a file, or from stdin when path is '-'.

    Args:
        path: File path or '-'.
        config: Configuration providing the ``files`` section.

    Returns:
        The document text.

    Raises:
        DocumentLoadError: If the file is missing, has an unsupported
            extension, is empty, or is larger than the configured limit.
    """
    files_config = (config or DEFAULT_CONFIG).get("files", DEFAULT_CONFIG["files"])

    if str(path) == STDIN_NAME:
        content = sys.stdin.read()
        if not content:
            raise DocumentLoadError("No input on stdin")
        _warn_if_not_dot(content, "stdin")
        return content

    file_path = Path(path)
    extensions = [ext.lower() for ext in files_config.get("extensions", [])]
    if extensions and file_path.suffix.lower() not in extensions:
        raise DocumentLoadError(
            f"Please select a file with one of these extensions: {', '.join(extensions)}"
        )

    if not file_path.is_file():
        raise DocumentLoadError(f"File not found: {file_path}")

    size = file_path.stat().st_size
    max_size = files_config.get("max_file_size", 0)
    if max_size and size > max_size:
        raise DocumentLoadError(
            f"File is too large. Maximum size is {max_size / (1024 * 1024):g}MB"
        )
    if size == 0:
        raise DocumentLoadError("Selected file is empty")

    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(f"Error reading file {file_path}: {e}") from e

    _warn_if_not_dot(content, str(file_path))
    logger.debug("Loaded %s (%d bytes)", file_path, size)
    return content


def _warn_if_not_dot(content: str, source: str) -> None:
    if not is_valid_dot_content(content):
        logger.warning("%s does not appear to contain valid DOT syntax", source)


def write_output(text: str | bytes, output: Path | None) -> None:
    """Write text or bytes to a file, or to stdout when output is None."""
    if output is None:
        if isinstance(text, bytes):
            sys.stdout.buffer.write(text)
            sys.stdout.flush()
        else:
            sys.stdout.write(text if text.endswith("\n") else text + "\n")
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(text, bytes):
        output.write_bytes(text)
    else:
        output.write_text(text, encoding="utf-8")
