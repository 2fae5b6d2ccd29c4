"""
dotlens.utilities.render - Hand documents to the Graphviz layout engine.

Graphviz is treated as a black box: text goes in on stdin, the rendered
image comes back on stdout. Any failure is raised as RenderError with the
engine's own message.
"""

from __future__ import annotations

import logging
import subprocess
from datetime import datetime

from dotlens.errors import RenderError

logger = logging.getLogger(__name__)

SUPPORTED_LAYOUTS = ("dot", "neato", "fdp", "circo", "twopi")
SUPPORTED_FORMATS = ("svg", "png", "pdf", "json", "dot")
DEFAULT_LAYOUT = "dot"


def render(
    text: str,
    engine: str = DEFAULT_LAYOUT,
    output_format: str = "svg",
    binary: str = "dot",
    timeout: float = 30,
) -> bytes:
    """Render a DOT document with Graphviz.

    Args:
        text: DOT document text.
        engine: Layout engine name, one of SUPPORTED_LAYOUTS.
        output_format: Graphviz output format, one of SUPPORTED_FORMATS.
        binary: Graphviz executable to run.
        timeout: Seconds to wait for the engine.

    Returns:
        The rendered output.

    Raises:
        RenderError: On an unknown engine or format, a missing binary, a
            timeout, or a non-zero exit from Graphviz.
    """
    if engine not in SUPPORTED_LAYOUTS:
        raise RenderError(
            f"Unknown layout engine '{engine}' (choose from {', '.join(SUPPORTED_LAYOUTS)})"
        )
    if output_format not in SUPPORTED_FORMATS:
        raise RenderError(
            f"Unknown output format '{output_format}' "
            f"(choose from {', '.join(SUPPORTED_FORMATS)})"
        )

    cmd = [binary, f"-K{engine}", f"-T{output_format}"]
    logger.debug("Running %s", " ".join(cmd))

    try:
        result = subprocess.run(
            cmd,
            input=text.encode("utf-8"),
            capture_output=True,
            timeout=timeout,
        )
    except FileNotFoundError as e:
        raise RenderError(
            f"Graphviz executable '{binary}' not found. Install Graphviz to render graphs."
        ) from e
    except subprocess.TimeoutExpired as e:
        raise RenderError(f"Graphviz did not finish within {timeout} seconds") from e

    if result.returncode != 0:
        message = result.stderr.decode("utf-8", errors="replace").strip()
        raise RenderError(
            f"Failed to render the graph. Please check your DOT syntax.\n{message}".rstrip()
        )

    return result.stdout


def generate_filename(engine: str, extension: str = "svg", now: datetime | None = None) -> str:
    """Build an output name like ``graph-dot-2024-01-31T12-30-00.svg``."""
    stamp = (now or datetime.now()).strftime("%Y-%m-%dT%H-%M-%S")
    return f"graph-{engine}-{stamp}.{extension}"
