"""
dotlens.config.loader - Find, parse and merge .dotlens.toml files.

Configuration is layered:
1. DEFAULT_CONFIG
2. The nearest .dotlens.toml (current directory or a parent), or an
   explicit --config path
3. DOTLENS_<SECTION>_<KEY> environment variables
"""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any, Mapping

import tomlkit
from tomlkit.exceptions import TOMLKitError

from dotlens.config.defaults import DEFAULT_CONFIG
from dotlens.errors import ConfigError

CONFIG_FILENAME = ".dotlens.toml"
ENV_PREFIX = "DOTLENS_"


def find_config_file(start: Path) -> Path | None:
    """Find .dotlens.toml in ``start`` or any parent directory.

    Args:
        start: Directory to begin searching from.

    Returns:
        Path to the config file, or None if none exists.
    """
    current = start.resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current.parent == current:
            return None
        current = current.parent


def merge_configs(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge ``override`` onto ``base`` without modifying either."""
    merged = copy.deepcopy(dict(base))
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _try_parse_env_value(value: str) -> Any:
    """Interpret an environment string as JSON list/object, bool, int or str.

    Malformed JSON is returned as the original string.
    """
    stripped = value.strip()
    if stripped.startswith(("[", "{")):
        try:
            return json.loads(stripped)
        except json.JSONDecodeError:
            return value

    lowered = stripped.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False

    try:
        return int(stripped)
    except ValueError:
        return value


def apply_env_overrides(
    config: Mapping[str, Any], environ: Mapping[str, str] | None = None
) -> dict[str, Any]:
    """Apply DOTLENS_<SECTION>_<KEY> variables to a config.

    Only variables naming an existing section are applied, e.g.
    DOTLENS_RENDER_ENGINE=neato sets ``config["render"]["engine"]``.
    """
    environ = os.environ if environ is None else environ
    result = copy.deepcopy(dict(config))

    for name, raw in environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        section, _, key = name[len(ENV_PREFIX) :].lower().partition("_")
        if not key or not isinstance(result.get(section), dict):
            continue
        result[section][key] = _try_parse_env_value(raw)

    return result


def load_config(config_path: Path) -> dict[str, Any]:
    """Load a config file merged over the defaults.

    Args:
        config_path: Path to a .dotlens.toml file.

    Returns:
        Merged configuration dictionary (environment not applied).

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e

    try:
        data = tomlkit.parse(content).unwrap()
    except TOMLKitError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

    return merge_configs(DEFAULT_CONFIG, data)


def get_config(
    config_path: Path | None = None,
    start_dir: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Resolve the effective configuration.

    Args:
        config_path: Explicit config file; searched for when None.
        start_dir: Where to start searching (defaults to the cwd).
        environ: Environment mapping (defaults to os.environ).

    Returns:
        Configuration with file values and environment overrides applied.
    """
    if config_path is None:
        config_path = find_config_file(start_dir or Path.cwd())

    if config_path is not None:
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        config = load_config(config_path)
    else:
        config = copy.deepcopy(DEFAULT_CONFIG)

    return apply_env_overrides(config, environ)
