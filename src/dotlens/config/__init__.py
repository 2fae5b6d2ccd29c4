"""
dotlens.config - Configuration loading and defaults
"""

from dotlens.config.defaults import DEFAULT_CONFIG
from dotlens.config.loader import (
    CONFIG_FILENAME,
    _try_parse_env_value,
    apply_env_overrides,
    find_config_file,
    get_config,
    load_config,
    merge_configs,
)

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_CONFIG",
    "_try_parse_env_value",
    "apply_env_overrides",
    "find_config_file",
    "get_config",
    "load_config",
    "merge_configs",
]
