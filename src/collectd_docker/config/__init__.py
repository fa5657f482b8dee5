"""
Configuration loading for the collectd_docker package.

Configuration is read once from defaults, an optional TOML file and the
process environment, and returned as an immutable value.
"""

from .loader import getenv, load_config, load_toml_file
from .validators import validate_monitor_config

__all__ = [
    "getenv",
    "load_config",
    "load_toml_file",
    "validate_monitor_config",
]
