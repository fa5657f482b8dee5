"""
Configuration loading utilities.

Configuration is assembled once at startup from three layers, later ones
winning: built-in defaults, an optional TOML file and the process
environment. The result is an immutable ``MonitorConfig`` that callers pass
explicitly to the components that need it.
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from ..models.config import (
    APP_ENV_ENV,
    APP_LABEL_ENV,
    TASK_ENV_ENV,
    TASK_LABEL_ENV,
    MonitorConfig,
)
from ..validation import ErrorSeverity, handle_config_error
from .validators import validate_monitor_config

logger = logging.getLogger(__name__)

# Environment variable -> key in the [identity] section.
_IDENTITY_ENV_OVERRIDES = {
    APP_LABEL_ENV: "app_label",
    APP_ENV_ENV: "app_env_key",
    TASK_LABEL_ENV: "task_label",
    TASK_ENV_ENV: "task_env_key",
}


def getenv(name: str, default: str = "", environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Return the value of an environment variable or ``default``.

    An empty value counts as unset.
    """
    env = os.environ if environ is None else environ
    value = env.get(name, "")
    if value:
        return value
    return default


def load_toml_file(file_path: Path, description: str = "configuration file") -> Dict[str, Any]:
    """
    Load and parse a TOML file with error handling.

    Args:
        file_path: Path to the TOML file to load
        description: Human-readable description for error messages

    Returns:
        Parsed TOML data as a dictionary

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the file is malformed
    """
    logger.info(f"Loading {description} from: {file_path}")

    if not file_path.exists():
        logger.error(f"{description} not found: {file_path}")
        raise FileNotFoundError(f"{description} not found: {file_path}")

    try:
        with open(file_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        handle_config_error(
            error=e,
            context=f"parsing {description}",
            severity=ErrorSeverity.CRITICAL,
            reraise=True,
            logger=logger
        )


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> MonitorConfig:
    """
    Build the monitor configuration.

    Args:
        config_path: Optional TOML file with ``[identity]`` and ``[sampling]``
            sections
        environ: Environment mapping to read overrides from, defaults to
            ``os.environ``

    Returns:
        Validated, immutable MonitorConfig

    Raises:
        FileNotFoundError: If ``config_path`` is given but missing
        ValidationError: If any value is invalid
    """
    data: Dict[str, Any] = {}
    if config_path is not None:
        data = load_toml_file(Path(config_path), "monitor configuration file")

    identity = dict(data.get("identity", {}))
    for env_name, key in _IDENTITY_ENV_OVERRIDES.items():
        value = getenv(env_name, environ=environ)
        if value:
            logger.debug(f"{key} overridden by {env_name}={value}")
            identity[key] = value

    return validate_monitor_config({
        "identity": identity,
        "sampling": dict(data.get("sampling", {})),
    })
