"""
Configuration validation utilities.

Turns raw configuration data, as merged from TOML and the environment,
into a validated ``MonitorConfig``.
"""

import logging
from typing import Any, Dict

from ..models.config import MonitorConfig
from ..validation import (
    validate_key_name,
    validate_positive_float,
    validate_positive_integer,
)

logger = logging.getLogger(__name__)


def validate_monitor_config(config_data: Dict[str, Any]) -> MonitorConfig:
    """
    Validate and create a MonitorConfig from raw configuration data.

    Args:
        config_data: Mapping with optional ``identity`` and ``sampling``
            sections; missing keys take their defaults

    Returns:
        Validated MonitorConfig instance

    Raises:
        ValidationError: If validation fails
    """
    identity_settings = config_data.get("identity", {})
    sampling_settings = config_data.get("sampling", {})
    defaults = MonitorConfig()

    app_label = validate_key_name(
        identity_settings.get("app_label", defaults.app_label),
        field_name="identity.app_label",
    )
    app_env_key = validate_key_name(
        identity_settings.get("app_env_key", defaults.app_env_key),
        field_name="identity.app_env_key",
    )
    task_label = validate_key_name(
        identity_settings.get("task_label", defaults.task_label),
        field_name="identity.task_label",
    )
    task_env_key = validate_key_name(
        identity_settings.get("task_env_key", defaults.task_env_key),
        field_name="identity.task_env_key",
    )

    interval = validate_positive_integer(
        sampling_settings.get("interval", defaults.interval),
        min_value=1,
        field_name="sampling.interval",
    )
    shutdown_timeout = validate_positive_float(
        sampling_settings.get("shutdown_timeout", defaults.shutdown_timeout),
        min_value=0.1,
        max_value=300.0,
        field_name="sampling.shutdown_timeout",
    )

    config = MonitorConfig(
        app_label=app_label,
        app_env_key=app_env_key,
        task_label=task_label,
        task_env_key=task_env_key,
        interval=interval,
        shutdown_timeout=shutdown_timeout,
    )
    logger.debug(f"Validated monitor configuration: {config}")
    return config
