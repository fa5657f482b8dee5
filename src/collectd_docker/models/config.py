"""
Configuration data model.

This module contains the immutable configuration value consulted when
resolving container identities and sampling stats streams.
"""

from dataclasses import dataclass

# Environment variables that override the configurable identity keys.
APP_LABEL_ENV = "APP_LABEL_KEY"
APP_ENV_ENV = "APP_ENV_KEY"
TASK_LABEL_ENV = "TASK_LABEL_KEY"
TASK_ENV_ENV = "TASK_ENV_KEY"

# Fixed location and trim-prefix keys, not configurable.
APP_LOCATION_LABEL = "collectd_docker_app_label"
APP_LOCATION_ENV = "COLLECTD_DOCKER_APP_ENV"
APP_TRIM_PREFIX_ENV = "COLLECTD_DOCKER_APP_ENV_TRIM_PREFIX"
TASK_LOCATION_LABEL = "collectd_docker_task_label"
TASK_LOCATION_ENV = "COLLECTD_DOCKER_TASK_ENV"
TASK_TRIM_PREFIX_ENV = "COLLECTD_DOCKER_TASK_ENV_TRIM_PREFIX"

DEFAULT_APP_LABEL = "app_id"
DEFAULT_APP_ENV_KEY = "MARATHON_APP_ID"
DEFAULT_TASK_LABEL = "collectd_docker_task"
DEFAULT_TASK_ENV_KEY = "MESOS_TASK_ID"


@dataclass(frozen=True)
class IdentityKeys:
    """
    The lookup keys used to resolve one identity (``app`` or ``task``).

    Env keys are stored without the trailing ``=``; the resolver matches
    entries of the form ``KEY=VALUE``.
    """

    # Label whose value names another label holding the identity.
    location_label: str
    # Env variable whose value names another env variable holding the identity.
    location_env: str
    # Label holding the identity directly.
    label: str
    # Env variable holding the identity directly.
    env_key: str
    # Env variable holding a prefix to strip from the resolved identity.
    trim_prefix_env: str


@dataclass(frozen=True)
class MonitorConfig:
    """
    Configuration for container monitoring, resolved once at startup.

    Built by ``collectd_docker.config.load_config`` from defaults, an
    optional TOML file and the process environment. Instances are frozen
    and passed explicitly to resolvers and monitors.
    """

    # [identity]
    app_label: str = DEFAULT_APP_LABEL
    app_env_key: str = DEFAULT_APP_ENV_KEY
    task_label: str = DEFAULT_TASK_LABEL
    task_env_key: str = DEFAULT_TASK_ENV_KEY

    # [sampling]
    interval: int = 1  # forward every Nth snapshot
    shutdown_timeout: float = 5.0  # seconds to wait for a sampler thread to stop

    @property
    def app_keys(self) -> IdentityKeys:
        return IdentityKeys(
            location_label=APP_LOCATION_LABEL,
            location_env=APP_LOCATION_ENV,
            label=self.app_label,
            env_key=self.app_env_key,
            trim_prefix_env=APP_TRIM_PREFIX_ENV,
        )

    @property
    def task_keys(self) -> IdentityKeys:
        return IdentityKeys(
            location_label=TASK_LOCATION_LABEL,
            location_env=TASK_LOCATION_ENV,
            label=self.task_label,
            env_key=self.task_env_key,
            trim_prefix_env=TASK_TRIM_PREFIX_ENV,
        )
