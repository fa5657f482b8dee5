"""
Container identity resolution.

An identity (``app`` or ``task``) is looked up on a container through a
chain of labels and environment variables:

1. a location label naming another label that holds the identity
2. a location env variable naming another env variable that holds it
3. a direct label
4. a direct env variable

The first step that yields a non-empty value wins. A location key that
points at a missing key falls through to the next step. Finally a trim
prefix read from the environment is stripped once from the result.
"""

import logging
from typing import Optional, Sequence

from ..models.config import IdentityKeys, MonitorConfig
from ..models.container import DEFAULT_TASK, ContainerMetadata, Identity

logger = logging.getLogger(__name__)


def extract_env(env: Sequence[str], key: str) -> str:
    """Return the value of the first ``key=...`` entry, or ``""``."""
    prefix = key + "="
    for entry in env:
        if entry.startswith(prefix):
            return entry[len(prefix):]
    return ""


def trim_prefix(value: str, prefix: str) -> str:
    if prefix and value.startswith(prefix):
        return value[len(prefix):]
    return value


class IdentityResolver:
    """
    Resolves the application and task identity of a container.

    The resolver holds no per-container state and may be shared between
    threads.
    """

    def __init__(self, config: Optional[MonitorConfig] = None):
        self.config = config or MonitorConfig()

    def resolve(self, container: ContainerMetadata) -> Identity:
        return Identity(
            app=self.resolve_app(container),
            task=self.resolve_task(container),
        )

    def resolve_app(self, container: ContainerMetadata) -> str:
        """Resolve the app identity; ``""`` means the container is not monitored."""
        return self._resolve(container, self.config.app_keys, missing="")

    def resolve_task(self, container: ContainerMetadata) -> str:
        """Resolve the task identity, ``"default"`` when nothing is found."""
        return self._resolve(container, self.config.task_keys, missing=DEFAULT_TASK)

    def _resolve(self, container: ContainerMetadata, keys: IdentityKeys, missing: str) -> str:
        value = self._lookup(container, keys) or missing

        prefix = extract_env(container.env, keys.trim_prefix_env)
        if prefix:
            value = trim_prefix(value, prefix)
        return value

    def _lookup(self, container: ContainerMetadata, keys: IdentityKeys) -> str:
        labels = container.labels
        env = container.env

        location = labels.get(keys.location_label, "")
        if location:
            value = labels.get(location, "")
            if value:
                return value
            logger.debug(
                f"Container {container.id}: label {keys.location_label} "
                f"points at missing label {location}"
            )

        location = extract_env(env, keys.location_env)
        if location:
            value = extract_env(env, location)
            if value:
                return value
            logger.debug(
                f"Container {container.id}: env {keys.location_env} "
                f"points at missing env {location}"
            )

        return labels.get(keys.label, "") or extract_env(env, keys.env_key)
