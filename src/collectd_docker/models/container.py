"""
Container data models.

This module defines the read-only view of an inspected container, the
resolved identity of a container and the tagged snapshot delivered
downstream for every forwarded stats sample.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

# Task identity used when no task label or env variable resolves.
DEFAULT_TASK = "default"


@dataclass(frozen=True)
class ContainerMetadata:
    """
    Labels and environment of a single container as reported by inspection.

    Attributes:
        id: Full container ID.
        name: Container name (Docker reports it with a leading ``/``).
        labels: Label name to value mapping.
        env: Ordered ``KEY=VALUE`` environment entries.
    """

    id: str
    name: str = ""
    labels: Mapping[str, str] = field(default_factory=dict)
    env: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "labels", MappingProxyType(dict(self.labels or {})))
        object.__setattr__(self, "env", tuple(self.env or ()))

    @classmethod
    def from_inspect(cls, payload: Dict[str, Any]) -> "ContainerMetadata":
        """
        Build metadata from a Docker inspect payload.

        ``Config.Labels`` and ``Config.Env`` are ``null`` for containers
        started without them.
        """
        config = payload.get("Config") or {}
        return cls(
            id=payload.get("Id", ""),
            name=payload.get("Name", ""),
            labels=config.get("Labels") or {},
            env=config.get("Env") or (),
        )


@dataclass(frozen=True)
class Identity:
    """Resolved application and task identity of a container."""

    app: str
    task: str = DEFAULT_TASK

    @property
    def should_monitor(self) -> bool:
        return self.app != ""


@dataclass(frozen=True)
class TaggedSnapshot:
    """
    A raw stats snapshot paired with the tags of the container it came from.

    ``tags`` is shared read-only between all snapshots of one monitor.
    """

    tags: Mapping[str, str]
    stats: Any
