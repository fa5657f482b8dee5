"""
Defines the abstract runtime client used by monitors.

A runtime client knows how to describe a container and how to stream its
resource usage snapshots. Monitors only depend on this interface, so tests
and alternative runtimes can provide their own implementation.
"""

import queue
from abc import ABC, abstractmethod
from typing import Any

from ..models.container import ContainerMetadata


class AbstractRuntimeClient(ABC):
    """
    Abstract base class for container runtime clients.

    Subclasses wrap a concrete runtime API (e.g. the Docker Engine API).
    """

    @abstractmethod
    def inspect_container(self, container_id: str) -> ContainerMetadata:
        """
        Describe a container.

        Args:
            container_id: ID or name of the container.

        Returns:
            The container's labels and environment.

        Raises:
            Exception: Any error raised by the underlying runtime API.
        """
        pass

    @abstractmethod
    def stats(self, container_id: str, sink: "queue.Queue[Any]", stream: bool = True) -> None:
        """
        Push the container's stats snapshots onto ``sink``.

        Blocks until the stream ends. Each snapshot is put with a blocking
        ``put`` so a slow consumer throttles the stream.

        Args:
            container_id: ID of the container.
            sink: Queue receiving raw snapshots in arrival order.
            stream: Keep streaming until the container stops. When False a
                single snapshot is pushed.

        Raises:
            Exception: Any error raised by the underlying runtime API.
        """
        pass
