"""
Monitoring of a single container.

A ``Monitor`` inspects a container once, resolves its identity into a tag
set and then streams its stats through a ``Sampler`` until the stream ends.
"""

import logging
import queue
from enum import Enum
from typing import Optional

from ..collectors.base import AbstractRuntimeClient
from ..collectors.sampler import Sampler
from ..identity import IdentityResolver, build_tag_set
from ..models.config import MonitorConfig
from ..models.container import TaggedSnapshot
from ..validation import (
    ErrorSeverity,
    InspectError,
    NoNeedToMonitor,
    StreamError,
    handle_error,
    validate_positive_integer,
)

logger = logging.getLogger(__name__)


class MonitorState(Enum):
    """Lifecycle of a monitor."""
    READY = "ready"
    RUNNING = "running"
    FINISHED = "finished"
    FAILED = "failed"


class Monitor:
    """
    Monitors a single container (task).

    Construction inspects the container and resolves its tags; ``run``
    then blocks for the lifetime of the container's stats stream.

    Raises on construction:
        ValidationError: If interval is not a positive integer
        InspectError: If the container cannot be inspected
        NoNeedToMonitor: If the container has no app identity
    """

    def __init__(
        self,
        client: AbstractRuntimeClient,
        container_id: str,
        interval: int,
        config: Optional[MonitorConfig] = None,
    ):
        self.client = client
        self.config = config or MonitorConfig()
        self.interval = validate_positive_integer(interval, min_value=1, field_name="interval")

        try:
            container = client.inspect_container(container_id)
        except Exception as e:
            handle_error(
                error=e,
                context=f"inspecting container {container_id}",
                severity=ErrorSeverity.ERROR,
                reraise=False,
                logger=logger
            )
            raise InspectError(f"cannot inspect container {container_id}: {e}", container_id) from e

        identity = IdentityResolver(self.config).resolve(container)
        if not identity.should_monitor:
            logger.info(f"No need to monitor {container_id} {container.name}")
            raise NoNeedToMonitor(container_id, container.name)

        self.identity = identity
        self.tags = build_tag_set(self.identity)
        self.id = container.id or container_id
        self.name = container.name
        self.state = MonitorState.READY

        logger.info(f"Monitoring for {self.app}({self.task}) every {self.interval}")

    @property
    def app(self) -> str:
        return self.identity.app

    @property
    def task(self) -> str:
        return self.identity.task

    def run(self, output_queue: 'queue.Queue[TaggedSnapshot]') -> None:
        """
        Stream the container's stats into ``output_queue`` until the stream ends.

        Every ``interval``-th snapshot is forwarded as a ``TaggedSnapshot``.
        Returns when the stream closes cleanly.

        Args:
            output_queue: Shared destination for tagged snapshots; a full
                queue blocks this monitor

        Raises:
            StreamError: If the stats stream fails
            RuntimeError: If the monitor has already been run
        """
        if self.state is not MonitorState.READY:
            raise RuntimeError(f"Monitor for {self.id} is {self.state.value}, cannot run again")

        sampler = Sampler(
            tags=self.tags,
            interval=self.interval,
            output_queue=output_queue,
            name=f"Sampler-{self.id[:12]}",
        )
        self.state = MonitorState.RUNNING
        sampler.start()

        try:
            self.client.stats(self.id, sampler.input_queue, stream=True)
        except Exception as e:
            self.state = MonitorState.FAILED
            handle_error(
                error=e,
                context=f"stats stream of {self.app}({self.task})",
                severity=ErrorSeverity.ERROR,
                reraise=False,
                logger=logger
            )
            raise StreamError(f"stats stream failed for container {self.id}: {e}", self.id) from e
        finally:
            sampler.close(timeout=self.config.shutdown_timeout)

        self.state = MonitorState.FINISHED
        logger.info(f"Stats stream for {self.app}({self.task}) ended")
