"""
Sampler implementation.

The sampler is the per-container worker of the monitoring pipeline: it
consumes raw stats snapshots pushed by the runtime client, keeps every Nth
one, tags it and hands it to the shared output queue.
"""

import logging
import queue
import threading
import time
from typing import Any, Mapping, Optional

from ..models.container import TaggedSnapshot
from ..validation import validate_positive_integer

logger = logging.getLogger(__name__)

# Queued after the last snapshot when the stats stream ends.
_STREAM_END = object()


class Sampler:
    """
    Thins and tags the stats stream of one container.

    The runtime client puts raw snapshots onto ``input_queue``. The worker
    thread forwards snapshots at positions ``0, interval, 2 * interval, ...``
    to ``output_queue`` as ``TaggedSnapshot`` objects, in arrival order.

    Both queue operations block: the input queue holds a single snapshot
    and the output queue is bounded by its owner, so a slow consumer
    throttles the stream instead of snapshots being buffered or dropped.
    """

    def __init__(
        self,
        tags: Mapping[str, str],
        interval: int,
        output_queue: 'queue.Queue[TaggedSnapshot]',
        name: str = "Sampler",
    ):
        """
        Args:
            tags: Immutable tag set attached to every forwarded snapshot
            interval: Forward every Nth snapshot, must be positive
            output_queue: Shared destination for tagged snapshots
            name: Name of the worker thread

        Raises:
            ValidationError: If interval is not a positive integer
        """
        self.tags = tags
        self.interval = validate_positive_integer(interval, min_value=1, field_name="interval")
        self.output_queue = output_queue
        self.name = name
        self.input_queue: 'queue.Queue[Any]' = queue.Queue(maxsize=1)

        self.thread: Optional[threading.Thread] = None
        self.running = False

        self.received = 0
        self.forwarded = 0
        self.last_activity_time = 0.0

    def start(self) -> None:
        """Start the worker thread."""
        if self.running:
            logger.warning(f"{self.name} already running")
            return

        self.running = True
        self.thread = threading.Thread(
            target=self.sampling_loop,
            name=self.name,
            daemon=True
        )
        self.thread.start()
        logger.debug(f"{self.name} started, forwarding every {self.interval} snapshot(s)")

    def close(self, timeout: float = 5.0) -> None:
        """
        Signal the end of the stream and wait for the worker to drain.

        Snapshots already queued are still forwarded. If the worker is
        stuck on a full output queue, this gives up after ``timeout`` and
        leaves the worker blocked.

        Args:
            timeout: Seconds to wait for the end marker to be queued and
                again for the worker thread to exit
        """
        if not self.running:
            return

        try:
            self.input_queue.put(_STREAM_END, timeout=timeout)
        except queue.Full:
            logger.warning(f"{self.name} did not stop within {timeout}s")
            return

        if self.thread and self.thread.is_alive():
            self.thread.join(timeout=timeout)
            if self.thread.is_alive():
                logger.warning(f"{self.name} did not stop within {timeout}s")
                return
        self.running = False
        logger.debug(f"{self.name} stopped after {self.received} snapshot(s), {self.forwarded} forwarded")

    def sampling_loop(self) -> None:
        """Main loop of the worker thread."""
        i = 0
        while True:
            snapshot = self.input_queue.get()
            if snapshot is _STREAM_END:
                break

            self.received += 1
            self.last_activity_time = time.time()

            if i % self.interval == 0:
                self.output_queue.put(TaggedSnapshot(tags=self.tags, stats=snapshot))
                self.forwarded += 1

            i += 1

    def get_performance_info(self) -> dict:
        """
        Return counters describing the worker.

        Returns:
            Dictionary with the worker state and snapshot counters
        """
        return {
            'name': self.name,
            'running': self.running,
            'interval': self.interval,
            'received': self.received,
            'forwarded': self.forwarded,
            'last_activity': self.last_activity_time,
            'output_queue_size': self.output_queue.qsize(),
        }
