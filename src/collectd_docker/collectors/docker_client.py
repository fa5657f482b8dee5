"""
Docker Engine implementation of the runtime client.
"""

import logging
import queue
from typing import Any, Optional

import docker

from ..models.container import ContainerMetadata
from .base import AbstractRuntimeClient

logger = logging.getLogger(__name__)


class DockerRuntimeClient(AbstractRuntimeClient):
    """
    Runtime client backed by the Docker SDK.

    Uses the low-level API client so that inspection returns the raw
    payload and stats are decoded JSON dicts, one per sample.
    """

    def __init__(self, client: Optional[docker.DockerClient] = None):
        self.client = client or docker.from_env()

    def inspect_container(self, container_id: str) -> ContainerMetadata:
        payload = self.client.api.inspect_container(container_id)
        return ContainerMetadata.from_inspect(payload)

    def stats(self, container_id: str, sink: "queue.Queue[Any]", stream: bool = True) -> None:
        logger.debug(f"Opening stats stream for container {container_id[:12]}")
        if not stream:
            sink.put(self.client.api.stats(container_id, stream=False))
            return
        samples = self.client.api.stats(container_id, decode=True, stream=True)
        for sample in samples:
            sink.put(sample)
        logger.debug(f"Stats stream for container {container_id[:12]} closed")
