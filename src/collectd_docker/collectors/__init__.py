"""
Stats collection for monitored containers.

This package provides:

- The abstract runtime client contract (inspection and stats streaming)
- A Docker Engine implementation based on the Docker SDK
- The sampler, the per-container worker that thins the stats stream and
  attaches identity tags to every forwarded snapshot
"""

from .base import AbstractRuntimeClient
from .docker_client import DockerRuntimeClient
from .sampler import Sampler

__all__ = [
    "AbstractRuntimeClient",
    "DockerRuntimeClient",
    "Sampler",
]
