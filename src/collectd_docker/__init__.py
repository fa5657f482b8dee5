"""
collectd_docker: identity tagging and sampling of container stats.

This package attaches hierarchical identity tags (application, group, task)
to the stats stream of running containers and thins the stream at a
configurable interval.

The package is organized into specialized modules:
- config: Configuration loading from defaults, TOML and the environment
- models: Data structures and type definitions
- validation: Input validation and the monitor error taxonomy
- identity: Identity resolution and tag expansion
- collectors: Runtime clients and the per-container sampler
- monitoring: The lifecycle of monitoring one container

Usage:
    import queue
    from collectd_docker import DockerRuntimeClient, Monitor, NoNeedToMonitor, load_config

    config = load_config()
    output = queue.Queue(maxsize=1000)
    try:
        monitor = Monitor(DockerRuntimeClient(), container_id, config.interval, config)
    except NoNeedToMonitor:
        pass
    else:
        monitor.run(output)
"""

# Main interfaces
from .config import load_config
from .collectors import AbstractRuntimeClient, DockerRuntimeClient, Sampler
from .identity import IdentityResolver, build_tag_set
from .monitoring import Monitor, MonitorState

# Model classes for external use
from .models import (
    DEFAULT_TASK,
    ContainerMetadata,
    Identity,
    MonitorConfig,
    TaggedSnapshot,
)

# Errors
from .validation import (
    InspectError,
    MonitorError,
    NoNeedToMonitor,
    StreamError,
    ValidationError,
)

__version__ = "1.0.0"

__all__ = [
    # Main interfaces
    "load_config",
    "AbstractRuntimeClient",
    "DockerRuntimeClient",
    "Sampler",
    "IdentityResolver",
    "build_tag_set",
    "Monitor",
    "MonitorState",
    # Models
    "DEFAULT_TASK",
    "ContainerMetadata",
    "Identity",
    "MonitorConfig",
    "TaggedSnapshot",
    # Errors
    "InspectError",
    "MonitorError",
    "NoNeedToMonitor",
    "StreamError",
    "ValidationError",
]
