"""
Data models for container monitoring.

Configuration Models:
- Identity lookup keys and sampling settings

Container Models:
- Inspected container metadata
- Resolved identities and tagged stats snapshots
"""

# Configuration models
from .config import IdentityKeys, MonitorConfig

# Container models
from .container import DEFAULT_TASK, ContainerMetadata, Identity, TaggedSnapshot

__all__ = [
    # Configuration
    "IdentityKeys",
    "MonitorConfig",
    # Container
    "DEFAULT_TASK",
    "ContainerMetadata",
    "Identity",
    "TaggedSnapshot",
]
