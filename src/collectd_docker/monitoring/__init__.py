"""
Per-container monitoring lifecycle.
"""

from .monitor import Monitor, MonitorState

__all__ = ["Monitor", "MonitorState"]
