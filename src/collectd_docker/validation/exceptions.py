"""
Exception types and error handling for container monitoring.

This module provides the validation error used for configuration problems,
the error taxonomy raised while monitoring a container, and a small helper
for logging errors consistently before propagating them.
"""

import logging
from enum import Enum
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)


class ErrorSeverity(Enum):
    """Severity levels for error handling."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ValidationError(Exception):
    """
    Exception raised when validation fails.

    Raised for malformed configuration, including a non-positive
    sampling interval.
    """

    def __init__(self, message: str, field_name: Optional[str] = None,
                 value: Any = None, severity: ErrorSeverity = ErrorSeverity.ERROR):
        super().__init__(message)
        self.field_name = field_name
        self.value = value
        self.severity = severity


class MonitorError(Exception):
    """Base class for faults raised while monitoring a single container."""

    def __init__(self, message: str, container_id: Optional[str] = None):
        super().__init__(message)
        self.container_id = container_id


class InspectError(MonitorError):
    """The runtime client failed to describe the container."""


class StreamError(MonitorError):
    """The blocking stats stream failed after monitoring started."""


class NoNeedToMonitor(Exception):
    """
    Raised when a container carries no application identity.

    This is a normal skip outcome, not a fault. Callers should not retry
    or alert on it.
    """

    def __init__(self, container_id: str, name: str = ""):
        super().__init__(f"container {container_id} is not supposed to be monitored")
        self.container_id = container_id
        self.name = name


def handle_error(
    error: Exception,
    context: str,
    severity: Union[ErrorSeverity, str] = ErrorSeverity.ERROR,
    reraise: bool = True,
    logger: Optional[logging.Logger] = None
) -> None:
    """
    Handle errors with consistent logging and optional re-raising.

    Args:
        error: The exception that occurred
        context: Context description of where the error occurred
        severity: Severity level for logging
        reraise: Whether to re-raise the exception after logging
        logger: Logger instance to use (defaults to module logger)
    """
    effective_logger = logger or globals()['logger']

    error_msg = f"Error in {context}: {error}"

    if isinstance(severity, str):
        severity = ErrorSeverity(severity.lower())

    if severity is ErrorSeverity.DEBUG:
        effective_logger.debug(error_msg, exc_info=True)
    elif severity is ErrorSeverity.INFO:
        effective_logger.info(error_msg)
    elif severity is ErrorSeverity.WARNING:
        effective_logger.warning(error_msg)
    elif severity is ErrorSeverity.ERROR:
        effective_logger.error(error_msg)
    else:
        effective_logger.critical(error_msg, exc_info=True)

    if reraise:
        raise error


def handle_config_error(error: Exception, context: str, **kwargs) -> None:
    """Handle configuration-related errors."""
    handle_error(error, f"config {context}", **kwargs)
