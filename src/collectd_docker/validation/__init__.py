"""
Validation and error handling for the collectd_docker package.

This module provides input validation, the monitor error taxonomy and
error handling with consistent error reporting across the package.
"""

# Core exception classes and error handling
from .exceptions import (
    ErrorSeverity,
    ValidationError,
    MonitorError,
    InspectError,
    StreamError,
    NoNeedToMonitor,
    handle_error,
    handle_config_error,
)

# Validation functions
from .validators import (
    validate_key_name,
    validate_positive_float,
    validate_positive_integer,
)

__all__ = [
    # Core functionality
    "ErrorSeverity",
    "ValidationError",
    "MonitorError",
    "InspectError",
    "StreamError",
    "NoNeedToMonitor",
    "handle_error",
    "handle_config_error",
    # Validators
    "validate_key_name",
    "validate_positive_float",
    "validate_positive_integer",
]
