"""Utils module exports."""

from runtimeinfo.utils.env_utils import env_has_content, env_is_true
from runtimeinfo.utils.exceptions import (
    ConfigurationError,
    DetectionCancelledError,
    RuntimeInfoError,
)
from runtimeinfo.utils.line_reader import CancellableLineReader
from runtimeinfo.utils.logging_config import get_logger, setup_logging

__all__ = [
    # Exceptions
    "RuntimeInfoError",
    "ConfigurationError",
    "DetectionCancelledError",
    # Environment
    "env_is_true",
    "env_has_content",
    # I/O
    "CancellableLineReader",
    # Logging
    "get_logger",
    "setup_logging",
]
