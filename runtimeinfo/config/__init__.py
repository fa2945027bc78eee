"""Config module exports."""

from runtimeinfo.config.settings import (
    Settings,
    get_settings,
    reload_settings,
)
from runtimeinfo.config.validators import (
    validate_log_level,
    validate_non_empty_string,
    validate_port,
    validate_positive_integer,
)

__all__ = [
    "Settings",
    "get_settings",
    "reload_settings",
    # Validators
    "validate_log_level",
    "validate_port",
    "validate_positive_integer",
    "validate_non_empty_string",
]
