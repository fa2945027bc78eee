"""Reusable configuration validators.

Provides validation functions that can be used across the application
for consistent configuration validation.
"""


def validate_log_level(level: str) -> str:
    """Validate a log level.

    Args:
        level: Log level string

    Returns:
        Normalized (uppercase) log level

    Raises:
        ValueError: If log level is invalid
    """
    valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

    level = level.upper().strip()

    if level not in valid_levels:
        raise ValueError(
            f"Invalid log level: {level}. Must be one of: {', '.join(sorted(valid_levels))}"
        )

    return level


def validate_port(port: int, field_name: str = "port") -> int:
    """Check a port number is in the TCP range.

    Raises:
        ValueError: If port is outside 1-65535
    """
    if port < 1 or port > 65535:
        raise ValueError(f"{field_name} must be between 1 and 65535")

    return port


def validate_positive_integer(value: int, field_name: str = "value") -> int:
    """Check an already-parsed integer is at least 1.

    Raises:
        ValueError: If value is zero or negative
    """
    if value < 1:
        raise ValueError(f"{field_name} must be a positive integer")

    return value


def validate_non_empty_string(value: str, field_name: str = "value") -> str:
    """Validate a non-empty string.

    Args:
        value: String to validate
        field_name: Name of the field for error messages

    Returns:
        Stripped string

    Raises:
        ValueError: If string is empty or None
    """
    if value is None:
        raise ValueError(f"{field_name} is required")

    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string")

    stripped = value.strip()
    if not stripped:
        raise ValueError(f"{field_name} cannot be empty")

    return stripped
