"""Custom exceptions for runtimeinfo."""


class RuntimeInfoError(Exception):
    """Base exception for all errors."""

    pass


class ConfigurationError(RuntimeInfoError):
    """Configuration validation or loading error."""

    pass


class DetectionCancelledError(RuntimeInfoError):
    """An environment check was aborted before it produced a verdict."""

    def __init__(self, message: str = "Detection was cancelled", check: str = None):
        super().__init__(message)
        self.check = check
