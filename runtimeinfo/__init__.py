"""Runtime environment detection package."""

__version__ = "0.1.0"
__author__ = "runtimeinfo"
__description__ = (
    "Detects the host OS family and whether the process runs in a container, "
    "a CI runner, an Azure Function or an Azure App Service"
)

from runtimeinfo.core import (
    ContainerCheck,
    EnvironmentReport,
    OSFamily,
    collect_environment_report,
    detect_os_family,
    is_android,
    is_azure_app_service,
    is_azure_function,
    is_browser,
    is_container,
    is_github_action,
    is_ios,
    is_linux,
    is_macos,
    is_windows,
)
from runtimeinfo.utils.exceptions import DetectionCancelledError, RuntimeInfoError

__all__ = [
    "OSFamily",
    "detect_os_family",
    "is_windows",
    "is_macos",
    "is_linux",
    "is_android",
    "is_browser",
    "is_ios",
    "is_github_action",
    "is_azure_function",
    "is_azure_app_service",
    "is_container",
    "ContainerCheck",
    "EnvironmentReport",
    "collect_environment_report",
    "RuntimeInfoError",
    "DetectionCancelledError",
]
