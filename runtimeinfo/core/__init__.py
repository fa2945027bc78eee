"""Core detection exports."""

from runtimeinfo.core.cells import OnceCell
from runtimeinfo.core.container import (
    ContainerCheck,
    detect_is_container,
    get_container_check,
    is_container,
    reset_container_check,
)
from runtimeinfo.core.flags import (
    EnvironmentFlag,
    is_azure_app_service,
    is_azure_function,
    is_github_action,
    reset_flags,
)
from runtimeinfo.core.platform import (
    OSFamily,
    detect_os_family,
    is_android,
    is_browser,
    is_ios,
    is_linux,
    is_macos,
    is_windows,
)
from runtimeinfo.core.report import EnvironmentReport, collect_environment_report

__all__ = [
    "OnceCell",
    # Platform
    "OSFamily",
    "detect_os_family",
    "is_windows",
    "is_macos",
    "is_linux",
    "is_android",
    "is_browser",
    "is_ios",
    # Flags
    "EnvironmentFlag",
    "is_github_action",
    "is_azure_function",
    "is_azure_app_service",
    "reset_flags",
    # Container
    "ContainerCheck",
    "detect_is_container",
    "get_container_check",
    "is_container",
    "reset_container_check",
    # Report
    "EnvironmentReport",
    "collect_environment_report",
]
