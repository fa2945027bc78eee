"""Host operating system family detection."""

import sys
from enum import Enum
from typing import Optional


class OSFamily(str, Enum):
    """Operating system families the predicates distinguish."""

    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"
    ANDROID = "android"
    BROWSER = "browser"
    IOS = "ios"
    OTHER = "other"


def detect_os_family(platform: Optional[str] = None) -> OSFamily:
    """Map a ``sys.platform`` string to an OS family.

    Args:
        platform: Platform identifier, defaults to the running interpreter's

    Returns:
        Matching OSFamily, OTHER when the platform is not recognised
    """
    if platform is None:
        platform = sys.platform
        # Older Android builds report "linux"
        if platform.startswith("linux") and hasattr(sys, "getandroidapilevel"):
            return OSFamily.ANDROID

    if platform == "win32":
        return OSFamily.WINDOWS
    if platform == "darwin":
        return OSFamily.MACOS
    if platform == "ios":
        return OSFamily.IOS
    if platform == "android":
        return OSFamily.ANDROID
    if platform.startswith("linux"):
        return OSFamily.LINUX
    if platform == "emscripten":
        return OSFamily.BROWSER
    return OSFamily.OTHER


def is_windows() -> bool:
    return detect_os_family() is OSFamily.WINDOWS


def is_macos() -> bool:
    return detect_os_family() is OSFamily.MACOS


def is_linux() -> bool:
    return detect_os_family() is OSFamily.LINUX


def is_android() -> bool:
    return detect_os_family() is OSFamily.ANDROID


def is_browser() -> bool:
    """Check for a WebAssembly build running in a browser (Emscripten)."""
    return detect_os_family() is OSFamily.BROWSER


def is_ios() -> bool:
    return detect_os_family() is OSFamily.IOS
