"""Probe registry mapping OS families to container probes.

The host probe is chosen once from the detected OS family; families with
no registered probe fall back to the default probe.
"""

from typing import Callable, Optional, TypeVar

from runtimeinfo.core.platform import OSFamily, detect_os_family
from runtimeinfo.core.probes.base import PlatformProbe
from runtimeinfo.core.probes.default import DefaultProbe
from runtimeinfo.utils.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T", bound=PlatformProbe)

# Registry of probe classes
_probe_registry: dict[OSFamily, type[PlatformProbe]] = {}


def register_probe(os_family: OSFamily) -> Callable[[type[T]], type[T]]:
    """Register a probe class for an OS family.

    Example:
        @register_probe(OSFamily.LINUX)
        class LinuxProbe(PlatformProbe):
            ...
    """

    def decorator(cls: type[T]) -> type[T]:
        if os_family in _probe_registry:
            logger.warning(f"Probe for '{os_family.value}' is already registered, overwriting")

        _probe_registry[os_family] = cls
        logger.debug(f"Registered container probe for {os_family.value}: {cls.__name__}")
        return cls

    return decorator


def get_probe_class(os_family: OSFamily) -> type[PlatformProbe] | None:
    """Get the probe class registered for an OS family."""
    return _probe_registry.get(os_family)


def unregister_probe(os_family: OSFamily) -> bool:
    """Unregister a probe.

    Returns:
        True if a probe was removed, False if none was registered
    """
    if os_family in _probe_registry:
        del _probe_registry[os_family]
        logger.debug(f"Unregistered container probe for {os_family.value}")
        return True
    return False


def create_probe(os_family: OSFamily, settings=None) -> PlatformProbe:
    """Create the probe for an OS family.

    Args:
        os_family: OS family to probe
        settings: Optional Settings used to configure the probe

    Returns:
        Registered probe instance, or the default probe when none is registered
    """
    probe_class = get_probe_class(os_family) or DefaultProbe
    if settings is None:
        return probe_class()
    return probe_class.from_settings(settings)


def create_host_probe(settings=None, platform: Optional[str] = None) -> PlatformProbe:
    """Create the probe matching the host OS family."""
    os_family = detect_os_family(platform)
    probe = create_probe(os_family, settings)
    logger.debug(f"Selected {probe!r} for host OS family {os_family.value}")
    return probe


def list_probes() -> list[OSFamily]:
    """List OS families with a registered probe."""
    return list(_probe_registry.keys())
