"""Platform container probes.

Importing this package registers the built-in probes.
"""

from runtimeinfo.core.probes.base import PlatformProbe
from runtimeinfo.core.probes.default import DefaultProbe
from runtimeinfo.core.probes.linux import LinuxProbe, line_has_container_marker
from runtimeinfo.core.probes.registry import (
    create_host_probe,
    create_probe,
    get_probe_class,
    list_probes,
    register_probe,
    unregister_probe,
)
from runtimeinfo.core.probes.windows import WindowsProbe

__all__ = [
    "PlatformProbe",
    "DefaultProbe",
    "LinuxProbe",
    "WindowsProbe",
    "line_has_container_marker",
    "register_probe",
    "unregister_probe",
    "get_probe_class",
    "create_probe",
    "create_host_probe",
    "list_probes",
]
