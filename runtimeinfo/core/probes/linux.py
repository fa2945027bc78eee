"""Linux container probe.

Checks the Docker marker file first, then streams the init process's
control group file looking for container runtime names.
"""

import asyncio
import os
from typing import Optional

from runtimeinfo.core.platform import OSFamily
from runtimeinfo.core.probes.base import PlatformProbe
from runtimeinfo.core.probes.registry import register_probe
from runtimeinfo.utils.constants import (
    CGROUP_CONTAINER_MARKERS,
    CGROUP_PATH,
    DEFAULT_READ_BUFFER_SIZE,
    DOCKERENV_PATH,
)
from runtimeinfo.utils.line_reader import CancellableLineReader
from runtimeinfo.utils.logging_config import get_logger

logger = get_logger(__name__)


def line_has_container_marker(line: str) -> bool:
    """Check a cgroup line for docker, kubepods or containerd (any case)."""
    lowered = line.lower()
    return any(marker in lowered for marker in CGROUP_CONTAINER_MARKERS)


@register_probe(OSFamily.LINUX)
class LinuxProbe(PlatformProbe):
    """Container probe for Linux hosts."""

    def __init__(
        self,
        dockerenv_path: str = DOCKERENV_PATH,
        cgroup_path: str = CGROUP_PATH,
        buffer_size: int = DEFAULT_READ_BUFFER_SIZE,
    ):
        super().__init__()
        self.dockerenv_path = dockerenv_path
        self.cgroup_path = cgroup_path
        self.buffer_size = buffer_size

    @classmethod
    def from_settings(cls, settings) -> "LinuxProbe":
        return cls(
            dockerenv_path=settings.dockerenv_path,
            cgroup_path=settings.cgroup_path,
            buffer_size=settings.read_buffer_size,
        )

    async def detect(self, cancel_event: Optional[asyncio.Event] = None) -> bool:
        if os.path.exists(self.dockerenv_path):
            logger.debug(f"Container marker found at {self.dockerenv_path}")
            return True

        if not os.path.exists(self.cgroup_path):
            logger.debug(f"No cgroup file at {self.cgroup_path}")
            return False

        return await self.scan_cgroup(cancel_event)

    async def scan_cgroup(self, cancel_event: Optional[asyncio.Event] = None) -> bool:
        """Stream the cgroup file, stopping at the first container marker.

        Raises:
            DetectionCancelledError: If cancel_event is set during the read
        """
        try:
            async with CancellableLineReader(
                self.cgroup_path, buffer_size=self.buffer_size, cancel_event=cancel_event
            ) as reader:
                async for line in reader:
                    if line_has_container_marker(line):
                        logger.debug(f"Container cgroup entry: {line}")
                        return True
        except OSError as e:
            logger.debug(f"Could not read {self.cgroup_path}: {e}")
            return False

        return False

    def __repr__(self) -> str:
        return (
            f"LinuxProbe(dockerenv_path={self.dockerenv_path!r}, "
            f"cgroup_path={self.cgroup_path!r})"
        )
