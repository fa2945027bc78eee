"""Platform probe base class and interface."""

import asyncio
from abc import ABC, abstractmethod
from typing import Optional

from runtimeinfo.utils.exceptions import DetectionCancelledError


class PlatformProbe(ABC):
    """Abstract base class for platform-specific container probes."""

    def __init__(self):
        self.name = self.__class__.__name__.replace("Probe", "").lower()

    @classmethod
    def from_settings(cls, settings) -> "PlatformProbe":
        """Create a probe from application settings."""
        return cls()

    @abstractmethod
    async def detect(self, cancel_event: Optional[asyncio.Event] = None) -> bool:
        """Look for container signals on this platform.

        Signals are checked in priority order and the first positive one
        ends the search. Read failures count as an absent signal.

        Args:
            cancel_event: When set, pending reads are abandoned

        Returns:
            True if a container signal was found

        Raises:
            DetectionCancelledError: If cancel_event was set before a verdict
        """
        pass

    def check_cancelled(self, cancel_event: Optional[asyncio.Event]) -> None:
        """Raise DetectionCancelledError if cancel_event is set."""
        if cancel_event is not None and cancel_event.is_set():
            raise DetectionCancelledError(f"{self.name} probe was cancelled", check=self.name)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
