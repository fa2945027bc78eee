"""Probe for platforms without container signals."""

import asyncio
from typing import Optional

from runtimeinfo.core.probes.base import PlatformProbe


class DefaultProbe(PlatformProbe):
    """Reports no container on unsupported or unknown platforms."""

    async def detect(self, cancel_event: Optional[asyncio.Event] = None) -> bool:
        return False
