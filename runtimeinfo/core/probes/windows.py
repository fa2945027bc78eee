"""Windows container probe.

Windows containers run as ContainerAdministrator in the "User Manager"
domain by default, and the host marks them with a ContainerType value in
the Control registry key.
"""

import asyncio
import getpass
import os
from typing import Optional

from runtimeinfo.core.platform import OSFamily
from runtimeinfo.core.probes.base import PlatformProbe
from runtimeinfo.core.probes.registry import register_probe
from runtimeinfo.utils.constants import (
    WINDOWS_CONTAINER_DOMAIN,
    WINDOWS_CONTAINER_TYPE_CONTAINER,
    WINDOWS_CONTAINER_TYPE_VALUE,
    WINDOWS_CONTAINER_USER,
    WINDOWS_CONTROL_KEY,
)
from runtimeinfo.utils.logging_config import get_logger

logger = get_logger(__name__)


@register_probe(OSFamily.WINDOWS)
class WindowsProbe(PlatformProbe):
    """Container probe for Windows hosts."""

    async def detect(self, cancel_event: Optional[asyncio.Event] = None) -> bool:
        user, domain = self.current_user()
        if user == WINDOWS_CONTAINER_USER and domain == WINDOWS_CONTAINER_DOMAIN:
            logger.debug(f"Running as {domain}\\{user}")
            return True

        self.check_cancelled(cancel_event)
        container_type = await asyncio.to_thread(self.read_container_type)
        self.check_cancelled(cancel_event)

        # REG_DWORD values come back as int
        if isinstance(container_type, int) and container_type == WINDOWS_CONTAINER_TYPE_CONTAINER:
            logger.debug(f"{WINDOWS_CONTAINER_TYPE_VALUE} registry value is {container_type}")
            return True

        return False

    def current_user(self) -> tuple[str, str]:
        """Return the (user name, domain name) of the current process."""
        try:
            user = getpass.getuser()
        except (OSError, ImportError, KeyError) as e:
            logger.debug(f"Could not determine current user: {e}")
            user = ""
        return user, os.environ.get("USERDOMAIN", "")

    def read_container_type(self) -> Optional[object]:
        """Read the ContainerType registry value.

        Returns:
            The stored value, or None if the key or value cannot be read
        """
        try:
            import winreg
        except ImportError:
            return None

        try:
            with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, WINDOWS_CONTROL_KEY) as key:
                value, _ = winreg.QueryValueEx(key, WINDOWS_CONTAINER_TYPE_VALUE)
                return value
        except OSError as e:
            logger.debug(f"Could not read {WINDOWS_CONTAINER_TYPE_VALUE} from registry: {e}")
            return None
