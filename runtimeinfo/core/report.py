"""Aggregate view of every environment check."""

import asyncio
from dataclasses import asdict, dataclass
from typing import Any, Optional

from runtimeinfo.core.container import ContainerCheck, get_container_check
from runtimeinfo.core.flags import is_azure_app_service, is_azure_function, is_github_action
from runtimeinfo.core.platform import OSFamily, detect_os_family


@dataclass
class EnvironmentReport:
    """Snapshot of the detected runtime environment."""

    os_family: OSFamily
    is_container: bool
    is_github_action: bool
    is_azure_function: bool
    is_azure_app_service: bool

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["os_family"] = self.os_family.value
        return data


async def collect_environment_report(
    check: Optional[ContainerCheck] = None,
    cancel_event: Optional[asyncio.Event] = None,
) -> EnvironmentReport:
    """Collect the OS family, hosting flags and container verdict."""
    check = check or get_container_check()
    return EnvironmentReport(
        os_family=detect_os_family(),
        is_container=await check.get(cancel_event),
        is_github_action=is_github_action(),
        is_azure_function=is_azure_function(),
        is_azure_app_service=is_azure_app_service(),
    )
