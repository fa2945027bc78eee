"""Shared fixtures for runtimeinfo tests."""

import asyncio
import threading
from typing import Optional

import pytest

from runtimeinfo.config import settings as settings_module
from runtimeinfo.core.container import reset_container_check
from runtimeinfo.core.flags import reset_flags
from runtimeinfo.core.probes import LinuxProbe, PlatformProbe

DETECTION_ENV_VARS = (
    "DOTNET_RUNNING_IN_CONTAINER",
    "DOTNET_RUNNING_IN_CONTAINERS",
    "GITHUB_ACTIONS",
    "CI",
    "FUNCTIONS_WORKER_RUNTIME",
    "WEBSITE_SITE_NAME",
    "WEBSITE_INSTANCE_ID",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Run every test without detection variables and with empty caches."""
    for name in DETECTION_ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    reset_flags()
    reset_container_check()
    settings_module._settings = None

    yield

    reset_flags()
    reset_container_check()
    settings_module._settings = None


@pytest.fixture
def linux_paths(tmp_path):
    """Marker and cgroup paths inside a temporary directory (neither exists yet)."""
    return tmp_path / ".dockerenv", tmp_path / "cgroup"


@pytest.fixture
def linux_probe(linux_paths):
    dockerenv, cgroup = linux_paths
    return LinuxProbe(dockerenv_path=str(dockerenv), cgroup_path=str(cgroup))


class StaticProbe(PlatformProbe):
    """Probe returning a fixed verdict and counting evaluations."""

    def __init__(self, result: bool = False, delay: float = 0.0):
        super().__init__()
        self.result = result
        self.delay = delay
        self.calls = 0
        self.started = threading.Event()

    async def detect(self, cancel_event: Optional[asyncio.Event] = None) -> bool:
        self.calls += 1
        self.started.set()
        if self.delay:
            await asyncio.sleep(self.delay)
        return self.result


class GatedProbe(PlatformProbe):
    """Probe that waits for a gate to open, honouring the cancel event."""

    def __init__(self, result: bool = True):
        super().__init__()
        self.result = result
        self.gate = asyncio.Event()
        self.started = asyncio.Event()
        self.calls = 0

    async def detect(self, cancel_event: Optional[asyncio.Event] = None) -> bool:
        self.calls += 1
        self.started.set()
        while not self.gate.is_set():
            self.check_cancelled(cancel_event)
            await asyncio.sleep(0.001)
        return self.result
