"""Tests for the diagnostics API."""

import asyncio
from typing import Optional

import pytest
from conftest import StaticProbe
from fastapi.testclient import TestClient

from runtimeinfo import __version__
from runtimeinfo.core import container as container_module
from runtimeinfo.core.container import ContainerCheck, is_container
from runtimeinfo.core.flags import reset_flags
from runtimeinfo.core.platform import detect_os_family
from runtimeinfo.core.probes import PlatformProbe
from runtimeinfo.main import create_app
from runtimeinfo.utils.exceptions import DetectionCancelledError


class CancellingProbe(PlatformProbe):
    async def detect(self, cancel_event: Optional[asyncio.Event] = None) -> bool:
        raise DetectionCancelledError("cgroup read was cancelled", check="cgroup")


@pytest.fixture
def probe():
    return StaticProbe(True)


@pytest.fixture
def client(probe):
    app = create_app(ContainerCheck(probe))
    with TestClient(app) as test_client:
        yield test_client


class TestEndpoints:
    """Tests for API endpoints."""

    def test_health(self, client):
        """Test the health endpoint."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": __version__}

    def test_environment(self, client, probe, monkeypatch):
        """Test the environment report reflects detection results."""
        monkeypatch.setenv("FUNCTIONS_WORKER_RUNTIME", "python")
        # Flags were cached during startup
        reset_flags()

        response = client.get("/environment")
        data = response.json()

        assert response.status_code == 200
        assert data["os_family"] == detect_os_family().value
        assert data["is_container"] is True
        assert data["is_azure_function"] is True
        assert data["is_github_action"] is False
        # Startup banner and the request share one evaluation
        assert probe.calls == 1

    def test_config(self, client):
        """Test the probe configuration endpoint."""
        data = client.get("/config").json()

        assert data["probe"] == "static"
        assert data["cgroup_path"] == "/proc/1/cgroup"
        assert data["read_buffer_size"] == 4096


class TestSharedVerdict:
    """Tests for sharing the verdict with library callers."""

    def test_app_and_library_share_one_evaluation(self, monkeypatch):
        """Test /environment and is_container() use the process-wide check."""
        probe = StaticProbe(True)
        monkeypatch.setattr(container_module, "create_host_probe", lambda settings: probe)

        with TestClient(create_app()) as test_client:
            assert test_client.get("/environment").json()["is_container"] is True

        assert asyncio.run(is_container()) is True
        assert probe.calls == 1


class TestErrorHandling:
    """Tests for API error responses."""

    def test_cancelled_detection_returns_503(self):
        """Test cancellation maps to a structured 503 response."""
        app = create_app(ContainerCheck(CancellingProbe()))
        client = TestClient(app)

        response = client.get("/environment")

        assert response.status_code == 503
        assert response.json() == {
            "error": "cgroup read was cancelled",
            "code": "DETECTION_CANCELLED",
        }
