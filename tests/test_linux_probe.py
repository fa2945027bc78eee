"""Tests for the Linux container probe."""

import asyncio

import pytest

from runtimeinfo.config import Settings
from runtimeinfo.core.probes import LinuxProbe, line_has_container_marker
from runtimeinfo.core.probes import linux as linux_module
from runtimeinfo.utils.exceptions import DetectionCancelledError


class TestLineHasContainerMarker:
    """Tests for line_has_container_marker function."""

    def test_docker_line(self):
        """Test a docker cgroup entry matches."""
        assert line_has_container_marker("1:name=systemd:/docker/abcd1234") is True

    def test_kubepods_and_containerd(self):
        """Test kubepods and containerd entries match."""
        assert line_has_container_marker("0::/kubepods/besteffort/pod1234") is True
        assert line_has_container_marker("0::/system.slice/containerd.service") is True

    def test_case_insensitive(self):
        """Test markers match regardless of case."""
        assert line_has_container_marker("3:cpu:/DOCKER/abc") is True
        assert line_has_container_marker("3:cpu:/KubePods/abc") is True

    def test_host_line(self):
        """Test a host cgroup entry does not match."""
        assert line_has_container_marker("0::/init.scope") is False
        assert line_has_container_marker("") is False


class TestLinuxProbe:
    """Tests for LinuxProbe.detect."""

    @pytest.mark.asyncio
    async def test_dockerenv_marker(self, linux_probe, linux_paths):
        """Test the marker file alone yields true without a cgroup file."""
        dockerenv, cgroup = linux_paths
        dockerenv.touch()

        assert await linux_probe.detect() is True
        assert not cgroup.exists()

    @pytest.mark.asyncio
    async def test_docker_cgroup_line(self, linux_probe, linux_paths):
        """Test a docker cgroup entry yields true."""
        _, cgroup = linux_paths
        cgroup.write_text("2:cpu:/\n1:name=systemd:/docker/abcd1234\n")

        assert await linux_probe.detect() is True

    @pytest.mark.asyncio
    async def test_host_cgroup_file(self, linux_probe, linux_paths):
        """Test a cgroup file without markers yields false."""
        _, cgroup = linux_paths
        cgroup.write_text("12:pids:/init.scope\n0::/init.scope\n")

        assert await linux_probe.detect() is False

    @pytest.mark.asyncio
    async def test_no_marker_no_cgroup(self, linux_probe):
        """Test missing marker and cgroup file yields false."""
        assert await linux_probe.detect() is False

    @pytest.mark.asyncio
    async def test_stops_at_first_match(self, linux_probe, linux_paths, monkeypatch):
        """Test the scan ends at the first matching line."""
        _, cgroup = linux_paths
        cgroup.write_text("0::/\n1:cpu:/kubepods/pod1\n2:mem:/\n3:io:/\n4:net:/\n")

        checked = []

        def spy(line):
            checked.append(line)
            return line_has_container_marker(line)

        monkeypatch.setattr(linux_module, "line_has_container_marker", spy)

        assert await linux_probe.detect() is True
        assert checked == ["0::/", "1:cpu:/kubepods/pod1"]

    @pytest.mark.asyncio
    async def test_unreadable_cgroup_is_no_signal(self, linux_probe, linux_paths):
        """Test read failures are treated as an absent signal."""
        _, cgroup = linux_paths
        cgroup.mkdir()

        assert await linux_probe.detect() is False

    @pytest.mark.asyncio
    async def test_cancellation_is_not_false(self, linux_probe, linux_paths):
        """Test cancellation surfaces as an error rather than a verdict."""
        _, cgroup = linux_paths
        cgroup.write_text("0::/\n" * 100)
        cancel = asyncio.Event()
        cancel.set()

        with pytest.raises(DetectionCancelledError):
            await linux_probe.detect(cancel)

    @pytest.mark.asyncio
    async def test_small_buffer(self, linux_paths):
        """Test matches are found when lines span several reads."""
        dockerenv, cgroup = linux_paths
        cgroup.write_text("0::/\n5:blkio:/system.slice/containerd-abc.scope\n")
        probe = LinuxProbe(str(dockerenv), str(cgroup), buffer_size=2)

        assert await probe.detect() is True

    def test_from_settings(self):
        """Test probe paths come from settings."""
        settings = Settings(
            RUNTIMEINFO_DOCKERENV_PATH="/tmp/marker",
            RUNTIMEINFO_CGROUP_PATH="/tmp/cgroup",
            RUNTIMEINFO_READ_BUFFER_SIZE=128,
        )
        probe = LinuxProbe.from_settings(settings)

        assert probe.dockerenv_path == "/tmp/marker"
        assert probe.cgroup_path == "/tmp/cgroup"
        assert probe.buffer_size == 128
        assert probe.name == "linux"
