"""Tests for OS family detection."""

import sys

import pytest

from runtimeinfo.core.platform import (
    OSFamily,
    detect_os_family,
    is_android,
    is_browser,
    is_ios,
    is_linux,
    is_macos,
    is_windows,
)

PREDICATES = {
    OSFamily.WINDOWS: is_windows,
    OSFamily.MACOS: is_macos,
    OSFamily.LINUX: is_linux,
    OSFamily.ANDROID: is_android,
    OSFamily.BROWSER: is_browser,
    OSFamily.IOS: is_ios,
}


class TestDetectOSFamily:
    """Tests for detect_os_family function."""

    @pytest.mark.parametrize(
        "platform,expected",
        [
            ("win32", OSFamily.WINDOWS),
            ("darwin", OSFamily.MACOS),
            ("linux", OSFamily.LINUX),
            ("linux2", OSFamily.LINUX),
            ("android", OSFamily.ANDROID),
            ("ios", OSFamily.IOS),
            ("emscripten", OSFamily.BROWSER),
        ],
    )
    def test_known_platforms(self, platform, expected):
        """Test known sys.platform values map to their family."""
        assert detect_os_family(platform) is expected

    def test_unknown_platform_is_other(self):
        """Test unrecognised platforms fall back to OTHER."""
        assert detect_os_family("freebsd13") is OSFamily.OTHER
        assert detect_os_family("wasi") is OSFamily.OTHER

    def test_defaults_to_running_interpreter(self, monkeypatch):
        """Test sys.platform is used when no platform is given."""
        monkeypatch.setattr(sys, "platform", "darwin")
        assert detect_os_family() is OSFamily.MACOS

    def test_linux_with_android_api_level_is_android(self, monkeypatch):
        """Test Android interpreters reporting 'linux' are detected as Android."""
        monkeypatch.setattr(sys, "platform", "linux")
        monkeypatch.setattr(sys, "getandroidapilevel", lambda: 30, raising=False)
        assert detect_os_family() is OSFamily.ANDROID


class TestPredicates:
    """Tests for the OS family predicates."""

    def test_at_most_one_predicate_true_on_host(self):
        """Test exactly the host's predicate is true."""
        results = {family: predicate() for family, predicate in PREDICATES.items()}
        host = detect_os_family()

        assert sum(results.values()) == (0 if host is OSFamily.OTHER else 1)
        if host is not OSFamily.OTHER:
            assert results[host] is True

    @pytest.mark.parametrize("family", list(PREDICATES))
    def test_only_matching_predicate_true(self, monkeypatch, family):
        """Test each simulated platform enables only its own predicate."""
        platforms = {
            OSFamily.WINDOWS: "win32",
            OSFamily.MACOS: "darwin",
            OSFamily.LINUX: "linux",
            OSFamily.ANDROID: "android",
            OSFamily.BROWSER: "emscripten",
            OSFamily.IOS: "ios",
        }
        monkeypatch.setattr(sys, "platform", platforms[family])
        monkeypatch.delattr(sys, "getandroidapilevel", raising=False)

        true_families = [f for f, predicate in PREDICATES.items() if predicate()]
        assert true_families == [family]
