import pytest

from port_check.errors import UnsupportedPlatform
from port_check.resolver import SUPPORTED_PLATFORMS, get_command, is_windows


@pytest.mark.parametrize("platform", ["darwin", "linux"])
def test_unix_platforms_use_lsof(platform):
    assert get_command(platform, 3000) == "lsof -i tcp:3000"


def test_windows_uses_netstat_findstr():
    assert get_command("win32", 8080) == "netstat -ano | findstr :8080"


@pytest.mark.parametrize("platform", ["freebsd", "aix", "sunos", "cygwin", ""])
def test_unknown_platform_raises(platform):
    with pytest.raises(UnsupportedPlatform) as exc:
        get_command(platform, 3000)
    assert exc.value.platform == platform
    assert "Unsupported platform" in str(exc.value)


def test_override_replaces_template_for_supported_platform():
    cmd = get_command("linux", 22, {"linux": "lsof -nP -i tcp:{port}"})
    assert cmd == "lsof -nP -i tcp:22"


def test_override_cannot_add_platform():
    with pytest.raises(UnsupportedPlatform):
        get_command("freebsd", 22, {"freebsd": "sockstat -4 -p {port}"})


def test_supported_set():
    assert set(SUPPORTED_PLATFORMS) == {"darwin", "linux", "win32"}
    assert is_windows("win32")
    assert not is_windows("linux")


def test_override_keeps_other_braces_literal():
    cmd = get_command("linux", 3000, {"linux": "lsof -i tcp:{port} | awk '{print $2}'"})
    assert cmd == "lsof -i tcp:3000 | awk '{print $2}'"
