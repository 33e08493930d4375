from __future__ import annotations
from typing import Dict, Optional

from .errors import UnsupportedPlatform

UNIX_PLATFORMS = ("darwin", "linux")
WINDOWS_PLATFORMS = ("win32",)
SUPPORTED_PLATFORMS = UNIX_PLATFORMS + WINDOWS_PLATFORMS

COMMANDS: Dict[str, str] = {
    "darwin": "lsof -i tcp:{port}",
    "linux": "lsof -i tcp:{port}",
    "win32": "netstat -ano | findstr :{port}",
}

def is_windows(platform: str) -> bool:
    return platform in WINDOWS_PLATFORMS

def get_command(platform: str, port: int, overrides: Optional[Dict[str, str]] = None) -> str:
    """Return the shell command listing the holders of ``port`` on ``platform``.

    ``overrides`` replaces the template of an already supported platform;
    it cannot introduce new ones.
    """
    if platform not in COMMANDS:
        raise UnsupportedPlatform(platform)
    template = (overrides or {}).get(platform) or COMMANDS[platform]
    return template.replace("{port}", str(int(port)))
