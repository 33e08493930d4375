from __future__ import annotations
from typing import Optional

SUPPORTED_PLATFORMS_TEXT = "macOS (darwin), Linux (linux), Windows (win32)"

class PortCheckError(Exception):
    pass

class InvalidArgument(PortCheckError):
    pass

class ConfigError(PortCheckError):
    pass

class UnsupportedPlatform(PortCheckError):
    def __init__(self, platform: str):
        super().__init__(f"Unsupported platform: {platform}")
        self.platform = platform

class CommandExecutionFailure(PortCheckError):
    """The external tool exited non-zero.

    lsof and findstr both exit with status 1 and print nothing when no
    line matched; that case is exposed as ``is_empty_result`` so callers
    can report it as "nothing found" instead of a failure.
    """

    def __init__(self, command: str, returncode: int, stdout: str = "", stderr: str = ""):
        detail = (stderr or "").strip() or f"exit status {returncode}"
        super().__init__(f"{command}: {detail}")
        self.command = command
        self.returncode = returncode
        self.stdout = stdout or ""
        self.stderr = stderr or ""

    @property
    def is_empty_result(self) -> bool:
        return self.returncode == 1 and not self.stdout.strip()

def troubleshooting_hints(platform: Optional[str]) -> list[str]:
    hints = ["- Make sure you have the required tools installed:"]
    if platform == "win32":
        hints.append("  - netstat (built into Windows)")
    else:
        hints.append("  - lsof (install with: brew install lsof on macOS, apt-get install lsof on Linux)")
    hints.append("- Try running with administrator/sudo privileges if needed")
    return hints
