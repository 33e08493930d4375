import sys
from pathlib import Path

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]

# Prefer repo sources over any installed package.
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from port_check import main as main_mod  # noqa: E402
from port_check.errors import CommandExecutionFailure  # noqa: E402


UNIX_SCENARIO_A = (
    "COMMAND  PID  USER  FD  TYPE DEVICE SIZE NODE NAME\n"
    "node    123  alice  3u  IPv4  0x1  0t0  TCP  *:3000\n"
    "node    123  alice  4u  IPv4  0x2  0t0  TCP  *:3000"
)
UNIX_HEADER = "COMMAND  PID  USER  FD  TYPE DEVICE SIZE NODE NAME"
WINDOWS_SCENARIO_C = "TCP  0.0.0.0:3000  0.0.0.0:0  LISTENING  456"


class FakeExecutor:
    def __init__(self, output="", failure=None):
        self.output = output
        self.failure = failure
        self.commands = []

    def __call__(self, command):
        self.commands.append(command)
        if self.failure is not None:
            raise self.failure
        return self.output


@pytest.fixture(autouse=True)
def block_commands(monkeypatch):
    def guarded(command):
        raise RuntimeError(f"Command execution blocked in tests: {command}")

    monkeypatch.setattr(main_mod, "run_command", guarded)


@pytest.fixture
def executor(monkeypatch):
    def install(output="", failure=None):
        fake = FakeExecutor(output, failure)
        monkeypatch.setattr(main_mod, "run_command", fake)
        return fake

    return install


@pytest.fixture
def empty_result_failure():
    return CommandExecutionFailure("lsof -i tcp:3000", 1, "", "")
