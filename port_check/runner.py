from __future__ import annotations
import subprocess

from .errors import CommandExecutionFailure

def run_command(command: str) -> str:
    # shell=True: the Windows command is a netstat | findstr pipeline
    proc = subprocess.run(command, shell=True, capture_output=True, text=True, errors="ignore")  # noqa: S602
    if proc.returncode != 0:
        raise CommandExecutionFailure(command, proc.returncode, proc.stdout, proc.stderr)
    return proc.stdout
