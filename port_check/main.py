from __future__ import annotations
import argparse, sys
from typing import Optional, Sequence

from .aggregate import summarize
from .config import CFG, init_cfg_from_args
from .enrich import enrich
from .errors import (SUPPORTED_PLATFORMS_TEXT, CommandExecutionFailure, ConfigError,
                     InvalidArgument, UnsupportedPlatform, troubleshooting_hints)
from .models import NOT_FOUND
from .parsers import parse_output
from .report import format_json, format_report
from .resolver import get_command
from .runner import run_command

def parse_args(argv: Optional[Sequence[str]] = None):
    ap = argparse.ArgumentParser(prog='port-check', description='show which process(es) hold a TCP port open')
    ap.add_argument('port', help='TCP port number (1-65535)')
    ap.add_argument('--platform', type=str, default=None, help='platform id to use instead of the detected one (darwin, linux, win32)')
    ap.add_argument('--details', action='store_true', help='look up process name and command line for each PID')
    ap.add_argument('--json', action='store_true', help='print the result as JSON')
    ap.add_argument('--config', type=str, default=None, help='YAML or JSON settings file')
    ap.add_argument('-v', '--verbose', action='store_true', help='print the command and parser diagnostics to stderr')
    return ap.parse_args(argv)

def _debug(cfg: CFG, msg: str) -> None:
    if cfg.verbose:
        print(f"[debug] {msg}", file=sys.stderr)

def run(cfg: CFG) -> int:
    port = cfg.port
    if not cfg.json_output:
        print(f"[*] Checking port {port} on {cfg.platform}...\n")

    command = get_command(cfg.platform, port, cfg.commands)
    _debug(cfg, f"running: {command}")
    try:
        output = run_command(command)
    except CommandExecutionFailure as e:
        if not e.is_empty_result:
            raise
        _debug(cfg, f"{command!r} exited {e.returncode} with no output")
        output = ""

    skipped: list[str] = []
    result = summarize(parse_output(output, cfg.platform, on_skip=skipped.append)) if output.strip() else NOT_FOUND
    for line in skipped:
        _debug(cfg, f"skipped malformed line: {line!r}")

    if result and cfg.details:
        enrich(result)

    print(format_json(result, port) if cfg.json_output else format_report(result, cfg.platform, port))
    return 0

def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    cfg: Optional[CFG] = None
    try:
        cfg = init_cfg_from_args(args)
        return run(cfg)
    except InvalidArgument as e:
        print(f"[error] {e}", file=sys.stderr)
        print("Usage: port-check <port>\nExample: port-check 3000", file=sys.stderr)
        return 1
    except ConfigError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1
    except UnsupportedPlatform as e:
        print(f"[error] {e}", file=sys.stderr)
        print(f"Supported platforms: {SUPPORTED_PLATFORMS_TEXT}", file=sys.stderr)
        return 1
    except CommandExecutionFailure as e:
        print(f"[error] Error executing command: {e}", file=sys.stderr)
        print("\nTroubleshooting:", file=sys.stderr)
        for hint in troubleshooting_hints(cfg.platform if cfg else None):
            print(hint, file=sys.stderr)
        return 1

if __name__ == '__main__':
    raise SystemExit(main())
