from __future__ import annotations
import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

import yaml

from .errors import ConfigError, InvalidArgument
from .resolver import SUPPORTED_PLATFORMS

PORT_MIN = 1
PORT_MAX = 65535

@dataclass
class CFG:
    port: int = 0
    platform: str = sys.platform
    details: bool = False
    json_output: bool = False
    verbose: bool = False
    commands: Dict[str, str] = field(default_factory=dict)

def validate_port(value) -> int:
    if value is None or str(value).strip() == "":
        raise InvalidArgument("Please provide a port number.")
    s = str(value).strip()
    # int() would also take "+80" or "3_000"
    if not (s.isascii() and s.isdigit()):
        raise InvalidArgument(f"Port must be a number between {PORT_MIN} and {PORT_MAX}.")
    port = int(s)
    if not PORT_MIN <= port <= PORT_MAX:
        raise InvalidArgument(f"Port must be a number between {PORT_MIN} and {PORT_MAX}.")
    return port

def to_abs_path(p: str) -> Path:
    pp = Path(p).expanduser()
    return pp.resolve() if pp.is_absolute() else (Path.cwd() / pp).resolve()

def load_config_file(path: Optional[str]) -> dict:
    """Read a YAML (.yaml/.yml) or JSON settings file.

    Recognised keys: ``details``, ``json``, ``commands`` (platform -> command
    template containing ``{port}``). A missing file only warns.
    """
    if not path:
        return {}
    p = to_abs_path(path)
    if not p.exists():
        print(f"[warn] config not found: {p}", file=sys.stderr)
        return {}
    try:
        txt = p.read_text(encoding="utf-8")
        data = yaml.safe_load(txt) if p.suffix in (".yaml", ".yml") else json.loads(txt)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ConfigError(f"cannot read config {p}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"config {p} must be a mapping")

    commands = data.get("commands") or {}
    if not isinstance(commands, dict):
        raise ConfigError("'commands' must map platform names to command templates")
    for plat, tmpl in commands.items():
        if plat not in SUPPORTED_PLATFORMS:
            raise ConfigError(f"'commands' has unsupported platform: {plat}")
        if not isinstance(tmpl, str) or "{port}" not in tmpl:
            raise ConfigError(f"command template for {plat} must contain '{{port}}'")
    data["commands"] = dict(commands)
    return data

def init_cfg_from_args(args) -> CFG:
    cfg = CFG()
    cfg.port = validate_port(args.port)
    filecfg = load_config_file(getattr(args, "config", None))
    cfg.platform = getattr(args, "platform", None) or sys.platform
    cfg.details = bool(args.details or filecfg.get("details", False))
    cfg.json_output = bool(args.json or filecfg.get("json", False))
    cfg.verbose = bool(args.verbose)
    cfg.commands = filecfg.get("commands", {})
    return cfg
