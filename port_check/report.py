from __future__ import annotations
import json
from typing import Callable, List, Union

from .models import ProcessSummary, _NotFound
from .resolver import is_windows

def not_found_message(port: int) -> str:
    return f"No process found using port {port}"

def _conn_suffix(count: int) -> str:
    return f" ({count} connections)" if count > 1 else ""

def _unix_line(s: ProcessSummary) -> str:
    r = s.record
    return f"  {r.command} (PID: {r.pid}) - {r.user}{_conn_suffix(s.connection_count)}"

def _windows_line(s: ProcessSummary) -> str:
    r = s.record
    return (f"  {r.protocol} {r.local_address} -> {r.foreign_address} ({r.state}) "
            f"PID: {r.pid}{_conn_suffix(s.connection_count)}")

def _details_line(s: ProcessSummary) -> str:
    d = s.details
    return f"      {d.name} [{d.user}]: {d.cmd or '?'}"

def format_report(result: Union[List[ProcessSummary], _NotFound], platform: str, port: int) -> str:
    if not result:
        return not_found_message(port)
    line_for: Callable[[ProcessSummary], str] = _windows_line if is_windows(platform) else _unix_line
    lines = [f"Process(es) using port {port}:"]
    for s in result:
        lines.append(line_for(s))
        if s.details is not None:
            lines.append(_details_line(s))
    return "\n".join(lines)

def format_json(result: Union[List[ProcessSummary], _NotFound], port: int) -> str:
    processes = [s.to_dict() for s in result] if result else []
    return json.dumps({"port": port, "processes": processes}, indent=2)
