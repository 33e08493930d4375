from __future__ import annotations
import re
from typing import Callable, List, Optional

from ..models import UnixRecord

WS_RE = re.compile(r"\s+")
MIN_FIELDS = 9  # COMMAND PID USER FD TYPE DEVICE SIZE/OFF NODE NAME

def parse(output: str, on_skip: Optional[Callable[[str], None]] = None) -> List[UnixRecord]:
    """Parse ``lsof -i`` output.

    The first line is the column header. Rows with fewer than nine columns
    are dropped; extra trailing tokens such as ``(LISTEN)`` are ignored.
    """
    lines = (output or "").strip().splitlines()
    if len(lines) < 2:
        return []

    records: List[UnixRecord] = []
    for line in lines[1:]:
        line = line.strip()
        if not line:
            continue
        parts = WS_RE.split(line)
        if len(parts) < MIN_FIELDS:
            if on_skip:
                on_skip(line)
            continue
        command, pid, user, fd, type_, device, size, node, name = parts[:MIN_FIELDS]
        records.append(UnixRecord(command=command, pid=pid, user=user, fd=fd, type=type_,
                                  device=device, size=size, node=node, name=name))
    return records
