from __future__ import annotations
import re
from typing import Callable, List, Optional

from ..models import WindowsRecord

WS_RE = re.compile(r"\s+")
MIN_FIELDS = 5  # Proto  Local Address  Foreign Address  State  PID

def parse(output: str, on_skip: Optional[Callable[[str], None]] = None) -> List[WindowsRecord]:
    # findstr already removed the netstat header, every line is a row
    records: List[WindowsRecord] = []
    for line in (output or "").strip().splitlines():
        line = line.strip()
        if not line:
            continue
        parts = WS_RE.split(line)
        if len(parts) < MIN_FIELDS:
            if on_skip:
                on_skip(line)
            continue
        proto, laddr, raddr, state, pid = parts[:MIN_FIELDS]
        records.append(WindowsRecord(protocol=proto, local_address=laddr,
                                     foreign_address=raddr, state=state, pid=pid))
    return records
