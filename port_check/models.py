from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Optional, Union

@dataclass
class UnixRecord:
    command: str
    pid: str
    user: str
    fd: str
    type: str = ""
    device: str = ""
    size: str = ""
    node: str = ""
    name: str = ""

@dataclass
class WindowsRecord:
    protocol: str
    local_address: str
    foreign_address: str
    state: str
    pid: str

ConnectionRecord = Union[UnixRecord, WindowsRecord]

@dataclass
class ProcessDetails:
    name: str = "?"
    user: str = "?"
    cmd: str = ""

@dataclass
class ProcessSummary:
    record: ConnectionRecord  # first record seen for the pid
    connection_count: int = 1
    details: Optional[ProcessDetails] = None

    @property
    def pid(self) -> str:
        return self.record.pid

    def to_dict(self) -> dict:
        d = asdict(self.record)
        d["connections"] = self.connection_count
        if self.details is not None:
            d["details"] = asdict(self.details)
        return d

class _NotFound:
    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __bool__(self) -> bool:
        return False

NOT_FOUND = _NotFound()
