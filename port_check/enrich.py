from __future__ import annotations
from typing import Iterable

import psutil

from .models import ProcessDetails, ProcessSummary

def process_details(pid: int) -> ProcessDetails:
    name = "?"; user = "?"; cmd = ""
    try:
        p = psutil.Process(pid)
        name = p.name()
        try:
            user = p.username()
        except psutil.AccessDenied:
            user = "?"
        try:
            cmdline = p.cmdline()
            if cmdline: cmd = " ".join(cmdline)
        except psutil.AccessDenied:
            cmd = ""
    except (psutil.NoSuchProcess, psutil.AccessDenied, psutil.ZombieProcess):
        # process went away or belongs to someone else; keep placeholders
        pass
    return ProcessDetails(name=name, user=user, cmd=cmd)

def enrich(summaries: Iterable[ProcessSummary]) -> None:
    for s in summaries:
        if not s.pid.isdigit():
            continue
        s.details = process_details(int(s.pid))
