from __future__ import annotations
from typing import Dict, Iterable, List, Union

from .models import NOT_FOUND, ConnectionRecord, ProcessSummary, _NotFound

def aggregate(records: Iterable[ConnectionRecord]) -> List[ProcessSummary]:
    """Merge records by pid, keeping first-seen order.

    A repeated pid only bumps the count; the fields of its first record are
    kept even if later rows differ.
    """
    by_pid: Dict[str, ProcessSummary] = {}
    for rec in records:
        summary = by_pid.get(rec.pid)
        if summary is not None:
            summary.connection_count += 1
        else:
            by_pid[rec.pid] = ProcessSummary(record=rec)
    return list(by_pid.values())

def summarize(records: Iterable[ConnectionRecord]) -> Union[List[ProcessSummary], _NotFound]:
    summaries = aggregate(records)
    return summaries if summaries else NOT_FOUND
