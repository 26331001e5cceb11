from __future__ import annotations

"""
Batch execution report.

One `FileOutcome` is recorded per discovered file, whatever its result; the
report never short-circuits on a failure. Stage timings are accumulated with
`StageTimer` (discovery, format).
"""

import json
import threading
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List

from jsonprettifier.core.models import FileOutcome


@dataclass
class BatchReport:
    started_at: float = field(default_factory=time.perf_counter)
    finished_at: float | None = None
    duration_s: float | None = None

    target: str = ""
    indent: int = 0

    files_total: int = 0
    outcomes: List[FileOutcome] = field(default_factory=list)

    time_by_stage: Dict[str, float] = field(
        default_factory=lambda: {"discovery": 0.0, "format": 0.0}
    )

    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def add_paths(self, paths: Iterable[Path]) -> None:
        self.files_total += sum(1 for _ in paths)

    def add_outcome(self, outcome: FileOutcome) -> None:
        with self._lock:
            self.outcomes.append(outcome)

    def add_time(self, stage: str, seconds: float) -> None:
        self.time_by_stage[stage] = self.time_by_stage.get(stage, 0.0) + seconds

    @property
    def succeeded(self) -> List[FileOutcome]:
        return [o for o in self.outcomes if o.ok]

    @property
    def failed(self) -> List[FileOutcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def errors_by_kind(self) -> Dict[str, int]:
        counts = {"read": 0, "parse": 0, "write": 0}
        for o in self.failed:
            counts[o.kind] = counts.get(o.kind, 0) + 1
        return counts

    def finish(self) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = (
            self.finished_at - self.started_at if self.finished_at else None
        )

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(
            {
                "started_at": self.started_at,
                "finished_at": self.finished_at,
                "duration_s": self.duration_s,
                "target": self.target,
                "indent": self.indent,
                "files_total": self.files_total,
                "files_ok": len(self.succeeded),
                "files_failed": len(self.failed),
                "errors_by_kind": self.errors_by_kind,
                "time_by_stage": self.time_by_stage,
                "errors": [
                    {"path": str(o.path), "kind": o.kind, "message": o.message}
                    for o in self.failed
                ],
            },
            indent=indent,
        )


class StageTimer:
    def __init__(self, report: BatchReport, stage: str):
        self._report = report
        self._stage = stage
        self._t0: float | None = None

    def __enter__(self):
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._t0 is not None:
            self._report.add_time(self._stage, time.perf_counter() - self._t0)
        return False
