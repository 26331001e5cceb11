from __future__ import annotations

"""
Batch runner: discover files, then format them in parallel.

One task per file is submitted to a thread pool. Each task returns a
`FileOutcome`; the runner collects all of them into a `BatchReport` and never
stops early on a failed file. There is no cancellation and no timeout: once
the batch starts it runs to completion.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Optional

from jsonprettifier.core.interfaces.fs import FileDiscoveryProtocol
from jsonprettifier.core.interfaces.logging import LoggerLikeProtocol
from jsonprettifier.core.models import FileOutcome, PrettifyConfig
from jsonprettifier.core.report import BatchReport, StageTimer
from jsonprettifier.logging.helpers import get_logger
from jsonprettifier.runtime.pipeline import FilePipeline


class BatchRunner:
    def __init__(
        self,
        *,
        discovery: FileDiscoveryProtocol,
        pipeline: FilePipeline,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._discovery = discovery
        self._pipeline = pipeline
        self._log = logger or get_logger("runner")

    def _collect(self, report: BatchReport, outcome: FileOutcome) -> None:
        report.add_outcome(outcome)
        if outcome.ok:
            self._log.debug("formatted %s", outcome.path)
        else:
            self._log.error("%s", outcome.message)

    def run(self, config: PrettifyConfig) -> BatchReport:
        report = BatchReport(target=str(config.target_dir), indent=config.indent)

        with StageTimer(report, "discovery"):
            paths = self._discovery.gather(config.target_dir)
        report.add_paths(paths)
        self._log.debug("%d candidate file(s) under %s", len(paths), config.target_dir)

        if paths:
            with StageTimer(report, "format"):
                with ThreadPoolExecutor(max_workers=config.workers) as pool:
                    futures = [pool.submit(self._pipeline.process, p) for p in paths]
                    for fut in as_completed(futures):
                        self._collect(report, fut.result())

        report.finish()
        return report
