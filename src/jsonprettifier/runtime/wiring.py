from __future__ import annotations

import os
from typing import Optional

from jsonprettifier.constants import ENV_WORKERS
from jsonprettifier.core.interfaces.logging import LoggerLikeProtocol
from jsonprettifier.discovery.file_discovery import FileDiscovery
from jsonprettifier.io.json_codec import JsonCodec
from jsonprettifier.logging.helpers import get_logger
from jsonprettifier.runtime.pipeline import FilePipeline
from jsonprettifier.runtime.runner import BatchRunner


def workers_from_env(logger: Optional[LoggerLikeProtocol] = None) -> Optional[int]:
    """Read the worker count override; None lets the executor decide."""
    raw = (os.getenv(ENV_WORKERS) or "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value <= 0:
        (logger or get_logger("wiring")).warning(
            "ignoring %s=%r: expected a positive integer", ENV_WORKERS, raw
        )
        return None
    return value


def build_runner(*, indent: int, logger: Optional[LoggerLikeProtocol] = None) -> BatchRunner:
    """Assemble discovery, codec, pipeline and runner for one invocation."""
    lg = logger or get_logger()
    codec = JsonCodec(indent=indent)
    pipeline = FilePipeline(codec=codec, logger=get_logger("pipeline"))
    return BatchRunner(
        discovery=FileDiscovery(logger=get_logger("discovery")),
        pipeline=pipeline,
        logger=lg,
    )
