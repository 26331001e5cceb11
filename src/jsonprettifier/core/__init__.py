from __future__ import annotations

"""Public surface for jsonprettifier.core.

Protocols, models, the error taxonomy and the batch report live here so that
runtime modules and downstream callers share a single import location:

    from jsonprettifier.core import PrettifyConfig, BatchReport, ParseError
"""

from jsonprettifier.core.errors import (
    ArgumentError,
    ParseError,
    PrettifyError,
    ReadError,
    UnexpectedError,
    WriteError,
)
from jsonprettifier.core.models import FileOutcome, PrettifyConfig
from jsonprettifier.core.report import BatchReport, StageTimer

__all__ = [
    # Errors
    "ArgumentError",
    "ParseError",
    "PrettifyError",
    "ReadError",
    "UnexpectedError",
    "WriteError",
    # Models
    "FileOutcome",
    "PrettifyConfig",
    # Reporting
    "BatchReport",
    "StageTimer",
]
