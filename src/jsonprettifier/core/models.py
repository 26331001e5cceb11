from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from jsonprettifier.constants import DEFAULT_INDENT
from jsonprettifier.core.errors import PrettifyError


@dataclass(frozen=True)
class PrettifyConfig:
    """Run configuration, built once at startup and passed to every task."""
    target_dir: Path
    indent: int = DEFAULT_INDENT
    workers: Optional[int] = None


@dataclass(frozen=True)
class FileOutcome:
    path: Path
    error: Optional[PrettifyError] = None
    bytes_in: int = 0
    bytes_out: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> str:
        return "ok" if self.error is None else self.error.kind

    @property
    def message(self) -> str:
        return "" if self.error is None else self.error.message
