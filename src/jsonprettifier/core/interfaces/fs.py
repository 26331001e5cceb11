from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileDiscoveryProtocol(Protocol):
    def gather(self, target: str | Path) -> list[Path]:
        ...
