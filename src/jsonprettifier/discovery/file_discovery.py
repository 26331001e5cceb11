from __future__ import annotations

"""
File discovery.

Walks a target directory and returns every regular file whose extension is one
of the configured JSON suffixes. Traversal problems (unreadable directories,
entries vanishing mid-walk, a missing target) are skipped without being
reported to the user; they only show up in debug logs.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from jsonprettifier.constants import JSON_SUFFIXES
from jsonprettifier.core.interfaces.fs import FileDiscoveryProtocol
from jsonprettifier.core.interfaces.logging import LoggerLikeProtocol
from jsonprettifier.logging.helpers import get_logger
from jsonprettifier.utils.suffixes import has_allowed_suffix, normalize_suffixes


@dataclass
class FileDiscovery(FileDiscoveryProtocol):
    """Recursive walker selecting `.json` / `.jsonc` files."""

    suffixes: Sequence[str] = JSON_SUFFIXES
    logger: Optional[LoggerLikeProtocol] = None
    _allowed: tuple = field(default=(), init=False, repr=False)

    def __post_init__(self) -> None:
        self._allowed = normalize_suffixes(self.suffixes)
        if self.logger is None:
            self.logger = get_logger("discovery")

    # -------- Internal helpers --------

    def _selected(self, path: Path) -> bool:
        # is_file() follows symlinks, so links to regular files are kept.
        return has_allowed_suffix(path, self._allowed) and path.is_file()

    def _on_walk_error(self, exc: OSError) -> None:
        self.logger.debug("skipping %s: %s", getattr(exc, "filename", "?"), exc)

    # -------- FileDiscoveryProtocol --------

    def gather(self, target: str | Path) -> List[Path]:
        """Return the candidate files under *target*, sorted by path.

        A *target* that is itself a matching file is returned as the only
        candidate. Symlinked directories are listed but not descended.
        """
        root = Path(target)
        collected: List[Path] = []

        if self._selected(root):
            return [root]

        for dirpath, _dirnames, filenames in os.walk(root, onerror=self._on_walk_error):
            for fn in filenames:
                fp = Path(dirpath, fn)
                if self._selected(fp):
                    collected.append(fp)

        return sorted(collected, key=str)
