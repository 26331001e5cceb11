from __future__ import annotations
"""Suffix utilities for file selection.

Unlike a filename-tail match, selection here is by *extension*: the text after
the last dot of the basename, as reported by `Path.suffix`.

Semantics:
    * Tokens are normalized by prefixing a dot when missing: "json" -> ".json".
    * Comparison is case-sensitive: "a.JSON" is not a ".json" file.
    * A bare dotfile has no extension: ".json" itself is never selected.

Examples:
    normalize_suffixes(["json", ".jsonc"])   -> (".json", ".jsonc")
    has_allowed_suffix(Path("a.json"), ...)  -> True
    has_allowed_suffix(Path("a.json.bak"))   -> False
"""

from pathlib import Path
from typing import Iterable, Sequence, Tuple


def normalize_suffixes(suffixes: Sequence[str] | None) -> Tuple[str, ...]:
    """Normalize suffix tokens.

    Args:
        suffixes: Extension tokens, with or without the leading dot.

    Returns:
        A deduplicated tuple of dotted extensions, in first-seen order.
    """
    if not suffixes:
        return ()
    out: list[str] = []
    for raw in suffixes:
        s = (raw or "").strip()
        if not s or s == ".":
            continue
        s = s if s.startswith(".") else f".{s}"
        if s not in out:
            out.append(s)
    return tuple(out)


def has_allowed_suffix(path: Path, allowed: Iterable[str]) -> bool:
    """Return True if the extension of *path* is exactly one of *allowed*."""
    suffix = path.suffix
    if not suffix:
        return False
    return suffix in allowed
