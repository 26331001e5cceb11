from __future__ import annotations
"""Text transformer protocol definitions."""

from typing import Protocol


class CommentStripperProtocol(Protocol):
    """Callable that removes comment regions from raw file text.

    Implementations must be total: any input string yields an output string.
    """

    def __call__(self, text: str) -> str:
        ...
