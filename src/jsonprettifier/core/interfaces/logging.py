from __future__ import annotations
"""Logger surface accepted by discovery, pipeline and runner.

Any `logging.Logger` satisfies it; tests may pass a recorder instead.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def warning(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...
