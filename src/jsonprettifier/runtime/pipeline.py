from __future__ import annotations

"""
Per-file pipeline: read -> strip -> parse -> serialize -> write.

Every file is handled by one self-contained `FilePipeline.process` call that
shares nothing mutable with other files. Failures are raised internally as
`ReadError` / `ParseError` / `WriteError` and converted into a `FileOutcome`
before leaving `process`; any other exception is wrapped in an
`UnexpectedError`. A worker pool can run many of these side by side without
one bad file affecting the rest.
"""

from pathlib import Path
from typing import Any, Optional

from jsonprettifier.core.errors import ParseError, PrettifyError, ReadError, UnexpectedError, WriteError
from jsonprettifier.core.interfaces.codec import ValueCodecProtocol
from jsonprettifier.core.interfaces.logging import LoggerLikeProtocol
from jsonprettifier.core.interfaces.text import CommentStripperProtocol
from jsonprettifier.core.models import FileOutcome
from jsonprettifier.logging.helpers import get_logger, trace_io
from jsonprettifier.processing.comment_stripper import strip_comments


class FilePipeline:
    def __init__(
        self,
        *,
        codec: ValueCodecProtocol,
        stripper: Optional[CommentStripperProtocol] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._codec = codec
        self._strip = stripper or strip_comments
        self._log = logger or get_logger("pipeline")

    # -------- stages --------

    def read(self, path: Path) -> str:
        # newline="" keeps \r\n as-is so stripped text mirrors the file.
        try:
            with open(path, "r", encoding="utf-8", newline="") as fh:
                return fh.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadError(path, exc) from exc

    def parse(self, path: Path, stripped: str) -> Any:
        try:
            return self._codec.parse(stripped)
        except (ValueError, RecursionError) as exc:
            raise ParseError(path, exc, stripped) from exc

    def render(self, path: Path, value: Any, stripped: str) -> bytes:
        # Runs before the file is truncated. Non-finite floats (1e400) and
        # lone surrogates from \ud800-style escapes have no valid output.
        try:
            return self._codec.dumps(value).encode("utf-8")
        except (ValueError, RecursionError) as exc:
            raise ParseError(path, exc, stripped) from exc

    def write(self, path: Path, data: bytes) -> None:
        try:
            with open(path, "wb") as fh:
                fh.write(data)
        except OSError as exc:
            raise WriteError(path, exc) from exc

    # -------- entry point --------

    def run(self, path: Path) -> FileOutcome:
        """Run every stage, raising the first per-file error encountered."""
        raw = self.read(path)
        trace_io(self._log, "read", path=str(path), chars=len(raw))

        stripped = self._strip(raw)
        value = self.parse(path, stripped)
        data = self.render(path, value, stripped)

        self.write(path, data)
        trace_io(self._log, "write", path=str(path), bytes=len(data))
        return FileOutcome(path=path, bytes_in=len(raw), bytes_out=len(data))

    def process(self, path: Path) -> FileOutcome:
        """Run the pipeline for *path*; per-file errors come back in the outcome."""
        try:
            return self.run(path)
        except PrettifyError as exc:
            return FileOutcome(path=path, error=exc)
        except Exception as exc:
            self._log.debug("unexpected failure on %s", path, exc_info=True)
            return FileOutcome(path=path, error=UnexpectedError(path, exc))
