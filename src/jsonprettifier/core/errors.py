from __future__ import annotations

"""Error taxonomy for jsonprettifier.

Per-file errors (`ReadError`, `ParseError`, `WriteError`, `UnexpectedError`) are raised inside a
file task and converted into a `FileOutcome` at the task boundary; they never
abort the batch. `ArgumentError` is fatal and stops the run before any file is
touched.
"""

from pathlib import Path


class PrettifyError(Exception):
    """Base class for per-file failures."""

    kind = "error"

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path
        self.message = message


class ReadError(PrettifyError):
    kind = "read"

    def __init__(self, path: Path, reason: object) -> None:
        super().__init__(path, f"Can not read file: {reason}")
        self.reason = reason


class ParseError(PrettifyError):
    """Stripped text is not a well-formed JSON document.

    `stripped` keeps the full text handed to the parser so the offending
    region can be inspected.
    """

    kind = "parse"

    def __init__(self, path: Path, diagnostic: object, stripped: str) -> None:
        super().__init__(path, f"Malformed json: {diagnostic} at file {stripped!r}")
        self.diagnostic = str(diagnostic)
        self.stripped = stripped


class WriteError(PrettifyError):
    kind = "write"

    def __init__(self, path: Path, reason: object) -> None:
        super().__init__(path, f"Unable to create a file: {reason}")
        self.reason = reason


class UnexpectedError(PrettifyError):
    """Any other exception raised while formatting one file."""

    kind = "unexpected"

    def __init__(self, path: Path, cause: BaseException) -> None:
        super().__init__(path, f"Unexpected error: {type(cause).__name__}: {cause}")
        self.cause = cause


class ArgumentError(ValueError):
    """Invalid command line; nothing is processed."""
