from __future__ import annotations
"""JSONC comment stripper.

Removes line ('// ...') and block ('/* ... */') comments that sit outside
double-quoted string regions, keeping every other character in its original
order. The newline that closes a line comment is kept, so line numbers in
downstream parser diagnostics still point at the original source lines.

Implementation:
    Deterministic single-pass state machine with one character of lookahead:
        DEFAULT | SINGLE_LINE_COMMENT | BLOCK_COMMENT  (+ an orthogonal quote flag)

    `step` is the pure transition function; `strip_comments` only drives it.

Notes:
    - The quote flag toggles on every '"' before the scan state is consulted,
      even inside comments. Backslash escapes are not recognised, so `\\"`
      inside a string flips the flag as well. Files relying on either usually
      surface as parse errors downstream.
    - Block comments do not nest.
    - An unterminated block comment swallows the rest of the input without
      raising; the parser reports the truncated document instead.
"""

import enum
from typing import NamedTuple

_QUOTE = '"'
_SLASH = "/"
_STAR = "*"
_NEWLINE = "\n"


class ScanState(enum.Enum):
    """Comment-tracking mode of the scanner at a given position."""

    DEFAULT = "default"
    SINGLE_LINE_COMMENT = "single_line_comment"
    BLOCK_COMMENT = "block_comment"


class Step(NamedTuple):
    """Result of feeding one character to the scanner."""

    state: ScanState
    in_quotes: bool
    emit: str = ""
    consume_lookahead: bool = False


def step(state: ScanState, in_quotes: bool, ch: str, lookahead: str = "") -> Step:
    """Advance the scanner by one character.

    Args:
        state: Current scan state.
        in_quotes: Whether the scan position is inside a double-quoted string.
        ch: Character being consumed.
        lookahead: Next character of the input, or "" at end of input.

    Returns:
        The new state and quote flag, the text to emit ("" or ch) and whether
        the lookahead character was consumed as part of a comment delimiter.
    """
    if ch == _QUOTE:
        in_quotes = not in_quotes
    if in_quotes:
        return Step(state, True, ch)

    if state is ScanState.DEFAULT:
        if ch == _SLASH:
            if lookahead == _SLASH:
                return Step(ScanState.SINGLE_LINE_COMMENT, False, "", True)
            if lookahead == _STAR:
                return Step(ScanState.BLOCK_COMMENT, False, "", True)
        return Step(state, False, ch)

    if state is ScanState.SINGLE_LINE_COMMENT:
        if ch == _NEWLINE:
            return Step(ScanState.DEFAULT, False, ch)
        return Step(state, False)

    # BLOCK_COMMENT
    if ch == _STAR and lookahead == _SLASH:
        return Step(ScanState.DEFAULT, False, "", True)
    return Step(state, False)


def strip_comments(text: str) -> str:
    """Strip // and /* */ comments from JSONC text.

    Args:
        text: Raw file contents.

    Returns:
        The text without comment regions. Never raises.
    """
    out: list[str] = []
    state = ScanState.DEFAULT
    in_quotes = False
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]
        nxt = text[i + 1] if i + 1 < n else ""
        state, in_quotes, emit, consumed = step(state, in_quotes, ch, nxt)
        if emit:
            out.append(emit)
        i += 2 if consumed else 1

    return "".join(out)
