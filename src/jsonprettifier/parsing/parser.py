# jsonprettifier/parsing/parser.py
from __future__ import annotations

import argparse
import re
from pathlib import Path
from typing import Sequence

from jsonprettifier.constants import DEFAULT_INDENT, MAX_INDENT, MSG_BAD_INDENT, MSG_MISSING_TARGET
from jsonprettifier.core.errors import ArgumentError
from jsonprettifier.core.models import PrettifyConfig

_U32_RE = re.compile(r"\+?[0-9]+", re.ASCII)


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - Both positionals are optional at the argparse level so that a missing
          target is reported with the tool's own message instead of argparse's
          usage error.
        - No flags are defined, -h included.
    """
    p = argparse.ArgumentParser(
        prog="jsonprettifier",
        usage="%(prog)s TARGET_DIR [INDENT]",
        add_help=False,
        description=(
            "jsonprettifier – strip // and /* */ comments from every .json/.jsonc "
            "file under TARGET_DIR and rewrite it pretty-printed in place."
        ),
    )
    p.add_argument(
        "target_dir",
        nargs="?",
        metavar="TARGET_DIR",
        help="Directory scanned recursively for .json and .jsonc files.",
    )
    p.add_argument(
        "indent",
        nargs="?",
        metavar="INDENT",
        help=f"Spaces per indentation level (non-negative integer, default {DEFAULT_INDENT}).",
    )
    return p


def parse_indent(raw: str | None) -> int:
    """Parse an unsigned 32-bit indentation width.

    Accepts ASCII digits with an optional leading '+'; anything else (signs,
    whitespace, underscores, overflow) is rejected.
    """
    if raw is None:
        return DEFAULT_INDENT
    if not _U32_RE.fullmatch(raw):
        raise ArgumentError(MSG_BAD_INDENT)
    value = int(raw)
    if value > MAX_INDENT:
        raise ArgumentError(MSG_BAD_INDENT)
    return value


def parse_config(argv: Sequence[str], *, workers: int | None = None) -> PrettifyConfig:
    """Turn argv-like tokens into a PrettifyConfig.

    Tokens beyond the two positionals are ignored.

    Raises:
        ArgumentError: missing target directory or malformed indent.
    """
    ns, _extra = _build_parser().parse_known_args(list(argv))
    if not ns.target_dir:
        raise ArgumentError(MSG_MISSING_TARGET)
    indent = parse_indent(ns.indent)
    return PrettifyConfig(target_dir=Path(ns.target_dir), indent=indent, workers=workers)
