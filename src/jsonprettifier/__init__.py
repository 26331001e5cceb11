from __future__ import annotations

from pathlib import Path

from jsonprettifier.constants import DEFAULT_INDENT, JSON_SUFFIXES
from jsonprettifier.cli import JsonPrettifier
from jsonprettifier.core import (
    ArgumentError,
    BatchReport,
    FileOutcome,
    ParseError,
    PrettifyConfig,
    PrettifyError,
    ReadError,
    UnexpectedError,
    WriteError,
)
from jsonprettifier.discovery.file_discovery import FileDiscovery
from jsonprettifier.io.json_codec import JsonCodec
from jsonprettifier.processing.comment_stripper import ScanState, step, strip_comments
from jsonprettifier.runtime.pipeline import FilePipeline
from jsonprettifier.runtime.runner import BatchRunner
from jsonprettifier.runtime.wiring import build_runner

__version__ = '0.1.0'


def prettify_tree(target_dir, indent: int = DEFAULT_INDENT, *, workers=None) -> BatchReport:
    """Programmatic counterpart of the CLI: format every JSON file under *target_dir*."""
    config = PrettifyConfig(target_dir=Path(target_dir), indent=indent, workers=workers)
    return build_runner(indent=indent).run(config)


__all__ = [
    'JsonPrettifier',
    'DEFAULT_INDENT',
    'JSON_SUFFIXES',
    'prettify_tree',
    'ScanState',
    'step',
    'strip_comments',
    'JsonCodec',
    'FileDiscovery',
    'FilePipeline',
    'BatchRunner',
    'build_runner',
    'BatchReport',
    'FileOutcome',
    'PrettifyConfig',
    'PrettifyError',
    'ReadError',
    'ParseError',
    'WriteError',
    'UnexpectedError',
    'ArgumentError',
]
