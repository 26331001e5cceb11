from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Spaces per indentation level when the CLI does not receive one.
DEFAULT_INDENT: int = 4

# Extensions are compared case-sensitively against Path.suffix.
JSON_SUFFIXES: tuple[str, ...] = ('.json', '.jsonc')

# Largest indent accepted on the command line (unsigned 32-bit).
MAX_INDENT: int = 2 ** 32 - 1

MSG_MISSING_TARGET: str = 'Target directory not specified'
MSG_BAD_INDENT: str = 'Indentation must be an u32'

ENV_WORKERS: str = 'JSONPRETTIFIER_WORKERS'
ENV_JSON_LOGS: str = 'JSONPRETTIFIER_JSON_LOGS'
ENV_TRACE_IO: str = 'JSONPRETTIFIER_TRACE_IO'
