from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

# Make the src/ layout importable without an editable install.
SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


@pytest.fixture(autouse=True)
def _reset_base_logger():
    """Drop handlers bound to streams captured by a previous test."""
    yield
    base = logging.getLogger("jsonprettifier")
    for h in list(base.handlers):
        base.removeHandler(h)
    base.propagate = True
    base.setLevel(logging.NOTSET)
