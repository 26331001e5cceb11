from __future__ import annotations

"""
JSON value parser / serializer.

Thin policy layer over the standard `json` module:
  * parse: strict standard JSON. Objects keep insertion order and the last
    duplicate key wins. The non-standard constants NaN / Infinity / -Infinity
    that `json` accepts by default are rejected.
  * dumps: pretty-printed with `indent` spaces per level, `": "` after keys,
    one element per line, non-ASCII text written as-is and no trailing
    newline. Empty containers stay `{}` / `[]`. Non-finite floats, which a
    number such as 1e400 parses to, raise ValueError instead of being
    written as Infinity.
"""

import json
from typing import Any

from jsonprettifier.constants import DEFAULT_INDENT
from jsonprettifier.core.interfaces.codec import ValueCodecProtocol


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name!r}")


class JsonCodec(ValueCodecProtocol):
    def __init__(self, *, indent: int = DEFAULT_INDENT) -> None:
        if indent < 0:
            raise ValueError("indent must be non-negative")
        self._indent = int(indent)

    @property
    def indent(self) -> int:
        return self._indent

    def parse(self, text: str) -> Any:
        """Parse *text* as one JSON document.

        Raises:
            ValueError: malformed document (json.JSONDecodeError is a subclass).
        """
        return json.loads(text, parse_constant=_reject_constant)

    def dumps(self, value: Any) -> str:
        """Serialize *value*.

        Raises:
            ValueError: the value holds a NaN or infinite float.
        """
        return json.dumps(
            value,
            indent=self._indent,
            separators=(",", ": "),
            ensure_ascii=False,
            allow_nan=False,
        )
