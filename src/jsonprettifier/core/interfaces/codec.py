from __future__ import annotations
"""Value parser/serializer protocol definitions."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ValueCodecProtocol(Protocol):
    """Parse text into a structured value and serialize it back.

    Methods:
        parse: Parse a complete document; raise ValueError on malformed input.
        dumps: Serialize a value using the codec's indentation unit.
    """

    def parse(self, text: str) -> Any:
        ...

    def dumps(self, value: Any) -> str:
        ...
