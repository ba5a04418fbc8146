"""
Core types for byte display.
"""

from typing import Protocol

type ByteValue = int


class TextSink(Protocol):
    """Anything that accepts chunks of text; failure is signalled by raising."""

    def write(self, s: str, /) -> object: ...
