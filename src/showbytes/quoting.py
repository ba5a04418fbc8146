"""Quoting styles for displayed byte strings."""

from enum import Enum
from typing import Literal

from .errors import QuoteStyleError

QuoteStyleName = Literal["none", "single", "double"]


class QuoteStyle(str, Enum):
    """
    How, if at all, displayed bytes are wrapped in quotes.

    The chosen style also decides which quote character gets escaped inside
    the output.
    """

    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"

    @property
    def quote(self) -> str:
        """Return the quote character, or an empty string for ``NONE``."""
        return _QUOTE_CHARS[self]

    @classmethod
    def get(cls, name: "str | QuoteStyle") -> "QuoteStyle":
        """Get quote style by name (case-insensitive)."""
        if isinstance(name, cls):
            return name
        try:
            return cls[name.upper()]
        except (KeyError, AttributeError):
            raise QuoteStyleError(
                "unknown quote style",
                invalid_name=str(name),
                available=list_quote_styles(),
            )


_QUOTE_CHARS: dict[QuoteStyle, str] = {
    QuoteStyle.NONE: "",
    QuoteStyle.SINGLE: "'",
    QuoteStyle.DOUBLE: '"',
}


def list_quote_styles() -> list[str]:
    """Return available quote style names."""
    return [style.value for style in QuoteStyle]


__all__ = [
    "QuoteStyleName",
    "QuoteStyle",
    "list_quote_styles",
]
