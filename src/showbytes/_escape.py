"""
Escape table and scanner used to turn raw bytes into printable ASCII.
"""

from functools import cache

import regex as re

from .quoting import QuoteStyle
from .sources import to_byte
from .types import ByteValue

# mnemonic escapes, everything else outside the printable range is \xHH
MNEMONICS: dict[int, str] = {
    0x00: "\\0",
    0x07: "\\a",
    0x08: "\\b",
    0x09: "\\t",
    0x0A: "\\n",
    0x0B: "\\v",
    0x0C: "\\f",
    0x0D: "\\r",
    0x5C: "\\\\",
}


def _is_literal(byte: int, quote: str) -> bool:
    """Return True if ``byte`` is shown as itself under the given quote."""
    if byte == 0x5C or (quote and byte == ord(quote)):
        return False
    return 0x20 <= byte <= 0x7E


@cache
def escape_table(style: QuoteStyle) -> tuple[str, ...]:
    """
    Build the 256-entry lookup table for a quote style.

    Index ``b`` holds the text shown for byte value ``b``.
    """
    quote = style.quote
    table = []
    for byte in range(256):
        if byte in MNEMONICS:
            table.append(MNEMONICS[byte])
        elif quote and byte == ord(quote):
            table.append("\\" + quote)
        elif _is_literal(byte, quote):
            table.append(chr(byte))
        else:
            table.append(f"\\x{byte:02x}")
    return tuple(table)


@cache
def scanner(style: QuoteStyle) -> "re.Pattern[bytes]":
    """
    Compile a bytes pattern splitting input into literal runs and single escapes.

    Matches are named ``literal`` (one or more bytes shown as themselves) or
    ``escape`` (exactly one byte that needs its table entry).
    """
    quote = style.quote
    literal_class = "".join(
        f"\\x{byte:02x}" for byte in range(256) if _is_literal(byte, quote)
    )
    pattern = f"(?P<literal>[{literal_class}]+)|(?P<escape>.)"
    return re.compile(pattern.encode("ascii"), re.DOTALL)


def escape_byte(
    value: ByteValue, quote_style: "str | QuoteStyle" = QuoteStyle.NONE
) -> str:
    """
    Return the displayed form of a single byte value.

    :param value: Integer in ``0..255``.
    :param quote_style: Quote style whose quote character must be escaped.
    :raises ByteValueError: If ``value`` is not an int in ``0..255``.
    :raises QuoteStyleError: If ``quote_style`` is unknown.

    .. code-block:: python

        escape_byte(0x41)  # 'A'
        escape_byte(0xFF)  # '\\xff'
    """
    return escape_table(QuoteStyle.get(quote_style))[to_byte(value)]


__all__ = ["MNEMONICS", "escape_table", "scanner", "escape_byte"]
