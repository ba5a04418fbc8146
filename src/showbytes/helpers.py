"""Convenience functions for showing bytes without building a Printer."""

import sys

from ._config import DEFAULT_CHUNK_SIZE
from .printer import Printer
from .quoting import QuoteStyle, QuoteStyleName
from .types import TextSink


def format_bytes(
    source: object,
    quote_style: "QuoteStyleName | QuoteStyle" = "none",
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> str:
    """
    Return the escaped rendering of a byte source.

    :param source: Buffer, binary stream, iterator or iterable of byte values.
    :param quote_style: "none", "single" or "double".
    :param chunk_size: Source bytes read per chunk; never affects the result.
    :return: Printable ASCII text.
    :raises QuoteStyleError: If quote_style is unknown.

    .. code-block:: python

        format_bytes(b"Hello\\x00\\xff")  # 'Hello\\\\0\\\\xff'
        format_bytes([92])  # '\\\\\\\\'
    """
    return Printer(quote_style, chunk_size).into_string(source)


def write_bytes(
    source: object,
    sink: TextSink,
    quote_style: "QuoteStyleName | QuoteStyle" = "none",
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> None:
    """Write the escaped rendering of a byte source to ``sink``."""
    Printer(quote_style, chunk_size).write_to(source, sink)


def show_bytes(source: object) -> str:
    """
    Return the rendering wrapped in double quotes.

    Equivalent to ``Printer(QuoteStyle.DOUBLE).into_string(source)``.
    """
    return Printer(QuoteStyle.DOUBLE).into_string(source)


def print_bytes(
    source: object,
    *,
    quote_style: "QuoteStyleName | QuoteStyle" = "none",
    file: TextSink | None = None,
) -> None:
    """Write the rendering to ``file`` (stdout by default) without a newline."""
    # look stdout up per call so redirection after import is honoured
    write_bytes(source, sys.stdout if file is None else file, quote_style)


def println_bytes(
    source: object,
    *,
    quote_style: "QuoteStyleName | QuoteStyle" = "none",
    file: TextSink | None = None,
) -> None:
    """Like :func:`print_bytes` but terminates the line."""
    sink = sys.stdout if file is None else file
    write_bytes(source, sink, quote_style)
    sink.write("\n")


__all__ = [
    "format_bytes",
    "write_bytes",
    "show_bytes",
    "print_bytes",
    "println_bytes",
]
