"""
Printer that writes byte sequences as escaped, printable ASCII text.
"""

import io
import logging
from dataclasses import dataclass

from ._config import DEFAULT_CHUNK_SIZE, validate_chunk_size
from ._escape import escape_table, scanner
from .quoting import QuoteStyle
from .sources import adapt
from .types import TextSink

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Printer:
    """
    Describes how to display bytes and writes them to a text sink.

    Printable ASCII other than the backslash (and the active quote
    character) is shown as is. NUL, BEL, BS, TAB, LF, VT, FF, CR and the
    backslash get mnemonic escapes, everything else becomes ``\\xHH``.
    ``chunk_size`` only sets how many source bytes are read at a time.
    """

    quote_style: QuoteStyle = QuoteStyle.NONE
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self) -> None:
        # accept plain names like "double" as well as enum members
        object.__setattr__(self, "quote_style", QuoteStyle.get(self.quote_style))
        validate_chunk_size(self.chunk_size)

    def write_to(self, source: object, sink: TextSink) -> None:
        """
        Write the formatted bytes to a text sink.

        Each literal run and each escape sequence is handed to ``sink.write``
        as soon as it is resolved, so nothing beyond a single source chunk is
        held in memory. With no quote style, empty input never touches the
        sink.

        :param source: Any value accepted by :func:`showbytes.sources.adapt`.
        :param sink: Object with a ``write(str)`` method.
        :raises ByteSourceError: If ``source`` cannot be adapted.
        :raises ByteValueError: If ``source`` yields a non-byte element.

        Exceptions raised by ``sink.write`` propagate unchanged; output
        already accepted by the sink stays written.
        """
        sequence = adapt(source, chunk_size=self.chunk_size)
        table = escape_table(self.quote_style)
        scan = scanner(self.quote_style)
        quote = self.quote_style.quote

        offset = 0
        if quote:
            _emit(sink, quote, offset)

        for chunk in sequence.chunks():
            for match in scan.finditer(chunk):
                if match.lastgroup == "literal":
                    text = match.group().decode("ascii")
                else:
                    text = table[match.group()[0]]
                _emit(sink, text, offset + match.start())
            offset += len(chunk)

        if quote:
            _emit(sink, quote, offset)

    def into_string(self, source: object) -> str:
        """Return a string displaying the bytes."""
        output = io.StringIO()
        self.write_to(source, output)
        return output.getvalue()


def _emit(sink: TextSink, text: str, offset: int) -> None:
    """Hand one resolved chunk to the sink, logging where a failure stopped the pass."""
    try:
        sink.write(text)
    except Exception:
        log.debug(
            f"{type(sink).__name__} rejected output at byte offset {offset}, "
            "stopping"
        )
        raise


__all__ = ["Printer"]
