"""showbytes: display raw bytes as printable ASCII with escape sequences."""

from ._config import DEFAULT_CHUNK_SIZE
from ._escape import escape_byte
from .errors import (
    ByteSourceError,
    ByteValueError,
    ConfigError,
    QuoteStyleError,
    ShowBytesError,
)
from .helpers import (
    format_bytes,
    print_bytes,
    println_bytes,
    show_bytes,
    write_bytes,
)
from .printer import Printer
from .quoting import QuoteStyle, list_quote_styles
from .sources import (
    BufferSource,
    ByteSequence,
    IterableSource,
    IteratorSource,
    StreamSource,
    adapt,
)

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("showbytes")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "Printer",
    "QuoteStyle",
    "ByteSequence",
    "BufferSource",
    "IteratorSource",
    "IterableSource",
    "StreamSource",
    "ShowBytesError",
    "ByteSourceError",
    "ByteValueError",
    "QuoteStyleError",
    "ConfigError",
    "adapt",
    "escape_byte",
    "format_bytes",
    "write_bytes",
    "show_bytes",
    "print_bytes",
    "println_bytes",
    "list_quote_styles",
    "DEFAULT_CHUNK_SIZE",
]
