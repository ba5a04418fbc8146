"""
Adapters that turn byte-bearing values into a single-pass byte sequence.
"""

import array
import io
import logging
import mmap
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Buffer, Iterable, Iterator
from functools import singledispatch
from itertools import islice
from typing import override

from ._config import DEFAULT_CHUNK_SIZE, validate_chunk_size
from .errors import ByteSourceError, ByteValueError
from .types import ByteValue

log = logging.getLogger(__name__)


class ByteSequence(ABC):
    """
    Lazy, single-pass sequence of byte values.

    Iterating yields ints in ``0..255``. ``chunks()`` yields the same
    sequence as ``bytes`` slices, which is what the formatter consumes.
    """

    def __init__(self, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        super().__init__()
        self.chunk_size = validate_chunk_size(chunk_size)
        self._consumed = False

    def chunks(self) -> Iterator[bytes]:
        """
        Start the single pass and return an iterator of ``bytes`` slices.

        :raises ByteSourceError: If the sequence has already been consumed.
        """
        if self._consumed:
            raise ByteSourceError(
                f"{self.__class__.__name__} has already been consumed"
            )
        self._consumed = True
        return self._iter_chunks()

    def __iter__(self) -> Iterator[ByteValue]:
        for chunk in self.chunks():
            yield from chunk

    @abstractmethod
    def _iter_chunks(self) -> Iterator[bytes]:
        """Subclass-specific chunk production."""
        ...


class BufferSource(ByteSequence):
    """
    Sequence over anything exposing the buffer protocol.

    Covers ``bytes``, ``bytearray``, ``memoryview``, ``array.array`` and
    ``mmap.mmap``. The buffer is only borrowed for the duration of the pass.
    """

    def __init__(
        self, buffer: Buffer, *, chunk_size: int = DEFAULT_CHUNK_SIZE
    ) -> None:
        super().__init__(chunk_size=chunk_size)
        try:
            memoryview(buffer).release()
        except (TypeError, ValueError) as e:
            raise ByteSourceError(
                "object does not expose a readable buffer", source_type=type(buffer)
            ) from e
        self._buffer = buffer

    @override
    def _iter_chunks(self) -> Iterator[bytes]:
        size = self.chunk_size
        # fast path: immutable and small enough to hand over as is
        if type(self._buffer) is bytes and len(self._buffer) <= size:
            if self._buffer:
                yield self._buffer
            return

        with memoryview(self._buffer) as view:
            if not view.c_contiguous:
                # strided views have to be copied before they can be cast
                data = view.tobytes()
                for start in range(0, len(data), size):
                    yield data[start : start + size]
                return
            with view.cast("B") as flat:
                for start in range(0, flat.nbytes, size):
                    yield flat[start : start + size].tobytes()


class IteratorSource(ByteSequence):
    """
    Sequence over an existing iterator of ints.

    The caller's iterator is advanced in place one element at a time, so
    after a full pass it is exhausted and after an interrupted pass it sits
    just past the last byte handed out. ``chunk_size`` is accepted for a
    uniform signature but never causes read-ahead.
    """

    def __init__(
        self, iterator: Iterator[ByteValue], *, chunk_size: int = DEFAULT_CHUNK_SIZE
    ) -> None:
        super().__init__(chunk_size=chunk_size)
        self._iterator = iterator

    @override
    def _iter_chunks(self) -> Iterator[bytes]:
        for position, value in enumerate(self._iterator):
            yield bytes((to_byte(value, position),))


class IterableSource(ByteSequence):
    """
    Sequence over a re-iterable collection of ints (list, tuple, deque, ...).

    The collection is never modified; a fresh iterator is taken per pass.
    """

    def __init__(
        self, iterable: Iterable[ByteValue], *, chunk_size: int = DEFAULT_CHUNK_SIZE
    ) -> None:
        super().__init__(chunk_size=chunk_size)
        self._iterable = iterable

    @override
    def _iter_chunks(self) -> Iterator[bytes]:
        iterator = iter(self._iterable)
        position = 0
        while batch := list(islice(iterator, self.chunk_size)):
            try:
                chunk = bytes(batch)
            except (TypeError, ValueError):
                # locate the offending element for the error message
                for offset, value in enumerate(batch):
                    to_byte(value, position + offset)
                raise
            position += len(chunk)
            yield chunk


class StreamSource(ByteSequence):
    """
    Sequence over a readable binary stream such as ``io.BytesIO``.

    The stream is read lazily from its current position and is neither
    rewound nor closed.
    """

    def __init__(
        self, stream: io.IOBase, *, chunk_size: int = DEFAULT_CHUNK_SIZE
    ) -> None:
        super().__init__(chunk_size=chunk_size)
        if isinstance(stream, io.TextIOBase):
            raise ByteSourceError(
                "text streams carry str, open the stream in binary mode",
                source_type=type(stream),
            )
        # readable() itself raises ValueError once the stream is closed
        if stream.closed:
            raise ByteSourceError("stream is closed", source_type=type(stream))
        if not stream.readable():
            raise ByteSourceError("stream is not readable", source_type=type(stream))
        self._stream = stream

    @override
    def _iter_chunks(self) -> Iterator[bytes]:
        size = self.chunk_size
        log.debug(f"reading {type(self._stream).__name__} in {size} byte chunks")
        # read() returns None on a non-blocking stream with no data ready
        while chunk := self._stream.read(size):
            yield bytes(chunk)


def to_byte(value: object, position: int | None = None) -> ByteValue:
    """
    Validate a single element of a byte source.

    :raises ByteValueError: If ``value`` is not an int in ``0..255``.
    """
    try:
        (byte,) = bytes((value,))
    except (TypeError, ValueError) as e:
        raise ByteValueError(
            "not a byte value", value=value, position=position
        ) from e
    return byte


@singledispatch
def adapt(source: object, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> ByteSequence:
    """
    Normalize a byte-bearing value into a ``ByteSequence``.

    Buffers and collections are borrowed, iterators are advanced in place,
    and binary streams are read from their current position.

    :param source: Buffer, binary stream, iterator or iterable of byte values.
    :param chunk_size: Bytes sliced or read per chunk; never affects output.
    :return: Single-pass sequence over the source's bytes.
    :raises ByteSourceError: If the value is text or has no byte interpretation.
    :raises ConfigError: If chunk_size is not a positive int.

    .. code-block:: python

        adapt(b"Hello")
        adapt(iter([72, 105]))
        adapt(io.BytesIO(b"\\x00\\xff"), chunk_size=4096)
    """
    if isinstance(source, io.IOBase):
        return _log_choice(source, StreamSource(source, chunk_size=chunk_size))
    if isinstance(source, Buffer):
        return _log_choice(source, BufferSource(source, chunk_size=chunk_size))
    if isinstance(source, Iterator):
        return _log_choice(source, IteratorSource(source, chunk_size=chunk_size))
    if isinstance(source, Iterable):
        return _log_choice(source, IterableSource(source, chunk_size=chunk_size))
    raise ByteSourceError("unsupported byte source", source_type=type(source))


@adapt.register
def _(source: ByteSequence, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> ByteSequence:
    # already chunked with its own size
    return source


@adapt.register
def _(source: str, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> ByteSequence:
    raise ByteSourceError(
        "str has no byte representation, encode it first", source_type=type(source)
    )


@adapt.register(bytes)
@adapt.register(bytearray)
@adapt.register(memoryview)
@adapt.register(array.array)
@adapt.register(mmap.mmap)
def _(source: Buffer, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> ByteSequence:
    return _log_choice(source, BufferSource(source, chunk_size=chunk_size))


@adapt.register(list)
@adapt.register(tuple)
@adapt.register(deque)
def _(
    source: Iterable[ByteValue], *, chunk_size: int = DEFAULT_CHUNK_SIZE
) -> ByteSequence:
    return _log_choice(source, IterableSource(source, chunk_size=chunk_size))


def _log_choice(source: object, sequence: ByteSequence) -> ByteSequence:
    log.debug(
        f"adapted {type(source).__name__} with {sequence.__class__.__name__}"
    )
    return sequence


__all__ = [
    "ByteSequence",
    "BufferSource",
    "IteratorSource",
    "IterableSource",
    "StreamSource",
    "adapt",
    "to_byte",
]
