from typing import Final

from .errors import ConfigError

DEFAULT_CHUNK_SIZE: Final[int] = 8192


def validate_chunk_size(size: int) -> int:
    """Return ``size`` if it is usable as a read/slice granularity."""
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise ConfigError("chunk size must be a positive integer", value=size)
    return size
