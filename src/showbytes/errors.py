"""Custom exception hierarchy for showbytes errors."""


class ShowBytesError(Exception):
    """Base exception for all showbytes errors."""


class ByteSourceError(ShowBytesError, TypeError):
    """Raised when a value cannot be adapted into a byte sequence."""

    def __init__(self, message: str, *, source_type: type | None = None) -> None:
        """Initialize with optional source_type that gets appended to the message."""
        if source_type is not None:
            message = f"{message} (got {source_type.__name__})"
        super().__init__(message)
        self.source_type = source_type


class ByteValueError(ShowBytesError, ValueError):
    """Raised when a byte source yields something that is not a byte value."""

    def __init__(
        self,
        message: str,
        *,
        value: object = None,
        position: int | None = None,
    ) -> None:
        """
        Initialize ByteValueError with the offending element.

        Args:
            message: Error message.
            value: The element that is not an int in 0..255.
            position: Zero-based index of the element in the sequence.
        """
        extra = " "
        if value is not None:
            extra += f"(value: {value!r}) "
        if position is not None:
            extra += f"(position: {position}) "
        super().__init__(message + extra)
        self.value = value
        self.position = position


class QuoteStyleError(ShowBytesError):
    """Raised when an unknown quote style is requested."""

    def __init__(
        self,
        message: str,
        *,
        invalid_name: str | None = None,
        available: list[str] | None = None,
    ) -> None:
        extra = " "
        if invalid_name:
            extra += f"(available: {available}) (got {invalid_name}) "
        super().__init__(message + extra)
        self.invalid_name = invalid_name
        self.available = available


class ConfigError(ShowBytesError):
    """Raised when a configuration value is invalid."""

    def __init__(self, message: str, *, value: object = None) -> None:
        if value is not None:
            message = f"{message} (got {value!r})"
        super().__init__(message)
        self.value = value
