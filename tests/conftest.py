"""Shared fixtures for showbytes tests."""

import pytest


class RecordingSink:
    """Text sink that remembers every chunk it was handed."""

    def __init__(self) -> None:
        self.chunks: list[str] = []

    def write(self, s: str) -> int:
        self.chunks.append(s)
        return len(s)


class FailingSink:
    """Text sink that accepts ``accept`` chunks and then raises ``error``."""

    def __init__(self, error: Exception, accept: int = 0) -> None:
        self.error = error
        self.accept = accept
        self.calls = 0
        self.chunks: list[str] = []

    def write(self, s: str) -> int:
        self.calls += 1
        if self.calls > self.accept:
            raise self.error
        self.chunks.append(s)
        return len(s)


@pytest.fixture
def sample():
    """Return the reference byte values: "Hello", NUL, 0xFF."""
    return [72, 101, 108, 108, 111, 0, 255]


@pytest.fixture
def sample_rendered():
    """Return the expected rendering of ``sample``."""
    return r"Hello\0\xff"


@pytest.fixture
def recording_sink():
    """Return an empty RecordingSink."""
    return RecordingSink()


@pytest.fixture
def failing_sink():
    """Return a factory for sinks that raise after ``accept`` writes."""
    return FailingSink
