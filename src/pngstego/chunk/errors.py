"""Exception types for the chunk subsystem."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..exceptions import PngStegoError


class ChunkError(PngStegoError):
    """Base class for chunk encoding and decoding errors."""


@dataclass
class InvalidByteError(ChunkError):
    """Raised when a chunk type code is built from unacceptable bytes."""

    reason: str
    byte: Optional[int] = None
    position: Optional[int] = None

    def __str__(self) -> str:  # pragma: no cover - human-friendly message
        if self.byte is None:
            return self.reason
        return f"{self.reason}: byte {self.byte:#04x} at position {self.position}"


@dataclass
class LengthExceededError(ChunkError):
    """Raised when a chunk length is above the permitted maximum."""

    length: int
    limit: int

    def __str__(self) -> str:  # pragma: no cover - human-friendly message
        return f"chunk length {self.length} exceeds maximum of {self.limit}"


@dataclass
class TruncatedInputError(ChunkError):
    """Raised when the buffer ends before the chunk does."""

    needed: int
    available: int

    def __str__(self) -> str:  # pragma: no cover - human-friendly message
        return f"truncated chunk: needed {self.needed} bytes, {self.available} available"


@dataclass
class CrcMismatchError(ChunkError):
    """Raised when the declared CRC does not match the recomputed one."""

    expected: int
    actual: int

    def __str__(self) -> str:  # pragma: no cover - human-friendly message
        return f"CRC mismatch: declared {self.expected:#010x}, computed {self.actual:#010x}"


class InvalidUtf8Error(ChunkError):
    """Raised when chunk bytes requested as text are not valid UTF-8."""


__all__ = [
    "ChunkError",
    "CrcMismatchError",
    "InvalidByteError",
    "InvalidUtf8Error",
    "LengthExceededError",
    "TruncatedInputError",
]
