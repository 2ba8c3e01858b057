"""Hide and recover payloads in PNG-style chunks."""

from .exceptions import ConfigurationError, PngStegoError
from .chunk import (
    Chunk,
    ChunkCfg,
    ChunkError,
    ChunkType,
    CrcMismatchError,
    InvalidByteError,
    InvalidUtf8Error,
    LengthExceededError,
    TruncatedInputError,
    iter_chunks,
    parse_chunk,
)

__all__ = [
    "Chunk",
    "ChunkCfg",
    "ChunkError",
    "ChunkType",
    "ConfigurationError",
    "CrcMismatchError",
    "InvalidByteError",
    "InvalidUtf8Error",
    "LengthExceededError",
    "PngStegoError",
    "TruncatedInputError",
    "iter_chunks",
    "parse_chunk",
]
