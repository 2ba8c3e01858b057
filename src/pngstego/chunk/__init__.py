"""PNG-style chunk encoding and decoding."""

from .errors import (
    ChunkError,
    CrcMismatchError,
    InvalidByteError,
    InvalidUtf8Error,
    LengthExceededError,
    TruncatedInputError,
)
from .config import MAX_LENGTH, ChunkCfg
from .crc import chunk_crc, crc32
from .chunk_type import ChunkType
from .chunk import Chunk, iter_chunks, parse_chunk

__all__ = [
    "ChunkError",
    "CrcMismatchError",
    "InvalidByteError",
    "InvalidUtf8Error",
    "LengthExceededError",
    "TruncatedInputError",
    "MAX_LENGTH",
    "ChunkCfg",
    "chunk_crc",
    "crc32",
    "ChunkType",
    "Chunk",
    "iter_chunks",
    "parse_chunk",
]
