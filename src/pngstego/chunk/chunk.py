"""Length-prefixed, CRC-checked chunk records.

On the wire a chunk is laid out as::

    +--------+------+------------------+-------+
    | length | type | data             | crc   |
    | 4 (BE) | 4    | ``length`` bytes | 4 (BE)|
    +--------+------+------------------+-------+

The CRC covers the type and data fields, never the length.
"""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

from .chunk_type import TYPE_SIZE, ChunkType
from .config import DEFAULT_CFG, MAX_LENGTH, ChunkCfg
from .crc import chunk_crc, pack_crc32, unpack_crc32
from .errors import (
    CrcMismatchError,
    InvalidByteError,
    InvalidUtf8Error,
    LengthExceededError,
    TruncatedInputError,
)

LOGGER = logging.getLogger(__name__)

_LENGTH_STRUCT = struct.Struct(">I")

LENGTH_SIZE = _LENGTH_STRUCT.size
CRC_SIZE = 4
HEADER_SIZE = LENGTH_SIZE + TYPE_SIZE
OVERHEAD = HEADER_SIZE + CRC_SIZE

BytesLike = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True)
class Chunk:
    """A single chunk: a type code plus opaque payload bytes."""

    chunk_type: ChunkType
    data: bytes = b""

    def __post_init__(self) -> None:
        if not isinstance(self.chunk_type, ChunkType):
            raise TypeError("chunk_type must be a ChunkType")
        if not isinstance(self.data, (bytes, bytearray, memoryview)):
            raise TypeError("chunk data must be bytes")
        object.__setattr__(self, "data", bytes(self.data))
        if len(self.data) > MAX_LENGTH:
            raise LengthExceededError(len(self.data), MAX_LENGTH)

    @property
    def length(self) -> int:
        return len(self.data)

    @property
    def size(self) -> int:
        """Number of bytes the serialised chunk occupies."""

        return OVERHEAD + self.length

    def crc(self) -> int:
        """CRC32 over the type code followed by the payload."""

        return chunk_crc(self.chunk_type.bytes(), self.data)

    checksum = crc

    def data_as_text(self) -> str:
        try:
            return self.data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidUtf8Error("chunk data is not valid UTF-8") from exc

    def as_bytes(self) -> bytes:
        """Serialise the chunk to its wire representation."""

        return b"".join(
            (
                _LENGTH_STRUCT.pack(self.length),
                self.chunk_type.bytes(),
                self.data,
                pack_crc32(self.crc()),
            )
        )

    def __bytes__(self) -> bytes:
        return self.as_bytes()

    @classmethod
    def from_bytes(cls, buffer: BytesLike, *, cfg: Optional[ChunkCfg] = None) -> "Chunk":
        """Parse a chunk from the start of *buffer*.

        Bytes following the chunk's CRC are ignored.
        """

        chunk, _ = parse_chunk(buffer, cfg=cfg)
        return chunk

    def render(self, cfg: Optional[ChunkCfg] = None) -> str:
        """Return ``"<type>\\t<text>"`` without raising.

        A payload that is not UTF-8 is replaced by the placeholder and a type
        code that is not text is shown with backslash escapes.
        """

        placeholder = (cfg or DEFAULT_CFG).placeholder
        try:
            type_text = self.chunk_type.as_text()
        except InvalidUtf8Error:
            type_text = self.chunk_type.bytes().decode("utf-8", "backslashreplace")
        try:
            text = self.data_as_text()
        except InvalidUtf8Error:
            text = placeholder
        return f"{type_text}\t{text}"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Chunk<{self.chunk_type!r}>[{self.length}]"


def _require(view: memoryview, offset: int, count: int) -> None:
    available = max(len(view) - offset, 0)
    if available < count:
        LOGGER.debug("chunk truncated at offset %d: need %d, have %d", offset, count, available)
        raise TruncatedInputError(count, available)


def parse_chunk(
    buffer: BytesLike,
    offset: int = 0,
    *,
    cfg: Optional[ChunkCfg] = None,
) -> Tuple[Chunk, int]:
    """Parse the chunk starting at *offset* in *buffer*.

    Returns the chunk together with the offset just past its CRC.  The buffer
    is not held after returning or raising, so a ``bytearray`` may be extended
    and parsed again after a :class:`TruncatedInputError`.
    """

    if not isinstance(buffer, (bytes, bytearray, memoryview)):
        raise TypeError("chunk buffer must be bytes")
    if offset < 0:
        raise ValueError("offset must be non-negative")
    cfg = cfg or DEFAULT_CFG
    with memoryview(buffer) as raw, raw.cast("B") as view:
        return _parse_view(view, offset, cfg)


def _parse_view(view: memoryview, offset: int, cfg: ChunkCfg) -> Tuple[Chunk, int]:
    _require(view, offset, LENGTH_SIZE)
    (length,) = _LENGTH_STRUCT.unpack_from(view, offset)
    if length > cfg.max_length:
        LOGGER.debug("chunk at offset %d declares length %d above %d", offset, length, cfg.max_length)
        raise LengthExceededError(length, cfg.max_length)
    offset += LENGTH_SIZE

    _require(view, offset, TYPE_SIZE)
    chunk_type = ChunkType.from_bytes(bytes(view[offset : offset + TYPE_SIZE]))
    offset += TYPE_SIZE

    _require(view, offset, length)
    data = bytes(view[offset : offset + length])
    offset += length

    _require(view, offset, CRC_SIZE)
    declared = unpack_crc32(view, offset)
    offset += CRC_SIZE

    chunk = Chunk(chunk_type, data)
    actual = chunk.crc()
    if actual != declared:
        LOGGER.debug("chunk %r failed CRC check: %#010x != %#010x", chunk_type, declared, actual)
        raise CrcMismatchError(declared, actual)

    if cfg.require_valid_type and not chunk_type.is_valid():
        raise InvalidByteError(f"chunk type {chunk_type!r} is not a valid type code")

    return chunk, offset


def iter_chunks(
    buffer: BytesLike,
    offset: int = 0,
    *,
    cfg: Optional[ChunkCfg] = None,
) -> Iterator[Chunk]:
    """Yield consecutive chunks from *buffer* until it is exhausted."""

    with memoryview(buffer) as raw:
        end = raw.nbytes
    while offset < end:
        chunk, offset = parse_chunk(buffer, offset, cfg=cfg)
        yield chunk


__all__ = [
    "CRC_SIZE",
    "HEADER_SIZE",
    "LENGTH_SIZE",
    "MAX_LENGTH",
    "OVERHEAD",
    "Chunk",
    "iter_chunks",
    "parse_chunk",
]
