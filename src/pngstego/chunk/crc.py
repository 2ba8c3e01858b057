"""CRC helper functions."""

from __future__ import annotations

import struct
import zlib

CRC32_INITIAL = 0

_CRC_STRUCT = struct.Struct(">I")


def crc32(data: bytes, value: int = CRC32_INITIAL) -> int:
    """Compute the CRC32 checksum of *data*.

    The checksum uses the same polynomial as :func:`zlib.crc32` (the ISO-HDLC
    variant shared with PNG and gzip) and returns an unsigned 32-bit integer.
    Pass a previous result as *value* to continue a running checksum.
    """

    return zlib.crc32(data, value) & 0xFFFFFFFF


def chunk_crc(type_bytes: bytes, data: bytes) -> int:
    """Return the CRC32 of ``type_bytes`` followed by ``data``."""

    return crc32(data, crc32(type_bytes))


def pack_crc32(checksum: int) -> bytes:
    """Return ``checksum`` as four big-endian bytes."""

    return _CRC_STRUCT.pack(checksum)


def unpack_crc32(blob: bytes, offset: int = 0) -> int:
    """Read a big-endian CRC32 from ``blob`` at ``offset``."""

    return _CRC_STRUCT.unpack_from(blob, offset)[0]
