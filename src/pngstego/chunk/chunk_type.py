"""Four-byte chunk type codes.

A type code is four bytes whose ASCII case carries one property each::

    byte 0  uppercase = critical     lowercase = ancillary
    byte 1  uppercase = public       lowercase = private
    byte 2  uppercase = reserved bit valid (must be set by producers)
    byte 3  uppercase = unsafe to copy, lowercase = safe to copy
"""

from __future__ import annotations

import builtins
from dataclasses import dataclass
from typing import Iterable, Union

from .errors import InvalidByteError, InvalidUtf8Error

TYPE_SIZE = 4

ANCILLARY_POS = 0
PRIVATE_POS = 1
RESERVED_POS = 2
SAFE_TO_COPY_POS = 3

RawTypeCode = Union[bytes, bytearray, memoryview, Iterable[int]]


def _is_upper(byte: int) -> bool:
    return 0x41 <= byte <= 0x5A


def _is_lower(byte: int) -> bool:
    return 0x61 <= byte <= 0x7A


@dataclass(frozen=True)
class ChunkType:
    """Immutable 4-byte chunk type code."""

    raw: builtins.bytes

    def __post_init__(self) -> None:
        if not isinstance(self.raw, bytes):
            raise InvalidByteError("type code must be bytes")
        if len(self.raw) != TYPE_SIZE:
            raise InvalidByteError(
                f"type code must be exactly {TYPE_SIZE} bytes, got {len(self.raw)}"
            )

    @classmethod
    def from_bytes(cls, raw: RawTypeCode) -> "ChunkType":
        """Wrap four raw bytes without checking that they are letters."""

        try:
            data = bytes(raw)
        except (TypeError, ValueError) as exc:
            raise InvalidByteError("type code must be a sequence of byte values") from exc
        return cls(data)

    @classmethod
    def from_str(cls, text: str) -> "ChunkType":
        """Parse a four-letter ASCII type code such as ``"IHDR"``."""

        if not isinstance(text, str):
            raise InvalidByteError("type code text must be a string")
        try:
            data = text.encode("ascii")
        except UnicodeEncodeError as exc:
            raise InvalidByteError(
                "type code must be ASCII", byte=ord(text[exc.start]), position=exc.start
            ) from None
        if len(data) != TYPE_SIZE:
            raise InvalidByteError(
                f"type code must be exactly {TYPE_SIZE} bytes, got {len(data)}"
            )
        for position, byte in enumerate(data):
            if not cls.is_valid_byte(byte):
                raise InvalidByteError(
                    "type code bytes must be ASCII letters", byte=byte, position=position
                )
        return cls(data)

    @staticmethod
    def is_valid_byte(byte: int) -> bool:
        return _is_upper(byte) or _is_lower(byte)

    def bytes(self) -> builtins.bytes:
        return self.raw

    def __bytes__(self) -> builtins.bytes:
        return self.raw

    def is_valid(self) -> bool:
        """Return ``True`` for an all-ASCII code whose reserved bit is set."""

        return all(byte < 0x80 for byte in self.raw) and self.is_reserved_bit_valid()

    def is_critical(self) -> bool:
        return _is_upper(self.raw[ANCILLARY_POS])

    def is_public(self) -> bool:
        return _is_upper(self.raw[PRIVATE_POS])

    def is_reserved_bit_valid(self) -> bool:
        return _is_upper(self.raw[RESERVED_POS])

    def is_safe_to_copy(self) -> bool:
        # Inverted polarity: an uppercase byte marks the chunk unsafe to copy.
        return not _is_upper(self.raw[SAFE_TO_COPY_POS])

    def as_text(self) -> str:
        """Return the type code as text.

        Raises :class:`InvalidUtf8Error` when the code was built from raw bytes
        that do not form valid text.
        """

        try:
            return self.raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidUtf8Error(f"type code {self.raw!r} is not valid text") from exc

    def __str__(self) -> str:
        return self.as_text()

    def __repr__(self) -> str:
        return f"ChunkType({self.raw!r})"


__all__ = ["ChunkType", "TYPE_SIZE"]
