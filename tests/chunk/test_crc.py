import zlib

from pngstego.chunk.crc import chunk_crc, crc32, pack_crc32, unpack_crc32


def test_iend_crc():
    assert crc32(b"IEND") == 0xAE426082
    assert chunk_crc(b"IEND", b"") == 0xAE426082


def test_chunk_crc_covers_type_then_data():
    message = b"This is where your secret message will be!"
    assert chunk_crc(b"RuSt", message) == 2882656334
    assert chunk_crc(b"RuSt", message) == zlib.crc32(b"RuSt" + message)
    assert chunk_crc(message, b"RuSt") != chunk_crc(b"RuSt", message)


def test_crc_bytes_are_big_endian():
    blob = pack_crc32(0x01020304)
    assert blob == b"\x01\x02\x03\x04"
    assert unpack_crc32(b"\x00" + blob, 1) == 0x01020304
