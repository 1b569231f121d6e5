import os
import zlib

from xgen_doc2docx.core.functions.crc32 import CRC32_TABLE, crc32, crc32_update


def test_empty_input_is_zero():
    assert crc32(b"") == 0x00000000


def test_reference_vector():
    assert crc32(b"123456789") == 0xCBF43926


def test_table_is_built_once_with_known_entries():
    assert len(CRC32_TABLE) == 256
    assert CRC32_TABLE[0] == 0
    assert CRC32_TABLE[1] == 0x77073096
    assert CRC32_TABLE[255] == 0x2D02EF8D
    assert isinstance(CRC32_TABLE, tuple)


def test_matches_zlib_on_arbitrary_data():
    for size in (1, 7, 255, 4096):
        data = os.urandom(size)
        assert crc32(data) == zlib.crc32(data) & 0xFFFFFFFF


def test_incremental_update_equals_single_pass():
    data = b"The quick brown fox jumps over the lazy dog"
    partial = crc32_update(0, data[:10])
    assert crc32_update(partial, data[10:]) == crc32(data)
    assert crc32(data) == 0x414FA339


def test_result_is_unsigned_32_bit():
    value = crc32(b"\xff" * 64)
    assert 0 <= value <= 0xFFFFFFFF
