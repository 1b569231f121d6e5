# xgen_doc2docx/core/functions/crc32.py
"""
CRC-32 checksum (ZIP/PNG variant)

Reflected polynomial 0xEDB88320, initial register 0xFFFFFFFF, final XOR
0xFFFFFFFF. ZIP readers verify this value for every entry, so the result
must match zlib.crc32 exactly.

The 256-entry lookup table is built once at import time and never mutated.

Usage:
    from xgen_doc2docx.core.functions.crc32 import crc32

    crc32(b"123456789")  # 0xCBF43926
"""
from typing import Tuple

CRC32_POLYNOMIAL = 0xEDB88320
CRC32_INITIAL = 0xFFFFFFFF
CRC32_MASK = 0xFFFFFFFF


def _build_table() -> Tuple[int, ...]:
    table = []
    for i in range(256):
        c = i
        for _ in range(8):
            if c & 1:
                c = CRC32_POLYNOMIAL ^ (c >> 1)
            else:
                c >>= 1
        table.append(c)
    return tuple(table)


CRC32_TABLE: Tuple[int, ...] = _build_table()


def crc32_update(crc: int, data: bytes) -> int:
    """
    Continue a CRC-32 computation over another chunk of data.

    Args:
        crc: Checksum of the preceding chunks (0 for the first chunk)
        data: Next chunk of bytes

    Returns:
        Checksum covering all chunks seen so far
    """
    register = (crc ^ CRC32_MASK) & CRC32_MASK
    table = CRC32_TABLE
    for byte in data:
        register = table[(register ^ byte) & 0xFF] ^ (register >> 8)
    return (register ^ CRC32_MASK) & CRC32_MASK


def crc32(data: bytes) -> int:
    """
    Compute the CRC-32 checksum of a byte sequence.

    Args:
        data: Bytes to checksum

    Returns:
        Unsigned 32-bit checksum
    """
    return crc32_update(0, data)


__all__ = [
    "CRC32_POLYNOMIAL",
    "CRC32_TABLE",
    "crc32",
    "crc32_update",
]
