# xgen_doc2docx/core/functions/binary_writer.py
"""
BinaryWriter - growable byte buffer with typed little-endian writes

Used by the ZIP writer so that every header field is written through a
range-checked integer operation and the current offset is always known.
"""
import io
import struct

from xgen_doc2docx.core.functions.errors import ArchiveConstructionError

UINT16_MAX = 0xFFFF
UINT32_MAX = 0xFFFFFFFF

_U16 = struct.Struct('<H')
_U32 = struct.Struct('<I')


class BinaryWriter:
    """
    In-memory little-endian binary writer.

    Example:
        >>> writer = BinaryWriter()
        >>> writer.write_bytes(b'PK\\x03\\x04')
        >>> writer.write_u16(20)
        >>> writer.tell()
        6
    """

    def __init__(self):
        self._buffer = io.BytesIO()

    def write_u16(self, value: int) -> None:
        """Write an unsigned 16-bit integer."""
        self._check_range(value, UINT16_MAX, "u16")
        self._buffer.write(_U16.pack(value))

    def write_u32(self, value: int) -> None:
        """Write an unsigned 32-bit integer."""
        self._check_range(value, UINT32_MAX, "u32")
        self._buffer.write(_U32.pack(value))

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes unchanged."""
        self._buffer.write(data)

    def tell(self) -> int:
        """Return the number of bytes written so far."""
        return self._buffer.tell()

    @property
    def position(self) -> int:
        return self.tell()

    def getvalue(self) -> bytes:
        """Return everything written as an immutable bytes object."""
        return self._buffer.getvalue()

    def __len__(self) -> int:
        return self.tell()

    @staticmethod
    def _check_range(value: int, maximum: int, kind: str) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise ArchiveConstructionError(f"{kind} field expects an int, got {type(value).__name__}")
        if value < 0 or value > maximum:
            raise ArchiveConstructionError(f"{kind} field out of range: {value}")


__all__ = [
    "BinaryWriter",
    "UINT16_MAX",
    "UINT32_MAX",
]
