# xgen_doc2docx/core/functions/zip_writer.py
"""
ZIP Archive Writer

Serializes an ordered set of named byte payloads into a minimal ZIP archive
using the STORE method only (no compression, no ZIP64). This is the
container format a .docx package is built on.

The writer runs in two phases:
    1. Local entries: for each entry, in insertion order, write the local
       file header followed by the raw data and record
       {name, crc32, size, offset}.
    2. Central directory: built purely from the recorded list, followed by
       the end-of-central-directory (EOCD) record.

All validation happens before any byte is written, so a failed build never
produces a partial archive.

Usage:
    from xgen_doc2docx.core.functions.zip_writer import build_archive

    data = build_archive({
        "a.xml": "<a/>",
        "b.bin": b"\\x01\\x02\\x03",
    })
"""
import logging
from collections import abc
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from xgen_doc2docx.core.functions.binary_writer import (
    BinaryWriter,
    UINT16_MAX,
    UINT32_MAX,
)
from xgen_doc2docx.core.functions.crc32 import crc32
from xgen_doc2docx.core.functions.errors import (
    ArchiveConstructionError,
    PreconditionError,
)


# === Record signatures and fixed sizes ===

LOCAL_FILE_HEADER_SIGNATURE = b'PK\x03\x04'
CENTRAL_DIRECTORY_SIGNATURE = b'PK\x01\x02'
END_OF_CENTRAL_DIRECTORY_SIGNATURE = b'PK\x05\x06'

LOCAL_FILE_HEADER_SIZE = 30
CENTRAL_DIRECTORY_HEADER_SIZE = 46
END_OF_CENTRAL_DIRECTORY_SIZE = 22

METHOD_STORE = 0
FLAG_UTF8_NAME = 0x0800

DOS_EPOCH = datetime(1980, 1, 1, 0, 0, 0)
DOS_MAX = datetime(2107, 12, 31, 23, 59, 58)

EntryData = Union[bytes, bytearray, memoryview, str]


@dataclass(frozen=True)
class ArchiveEntry:
    """One named payload destined for the archive."""
    name: str
    data: bytes


@dataclass(frozen=True)
class CentralDirectoryRecord:
    """
    Bookkeeping recorded while writing local entries.

    Attributes:
        name: Encoded entry name
        crc32: CRC-32 of the entry data
        size: Data length (compressed size equals size under STORE)
        offset: Byte offset of the entry's local header
        flags: General purpose bit flags used for the entry
    """
    name: bytes
    crc32: int
    size: int
    offset: int
    flags: int = 0


@dataclass
class ArchiveConfig:
    """
    ZIP writer configuration.

    Attributes:
        timestamp: Modification time stored for every entry (None: current local time)
        version_needed: "Version needed to extract" field (20 = 2.0)
        version_made_by: "Version made by" field
    """
    timestamp: Optional[datetime] = None
    version_needed: int = 20
    version_made_by: int = 20


def to_dos_datetime(value: datetime) -> Tuple[int, int]:
    """
    Encode a datetime as the (time, date) pair used by ZIP headers.

    Values outside the representable range (1980..2107) are clamped.
    Seconds are stored with two-second resolution.

    Returns:
        Tuple of (dos_time, dos_date)
    """
    value = value.replace(tzinfo=None, microsecond=0)
    if value < DOS_EPOCH:
        value = DOS_EPOCH
    elif value > DOS_MAX:
        value = DOS_MAX

    dos_time = (value.hour << 11) | (value.minute << 5) | (value.second >> 1)
    dos_date = ((value.year - 1980) << 9) | (value.month << 5) | value.day
    return dos_time, dos_date


class ZipArchiveBuilder:
    """
    STORE-only ZIP archive builder.

    Args:
        timestamp: Fixed modification time for all entries. When omitted the
            current local time is used, so two builds differ only in the
            timestamp fields.
        config: ArchiveConfig object (takes precedence over timestamp)

    Example:
        >>> builder = ZipArchiveBuilder(timestamp=datetime(2024, 1, 1))
        >>> data = builder.build({"word/document.xml": document_xml})
    """

    def __init__(
        self,
        timestamp: Optional[datetime] = None,
        config: Optional[ArchiveConfig] = None,
    ):
        self.config = config or ArchiveConfig(timestamp=timestamp)
        self._logger = logging.getLogger(f"xgen_doc2docx.{self.__class__.__name__}")

    def build(self, entries: Union[Mapping[str, EntryData], Iterable[Any]]) -> bytes:
        """
        Serialize entries into a complete ZIP archive.

        Args:
            entries: Ordered mapping of name -> data, or an iterable of
                ArchiveEntry objects / (name, data) pairs. str data is
                encoded as UTF-8.

        Returns:
            Archive bytes

        Raises:
            PreconditionError: If the entry set is empty
            ArchiveConstructionError: If a name is empty, malformed or
                duplicated, or a value does not fit a 32-bit field
        """
        normalized = self._normalize_entries(entries)
        self._check_limits(normalized)

        dos_time, dos_date = to_dos_datetime(self.config.timestamp or datetime.now())

        local_section, records = self._write_local_entries(normalized, dos_time, dos_date)
        central_directory = self._write_central_directory(records, dos_time, dos_date)
        end_record = self._write_end_of_central_directory(
            entry_count=len(records),
            directory_size=len(central_directory),
            directory_offset=len(local_section),
        )

        self._logger.debug(
            f"Built archive: {len(records)} entries, "
            f"{len(local_section) + len(central_directory) + len(end_record)} bytes"
        )
        return local_section + central_directory + end_record

    # =========================================================================
    # Validation
    # =========================================================================

    def _normalize_entries(self, entries: Any) -> List[Tuple[bytes, int, bytes]]:
        """Return [(encoded_name, flags, data)] after validating every entry."""
        if entries is None:
            raise PreconditionError("Archive requires at least one entry")

        if isinstance(entries, abc.Mapping):
            items = list(entries.items())
        else:
            items = []
            for item in entries:
                if isinstance(item, ArchiveEntry):
                    items.append((item.name, item.data))
                elif isinstance(item, tuple) and len(item) == 2:
                    items.append(item)
                else:
                    raise ArchiveConstructionError(f"Unsupported archive entry: {item!r}")

        if not items:
            raise PreconditionError("Archive requires at least one entry")

        seen = set()
        normalized = []
        for name, data in items:
            encoded_name, flags = self._encode_name(name)
            if name in seen:
                raise ArchiveConstructionError(f"Duplicate archive entry name: {name!r}")
            seen.add(name)
            normalized.append((encoded_name, flags, self._coerce_data(name, data)))
        return normalized

    @staticmethod
    def _encode_name(name: Any) -> Tuple[bytes, int]:
        if not isinstance(name, str):
            raise ArchiveConstructionError(f"Archive entry name must be str, got {type(name).__name__}")
        if not name:
            raise ArchiveConstructionError("Archive entry name must not be empty")
        if '\x00' in name or '\\' in name:
            raise ArchiveConstructionError(f"Malformed archive entry name: {name!r}")
        if any(segment in ('', '.', '..') for segment in name.split('/')):
            raise ArchiveConstructionError(f"Malformed archive entry path: {name!r}")

        try:
            encoded = name.encode('utf-8')
        except UnicodeEncodeError as e:
            raise ArchiveConstructionError(f"Archive entry name is not valid UTF-8: {name!r}") from e

        if len(encoded) > UINT16_MAX:
            raise ArchiveConstructionError(f"Archive entry name too long: {len(encoded)} bytes")

        # Non-ASCII names need the language encoding flag to be read back as UTF-8
        flags = 0 if encoded.isascii() else FLAG_UTF8_NAME
        return encoded, flags

    @staticmethod
    def _coerce_data(name: str, data: Any) -> bytes:
        if isinstance(data, str):
            return data.encode('utf-8')
        if isinstance(data, (bytes, bytearray, memoryview)):
            return bytes(data)
        raise ArchiveConstructionError(
            f"Archive entry {name!r} data must be bytes or str, got {type(data).__name__}"
        )

    @staticmethod
    def _check_limits(normalized: List[Tuple[bytes, int, bytes]]) -> None:
        if len(normalized) > UINT16_MAX:
            raise ArchiveConstructionError(f"Too many archive entries: {len(normalized)}")

        local_size = 0
        directory_size = 0
        for encoded_name, _, data in normalized:
            if len(data) > UINT32_MAX:
                raise ArchiveConstructionError(f"Archive entry too large: {len(data)} bytes")
            local_size += LOCAL_FILE_HEADER_SIZE + len(encoded_name) + len(data)
            directory_size += CENTRAL_DIRECTORY_HEADER_SIZE + len(encoded_name)

        # The last local header offset and the directory offset must fit in 32 bits
        if local_size > UINT32_MAX or directory_size > UINT32_MAX:
            raise ArchiveConstructionError("Archive exceeds 4 GiB; ZIP64 is not supported")

    # =========================================================================
    # Phase 1: local entries
    # =========================================================================

    def _write_local_entries(
        self,
        normalized: List[Tuple[bytes, int, bytes]],
        dos_time: int,
        dos_date: int,
    ) -> Tuple[bytes, List[CentralDirectoryRecord]]:
        writer = BinaryWriter()
        records: List[CentralDirectoryRecord] = []

        for encoded_name, flags, data in normalized:
            record = CentralDirectoryRecord(
                name=encoded_name,
                crc32=crc32(data),
                size=len(data),
                offset=writer.tell(),
                flags=flags,
            )

            writer.write_bytes(LOCAL_FILE_HEADER_SIGNATURE)
            writer.write_u16(self.config.version_needed)
            writer.write_u16(record.flags)
            writer.write_u16(METHOD_STORE)
            writer.write_u16(dos_time)
            writer.write_u16(dos_date)
            writer.write_u32(record.crc32)
            writer.write_u32(record.size)  # compressed size
            writer.write_u32(record.size)  # uncompressed size
            writer.write_u16(len(encoded_name))
            writer.write_u16(0)  # extra field length
            writer.write_bytes(encoded_name)
            writer.write_bytes(data)

            records.append(record)

        return writer.getvalue(), records

    # =========================================================================
    # Phase 2: central directory and EOCD
    # =========================================================================

    def _write_central_directory(
        self,
        records: List[CentralDirectoryRecord],
        dos_time: int,
        dos_date: int,
    ) -> bytes:
        writer = BinaryWriter()

        for record in records:
            writer.write_bytes(CENTRAL_DIRECTORY_SIGNATURE)
            writer.write_u16(self.config.version_made_by)
            writer.write_u16(self.config.version_needed)
            writer.write_u16(record.flags)
            writer.write_u16(METHOD_STORE)
            writer.write_u16(dos_time)
            writer.write_u16(dos_date)
            writer.write_u32(record.crc32)
            writer.write_u32(record.size)
            writer.write_u32(record.size)
            writer.write_u16(len(record.name))
            writer.write_u16(0)  # extra field length
            writer.write_u16(0)  # comment length
            writer.write_u16(0)  # disk number start
            writer.write_u16(0)  # internal attributes
            writer.write_u32(0)  # external attributes
            writer.write_u32(record.offset)
            writer.write_bytes(record.name)

        return writer.getvalue()

    @staticmethod
    def _write_end_of_central_directory(
        entry_count: int,
        directory_size: int,
        directory_offset: int,
    ) -> bytes:
        writer = BinaryWriter()
        writer.write_bytes(END_OF_CENTRAL_DIRECTORY_SIGNATURE)
        writer.write_u16(0)  # number of this disk
        writer.write_u16(0)  # disk where central directory starts
        writer.write_u16(entry_count)  # entries on this disk
        writer.write_u16(entry_count)  # total entries
        writer.write_u32(directory_size)
        writer.write_u32(directory_offset)
        writer.write_u16(0)  # comment length
        return writer.getvalue()


def build_archive(
    entries: Union[Mapping[str, EntryData], Iterable[Any]],
    timestamp: Optional[datetime] = None,
) -> bytes:
    """
    Build a STORE-only ZIP archive from named payloads.

    Convenience wrapper around ZipArchiveBuilder.build().

    Args:
        entries: Ordered mapping of name -> data (or ArchiveEntry iterable)
        timestamp: Fixed modification time (None: current local time)

    Returns:
        Archive bytes
    """
    return ZipArchiveBuilder(timestamp=timestamp).build(entries)


__all__ = [
    "ArchiveEntry",
    "ArchiveConfig",
    "CentralDirectoryRecord",
    "ZipArchiveBuilder",
    "build_archive",
    "to_dos_datetime",
    "LOCAL_FILE_HEADER_SIGNATURE",
    "CENTRAL_DIRECTORY_SIGNATURE",
    "END_OF_CENTRAL_DIRECTORY_SIGNATURE",
    "LOCAL_FILE_HEADER_SIZE",
    "CENTRAL_DIRECTORY_HEADER_SIZE",
    "END_OF_CENTRAL_DIRECTORY_SIZE",
]
