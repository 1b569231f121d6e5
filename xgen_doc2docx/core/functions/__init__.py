# xgen_doc2docx/core/functions/__init__.py
"""
Functions - Low-level building blocks

Module Components:
- crc32: CRC-32 checksum (ZIP/PNG variant)
- binary_writer: Little-endian byte buffer (BinaryWriter)
- zip_writer: STORE-only ZIP archive writer (ZipArchiveBuilder, build_archive)
- errors: Exception hierarchy
- file_converter: Source file converter interface
- page_tag_processor: Page marker generation
- utils: XML text escaping and line splitting

Usage Example:
    from xgen_doc2docx.core.functions import build_archive, crc32
"""

from xgen_doc2docx.core.functions.errors import (
    DocxBuildError,
    ArchiveConstructionError,
    PreconditionError,
)

from xgen_doc2docx.core.functions.crc32 import (
    crc32,
    crc32_update,
)

from xgen_doc2docx.core.functions.binary_writer import BinaryWriter

from xgen_doc2docx.core.functions.zip_writer import (
    ArchiveEntry,
    ArchiveConfig,
    CentralDirectoryRecord,
    ZipArchiveBuilder,
    build_archive,
    to_dos_datetime,
)

from xgen_doc2docx.core.functions.file_converter import (
    BaseFileConverter,
    TextFileConverter,
)

from xgen_doc2docx.core.functions.page_tag_processor import (
    PageTagConfig,
    PageTagProcessor,
)

from xgen_doc2docx.core.functions.utils import (
    sanitize_text_for_xml,
    escape_xml_text,
    split_nonblank_lines,
)

__all__ = [
    # Errors
    "DocxBuildError",
    "ArchiveConstructionError",
    "PreconditionError",
    # Checksum
    "crc32",
    "crc32_update",
    # Archive
    "BinaryWriter",
    "ArchiveEntry",
    "ArchiveConfig",
    "CentralDirectoryRecord",
    "ZipArchiveBuilder",
    "build_archive",
    "to_dos_datetime",
    # Converters
    "BaseFileConverter",
    "TextFileConverter",
    # Page tags
    "PageTagConfig",
    "PageTagProcessor",
    # Text utilities
    "sanitize_text_for_xml",
    "escape_xml_text",
    "split_nonblank_lines",
]
