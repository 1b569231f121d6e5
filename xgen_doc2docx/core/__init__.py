# xgen_doc2docx/core/__init__.py
"""
Core - DOCX Building Core Module

Module Structure:
- document_builder: Main DocxBuilder class and DocxResult
- processor/: DOCX producers
    - text_producer: Plain text -> paragraphs
    - image_producer: Single image -> inline picture
- functions/: Building blocks
    - crc32: CRC-32 checksum
    - zip_writer: STORE-only ZIP writer
    - errors: Exception hierarchy

Usage:
    from xgen_doc2docx import DocxBuilder
    from xgen_doc2docx.core.processor import TextDocxProducer, ImageDocxProducer
    from xgen_doc2docx.core.functions import build_archive, crc32
"""

# === Main Classes ===
from xgen_doc2docx.core.document_builder import DocxBuilder, DocxResult

# === Errors ===
from xgen_doc2docx.core.functions.errors import (
    DocxBuildError,
    ArchiveConstructionError,
    PreconditionError,
)

# === Explicit Subpackage Imports ===
from xgen_doc2docx.core import processor
from xgen_doc2docx.core import functions

__all__ = [
    # Main Classes
    "DocxBuilder",
    "DocxResult",
    # Errors
    "DocxBuildError",
    "ArchiveConstructionError",
    "PreconditionError",
    # Subpackages
    "processor",
    "functions",
]
