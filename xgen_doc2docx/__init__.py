# xgen_doc2docx/__init__.py
"""
xgen_doc2docx Library

Builds Word (.docx) documents from plain text, a single image, or the
text of a PDF. The ZIP container and the WordprocessingML parts are
written by hand: CRC-32, local headers, central directory and EOCD.

Package Structure:
- core: DOCX building core module
    - DocxBuilder: Main building class
    - processor: Text and image producers
    - functions: CRC-32, ZIP writer, errors, utilities

Usage:
    from xgen_doc2docx import DocxBuilder

    builder = DocxBuilder()
    result = builder.text_to_docx("Hello\\nWorld")
    result.save("hello.docx")
"""

__version__ = "0.1.0"

# Expose core classes at top level
from xgen_doc2docx.core import (
    DocxBuilder,
    DocxResult,
    DocxBuildError,
    ArchiveConstructionError,
    PreconditionError,
)

# Explicit subpackages
from xgen_doc2docx import core

__all__ = [
    "__version__",
    # Core classes
    "DocxBuilder",
    "DocxResult",
    # Errors
    "DocxBuildError",
    "ArchiveConstructionError",
    "PreconditionError",
    # Subpackages
    "core",
]
