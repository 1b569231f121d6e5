# xgen_doc2docx/core/functions/errors.py
"""
Exception types raised while building DOCX packages.

- DocxBuildError: Base class for every failure raised by this library
- ArchiveConstructionError: Entry set cannot be laid out as a ZIP container
  (duplicate/empty/malformed names, values that overflow 32-bit fields)
- PreconditionError: Input does not satisfy the producer contract
  (empty entry set, missing image dimensions, unreadable source file)

Both concrete errors also derive from ValueError so callers that already
catch ValueError keep working.
"""


class DocxBuildError(Exception):
    """Base class for DOCX build failures."""


class ArchiveConstructionError(DocxBuildError, ValueError):
    """Raised when the entry set cannot be serialized into a ZIP archive."""


class PreconditionError(DocxBuildError, ValueError):
    """Raised when a producer is called with input it cannot work with."""


__all__ = [
    "DocxBuildError",
    "ArchiveConstructionError",
    "PreconditionError",
]
