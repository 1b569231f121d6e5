# xgen_doc2docx/core/processor/pdf_helpers/pdf_file_converter.py
"""
PDFFileConverter - PDF file format converter

Converts binary PDF data to fitz.Document object using PyMuPDF.
"""
import logging
from typing import Any, BinaryIO, Optional

import fitz

from xgen_doc2docx.core.functions.errors import PreconditionError
from xgen_doc2docx.core.functions.file_converter import BaseFileConverter

logger = logging.getLogger("xgen_doc2docx.pdf.converter")


class PDFFileConverter(BaseFileConverter):
    """
    PDF file converter using PyMuPDF (fitz).
    """

    # PDF magic number
    PDF_MAGIC = b'%PDF'

    def convert(
        self,
        file_data: bytes,
        file_stream: Optional[BinaryIO] = None,
        **kwargs
    ) -> Any:
        """
        Convert binary PDF data to fitz.Document.

        Args:
            file_data: Raw binary PDF data
            file_stream: Not used, fitz prefers bytes

        Returns:
            fitz.Document object

        Raises:
            PreconditionError: If the PDF cannot be opened
        """
        if not file_data:
            raise PreconditionError("PDF data is empty")
        try:
            return fitz.open(stream=file_data, filetype="pdf")
        except (RuntimeError, ValueError) as e:
            logger.error(f"Failed to open PDF: {e}")
            raise PreconditionError(f"PDF could not be opened: {e}") from e

    def get_format_name(self) -> str:
        """Return format name."""
        return "PDF Document"

    def validate(self, file_data: bytes) -> bool:
        """Check for the %PDF magic number."""
        if not file_data or len(file_data) < 4:
            return False
        return file_data[:4] == self.PDF_MAGIC

    def close(self, converted_object: Any) -> None:
        """Close the fitz.Document."""
        if converted_object is not None and hasattr(converted_object, 'close'):
            converted_object.close()


__all__ = [
    "PDFFileConverter",
]
