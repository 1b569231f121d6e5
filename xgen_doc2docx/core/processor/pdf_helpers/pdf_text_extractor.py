# xgen_doc2docx/core/processor/pdf_helpers/pdf_text_extractor.py
"""
PDF Text Extraction Module

Extracts the plain text of every page of a PDF with PyMuPDF. Page text is
trimmed of surrounding whitespace and preceded by a page marker line:

    --- Page 1 ---
    first page text

    --- Page 2 ---
    ...
"""
import logging
from typing import Any, Optional

from xgen_doc2docx.core.functions.page_tag_processor import PageTagProcessor
from xgen_doc2docx.core.processor.pdf_helpers.pdf_file_converter import PDFFileConverter

logger = logging.getLogger("xgen_doc2docx.pdf.text")


class PDFTextExtractor:
    """
    Page-by-page PDF text extractor.

    Args:
        page_tag_processor: Builds the page marker lines
        file_converter: Opens PDF bytes (default: PDFFileConverter)

    Example:
        >>> extractor = PDFTextExtractor()
        >>> text = extractor.extract(pdf_bytes)
    """

    def __init__(
        self,
        page_tag_processor: Optional[PageTagProcessor] = None,
        file_converter: Optional[PDFFileConverter] = None,
    ):
        self._page_tag_processor = page_tag_processor or PageTagProcessor()
        self._file_converter = file_converter or PDFFileConverter()

    @property
    def page_tag_processor(self) -> PageTagProcessor:
        return self._page_tag_processor

    def extract(self, file_data: bytes) -> str:
        """
        Extract the text of all pages.

        Args:
            file_data: Raw PDF bytes

        Returns:
            Trimmed text of every page, each preceded by its page marker

        Raises:
            PreconditionError: If the PDF cannot be opened
        """
        doc = self._file_converter.convert(file_data)
        try:
            return self.extract_from_document(doc)
        finally:
            self._file_converter.close(doc)

    def extract_from_document(self, doc: Any) -> str:
        """Extract text from an already opened fitz.Document."""
        parts = []
        total_pages = len(doc)
        for page_num in range(total_pages):
            page = doc[page_num]
            page_text = page.get_text("text").strip()
            page_tag = self._page_tag_processor.create_page_tag(page_num + 1)
            parts.append(f"{page_tag}\n{page_text}\n\n")
            logger.debug(f"[PDF] Page {page_num + 1}/{total_pages}: {len(page_text)} chars")

        text = ''.join(parts)
        logger.info(f"[PDF] Extracted {len(text)} chars from {total_pages} pages")
        return text


__all__ = [
    "PDFTextExtractor",
]
