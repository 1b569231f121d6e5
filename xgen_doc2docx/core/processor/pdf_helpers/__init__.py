# xgen_doc2docx/core/processor/pdf_helpers/__init__.py
"""
PDF Helper Module

- pdf_file_converter: Opens PDF bytes with PyMuPDF (PDFFileConverter)
- pdf_text_extractor: Page-by-page text with page markers (PDFTextExtractor)
"""

from xgen_doc2docx.core.processor.pdf_helpers.pdf_file_converter import PDFFileConverter
from xgen_doc2docx.core.processor.pdf_helpers.pdf_text_extractor import PDFTextExtractor

__all__ = [
    "PDFFileConverter",
    "PDFTextExtractor",
]
