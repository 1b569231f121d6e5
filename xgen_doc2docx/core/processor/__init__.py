# xgen_doc2docx/core/processor/__init__.py
"""
Processor - DOCX producers

- base_producer: BaseProducer abstract class
- text_producer: Plain text -> paragraphs (TextDocxProducer)
- image_producer: Single image -> inline picture (ImageDocxProducer)

Helper packages:
- docx_helper: Package parts, paragraphs, drawings
- image_file_helper: Image dimension decoding
- pdf_helpers: PDF text extraction
"""

from xgen_doc2docx.core.processor.base_producer import BaseProducer
from xgen_doc2docx.core.processor.text_producer import TextDocxProducer
from xgen_doc2docx.core.processor.image_producer import ImageDocxProducer

from xgen_doc2docx.core.processor import docx_helper
from xgen_doc2docx.core.processor import image_file_helper
from xgen_doc2docx.core.processor import pdf_helpers

__all__ = [
    "BaseProducer",
    "TextDocxProducer",
    "ImageDocxProducer",
    "docx_helper",
    "image_file_helper",
    "pdf_helpers",
]
