# xgen_doc2docx/core/processor/text_producer.py
"""
Text Producer - Text-to-DOCX document producer

Turns a block of plain text (typically extracted from a PDF, already split
into lines) into a DOCX whose body holds one paragraph per non-blank line.
An empty input produces a valid document with no paragraphs.
"""
from typing import Optional

from xgen_doc2docx.core.functions.file_converter import BaseFileConverter, TextFileConverter
from xgen_doc2docx.core.processor.base_producer import BaseProducer
from xgen_doc2docx.core.processor.docx_helper.docx_constants import (
    CONTENT_TYPES_PART,
    DOCUMENT_PART,
    DOCUMENT_RELS_PART,
    PACKAGE_RELS_PART,
)
from xgen_doc2docx.core.processor.docx_helper.docx_package import (
    DocumentPackage,
    build_content_types_xml,
    build_document_xml,
    package_relationships,
)
from xgen_doc2docx.core.processor.docx_helper.docx_paragraph import (
    build_paragraphs_xml,
    text_to_paragraph_lines,
)


class TextDocxProducer(BaseProducer):
    """
    Text-to-DOCX producer.

    Example:
        >>> producer = TextDocxProducer()
        >>> data = producer.produce("Hello\\n\\nWorld")
    """

    def _create_file_converter(self) -> BaseFileConverter:
        """Text files are decoded with TextFileConverter."""
        return TextFileConverter()

    def build_document_body(self, text: Optional[str]) -> str:
        """Return the paragraphs for the non-blank lines of text."""
        lines = text_to_paragraph_lines(text)
        self.logger.debug(f"Building {len(lines)} paragraphs")
        return build_paragraphs_xml(lines)

    def build_package(self, text: Optional[str]) -> DocumentPackage:
        """
        Assemble the four parts of a text-only package.

        Args:
            text: Plain text; None is treated as empty

        Returns:
            DocumentPackage
        """
        package = DocumentPackage()
        package.add_part(CONTENT_TYPES_PART, build_content_types_xml())
        package.add_relationships_part(PACKAGE_RELS_PART, package_relationships())
        package.add_part(DOCUMENT_PART, build_document_xml(self.build_document_body(text)))
        package.add_relationships_part(DOCUMENT_RELS_PART)
        return package

    def produce(self, text: Optional[str]) -> bytes:
        """
        Build a DOCX from plain text.

        Args:
            text: Plain text, one paragraph per non-blank line

        Returns:
            DOCX file bytes
        """
        return super().produce(text)

    def produce_from_bytes(self, file_data: bytes, encoding: Optional[str] = None) -> bytes:
        """Decode a text file and build a DOCX from it."""
        text = self.file_converter.convert(file_data, encoding=encoding)
        return self.produce(text)


__all__ = [
    "TextDocxProducer",
]
