# xgen_doc2docx/core/processor/docx_helper/docx_paragraph.py
"""
Paragraph XML generation

Turns lines of plain text into WordprocessingML paragraphs, one run per
paragraph, whitespace preserved.
"""
from typing import Iterable, List, Optional

from xgen_doc2docx.core.functions.utils import (
    escape_xml_text,
    sanitize_text_for_xml,
    split_nonblank_lines,
)


def build_paragraph_xml(line: str) -> str:
    """
    Build one paragraph holding a single text run.

    Args:
        line: Text of the paragraph (escaped here)

    Returns:
        <w:p> element as a string
    """
    return f'<w:p><w:r><w:t xml:space="preserve">{escape_xml_text(line)}</w:t></w:r></w:p>'


def build_paragraphs_xml(lines: Iterable[str]) -> str:
    """Concatenate the paragraphs of several lines."""
    return ''.join(build_paragraph_xml(line) for line in lines)


def text_to_paragraph_lines(text: Optional[str]) -> List[str]:
    """
    Lines of text that become paragraphs.

    Characters illegal in XML are removed first, so a line holding only
    such characters counts as blank and is dropped.
    """
    return split_nonblank_lines(sanitize_text_for_xml(text))


__all__ = [
    'build_paragraph_xml',
    'build_paragraphs_xml',
    'text_to_paragraph_lines',
]
