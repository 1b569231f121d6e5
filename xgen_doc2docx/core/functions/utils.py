# xgen_doc2docx/core/functions/utils.py
"""
Common text utilities for building WordprocessingML parts
"""
import re
from typing import List, Optional
from xml.sax.saxutils import escape

# Characters outside the XML 1.0 Char production
_ILLEGAL_XML_CHARS = re.compile(
    '[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]'
)


def sanitize_text_for_xml(text: Optional[str]) -> str:
    """
    Remove characters that cannot appear in an XML 1.0 document.

    Removes:
    - Control characters other than tab, newline and carriage return
    - Isolated surrogates (U+D800-U+DFFF)
    - Non-character code points (U+FFFE, U+FFFF)

    Args:
        text: Input text

    Returns:
        Text safe to embed in an XML part
    """
    if not text:
        return text if text is not None else ""
    return _ILLEGAL_XML_CHARS.sub('', text)


def escape_xml_text(text: str) -> str:
    """Escape &, < and > for use as XML character data."""
    return escape(sanitize_text_for_xml(text))


def split_nonblank_lines(text: Optional[str]) -> List[str]:
    """
    Split text into lines and drop lines that are empty after trimming.

    Lines are returned untrimmed so internal and surrounding whitespace
    survives into the document.
    """
    if not text:
        return []
    return [line for line in re.split(r'\r\n|\r|\n', text) if line.strip()]


__all__ = [
    "sanitize_text_for_xml",
    "escape_xml_text",
    "split_nonblank_lines",
]
