# xgen_doc2docx/core/functions/page_tag_processor.py
"""
Page Tag Processor Module

Generates the page marker lines written in front of each page of text
extracted from a PDF before it is laid out as DOCX paragraphs.

Default format:
    --- Page 1 ---

Usage:
    processor = PageTagProcessor(tag_prefix="[Page ", tag_suffix="]")
    processor.create_page_tag(3)  # "[Page 3]"
"""
import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger("xgen_doc2docx.page_tag")


@dataclass
class PageTagConfig:
    """
    PageTagProcessor configuration.

    Attributes:
        tag_prefix: Text before the page number
        tag_suffix: Text after the page number
    """
    tag_prefix: str = "--- Page "
    tag_suffix: str = " ---"


class PageTagProcessor:
    """
    Builds page marker lines.

    Args:
        tag_prefix: Page tag prefix (default: "--- Page ")
        tag_suffix: Page tag suffix (default: " ---")
        config: PageTagConfig instance (overrides individual parameters)
    """

    def __init__(
        self,
        tag_prefix: Optional[str] = None,
        tag_suffix: Optional[str] = None,
        config: Optional[PageTagConfig] = None,
    ):
        if config is not None:
            self._config = config
        else:
            defaults = PageTagConfig()
            self._config = PageTagConfig(
                tag_prefix=tag_prefix if tag_prefix is not None else defaults.tag_prefix,
                tag_suffix=tag_suffix if tag_suffix is not None else defaults.tag_suffix,
            )

        if "\n" in self._config.tag_prefix or "\n" in self._config.tag_suffix:
            logger.warning("Page tag contains a newline; the marker will span several paragraphs")

    @property
    def config(self) -> PageTagConfig:
        return self._config

    def create_page_tag(self, page_number: int) -> str:
        """Return the marker for a 1-based page number."""
        return f"{self._config.tag_prefix}{page_number}{self._config.tag_suffix}"


__all__ = [
    "PageTagConfig",
    "PageTagProcessor",
]
