# xgen_doc2docx/core/processor/image_file_helper/__init__.py
"""
Image File Helper Module

- image_file_converter: Pixel dimension decoding (ImageFileConverter)
"""

from xgen_doc2docx.core.processor.image_file_helper.image_file_converter import (
    ImageDimensions,
    ImageFileConverter,
)

__all__ = [
    "ImageDimensions",
    "ImageFileConverter",
]
