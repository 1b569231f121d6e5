# xgen_doc2docx/core/processor/image_file_helper/image_file_converter.py
"""
ImageFileConverter - Image file format converter

Reads the pixel dimensions of an encoded image with Pillow. The image bytes
themselves are embedded unchanged; nothing is re-encoded.
"""
import io
import logging
from dataclasses import dataclass
from typing import BinaryIO, Optional

from PIL import Image, UnidentifiedImageError

from xgen_doc2docx.core.functions.errors import PreconditionError
from xgen_doc2docx.core.functions.file_converter import BaseFileConverter

logger = logging.getLogger("xgen_doc2docx.image_file.converter")


@dataclass(frozen=True)
class ImageDimensions:
    """Decoded pixel size of an image."""
    width: int
    height: int


class ImageFileConverter(BaseFileConverter):
    """
    Image file converter.

    convert() returns ImageDimensions decoded from the image header.
    """

    # Common image magic numbers
    MAGIC_JPEG = b'\xff\xd8\xff'
    MAGIC_PNG = b'\x89PNG\r\n\x1a\n'
    MAGIC_GIF = b'GIF8'
    MAGIC_BMP = b'BM'
    MAGIC_WEBP = b'RIFF'

    def convert(
        self,
        file_data: bytes,
        file_stream: Optional[BinaryIO] = None,
        **kwargs
    ) -> ImageDimensions:
        """
        Decode the pixel dimensions of an image.

        Args:
            file_data: Encoded image bytes
            file_stream: Optional stream over the same bytes

        Returns:
            ImageDimensions

        Raises:
            PreconditionError: If Pillow cannot identify the image
        """
        return self.get_dimensions(file_data, file_stream)

    def get_dimensions(self, file_data: bytes, file_stream: Optional[BinaryIO] = None) -> ImageDimensions:
        if not file_data:
            raise PreconditionError("Image data is empty")

        stream = file_stream if file_stream is not None else io.BytesIO(file_data)
        stream.seek(0)
        try:
            with Image.open(stream) as img:
                width, height = img.size
        except (UnidentifiedImageError, OSError) as e:
            logger.error(f"Failed to decode image dimensions: {e}")
            raise PreconditionError("Image dimensions are unavailable: image could not be decoded") from e

        logger.debug(f"Decoded image dimensions: {width}x{height}")
        return ImageDimensions(width=width, height=height)

    def get_format_name(self) -> str:
        """Return format name."""
        return "Image File"

    def validate(self, file_data: bytes) -> bool:
        """Validate if data is an image."""
        return self.detect_image_type(file_data) is not None

    def detect_image_type(self, file_data: bytes) -> Optional[str]:
        """
        Detect image type from binary data.

        Args:
            file_data: Raw binary image data

        Returns:
            Image type string (jpeg, png, gif, bmp, webp) or None
        """
        if not file_data or len(file_data) < 4:
            return None

        if file_data[:3] == self.MAGIC_JPEG:
            return "jpeg"
        elif file_data[:8] == self.MAGIC_PNG:
            return "png"
        elif file_data[:4] == self.MAGIC_GIF:
            return "gif"
        elif file_data[:2] == self.MAGIC_BMP:
            return "bmp"
        elif file_data[:4] == self.MAGIC_WEBP and file_data[8:12] == b'WEBP':
            return "webp"
        return None


__all__ = [
    "ImageDimensions",
    "ImageFileConverter",
]
