# xgen_doc2docx/core/processor/image_producer.py
"""
Image Producer - Image-to-DOCX document producer

Embeds a single raster image as an inline picture. The image bytes are
stored unchanged as word/media/image1.<ext> and wired up through the
document relationships (rId1) and a content type Default for the
extension.

Image dimensions come from the image decoder (Pillow via
ImageFileConverter) and must be present; the producer never guesses them.
"""
from datetime import datetime
from typing import Any, Dict, Optional

from xgen_doc2docx.core.functions.errors import PreconditionError
from xgen_doc2docx.core.functions.file_converter import BaseFileConverter
from xgen_doc2docx.core.functions.zip_writer import ZipArchiveBuilder
from xgen_doc2docx.core.processor.base_producer import BaseProducer
from xgen_doc2docx.core.processor.docx_helper.docx_constants import (
    CONTENT_TYPES_PART,
    DOCUMENT_PART,
    DOCUMENT_RELS_PART,
    IMAGE_REL_TYPE,
    MEDIA_DIRECTORY,
    PACKAGE_RELS_PART,
    ImageType,
    Relationship,
)
from xgen_doc2docx.core.processor.docx_helper.docx_drawing import (
    ImageExtent,
    ImagePlacementConfig,
    build_inline_image_xml,
    compute_image_extent,
)
from xgen_doc2docx.core.processor.docx_helper.docx_package import (
    DocumentPackage,
    build_content_types_xml,
    build_document_xml,
    package_relationships,
)
from xgen_doc2docx.core.processor.image_file_helper.image_file_converter import ImageFileConverter

IMAGE_REL_ID = "rId1"


class ImageDocxProducer(BaseProducer):
    """
    Image-to-DOCX producer.

    Args:
        config: Configuration dictionary (passed from DocxBuilder)
        archive_builder: ZipArchiveBuilder instance (passed from DocxBuilder)
        timestamp: Fixed ZIP entry timestamp
        placement_config: Image sizing configuration

    Example:
        >>> producer = ImageDocxProducer()
        >>> data = producer.produce(png_bytes, "png", 2000, 1000)
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        archive_builder: Optional[ZipArchiveBuilder] = None,
        timestamp: Optional[datetime] = None,
        placement_config: Optional[ImagePlacementConfig] = None,
    ):
        super().__init__(config=config, archive_builder=archive_builder, timestamp=timestamp)
        self._placement_config = (
            placement_config
            or self._config.get("image_placement")
            or ImagePlacementConfig()
        )

    def _create_file_converter(self) -> BaseFileConverter:
        """Image dimensions are decoded with ImageFileConverter (Pillow)."""
        return ImageFileConverter()

    @property
    def placement_config(self) -> ImagePlacementConfig:
        return self._placement_config

    def compute_extent(self, pixel_width: Optional[int], pixel_height: Optional[int]) -> ImageExtent:
        """Placed size of the image in EMU."""
        return compute_image_extent(pixel_width, pixel_height, self._placement_config)

    def build_package(
        self,
        image_data: bytes,
        extension: Optional[str],
        pixel_width: Optional[int],
        pixel_height: Optional[int],
    ) -> DocumentPackage:
        """
        Assemble the five parts of an image package.

        Args:
            image_data: Encoded image bytes (embedded unchanged)
            extension: File extension; "png" is kept, anything else is jpeg
            pixel_width: Decoded width in pixels
            pixel_height: Decoded height in pixels

        Returns:
            DocumentPackage

        Raises:
            PreconditionError: If the image data is empty or a dimension is missing
        """
        if not image_data:
            raise PreconditionError("Image data is empty")

        extent = self.compute_extent(pixel_width, pixel_height)
        image_type = ImageType.from_extension(extension)
        media_target = f"media/image1.{image_type.extension}"

        self.logger.debug(
            f"Placing {pixel_width}x{pixel_height} {image_type.extension} image "
            f"at {extent.cx}x{extent.cy} EMU"
        )

        package = DocumentPackage()
        package.add_part(CONTENT_TYPES_PART, build_content_types_xml(image_type))
        package.add_relationships_part(PACKAGE_RELS_PART, package_relationships())
        package.add_relationships_part(DOCUMENT_RELS_PART, [
            Relationship(rel_id=IMAGE_REL_ID, rel_type=IMAGE_REL_TYPE, target=media_target),
        ])
        package.add_part(DOCUMENT_PART, build_document_xml(build_inline_image_xml(extent, rel_id=IMAGE_REL_ID)))
        package.add_part(f"{MEDIA_DIRECTORY}/image1.{image_type.extension}", image_data)
        return package

    def produce(
        self,
        image_data: bytes,
        extension: Optional[str],
        pixel_width: Optional[int],
        pixel_height: Optional[int],
    ) -> bytes:
        """
        Build a DOCX containing one inline image.

        Returns:
            DOCX file bytes
        """
        return super().produce(image_data, extension, pixel_width, pixel_height)

    def produce_from_bytes(self, image_data: bytes, extension: Optional[str]) -> bytes:
        """Decode the image dimensions, then build the DOCX."""
        dimensions = self.file_converter.convert(image_data)
        return self.produce(image_data, extension, dimensions.width, dimensions.height)


__all__ = [
    "IMAGE_REL_ID",
    "ImageDocxProducer",
]
