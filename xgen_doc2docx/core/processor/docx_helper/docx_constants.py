# xgen_doc2docx/core/processor/docx_helper/docx_constants.py
"""
DOCX constants

Part names, namespaces, content types and relationship types needed to
write a minimal WordprocessingML package, plus EMU sizing constants.
"""
from dataclasses import dataclass
from enum import Enum


# === Package part names ===

CONTENT_TYPES_PART = '[Content_Types].xml'
PACKAGE_RELS_PART = '_rels/.rels'
DOCUMENT_PART = 'word/document.xml'
DOCUMENT_RELS_PART = 'word/_rels/document.xml.rels'
MEDIA_DIRECTORY = 'word/media'


# === OOXML namespaces ===

NAMESPACES = {
    'w': 'http://schemas.openxmlformats.org/wordprocessingml/2006/main',
    'wp': 'http://schemas.openxmlformats.org/drawingml/2006/wordprocessingDrawing',
    'a': 'http://schemas.openxmlformats.org/drawingml/2006/main',
    'pic': 'http://schemas.openxmlformats.org/drawingml/2006/picture',
    'r': 'http://schemas.openxmlformats.org/officeDocument/2006/relationships',
    'ct': 'http://schemas.openxmlformats.org/package/2006/content-types',
    'rel': 'http://schemas.openxmlformats.org/package/2006/relationships',
}


# === Content types ===

DOCX_MIME_TYPE = 'application/vnd.openxmlformats-officedocument.wordprocessingml.document'
DOCUMENT_MAIN_CONTENT_TYPE = 'application/vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml'
RELATIONSHIPS_CONTENT_TYPE = 'application/vnd.openxmlformats-package.relationships+xml'
XML_CONTENT_TYPE = 'application/xml'


# === Relationship types ===

OFFICE_DOCUMENT_REL_TYPE = 'http://schemas.openxmlformats.org/officeDocument/2006/relationships/officeDocument'
IMAGE_REL_TYPE = 'http://schemas.openxmlformats.org/officeDocument/2006/relationships/image'
PICTURE_GRAPHIC_URI = 'http://schemas.openxmlformats.org/drawingml/2006/picture'


# === EMU sizing ===

EMU_PER_INCH = 914400
# 6 inches: widest image that fits the default page margins
MAX_IMAGE_WIDTH_EMU = 6 * EMU_PER_INCH
# Pixel-to-EMU multiplier kept for output compatibility (standard 96 DPI would be 9525)
EMU_PER_PIXEL = 9144


class ImageType(Enum):
    """Image formats embeddable as media parts."""
    PNG = ("png", "image/png")
    JPEG = ("jpeg", "image/jpeg")

    @property
    def extension(self) -> str:
        return self.value[0]

    @property
    def mime_type(self) -> str:
        return self.value[1]

    @classmethod
    def from_extension(cls, extension: str) -> "ImageType":
        """Map a file extension to an ImageType; anything but png is treated as jpeg."""
        ext = (extension or "").strip().lower().lstrip(".")
        return cls.PNG if ext == "png" else cls.JPEG


@dataclass(frozen=True)
class Relationship:
    """One entry of a .rels part."""
    rel_id: str
    rel_type: str
    target: str


__all__ = [
    'CONTENT_TYPES_PART',
    'PACKAGE_RELS_PART',
    'DOCUMENT_PART',
    'DOCUMENT_RELS_PART',
    'MEDIA_DIRECTORY',
    'NAMESPACES',
    'DOCX_MIME_TYPE',
    'DOCUMENT_MAIN_CONTENT_TYPE',
    'RELATIONSHIPS_CONTENT_TYPE',
    'XML_CONTENT_TYPE',
    'OFFICE_DOCUMENT_REL_TYPE',
    'IMAGE_REL_TYPE',
    'PICTURE_GRAPHIC_URI',
    'EMU_PER_INCH',
    'MAX_IMAGE_WIDTH_EMU',
    'EMU_PER_PIXEL',
    'ImageType',
    'Relationship',
]
