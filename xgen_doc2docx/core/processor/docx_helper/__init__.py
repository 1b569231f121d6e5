# xgen_doc2docx/core/processor/docx_helper/__init__.py
"""
DOCX Helper Module

Utility modules for writing DOCX packages.

Module structure:
- docx_constants: Part names, namespaces, content/relationship types, EMU constants
- docx_package: [Content_Types].xml, .rels parts, document wrapper, DocumentPackage
- docx_paragraph: Paragraph XML from plain text lines
- docx_drawing: Inline picture XML and EMU placement geometry
"""

# Constants
from xgen_doc2docx.core.processor.docx_helper.docx_constants import (
    CONTENT_TYPES_PART,
    PACKAGE_RELS_PART,
    DOCUMENT_PART,
    DOCUMENT_RELS_PART,
    MEDIA_DIRECTORY,
    NAMESPACES,
    DOCX_MIME_TYPE,
    IMAGE_REL_TYPE,
    EMU_PER_PIXEL,
    MAX_IMAGE_WIDTH_EMU,
    ImageType,
    Relationship,
)

# Package
from xgen_doc2docx.core.processor.docx_helper.docx_package import (
    build_content_types_xml,
    build_relationships_xml,
    package_relationships,
    build_document_xml,
    DocumentPackage,
)

# Paragraph
from xgen_doc2docx.core.processor.docx_helper.docx_paragraph import (
    build_paragraph_xml,
    build_paragraphs_xml,
    text_to_paragraph_lines,
)

# Drawing
from xgen_doc2docx.core.processor.docx_helper.docx_drawing import (
    ImagePlacementConfig,
    ImageExtent,
    compute_image_extent,
    build_inline_image_xml,
)


__all__ = [
    # Constants
    'CONTENT_TYPES_PART',
    'PACKAGE_RELS_PART',
    'DOCUMENT_PART',
    'DOCUMENT_RELS_PART',
    'MEDIA_DIRECTORY',
    'NAMESPACES',
    'DOCX_MIME_TYPE',
    'IMAGE_REL_TYPE',
    'EMU_PER_PIXEL',
    'MAX_IMAGE_WIDTH_EMU',
    'ImageType',
    'Relationship',
    # Package
    'build_content_types_xml',
    'build_relationships_xml',
    'package_relationships',
    'build_document_xml',
    'DocumentPackage',
    # Paragraph
    'build_paragraph_xml',
    'build_paragraphs_xml',
    'text_to_paragraph_lines',
    # Drawing
    'ImagePlacementConfig',
    'ImageExtent',
    'compute_image_extent',
    'build_inline_image_xml',
]
