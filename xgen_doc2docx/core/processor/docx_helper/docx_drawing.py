# xgen_doc2docx/core/processor/docx_helper/docx_drawing.py
"""
Inline image drawing XML and EMU placement geometry

The placed width is the pixel width scaled by EMU_PER_PIXEL and capped at
MAX_IMAGE_WIDTH_EMU; the height is always derived from that width through
the source aspect ratio, so the picture is never distorted.
"""
import math
from dataclasses import dataclass
from typing import Optional

from xgen_doc2docx.core.functions.errors import PreconditionError
from xgen_doc2docx.core.processor.docx_helper.docx_constants import (
    EMU_PER_PIXEL,
    MAX_IMAGE_WIDTH_EMU,
    PICTURE_GRAPHIC_URI,
)


@dataclass
class ImagePlacementConfig:
    """
    Image sizing configuration.

    Attributes:
        max_width_emu: Widest allowed placement (default: 6 inches)
        emu_per_pixel: Multiplier from source pixels to EMU
    """
    max_width_emu: int = MAX_IMAGE_WIDTH_EMU
    emu_per_pixel: int = EMU_PER_PIXEL


@dataclass(frozen=True)
class ImageExtent:
    """Placed size of an image in EMU."""
    cx: int
    cy: int


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_image_extent(
    pixel_width: Optional[int],
    pixel_height: Optional[int],
    config: Optional[ImagePlacementConfig] = None,
) -> ImageExtent:
    """
    Convert decoded pixel dimensions to drawing extents.

    Args:
        pixel_width: Decoded image width in pixels
        pixel_height: Decoded image height in pixels
        config: Sizing configuration (defaults preserve the 9144 EMU/px rule)

    Returns:
        ImageExtent with cx = min(max_width, width * emu_per_pixel) and
        cy = round(cx * height / width)

    Raises:
        PreconditionError: If a dimension is missing or not positive
    """
    config = config or ImagePlacementConfig()

    for label, value in (("width", pixel_width), ("height", pixel_height)):
        if value is None:
            raise PreconditionError(f"Image {label} is unavailable; was the image decoded?")
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise PreconditionError(f"Image {label} must be a positive integer, got {value!r}")

    aspect_ratio = pixel_height / pixel_width
    width_emu = min(config.max_width_emu, pixel_width * config.emu_per_pixel)
    height_emu = _round_half_up(width_emu * aspect_ratio)
    return ImageExtent(cx=width_emu, cy=height_emu)


def build_inline_image_xml(
    extent: ImageExtent,
    rel_id: str = "rId1",
    drawing_id: int = 1,
    name: str = "Image1",
) -> str:
    """
    Build a paragraph containing one inline picture.

    Args:
        extent: Placed size in EMU
        rel_id: Relationship id of the image part (r:embed)
        drawing_id: Unique drawing object id
        name: Drawing object name

    Returns:
        <w:p> element as a string
    """
    return (
        '<w:p><w:r><w:drawing>'
        '<wp:inline distT="0" distB="0" distL="0" distR="0">'
        f'<wp:extent cx="{extent.cx}" cy="{extent.cy}"/>'
        '<wp:effectExtent l="0" t="0" r="0" b="0"/>'
        f'<wp:docPr id="{drawing_id}" name="{name}"/>'
        '<wp:cNvGraphicFramePr><a:graphicFrameLocks noChangeAspect="1"/></wp:cNvGraphicFramePr>'
        '<a:graphic>'
        f'<a:graphicData uri="{PICTURE_GRAPHIC_URI}">'
        '<pic:pic>'
        f'<pic:nvPicPr><pic:cNvPr id="{drawing_id}" name="{name}"/><pic:cNvPicPr/></pic:nvPicPr>'
        f'<pic:blipFill><a:blip r:embed="{rel_id}"/><a:stretch><a:fillRect/></a:stretch></pic:blipFill>'
        '<pic:spPr>'
        f'<a:xfrm><a:off x="0" y="0"/><a:ext cx="{extent.cx}" cy="{extent.cy}"/></a:xfrm>'
        '<a:prstGeom prst="rect"><a:avLst/></a:prstGeom>'
        '</pic:spPr>'
        '</pic:pic>'
        '</a:graphicData>'
        '</a:graphic>'
        '</wp:inline>'
        '</w:drawing></w:r></w:p>'
    )


__all__ = [
    'ImagePlacementConfig',
    'ImageExtent',
    'compute_image_extent',
    'build_inline_image_xml',
]
