import io
import xml.etree.ElementTree as ET

import docx
import pytest

from conftest import part_names, read_parts
from xgen_doc2docx.core.functions.errors import PreconditionError
from xgen_doc2docx.core.processor.docx_helper.docx_drawing import (
    ImagePlacementConfig,
    compute_image_extent,
)
from xgen_doc2docx.core.processor.image_file_helper import ImageFileConverter
from xgen_doc2docx.core.processor.image_producer import ImageDocxProducer

WP_NS = "http://schemas.openxmlformats.org/drawingml/2006/wordprocessingDrawing"
A_NS = "http://schemas.openxmlformats.org/drawingml/2006/main"
R_NS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"


@pytest.fixture
def producer(fixed_timestamp):
    return ImageDocxProducer(timestamp=fixed_timestamp)


def _extent(data):
    root = ET.fromstring(read_parts(data)["word/document.xml"])
    extent = root.find(f".//{{{WP_NS}}}extent")
    return int(extent.get("cx")), int(extent.get("cy"))


def test_wide_image_is_capped_at_six_inches():
    extent = compute_image_extent(2000, 1000)
    assert (extent.cx, extent.cy) == (5486400, 2743200)


def test_small_image_uses_pixel_scale():
    extent = compute_image_extent(100, 100)
    assert (extent.cx, extent.cy) == (914400, 914400)


def test_height_is_rounded_half_up():
    config = ImagePlacementConfig(max_width_emu=5, emu_per_pixel=1)
    # 5 * 0.5 = 2.5
    assert compute_image_extent(10, 5, config).cy == 3
    assert compute_image_extent(3, 1).cy == 9144


@pytest.mark.parametrize("width,height", [(None, 10), (10, None), (0, 10), (10, -1), (1.5, 2)])
def test_missing_or_invalid_dimensions(width, height):
    with pytest.raises(PreconditionError):
        compute_image_extent(width, height)


def test_part_order_and_media_bytes(producer, make_image):
    image = make_image(40, 20)
    data = producer.produce(image, "png", 40, 20)
    assert part_names(data) == [
        "[Content_Types].xml",
        "_rels/.rels",
        "word/_rels/document.xml.rels",
        "word/document.xml",
        "word/media/image1.png",
    ]
    parts = read_parts(data)
    assert parts["word/media/image1.png"] == image
    assert b'<Default Extension="png" ContentType="image/png"/>' in parts["[Content_Types].xml"]


def test_relationship_matches_embed_reference(producer, make_image):
    data = producer.produce(make_image(10, 10), "png", 10, 10)
    parts = read_parts(data)
    rels = ET.fromstring(parts["word/_rels/document.xml.rels"])
    (rel,) = list(rels)
    assert rel.get("Id") == "rId1"
    assert rel.get("Target") == "media/image1.png"
    assert rel.get("Type").endswith("/image")

    blip = ET.fromstring(parts["word/document.xml"]).find(f".//{{{A_NS}}}blip")
    assert blip.get(f"{{{R_NS}}}embed") == "rId1"


def test_non_png_extension_is_stored_as_jpeg(producer, make_image):
    image = make_image(16, 8, fmt="JPEG")
    data = producer.produce(image, "JPG", 16, 8)
    parts = read_parts(data)
    assert parts["word/media/image1.jpeg"] == image
    assert b'<Default Extension="jpeg" ContentType="image/jpeg"/>' in parts["[Content_Types].xml"]
    assert b'Target="media/image1.jpeg"' in parts["word/_rels/document.xml.rels"]


def test_empty_image_is_rejected(producer):
    with pytest.raises(PreconditionError):
        producer.produce(b"", "png", 10, 10)


def test_missing_dimension_is_rejected(producer, make_image):
    with pytest.raises(PreconditionError):
        producer.produce(make_image(10, 10), "png", None, 10)


def test_produce_from_bytes_decodes_dimensions(producer, make_image):
    data = producer.produce_from_bytes(make_image(40, 20), "png")
    assert _extent(data) == (365760, 182880)


def test_undecodable_image_is_rejected(producer):
    with pytest.raises(PreconditionError):
        producer.produce_from_bytes(b"not an image at all", "png")


def test_custom_placement_config(fixed_timestamp, make_image):
    producer = ImageDocxProducer(
        timestamp=fixed_timestamp,
        placement_config=ImagePlacementConfig(max_width_emu=914400),
    )
    assert _extent(producer.produce(make_image(200, 50), "png", 200, 50)) == (914400, 228600)


def test_document_opens_with_python_docx(producer, make_image):
    data = producer.produce(make_image(2000, 1000), "png", 2000, 1000)
    document = docx.Document(io.BytesIO(data))
    assert len(document.inline_shapes) == 1
    shape = document.inline_shapes[0]
    assert (shape.width, shape.height) == (5486400, 2743200)


def test_image_file_converter_detects_type(make_image):
    converter = ImageFileConverter()
    assert converter.detect_image_type(make_image(2, 2)) == "png"
    assert converter.detect_image_type(make_image(2, 2, fmt="JPEG")) == "jpeg"
    assert converter.detect_image_type(b"xx") is None
    assert converter.validate(make_image(2, 2, fmt="GIF"))
