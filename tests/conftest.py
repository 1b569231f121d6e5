import io
import zipfile
from datetime import datetime

import fitz
import pytest
from PIL import Image

FIXED_TIMESTAMP = datetime(2024, 3, 15, 10, 30, 42)

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"


@pytest.fixture
def fixed_timestamp():
    return FIXED_TIMESTAMP


@pytest.fixture
def make_image():
    def _make(width, height, fmt="PNG"):
        buf = io.BytesIO()
        Image.new("RGB", (width, height), color=(200, 40, 40)).save(buf, format=fmt)
        return buf.getvalue()
    return _make


@pytest.fixture
def make_pdf():
    def _make(page_texts):
        doc = fitz.open()
        for text in page_texts:
            page = doc.new_page()
            if text:
                page.insert_text((72, 72), text)
        data = doc.tobytes()
        doc.close()
        return data
    return _make


def read_parts(data):
    with zipfile.ZipFile(io.BytesIO(data)) as zf:
        return {info.filename: zf.read(info.filename) for info in zf.infolist()}


def part_names(data):
    with zipfile.ZipFile(io.BytesIO(data)) as zf:
        return zf.namelist()
