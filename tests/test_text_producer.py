import io
import xml.etree.ElementTree as ET

import docx
import pytest

from conftest import W_NS, part_names, read_parts
from xgen_doc2docx.core.functions.utils import sanitize_text_for_xml, split_nonblank_lines
from xgen_doc2docx.core.processor.text_producer import TextDocxProducer


@pytest.fixture
def producer(fixed_timestamp):
    return TextDocxProducer(timestamp=fixed_timestamp)


def _paragraph_texts(data):
    root = ET.fromstring(read_parts(data)["word/document.xml"])
    paragraphs = root.findall(f".//{{{W_NS}}}p")
    return ["".join(t.text or "" for t in p.iter(f"{{{W_NS}}}t")) for p in paragraphs]


def test_blank_lines_are_dropped(producer):
    assert _paragraph_texts(producer.produce("Hello\n\nWorld")) == ["Hello", "World"]


def test_special_characters_are_escaped(producer):
    data = producer.produce("A & B < C")
    document_xml = read_parts(data)["word/document.xml"].decode("utf-8")
    assert "A &amp; B &lt; C" in document_xml
    assert _paragraph_texts(data) == ["A & B < C"]


def test_empty_text_gives_valid_empty_document(producer):
    for text in ("", None, "  \n\t\n"):
        data = producer.produce(text)
        document_xml = read_parts(data)["word/document.xml"].decode("utf-8")
        assert "<w:p>" not in document_xml
        assert "<w:sectPr/>" in document_xml
        assert _paragraph_texts(data) == []


def test_part_order(producer):
    assert part_names(producer.produce("x")) == [
        "[Content_Types].xml",
        "_rels/.rels",
        "word/document.xml",
        "word/_rels/document.xml.rels",
    ]


def test_whitespace_inside_lines_is_preserved(producer):
    data = producer.produce("  indented\tline  \r\nnext")
    document_xml = read_parts(data)["word/document.xml"].decode("utf-8")
    assert 'xml:space="preserve"' in document_xml
    assert _paragraph_texts(data) == ["  indented\tline  ", "next"]


def test_control_characters_are_removed(producer):
    data = producer.produce("bell\x07 and form\x0cfeed")
    assert _paragraph_texts(data) == ["bell and formfeed"]


def test_line_of_only_control_characters_is_dropped(producer):
    data = producer.produce("A\n\x07\x07\nB")
    assert _paragraph_texts(data) == ["A", "B"]
    assert read_parts(data)["word/document.xml"].count(b"<w:p>") == 2


def test_document_opens_with_python_docx(producer):
    data = producer.produce("First line\n\n  \nSecond <line>\nThird & last")
    document = docx.Document(io.BytesIO(data))
    assert [p.text for p in document.paragraphs] == ["First line", "Second <line>", "Third & last"]


def test_produce_from_bytes_decodes_text(producer):
    data = producer.produce_from_bytes("\ufeffcafé\nthé".encode("utf-8"))
    assert _paragraph_texts(data) == ["café", "thé"]


def test_split_nonblank_lines_handles_all_line_endings():
    assert split_nonblank_lines("a\r\nb\rc\nd") == ["a", "b", "c", "d"]
    assert split_nonblank_lines("") == []


def test_sanitize_keeps_tab_and_newline():
    assert sanitize_text_for_xml("a\tb\nc\x00d\ufffe") == "a\tb\ncd"
