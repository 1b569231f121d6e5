import io
import struct
import zipfile
from datetime import datetime

import pytest

from xgen_doc2docx.core.functions.crc32 import crc32
from xgen_doc2docx.core.functions.errors import ArchiveConstructionError, PreconditionError
from xgen_doc2docx.core.functions.zip_writer import (
    ArchiveEntry,
    ZipArchiveBuilder,
    build_archive,
    to_dos_datetime,
)

ENTRIES = {"a.xml": "<a/>", "b.bin": bytes([0x01, 0x02, 0x03])}


def _eocd(data):
    return struct.unpack("<4sHHHHIIH", data[-22:])


def test_archive_signatures(fixed_timestamp):
    data = build_archive(ENTRIES, timestamp=fixed_timestamp)
    assert data[:4] == b"\x50\x4b\x03\x04"
    assert data[-22:-18] == b"\x50\x4b\x05\x06"


def test_central_directory_slice_holds_one_record_per_entry(fixed_timestamp):
    entries = {"one.txt": b"1", "dir/two.txt": b"22", "three.xml": "<x/>"}
    data = build_archive(entries, timestamp=fixed_timestamp)

    _, disk, cd_disk, count_disk, count_total, cd_size, cd_offset, comment_len = _eocd(data)
    assert (disk, cd_disk, comment_len) == (0, 0, 0)
    assert count_disk == count_total == 3
    assert cd_offset + cd_size == len(data) - 22

    directory = data[cd_offset:cd_offset + cd_size]
    pos = 0
    names = []
    while pos < len(directory):
        assert directory[pos:pos + 4] == b"PK\x01\x02"
        name_len, extra_len, comment_len = struct.unpack("<HHH", directory[pos + 28:pos + 34])
        names.append(directory[pos + 46:pos + 46 + name_len].decode())
        pos += 46 + name_len + extra_len + comment_len
    assert pos == len(directory)
    assert names == ["one.txt", "dir/two.txt", "three.xml"]


def test_round_trip_through_zipfile(fixed_timestamp):
    data = build_archive(ENTRIES, timestamp=fixed_timestamp)
    with zipfile.ZipFile(io.BytesIO(data)) as zf:
        assert zf.testzip() is None
        assert zf.namelist() == ["a.xml", "b.bin"]
        assert zf.read("a.xml") == b"<a/>"
        assert zf.read("b.bin") == b"\x01\x02\x03"
        for info in zf.infolist():
            assert info.compress_type == zipfile.ZIP_STORED
            assert info.CRC == crc32(zf.read(info.filename))
            assert info.file_size == info.compress_size


def test_local_header_layout(fixed_timestamp):
    data = build_archive({"a.xml": "<a/>"}, timestamp=fixed_timestamp)
    fields = struct.unpack("<4sHHHHHIIIHH", data[:30])
    sig, version, flags, method, dos_time, dos_date, crc, csize, usize, name_len, extra_len = fields
    assert sig == b"PK\x03\x04"
    assert version == 20
    assert flags == 0
    assert method == 0
    assert (dos_time, dos_date) == to_dos_datetime(fixed_timestamp)
    assert crc == crc32(b"<a/>")
    assert csize == usize == 4
    assert name_len == 5
    assert extra_len == 0
    assert data[30:35] == b"a.xml"
    assert data[35:39] == b"<a/>"


def test_header_offsets_recorded_in_central_directory(fixed_timestamp):
    data = build_archive(ENTRIES, timestamp=fixed_timestamp)
    with zipfile.ZipFile(io.BytesIO(data)) as zf:
        offsets = [info.header_offset for info in zf.infolist()]
    assert offsets == [0, 30 + 5 + 4]


def test_timestamp_round_trip(fixed_timestamp):
    data = build_archive(ENTRIES, timestamp=fixed_timestamp)
    with zipfile.ZipFile(io.BytesIO(data)) as zf:
        assert zf.getinfo("a.xml").date_time == (2024, 3, 15, 10, 30, 42)


def test_fixed_timestamp_is_byte_identical(fixed_timestamp):
    assert build_archive(ENTRIES, timestamp=fixed_timestamp) == build_archive(ENTRIES, timestamp=fixed_timestamp)


def test_dos_datetime_encoding_and_clamping():
    assert to_dos_datetime(datetime(1980, 1, 1)) == (0, 33)
    assert to_dos_datetime(datetime(1970, 6, 1, 12, 0, 0)) == (0, 33)
    dos_time, dos_date = to_dos_datetime(datetime(2024, 3, 15, 10, 30, 43))
    assert dos_time == (10 << 11) | (30 << 5) | 21
    assert dos_date == (44 << 9) | (3 << 5) | 15


def test_accepts_entry_objects_and_pairs(fixed_timestamp):
    from_entries = build_archive([ArchiveEntry("a.xml", b"<a/>"), ("b.bin", b"\x01\x02\x03")], timestamp=fixed_timestamp)
    from_mapping = build_archive(ENTRIES, timestamp=fixed_timestamp)
    assert from_entries == from_mapping


def test_non_ascii_name_sets_utf8_flag(fixed_timestamp):
    data = build_archive({"word/média.xml": "<x/>"}, timestamp=fixed_timestamp)
    flags = struct.unpack("<H", data[6:8])[0]
    assert flags & 0x0800
    with zipfile.ZipFile(io.BytesIO(data)) as zf:
        assert zf.namelist() == ["word/média.xml"]


def test_duplicate_names_fail_before_output():
    with pytest.raises(ArchiveConstructionError):
        build_archive([("a.xml", b"1"), ("a.xml", b"2")])


@pytest.mark.parametrize("name", [
    "",
    "/abs.xml",
    "a/",
    "./x",
    "word\\doc.xml",
    "word//doc.xml",
    "../x.xml",
    "a\x00b",
    "a" * 65536,
])
def test_malformed_names_rejected(name):
    with pytest.raises(ArchiveConstructionError):
        build_archive({name: b"x"})


def test_longest_name_is_accepted(fixed_timestamp):
    name = "a" * 65535
    data = build_archive({name: b"x"}, timestamp=fixed_timestamp)
    with zipfile.ZipFile(io.BytesIO(data)) as zf:
        assert zf.namelist() == [name]


def test_too_many_entries_rejected():
    with pytest.raises(ArchiveConstructionError):
        build_archive({f"e{i}": b"" for i in range(65536)})


def test_names_are_case_sensitive(fixed_timestamp):
    data = build_archive({"A.xml": b"1", "a.xml": b"2"}, timestamp=fixed_timestamp)
    with zipfile.ZipFile(io.BytesIO(data)) as zf:
        assert zf.namelist() == ["A.xml", "a.xml"]


def test_empty_entry_set_is_precondition_error():
    with pytest.raises(PreconditionError):
        build_archive({})
    with pytest.raises(PreconditionError):
        build_archive([])


def test_invalid_data_type_rejected():
    with pytest.raises(ArchiveConstructionError):
        build_archive({"a.xml": 123})


def test_empty_payload_is_allowed(fixed_timestamp):
    data = build_archive({"empty.txt": b""}, timestamp=fixed_timestamp)
    with zipfile.ZipFile(io.BytesIO(data)) as zf:
        assert zf.read("empty.txt") == b""
        assert zf.getinfo("empty.txt").CRC == 0


def test_builder_config_controls_version_fields(fixed_timestamp):
    builder = ZipArchiveBuilder(timestamp=fixed_timestamp)
    assert builder.config.version_needed == 20
    data = builder.build({"a.xml": b"<a/>"})
    _, disk, cd_disk, count_disk, count_total, cd_size, cd_offset, _ = _eocd(data)
    made_by, needed = struct.unpack("<HH", data[cd_offset + 4:cd_offset + 8])
    assert (made_by, needed) == (20, 20)
