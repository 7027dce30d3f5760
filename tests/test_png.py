import logging
import struct

import pytest

from zebrazpl.codecs.png import find_chunk, is_jpeg, is_png, iter_chunks, parse_png, png_size
from zebrazpl.errors import PngCrcError, PngFormatError


def test_signatures(make_png):
    assert is_png(make_png())
    assert not is_png(b"GIF89a")
    assert is_jpeg(b"\xff\xd8\xff\xe0\x00\x10JFIF")
    assert not is_jpeg(make_png())


def test_parse_pillow_png(make_png):
    chunks = parse_png(make_png(5, 3))
    assert chunks[0].type == "IHDR"
    assert chunks[-1].type == "IEND"
    assert all(chunk.crc_matched for chunk in chunks)
    header = chunks[0]
    assert header.details["width"] == 5
    assert header.details["height"] == 3
    assert header.details["bit_depth"] == 8
    assert header.critical and header.public and header.reserved_valid
    assert not header.safe_to_copy
    assert header.recognized
    assert png_size(make_png(5, 3)) == (5, 3)


def test_corrupted_crc_is_flagged(make_png, caplog):
    data = bytearray(make_png())
    # IHDR crc sits after signature(8) + length(4) + type(4) + data(13)
    data[29] ^= 0xFF
    with caplog.at_level(logging.WARNING):
        chunks = parse_png(bytes(data))
    header = chunks[0]
    assert header.type == "IHDR"
    assert header.length == 13
    assert len(header.data) == 13
    assert not header.crc_matched
    assert header.crc != header.crc_expected
    assert "CRC mismatch in IHDR" in caplog.text


def test_corrupted_crc_strict(make_png):
    data = bytearray(make_png())
    data[29] ^= 0xFF
    with pytest.raises(PngCrcError) as exc_info:
        parse_png(bytes(data), strict=True)
    assert exc_info.value.chunk_type == "IHDR"


def test_not_a_png():
    with pytest.raises(PngFormatError):
        parse_png(b"not a png at all")


def test_truncated_chunk(make_png):
    with pytest.raises(PngFormatError):
        parse_png(make_png()[:20])


def test_ancillary_chunk_details(png_signature, ihdr_chunk, make_chunk):
    data = (
        png_signature
        + ihdr_chunk
        + make_chunk(b"pHYs", struct.pack(">IIB", 2835, 2834, 1))
        + make_chunk(b"sRGB", b"\x00")
        + make_chunk(b"gAMA", struct.pack(">I", 45455))
        + make_chunk(b"iCCP", b"ICC Profile\x00\x00compressed")
        + make_chunk(b"PLTE", bytes([255, 0, 0, 0, 255, 0]))
        + make_chunk(b"tEXt", b"Comment\x00hi")
        + make_chunk(b"prIv", b"x")
        + make_chunk(b"IEND")
    )
    chunks = parse_png(data)
    assert [chunk.type for chunk in chunks] == ["IHDR", "pHYs", "sRGB", "gAMA", "iCCP", "PLTE", "tEXt", "prIv", "IEND"]
    assert find_chunk(chunks, "pHYs").details == {
        "pixels_per_unit_x": 2835,
        "pixels_per_unit_y": 2834,
        "unit_specifier": 1,
    }
    assert find_chunk(chunks, "sRGB").details == {"rendering_intent": 0}
    assert find_chunk(chunks, "gAMA").details == {"gamma": 45455}
    assert find_chunk(chunks, "iCCP").details == {
        "profile_name": "ICC Profile",
        "compression_method": 0,
        "compressed_profile": b"compressed",
    }
    assert find_chunk(chunks, "PLTE").details == {"palette": [(255, 0, 0), (0, 255, 0)]}

    text = find_chunk(chunks, "tEXt")
    assert not text.recognized
    assert not text.critical
    assert text.public
    assert text.safe_to_copy
    assert text.details == {}
    assert text.data == b"Comment\x00hi"
    assert not find_chunk(chunks, "prIv").public


def test_wrong_fixed_size_logs_warning(png_signature, ihdr_chunk, make_chunk, caplog):
    data = png_signature + ihdr_chunk + make_chunk(b"sRGB", b"\x00\x01") + make_chunk(b"IEND")
    with caplog.at_level(logging.WARNING):
        chunks = parse_png(data)
    assert "sRGB chunk should be 1 bytes" in caplog.text
    assert chunks[1].details == {"rendering_intent": 0}


def test_stops_at_iend(png_signature, ihdr_chunk, make_chunk):
    data = png_signature + ihdr_chunk + make_chunk(b"IEND") + b"trailing garbage"
    assert [chunk.type for chunk in parse_png(data)] == ["IHDR", "IEND"]


def test_iter_chunks_reports_both_crcs(png_signature, ihdr_chunk):
    chunk_type, data, stored, computed = next(iter_chunks(png_signature + ihdr_chunk))
    assert chunk_type == "IHDR"
    assert len(data) == 13
    assert stored == computed


def test_iccp_without_name_terminator(png_signature, ihdr_chunk, make_chunk, caplog):
    data = png_signature + ihdr_chunk + make_chunk(b"iCCP", b"A" * 100) + make_chunk(b"IEND")
    with caplog.at_level(logging.WARNING):
        details = find_chunk(parse_png(data), "iCCP").details
    assert details == {"profile_name": "A" * 79, "compression_method": None, "compressed_profile": b""}
    assert "not null-terminated" in caplog.text
