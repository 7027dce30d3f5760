import io
import struct
import zlib

import pytest
from PIL import Image

from zebrazpl.codecs.png import PNG_SIGNATURE


@pytest.fixture
def make_png():
    """Factory for small PNG byte strings rendered by Pillow."""

    def factory(width=4, height=2, mode="RGB", color="white"):
        buffer = io.BytesIO()
        Image.new(mode, (width, height), color).save(buffer, format="PNG")
        return buffer.getvalue()

    return factory


@pytest.fixture
def make_chunk():
    """Factory for a single PNG chunk with a correct CRC."""

    def factory(tag, payload=b""):
        return struct.pack(">I", len(payload)) + tag + payload + struct.pack(">I", zlib.crc32(tag + payload))

    return factory


@pytest.fixture
def ihdr_chunk(make_chunk):
    return make_chunk(b"IHDR", struct.pack(">IIBBBBB", 3, 2, 8, 2, 0, 0, 0))


@pytest.fixture
def png_signature():
    return PNG_SIGNATURE
