import pytest

from zebrazpl.codecs.encodings import base64_decode, base64_encode, hex_decode, hex_encode


def test_hex_encode_is_upper_case():
    assert hex_encode(b"\x00\x0f\xab") == "000FAB"
    assert hex_encode(b"") == ""


def test_hex_decode():
    assert hex_decode("000fab") == b"\x00\x0f\xab"
    with pytest.raises(ValueError):
        hex_decode("zz")


def test_base64_padding():
    assert base64_encode(b"Man") == "TWFu"
    assert base64_encode(b"Ma") == "TWE="
    assert base64_encode(b"M") == "TQ=="
    assert base64_encode(b"") == ""


def test_base64_decode():
    assert base64_decode("TWE=") == b"Ma"
    with pytest.raises(ValueError):
        base64_decode("!!")
