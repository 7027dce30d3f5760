from .checksums import adler32, compute_crc, crc16_ccitt, crc32, crc_table
from .encodings import base64_decode, base64_encode, hex_decode, hex_encode
from .png import PNG_SIGNATURE, PngChunk, find_chunk, is_jpeg, is_png, iter_chunks, parse_png, png_size

__all__ = [
    "adler32",
    "base64_decode",
    "base64_encode",
    "compute_crc",
    "crc16_ccitt",
    "crc32",
    "crc_table",
    "find_chunk",
    "hex_decode",
    "hex_encode",
    "is_jpeg",
    "is_png",
    "iter_chunks",
    "parse_png",
    "PNG_SIGNATURE",
    "PngChunk",
    "png_size",
]
