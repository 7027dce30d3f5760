from __future__ import annotations

import logging
import struct
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from ..errors import PngCrcError, PngFormatError
from .checksums import crc32

logger = logging.getLogger(__name__)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
JPEG_SIGNATURE = b"\xff\xd8\xff\xe0"
ICC_PROFILE_NAME_MAX = 79

RawChunk = Tuple[str, bytes, int, int]


@dataclass(frozen=True)
class PngChunk:
    """One PNG chunk. Only trust ``data`` when ``crc_matched`` is set."""

    type: str
    length: int
    data: bytes
    crc: int
    crc_expected: int
    crc_matched: bool
    critical: bool
    public: bool
    reserved_valid: bool
    safe_to_copy: bool
    recognized: bool
    details: Dict[str, Any] = field(default_factory=dict)


def is_png(data: bytes) -> bool:
    return bytes(data[:8]) == PNG_SIGNATURE


def is_jpeg(data: bytes) -> bool:
    return bytes(data[:4]) == JPEG_SIGNATURE


def iter_chunks(data: bytes) -> Iterator[RawChunk]:
    """Yield (type, data, stored crc, computed crc) for each chunk after the signature."""
    data = bytes(data)
    if not is_png(data):
        raise PngFormatError("Missing PNG signature")
    offset = len(PNG_SIGNATURE)
    total = len(data)
    while offset < total:
        if offset + 8 > total:
            raise PngFormatError(f"Truncated chunk header at offset {offset}")
        length, = struct.unpack_from(">I", data, offset)
        tag = data[offset + 4 : offset + 8]
        start = offset + 8
        end = start + length
        if end + 4 > total:
            raise PngFormatError(f"Truncated {tag.decode('latin-1')} chunk at offset {offset}")
        stored_crc, = struct.unpack_from(">I", data, end)
        yield tag.decode("latin-1"), data[start:end], stored_crc, crc32(data[offset + 4 : end])
        offset = end + 4


def _expect_length(chunk_type: str, data: bytes, size: int) -> None:
    if len(data) != size:
        logger.warning("%s chunk should be %d bytes, got %d", chunk_type, size, len(data))


def _ihdr(data: bytes) -> Dict[str, Any]:
    _expect_length("IHDR", data, 13)
    if len(data) < 13:
        return {}
    width, height, bit_depth, color_type, compression, filter_method, interlace = struct.unpack_from(">IIBBBBB", data)
    return {
        "width": width,
        "height": height,
        "bit_depth": bit_depth,
        "color_type": color_type,
        "compression_method": compression,
        "filter_method": filter_method,
        "interlace_method": interlace,
    }


def _plte(data: bytes) -> Dict[str, Any]:
    if len(data) % 3:
        logger.warning("PLTE chunk length should be divisible by 3, got %d", len(data))
    palette = [tuple(data[index : index + 3]) for index in range(0, len(data) - len(data) % 3, 3)]
    return {"palette": palette}


def _phys(data: bytes) -> Dict[str, Any]:
    _expect_length("pHYs", data, 9)
    if len(data) < 9:
        return {}
    ppu_x, ppu_y, unit = struct.unpack_from(">IIB", data)
    return {"pixels_per_unit_x": ppu_x, "pixels_per_unit_y": ppu_y, "unit_specifier": unit}


def _srgb(data: bytes) -> Dict[str, Any]:
    _expect_length("sRGB", data, 1)
    if not data:
        return {}
    return {"rendering_intent": data[0]}


def _gama(data: bytes) -> Dict[str, Any]:
    _expect_length("gAMA", data, 4)
    if len(data) < 4:
        return {}
    gamma, = struct.unpack_from(">I", data)
    return {"gamma": gamma}


def _iccp(data: bytes) -> Dict[str, Any]:
    # profile stays compressed; decompression is not supported
    end = data.find(b"\x00", 0, ICC_PROFILE_NAME_MAX + 1)
    if end < 0:
        logger.warning("iCCP profile name is not null-terminated within %d bytes", ICC_PROFILE_NAME_MAX)
        name = data[: min(len(data), ICC_PROFILE_NAME_MAX)].decode("latin-1")
        return {"profile_name": name, "compression_method": None, "compressed_profile": b""}
    name = data[:end].decode("latin-1")
    compression = data[end + 1] if end + 1 < len(data) else None
    if compression != 0:
        logger.warning("Invalid compression method %s in iCCP chunk", compression)
    return {
        "profile_name": name,
        "compression_method": compression,
        "compressed_profile": data[end + 2 :],
    }


def _no_details(data: bytes) -> Dict[str, Any]:
    return {}


CHUNK_DECODERS: Dict[str, Callable[[bytes], Dict[str, Any]]] = {
    "IHDR": _ihdr,
    "PLTE": _plte,
    "IDAT": _no_details,
    "IEND": _no_details,
    "iCCP": _iccp,
    "gAMA": _gama,
    "pHYs": _phys,
    "sRGB": _srgb,
}


def _is_upper(letter: str) -> bool:
    # bit 5 of each tag byte is the case bit
    return not ord(letter) & 0x20


def parse_png(data: bytes, strict: bool = False) -> List[PngChunk]:
    """Parse every chunk; CRC mismatches are flagged, or raised when strict."""
    chunks: List[PngChunk] = []
    for chunk_type, chunk_data, stored_crc, expected_crc in iter_chunks(data):
        matched = stored_crc == expected_crc
        if not matched:
            if strict:
                raise PngCrcError(chunk_type, expected_crc, stored_crc)
            logger.warning(
                "CRC mismatch in %s chunk (expected %08x, got %08x)", chunk_type, expected_crc, stored_crc
            )
        flags = [_is_upper(letter) for letter in chunk_type]
        decoder = CHUNK_DECODERS.get(chunk_type)
        chunks.append(
            PngChunk(
                type=chunk_type,
                length=len(chunk_data),
                data=chunk_data,
                crc=stored_crc,
                crc_expected=expected_crc,
                crc_matched=matched,
                critical=flags[0],
                public=flags[1],
                reserved_valid=flags[2],
                safe_to_copy=not flags[3],
                recognized=flags[2] and decoder is not None,
                details=decoder(chunk_data) if decoder else {},
            )
        )
        if chunk_type == "IEND":
            break
    return chunks


def png_size(data: bytes) -> Tuple[int, int]:
    chunk = find_chunk(parse_png(data), "IHDR")
    if chunk is None or "width" not in chunk.details:
        raise PngFormatError("PNG has no valid IHDR chunk")
    return chunk.details["width"], chunk.details["height"]


def find_chunk(chunks: List[PngChunk], chunk_type: str) -> Optional[PngChunk]:
    for chunk in chunks:
        if chunk.type == chunk_type:
            return chunk
    return None
