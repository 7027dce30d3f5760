from __future__ import annotations

from functools import lru_cache
from typing import Sequence, Tuple

CRC32_POLYNOMIAL = 0xEDB88320
CRC16_CCITT_POLYNOMIAL = 0x8408
ADLER32_MODULUS = 65521


@lru_cache(maxsize=None)
def crc_table(polynomial: int = CRC32_POLYNOMIAL) -> Tuple[int, ...]:
    """256 remainders for the reflected (LSB-first) polynomial."""
    table = []
    for index in range(256):
        remainder = index
        for _ in range(8):
            if remainder & 1:
                remainder = (remainder >> 1) ^ polynomial
            else:
                remainder >>= 1
        table.append(remainder)
    return tuple(table)


def compute_crc(data: bytes, table: Sequence[int], bits: int = 32) -> int:
    mask = (1 << bits) - 1
    crc = mask
    for byte in data:
        crc = (crc >> 8) ^ table[(crc ^ byte) & 0xFF]
    return (crc ^ mask) & mask


def crc32(data: bytes) -> int:
    return compute_crc(data, crc_table(CRC32_POLYNOMIAL))


def crc16_ccitt(data: bytes) -> int:
    return compute_crc(data, crc_table(CRC16_CCITT_POLYNOMIAL), bits=16)


def adler32(data: bytes, value: int = 1) -> int:
    """Adler-32 of data, continuing from a previous checksum value."""
    s1 = value & 0xFFFF
    s2 = (value >> 16) & 0xFFFF
    for byte in data:
        s1 = (s1 + byte) % ADLER32_MODULUS
        s2 = (s2 + s1) % ADLER32_MODULUS
    return (s2 << 16) | s1
