from __future__ import annotations

import base64
import binascii


def hex_encode(data: bytes) -> str:
    """Two upper-case hex digits per byte, as ~DY expects for ASCII hex payloads."""
    return bytes(data).hex().upper()


def hex_decode(text: str) -> bytes:
    try:
        return bytes.fromhex(text)
    except ValueError as exc:
        raise ValueError(f"Invalid hex string: {exc}") from exc


def base64_encode(data: bytes) -> str:
    return base64.b64encode(bytes(data)).decode("ascii")


def base64_decode(text: str) -> bytes:
    try:
        return base64.b64decode(text, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"Invalid base64 string: {exc}") from exc
