from __future__ import annotations

CSS_PIXELS_PER_INCH = 96

UNITS = ("dots", "in", "px")


def inches_to_dots(inches: float, dpi: float) -> float:
    return inches * dpi


def dots_to_inches(dots: float, dpi: float) -> float:
    return dots / dpi


def px_to_dots(pixels: float, dpi: float) -> float:
    """CSS pixels (1/96 inch) to printer dots."""
    return pixels * dpi / CSS_PIXELS_PER_INCH


def dots_to_px(dots: float, dpi: float) -> float:
    return dots * CSS_PIXELS_PER_INCH / dpi


def to_dots(value: float, unit: str, dpi: float | None = None) -> float:
    if unit == "dots":
        return value
    if dpi is None:
        raise ValueError(f"dpi is required to convert from {unit}")
    if unit == "in":
        return inches_to_dots(value, dpi)
    if unit == "px":
        return px_to_dots(value, dpi)
    raise ValueError(f"Unknown unit {unit!r}, expected one of {', '.join(UNITS)}")
