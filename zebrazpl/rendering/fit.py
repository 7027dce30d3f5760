from __future__ import annotations

import io
import logging
from typing import Tuple, Union

from PIL import Image, ImageOps

logger = logging.getLogger(__name__)

ImageSource = Union[str, bytes, Image.Image]


def _load_image(source: ImageSource) -> Image.Image:
    if isinstance(source, Image.Image):
        return ImageOps.exif_transpose(source)
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)
    with Image.open(source) as img:
        img = ImageOps.exif_transpose(img)
        return img.copy()


def label_size_in_dots(dpi: float, width_in: float, height_in: float) -> Tuple[int, int]:
    return int(round(width_in * dpi)), int(round(height_in * dpi))


def fit_ratio(width: int, height: int, box_width: int, box_height: int) -> float:
    """Scale factor that shrinks (width, height) into the box; 1.0 when it already fits."""
    if width <= box_width and height <= box_height:
        return 1.0
    return min(box_width / float(width), box_height / float(height))


def fit_image(img: Image.Image, box_width: int, box_height: int) -> Image.Image:
    """Rotate portrait images to landscape, then shrink to the box."""
    if img.width < img.height:
        logger.debug("Rotate by 90 degrees")
        img = img.transpose(Image.Transpose.ROTATE_270)
    ratio = fit_ratio(img.width, img.height, box_width, box_height)
    if ratio != 1.0:
        size = (max(1, int(img.width * ratio)), max(1, int(img.height * ratio)))
        logger.debug("Resize to %d x %d", *size)
        img = img.resize(size, Image.LANCZOS)
    return img


def encode_png(img: Image.Image) -> bytes:
    if img.mode not in ("1", "L", "LA", "P", "RGB", "RGBA"):
        img = img.convert("RGBA")
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


def fit_image_to_label(source: ImageSource, dpi: float, width_in: float, height_in: float) -> bytes:
    """Fit an image to the label's printable area and return it PNG-encoded."""
    box_width, box_height = label_size_in_dots(dpi, width_in, height_in)
    if box_width < 1 or box_height < 1:
        raise ValueError(f"Label of {width_in} x {height_in} in at {dpi} dpi has no printable area")
    img = fit_image(_load_image(source), box_width, box_height)
    return encode_png(img)
