"""PNG encode/decode at the edge of the library.

Pillow does the actual codec work; this module only converts between its
images and `kodak.core.image.Image`.
"""
from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path

import numpy as np
from PIL import Image as PILImage, UnidentifiedImageError

from kodak.core.image import Image
from kodak.errors import CodecError

logger = logging.getLogger(__name__)


def decode_png(data: bytes) -> Image:
    """Decode PNG bytes into an RGB Image.

    Greyscale, palette and alpha images are converted to plain RGB; the
    alpha channel is dropped. Pillow's MAX_IMAGE_PIXELS guard applies.

    Raises:
        CodecError: if the bytes are not a readable image.
    """
    try:
        with PILImage.open(BytesIO(data)) as pil:
            if pil.mode != "RGB":
                logger.debug("Converting %s image to RGB", pil.mode)
                pil = pil.convert("RGB")
            arr = np.asarray(pil, dtype=np.uint8)
    except (UnidentifiedImageError, PILImage.DecompressionBombError, OSError) as exc:
        raise CodecError(f"Failed to decode PNG data: {exc}") from exc
    return Image.from_array(arr)


def encode_png(image: Image) -> bytes:
    """Encode an Image as an 8-bit RGB PNG (no alpha, no palette)."""
    pil = PILImage.fromarray(image.to_array())
    buffer = BytesIO()
    pil.save(buffer, format="PNG")
    return buffer.getvalue()


def load_png(path: str | Path) -> Image:
    """Read and decode a PNG file.

    Raises:
        FileNotFoundError: if the path does not exist or is not a file.
        CodecError: if the file is not a readable image.
    """
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(f"PNG file not found: {p}")
    image = decode_png(p.read_bytes())
    logger.debug("Loaded %s (%dx%d)", p, image.width, image.height)
    return image


def save_png(image: Image, path: str | Path) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_bytes(encode_png(image))
    return p
