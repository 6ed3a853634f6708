"""In-memory RGB image stored as a flat, row-major pixel buffer.

The buffer is a numpy uint8 array of shape (width * height, 3); the pixel at
(x, y) lives at index x + y * width. Every transformation returns a new Image
with its own buffer, so chains like

    Image.blank(Dimension(40, 40)).fill(WHITE).overlay(other, Location(8, 8))

never share state between the images they pass through.
"""
from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from kodak.colour import BLACK, Colour
from kodak.coords import Dimension, Location, Region, rc_to_xy, xy_to_rc
from kodak.core.masks import index_to_xy, region_mask
from kodak.errors import MalformedInputError, OutOfBoundsError, PreconditionViolation

logger = logging.getLogger(__name__)

# Largest width/height the PNG format can describe.
MAX_SIDE = 2**32 - 1


class Image:
    """Owned width x height pixel buffer in row-major order.

    Fields:
        width: Width, px.
        height: Height, px.
        _pixels: (width * height, 3) uint8 buffer, never shared.
    """

    def __init__(self, width: int, height: int, pixels):
        buf = _checked_channels(pixels)
        if buf.size != width * height * 3:
            raise MalformedInputError(
                f"Pixel buffer holds {buf.size} channel values, "
                f"expected {width * height * 3} for a {width}x{height} image"
            )
        self._init(width, height, buf.reshape(-1, 3))

    def _init(self, width: int, height: int, buf: np.ndarray) -> None:
        if not (0 <= width <= MAX_SIDE and 0 <= height <= MAX_SIDE):
            raise ValueError(f"Image size {width}x{height} exceeds {MAX_SIDE}x{MAX_SIDE}")
        self.width = int(width)
        self.height = int(height)
        self._pixels = buf

    @classmethod
    def _wrap(cls, width: int, height: int, buf: np.ndarray) -> Image:
        # Takes ownership of buf; callers hand over freshly allocated arrays only.
        img = cls.__new__(cls)
        img._init(width, height, buf)
        return img

    # ---------- construction ----------
    @classmethod
    def blank(cls, dimension: Dimension) -> Image:
        """All-black image of the given size."""
        return cls._wrap(dimension.width, dimension.height,
                         np.zeros((dimension.area, 3), dtype=np.uint8))

    @classmethod
    def blank_with_colour(cls, dimension: Dimension, colour: Colour) -> Image:
        """Solid image of the given colour, allocated in one pass.

        Equivalent to `Image.blank(dimension).fill(colour)` without writing
        every pixel twice.
        """
        return cls._wrap(dimension.width, dimension.height,
                         _solid(dimension.area, colour))

    @classmethod
    def from_colours(cls, width: int, height: int, colours: Sequence[Colour]) -> Image:
        return cls(width, height, [tuple(c) for c in colours])

    @classmethod
    def from_array(cls, arr) -> Image:
        """Build an image from a (height, width, 3) array."""
        a = np.asarray(arr)
        if a.ndim != 3 or a.shape[2] != 3:
            raise MalformedInputError(f"Expected an (H, W, 3) array, got shape {a.shape}")
        width, height = rc_to_xy(a.shape[0], a.shape[1])
        return cls(width, height, a.reshape(-1, 3))

    # ---------- inspection ----------
    def get_dimensions(self) -> Dimension:
        return Dimension(self.width, self.height)

    def as_region(self) -> Region:
        """The whole image as a region anchored at (0, 0)."""
        return Region.from_top_left(self.get_dimensions())

    def get_pixel(self, location: Location) -> Colour:
        """Colour at `location`.

        Raises:
            OutOfBoundsError: if `location` is not inside the image.
        """
        if not location.inside_region(self.as_region()):
            raise OutOfBoundsError(
                f"Location ({location.x}, {location.y}) falls outside "
                f"the {self.width}x{self.height} image"
            )
        return Colour.from_bytes(self._pixels[location.as_index(self.get_dimensions())])

    def pixels(self) -> list[Colour]:
        return [Colour.from_bytes(p) for p in self._pixels]

    def to_array(self) -> np.ndarray:
        """Copy of the pixels as a (height, width, 3) uint8 array."""
        rows, cols = xy_to_rc(self.width, self.height)
        return self._pixels.reshape(rows, cols, 3).copy()

    def __eq__(self, other):
        if not isinstance(other, Image):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height) and \
            np.array_equal(self._pixels, other._pixels)

    def __repr__(self):
        return f"Image(width={self.width}, height={self.height})"

    # ---------- transformations ----------
    def fill(self, colour: Colour) -> Image:
        """Replace every pixel with `colour`."""
        return Image._wrap(self.width, self.height, _solid(len(self._pixels), colour))

    def fill_region(self, region: Region, colour: Colour) -> Image:
        """Set every pixel inside `region` to `colour`; the rest pass through."""
        buf = self._pixels.copy()
        buf[region_mask(self.get_dimensions(), region)] = tuple(colour)
        return Image._wrap(self.width, self.height, buf)

    def _crop_unclamped(self, region: Region) -> Image:
        """Cut `region` out of the image without adjusting it.

        Only for callers that already validated the region: the top-left
        corner must be inside the image and the (exclusive) far corner must
        not pass the image's right or bottom edge. Use `crop` otherwise.
        """
        if not region.top_left.inside_region(self.as_region()):
            raise PreconditionViolation("The corner from which to crop is outside of the image.")
        far = region.far_corner
        if far.x > self.width or far.y > self.height:
            raise PreconditionViolation(
                f"Cropped region reaches ({far.x}, {far.y}), past the "
                f"{self.width}x{self.height} image"
            )
        buf = self._pixels[region_mask(self.get_dimensions(), region)]
        return Image._wrap(region.dimension.width, region.dimension.height, buf)

    def crop(self, region: Region) -> Image:
        """Crop `region` out of the image.

        A region that reaches past the right or bottom edge is shrunk to end
        at that edge.

        Raises:
            OutOfBoundsError: if the top-left corner of `region` is outside the image.
        """
        corner = region.top_left
        if not corner.inside_region(self.as_region()):
            raise OutOfBoundsError(
                f"The corner ({corner.x}, {corner.y}) from which to crop falls "
                f"outside of the {self.width}x{self.height} image"
            )
        far = region.far_corner
        if far.x > self.width or far.y > self.height:
            clamped = Dimension(
                min(region.dimension.width, self.width - corner.x),
                min(region.dimension.height, self.height - corner.y),
            )
            region = Region(corner, clamped)
        return self._crop_unclamped(region)

    def overlay(self, other: Image, offset: Location) -> Image:
        """Paste `other` on top of this image with its top-left corner at `offset`.

        Whatever part of `other` does not fit is dropped. `offset` itself
        must lie within this image's dimensions.
        """
        if offset.x > self.width or offset.y > self.height:
            raise PreconditionViolation(
                f"Overlay offset ({offset.x}, {offset.y}) is beyond the "
                f"{self.width}x{self.height} image"
            )
        buf = self._pixels.copy()
        extent = Dimension(self.width - offset.x, self.height - offset.y)
        if extent.area == 0 or other.get_dimensions().area == 0:
            logger.debug("Nothing to paste at (%d, %d)", offset.x, offset.y)
            return Image._wrap(self.width, self.height, buf)

        cropped = other.crop(Region.from_top_left(extent))
        logger.debug("The cropped overlay is %d by %d", cropped.width, cropped.height)

        xs, ys = index_to_xy(cropped.get_dimensions())
        targets = (xs + offset.x) + (ys + offset.y) * self.width
        buf[targets] = cropped._pixels
        return Image._wrap(self.width, self.height, buf)

    def expand(self, amount: int, colour: Colour = BLACK) -> Image:
        """Surround the image with a solid border `amount` pixels wide."""
        return Image.blank_with_colour(self.get_dimensions().expand(2 * amount), colour) \
            .overlay(self, Location(amount, amount))


def _solid(count: int, colour: Colour) -> np.ndarray:
    buf = np.empty((count, 3), dtype=np.uint8)
    buf[:] = tuple(colour)
    return buf


def _checked_channels(pixels) -> np.ndarray:
    # Casting straight to uint8 would wrap 300 to 44.
    raw = np.asarray(pixels)
    if raw.size == 0:
        return np.zeros(0, dtype=np.uint8)
    if not np.issubdtype(raw.dtype, np.integer):
        raise MalformedInputError(f"Channel values must be integers, got dtype {raw.dtype}")
    lo, hi = int(raw.min()), int(raw.max())
    if lo < 0 or hi > 255:
        raise MalformedInputError(f"Channel values must be in 0..255, got range {lo}..{hi}")
    return raw.astype(np.uint8, copy=True)
