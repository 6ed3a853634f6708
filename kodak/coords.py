from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral


def _check_non_negative(**values: int) -> None:
    for name, v in values.items():
        if not isinstance(v, Integral) or isinstance(v, bool):
            raise TypeError(f"{name} must be an integer, got {v!r}")
        if v < 0:
            raise ValueError(f"{name} must be non-negative, got {v}")


@dataclass(frozen=True)
class Dimension:
    width: int
    height: int

    def __post_init__(self):
        _check_non_negative(width=self.width, height=self.height)

    @classmethod
    def square(cls, side: int) -> Dimension:
        return cls(side, side)

    def expand(self, amount: int) -> Dimension:
        """Grow both axes by the same amount."""
        return Dimension(self.width + amount, self.height + amount)

    @property
    def area(self) -> int:
        return self.width * self.height


@dataclass(frozen=True)
class Location:
    x: int  # column
    y: int  # row

    def __post_init__(self):
        _check_non_negative(x=self.x, y=self.y)

    @classmethod
    def from_index(cls, index: int, dimension: Dimension) -> Location:
        """Inverse of the row-major mapping index = x + y * width.

        The caller must keep index < dimension.area for the result to mean
        anything; only a zero width is rejected here.
        """
        if dimension.width == 0:
            raise ValueError("Cannot map an index onto a zero-width dimension")
        y, x = divmod(int(index), dimension.width)
        return cls(x, y)

    def as_index(self, dimension: Dimension) -> int:
        """Row-major index of this location. No bounds checking."""
        return self.x + self.y * dimension.width

    def inside_region(self, region: Region) -> bool:
        """Left-inclusive, right-exclusive on both axes."""
        cx, cy = region.top_left.x, region.top_left.y
        w, h = region.dimension.width, region.dimension.height
        return cx <= self.x < cx + w and cy <= self.y < cy + h

    def __add__(self, other):
        if isinstance(other, Dimension):
            return Location(self.x + other.width, self.y + other.height)
        if isinstance(other, Location):
            return Location(self.x + other.x, self.y + other.y)
        return NotImplemented


@dataclass(frozen=True)
class Region:
    top_left: Location
    dimension: Dimension

    @classmethod
    def from_top_left(cls, dimension: Dimension) -> Region:
        return cls(Location(0, 0), dimension)

    @property
    def far_corner(self) -> Location:
        # Exclusive: the first location past the bottom-right pixel.
        return self.top_left + self.dimension

    def __contains__(self, location: Location) -> bool:
        return location.inside_region(self)


def xy_to_rc(x: int, y: int) -> tuple[int, int]:
    """Convert Cartesian (x, y) to numpy array indices (row, col) = (y, x)."""
    return int(y), int(x)


def rc_to_xy(r: int, c: int) -> tuple[int, int]:
    """Convert numpy array indices (row, col) to Cartesian (x, y)."""
    return int(c), int(r)
