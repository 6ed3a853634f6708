"""8-bit sRGB colour value.

Every colour is three channels, 8 bits each, no alpha.
"""
from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from typing import ClassVar, Iterator, Sequence

from kodak.errors import MalformedInputError


@dataclass(frozen=True)
class Colour:
    r: int
    g: int
    b: int

    BLACK: ClassVar[Colour]
    WHITE: ClassVar[Colour]

    def __post_init__(self):
        for name in ("r", "g", "b"):
            v = getattr(self, name)
            if not isinstance(v, Integral) or isinstance(v, bool):
                raise TypeError(f"Channel {name}={v!r} is not an integer")
            if not 0 <= v <= 255:
                raise ValueError(f"Channel {name}={v} is outside 0..255")

    @classmethod
    def from_bytes(cls, values: Sequence[int]) -> Colour:
        """Build a colour from exactly three channel values (r, g, b)."""
        if len(values) != 3:
            raise MalformedInputError(
                f"Expected 3 channel values, got {len(values)}"
            )
        r, g, b = values
        return cls(int(r), int(g), int(b))

    def to_bytes(self) -> bytes:
        return bytes((self.r, self.g, self.b))

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b))


Colour.BLACK = BLACK = Colour(0, 0, 0)
Colour.WHITE = WHITE = Colour(255, 255, 255)
