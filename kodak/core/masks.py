from __future__ import annotations

import numpy as np

from kodak.coords import Dimension, Region


def index_to_xy(dimension: Dimension) -> tuple[np.ndarray, np.ndarray]:
    """Vectorised Location.from_index over every index of `dimension`.

    Returns (xs, ys), each of shape (width * height,), int64.
    """
    idx = np.arange(dimension.area, dtype=np.int64)
    if dimension.width == 0:
        return idx, idx
    ys, xs = np.divmod(idx, dimension.width)
    return xs, ys


def region_mask(dimension: Dimension, region: Region) -> np.ndarray:
    """Boolean mask over the linear buffer of `dimension`, True inside `region`.

    Same left-inclusive, right-exclusive rule as Location.inside_region.
    """
    xs, ys = index_to_xy(dimension)
    cx, cy = region.top_left.x, region.top_left.y
    w, h = region.dimension.width, region.dimension.height
    return (xs >= cx) & (xs < cx + w) & (ys >= cy) & (ys < cy + h)
