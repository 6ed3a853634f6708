from __future__ import annotations

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from kodak.coords import Region
from kodak.core.image import Image


def plot_image(image: Image, title: str = "", regions: list[Region] | None = None):
    """Draw an Image with optional region outlines. Returns (fig, ax)."""
    fig, ax = plt.subplots()
    ax.imshow(image.to_array(), origin='upper', interpolation='nearest',
              extent=(0, image.width, image.height, 0))
    for region in regions or []:
        ax.add_patch(Rectangle(
            (region.top_left.x, region.top_left.y),
            region.dimension.width,
            region.dimension.height,
            fill=False,
            edgecolor='red',
            linewidth=1.5,
        ))
    ax.set_title(title)
    ax.set_xlabel('X')
    ax.set_ylabel('Y')
    return fig, ax
