"""Small RGB raster image library.

Modules:
- kodak.coords: Location / Dimension / Region and coordinate conventions
- kodak.colour: 8-bit RGB colour value and named constants
- kodak.core.image / masks / pipeline: pixel buffer, region masks, step chains
- kodak.io.png / config: PNG codec boundary and pipeline configs
- kodak.viz.preview: plotting helpers without side effects (no plt.show inside)
"""
