"""Image module for pixel buffers and their text encoding.

Components:
    canvas: Bounds-checked width x height color grid
    ppm: Plain-text PPM (P3) encoder with clamping and line wrapping

The kernel never touches the filesystem; callers write the encoded text:

    >>> from pathlib import Path
    >>> from raykernel.image import Canvas, canvas_to_ppm
    >>> Path("image.ppm").write_text(canvas_to_ppm(Canvas(5, 3)))  # doctest: +SKIP
"""

from .canvas import Canvas
from .ppm import PPM_MAX_COLOR_VALUE, PPM_MAX_LINE_LENGTH, canvas_to_ppm, scale_channels

__all__ = [
    "Canvas",
    "canvas_to_ppm",
    "scale_channels",
    "PPM_MAX_COLOR_VALUE",
    "PPM_MAX_LINE_LENGTH",
]
