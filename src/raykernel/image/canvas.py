"""Pixel canvas.

A Canvas is a width x height grid of colors, black by default, stored as a
float64 numpy array of shape (height, width, 3) in row-major order. Values
are linear and unclamped; clamping happens only when the canvas is encoded.

Coordinates are (x, y) with x growing to the right and y growing down.
Reads and writes outside the grid raise OutOfRange instead of wrapping the
way negative numpy indices would.

Example:
    >>> from raykernel.core.color import Color
    >>> from raykernel.image.canvas import Canvas
    >>> canvas = Canvas(10, 20)
    >>> canvas.write_px(2, 3, Color(1, 0, 0))
    >>> canvas.px(2, 3)
    Color(1.0, 0.0, 0.0)
"""

from __future__ import annotations

import logging
import operator

import numpy as np
import numpy.typing as npt

from raykernel.core.color import Color
from raykernel.errors import OutOfRange

logger = logging.getLogger(__name__)


class Canvas:
    """A mutable grid of colors.

    Args:
        width: Number of columns (non-negative).
        height: Number of rows (non-negative).

    Raises:
        ValueError: If either dimension is negative.
    """

    __slots__ = ("_width", "_height", "_pixels")

    def __init__(self, width: int, height: int) -> None:
        width, height = operator.index(width), operator.index(height)
        if width < 0 or height < 0:
            raise ValueError(f"Canvas dimensions must be non-negative, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels: npt.NDArray[np.float64] = np.zeros((height, width, 3), dtype=np.float64)
        logger.debug("Created %dx%d canvas", width, height)

    @property
    def width(self) -> int:
        """Get the canvas width in pixels."""
        return self._width

    @property
    def height(self) -> int:
        """Get the canvas height in pixels."""
        return self._height

    def _check(self, x: int, y: int) -> tuple[int, int]:
        x, y = operator.index(x), operator.index(y)
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise OutOfRange(f"Out of range: ({x}, {y}) for size ({self._width}, {self._height})")
        return x, y

    def px(self, x: int, y: int) -> Color:
        """Read the color at (x, y).

        Raises:
            OutOfRange: If (x, y) lies outside the canvas.
        """
        x, y = self._check(x, y)
        r, g, b = self._pixels[y, x]
        return Color(r, g, b)

    def write_px(self, x: int, y: int, color: Color) -> None:
        """Write a color at (x, y).

        Raises:
            OutOfRange: If (x, y) lies outside the canvas.
        """
        x, y = self._check(x, y)
        self._pixels[y, x] = (color.r, color.g, color.b)

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a copy of the pixel buffer, shape (height, width, 3)."""
        return self._pixels.copy()

    def __repr__(self) -> str:
        return f"Canvas({self._width}, {self._height})"
