"""Plain-text PPM (P3) encoding for canvases.

The output is a three-line header followed by pixel data:

    P3
    <width> <height>
    255
    r g b r g b ...

Each channel is clamped and scaled to an integer in [0, 255]: values below
0 become 0, values above 1 become 255, and everything else is v * 255
rounded half up. Each canvas row starts on a new line and is wrapped
greedily at spaces so that no line exceeds 70 characters. The text always
ends with a newline.

Writing the text to disk is left to the caller:

    >>> from pathlib import Path
    >>> Path("out.ppm").write_text(canvas_to_ppm(canvas))  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import textwrap
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt

from raykernel.errors import NumericDegenerate

if TYPE_CHECKING:
    from raykernel.image.canvas import Canvas

logger = logging.getLogger(__name__)

PPM_MAGIC = "P3"
PPM_MAX_COLOR_VALUE = 255
PPM_MAX_LINE_LENGTH = 70


def scale_channels(
    pixels: npt.ArrayLike,
    *,
    max_value: int = PPM_MAX_COLOR_VALUE,
) -> npt.NDArray[np.int64]:
    """Convert linear float channels to clamped integers in [0, max_value].

    Args:
        pixels: Array of linear channel values, any shape.
        max_value: Largest output value (default 255).

    Returns:
        Integer array of the same shape.

    Raises:
        NumericDegenerate: If any channel is NaN.
    """
    values = np.asarray(pixels, dtype=np.float64)
    if np.isnan(values).any():
        raise NumericDegenerate("Cannot encode NaN color channels")
    scaled = np.floor(values * max_value + 0.5)
    return np.clip(scaled, 0, max_value).astype(np.int64)


def _wrap_row(channels: npt.NDArray[np.int64], max_line_length: int) -> list[str]:
    return textwrap.wrap(
        " ".join(str(v) for v in channels),
        width=max_line_length,
        break_long_words=False,
        break_on_hyphens=False,
    )


def canvas_to_ppm(
    canvas: Canvas,
    *,
    max_line_length: int = PPM_MAX_LINE_LENGTH,
) -> str:
    """Encode a canvas as plain-text PPM.

    Args:
        canvas: The canvas to encode.
        max_line_length: Longest allowed pixel-data line (default 70).

    Returns:
        The PPM text, ending with a newline.

    Example:
        >>> from raykernel.image.canvas import Canvas
        >>> canvas_to_ppm(Canvas(5, 3)).startswith("P3\\n5 3\\n255\\n")
        True
    """
    channels = scale_channels(canvas.to_numpy())
    lines = [PPM_MAGIC, f"{canvas.width} {canvas.height}", str(PPM_MAX_COLOR_VALUE)]
    for row in channels:
        lines.extend(_wrap_row(row.ravel(), max_line_length))
    logger.debug("Encoded %dx%d canvas as %d PPM lines", canvas.width, canvas.height, len(lines))
    return "\n".join(lines) + "\n"
