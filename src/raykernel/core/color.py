"""RGB color values.

Colors are unclamped linear floats; values outside [0, 1] are legal and are
only clamped when an image is encoded.
"""

from __future__ import annotations

import numbers
from collections.abc import Iterator

from raykernel.core.floats import float_eq


class Color:
    """An immutable (r, g, b) triple.

    Supports addition, subtraction, scaling by a number, and the Hadamard
    (component-wise) product with another color.
    """

    __slots__ = ("_r", "_g", "_b")

    def __init__(self, r: float, g: float, b: float) -> None:
        self._r = float(r)
        self._g = float(g)
        self._b = float(b)

    @property
    def r(self) -> float:
        return self._r

    @property
    def g(self) -> float:
        return self._g

    @property
    def b(self) -> float:
        return self._b

    def __iter__(self) -> Iterator[float]:
        yield self._r
        yield self._g
        yield self._b

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return float_eq(self._r, other._r) and float_eq(self._g, other._g) and float_eq(self._b, other._b)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Color({self._r!r}, {self._g!r}, {self._b!r})"

    def __add__(self, other: object) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self._r + other._r, self._g + other._g, self._b + other._b)

    def __sub__(self, other: object) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self._r - other._r, self._g - other._g, self._b - other._b)

    def __mul__(self, other: object) -> Color:
        if isinstance(other, Color):
            # Hadamard product
            return Color(self._r * other._r, self._g * other._g, self._b * other._b)
        if isinstance(other, numbers.Real):
            s = float(other)
            return Color(self._r * s, self._g * s, self._b * s)
        return NotImplemented

    __rmul__ = __mul__


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
