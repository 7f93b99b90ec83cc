"""Square matrices of order 1-4 and the affine transform builder.

The Matrix class stores its values in a read-only numpy float64 array of
shape (order, order). Determinants and inverses use cofactor expansion,
which is exact enough and cheap enough for the small fixed orders a ray
tracer needs; it is not meant as a general linear-algebra path.

Affine transforms are built by chaining builder calls on a matrix. Each
call left-multiplies the new transform, so the operations are applied to a
point in the order they are written:

    >>> from math import pi
    >>> from raykernel.core.matrix import Matrix
    >>> from raykernel.core.tuples import Point
    >>> m = Matrix.identity().rotate_x(pi / 2).scale(5, 5, 5).translate(10, 5, 7)
    >>> m @ Point(1, 0, 1) == Point(15, 0, 7)
    True

which is the same as translation @ scaling @ rotation.
"""

from __future__ import annotations

import logging
import math
import operator
from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

from raykernel.core.floats import EPSILON
from raykernel.core.tuples import Tuple4
from raykernel.errors import ContractViolation, OutOfRange, SingularMatrix

logger = logging.getLogger(__name__)

# Orders handled by the cofactor expansion. Order 1 only appears as the
# submatrix of an order-2 matrix.
SUPPORTED_ORDERS = (1, 2, 3, 4)

# Matrices whose |determinant| falls below this are treated as singular.
INVERSE_TOLERANCE = EPSILON


def _xyz(x: float | Tuple4 | Sequence[float], y: float | None, z: float | None) -> tuple[float, float, float]:
    """Accept either three numbers or a single tuple-like argument."""
    if y is None and z is None:
        if isinstance(x, Tuple4):
            return x.x, x.y, x.z
        components = list(x)  # type: ignore[arg-type]
        if len(components) != 3:
            raise ValueError(f"Expected 3 components, got {len(components)}")
        return float(components[0]), float(components[1]), float(components[2])
    if y is None or z is None:
        raise TypeError("Expected a tuple or three components (x, y, z)")
    return float(x), float(y), float(z)  # type: ignore[arg-type]


class Matrix:
    """An immutable square matrix of order 1, 2, 3 or 4.

    Args:
        values: Nested rows, a 2-D array, or a flat row-major sequence of
            order**2 values (the order is inferred).

    Raises:
        ValueError: If the values are not square or the order is unsupported.

    Example:
        >>> m = Matrix([[1, 2], [3, 4]])
        >>> m.determinant()
        -2.0
        >>> Matrix([1, 2, 3, 4]) == m
        True
    """

    __slots__ = ("_data",)

    def __init__(self, values: Sequence[float] | Sequence[Sequence[float]] | npt.ArrayLike) -> None:
        data = np.array(values, dtype=np.float64)
        if data.ndim == 1:
            order = math.isqrt(data.size)
            if order * order != data.size:
                raise ValueError(f"Flat matrix data must have a square number of values, got {data.size}")
            data = data.reshape(order, order)
        elif data.ndim != 2 or data.shape[0] != data.shape[1]:
            raise ValueError(f"Matrix data must be square, got shape {data.shape}")
        if data.shape[0] not in SUPPORTED_ORDERS:
            raise ValueError(f"Unsupported matrix order {data.shape[0]}; expected one of {SUPPORTED_ORDERS}")
        data.flags.writeable = False
        self._data = data

    @classmethod
    def _wrap(cls, data: npt.NDArray[np.float64]) -> Matrix:
        """Adopt an already validated array without copying."""
        matrix = cls.__new__(cls)
        data.flags.writeable = False
        matrix._data = data
        return matrix

    @classmethod
    def identity(cls, order: int = 4) -> Matrix:
        """Return the identity matrix of the given order."""
        if order not in SUPPORTED_ORDERS:
            raise ValueError(f"Unsupported matrix order {order}; expected one of {SUPPORTED_ORDERS}")
        return cls._wrap(np.identity(order, dtype=np.float64))

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    @property
    def order(self) -> int:
        return self._data.shape[0]

    def _check_index(self, row: int, col: int) -> tuple[int, int]:
        row, col = operator.index(row), operator.index(col)
        order = self.order
        if not (0 <= row < order and 0 <= col < order):
            raise OutOfRange(f"Index ({row}, {col}) out of range for a matrix of order {order}")
        return row, col

    def get(self, row: int, col: int) -> float:
        """Return the element at (row, col).

        Raises:
            OutOfRange: If either index is outside [0, order).
        """
        row, col = self._check_index(row, col)
        return float(self._data[row, col])

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = key
        return self.get(row, col)

    def rows(self) -> tuple[tuple[float, ...], ...]:
        return tuple(tuple(float(v) for v in row) for row in self._data)

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a writable copy of the underlying (order, order) array."""
        return self._data.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.allclose(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self._data.tolist()!r})"

    def allclose(self, other: Matrix, *, epsilon: float = EPSILON) -> bool:
        """Return True if every element differs from other's by less than epsilon."""
        if self.order != other.order:
            return False
        return bool(np.all(np.abs(self._data - other._data) < epsilon))

    # -------------------------------------------------------------------------
    # Products
    # -------------------------------------------------------------------------

    def __matmul__(self, other: object) -> Matrix | Tuple4:
        if isinstance(other, Matrix):
            if other.order != self.order:
                raise ContractViolation(
                    f"Cannot multiply a matrix of order {self.order} by one of order {other.order}"
                )
            return Matrix._wrap(self._data @ other._data)
        if isinstance(other, Tuple4):
            if self.order != 4:
                raise ContractViolation(f"Tuple products need an order-4 matrix, got order {self.order}")
            x, y, z, w = (float(v) for v in self._data @ other.to_numpy())
            return Tuple4.from_components(x, y, z, w)
        return NotImplemented

    # The chapter programs write products with "*"; accept both spellings.
    __mul__ = __matmul__

    def transpose(self) -> Matrix:
        return Matrix._wrap(self._data.T.copy())

    # -------------------------------------------------------------------------
    # Determinant and inverse
    # -------------------------------------------------------------------------

    def submatrix(self, row: int, col: int) -> Matrix:
        """Return the order-1 smaller matrix with the given row and column removed."""
        row, col = self._check_index(row, col)
        if self.order == 1:
            raise ContractViolation("A matrix of order 1 has no submatrix")
        data = np.delete(np.delete(self._data, row, axis=0), col, axis=1)
        return Matrix._wrap(data)

    def minor(self, row: int, col: int) -> float:
        """Determinant of the submatrix at (row, col)."""
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        """Minor at (row, col), negated when row + col is odd."""
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 else minor

    def determinant(self) -> float:
        """Determinant by cofactor expansion along row 0."""
        if self.order == 1:
            return float(self._data[0, 0])
        return sum(float(self._data[0, col]) * self.cofactor(0, col) for col in range(self.order))

    def is_invertible(self) -> bool:
        return abs(self.determinant()) >= INVERSE_TOLERANCE

    def inverse(self) -> Matrix:
        """Return the inverse, computed as adjugate / determinant.

        Raises:
            SingularMatrix: If |determinant| is below INVERSE_TOLERANCE.
        """
        det = self.determinant()
        if abs(det) < INVERSE_TOLERANCE:
            logger.debug("Refusing to invert order-%d matrix with determinant %r", self.order, det)
            raise SingularMatrix(det)
        if self.order == 1:
            return Matrix._wrap(np.array([[1.0 / det]]))
        n = self.order
        cofactors = np.array([[self.cofactor(r, c) for c in range(n)] for r in range(n)], dtype=np.float64)
        # adjugate(i, j) = cofactor(j, i)
        return Matrix._wrap(cofactors.T / det)

    # -------------------------------------------------------------------------
    # Affine transforms
    # -------------------------------------------------------------------------

    @classmethod
    def translation(cls, x: float | Tuple4 | Sequence[float], y: float | None = None, z: float | None = None) -> Matrix:
        tx, ty, tz = _xyz(x, y, z)
        data = np.identity(4, dtype=np.float64)
        data[0:3, 3] = (tx, ty, tz)
        return cls._wrap(data)

    @classmethod
    def scaling(cls, x: float | Tuple4 | Sequence[float], y: float | None = None, z: float | None = None) -> Matrix:
        sx, sy, sz = _xyz(x, y, z)
        return cls._wrap(np.diag([sx, sy, sz, 1.0]).astype(np.float64))

    @classmethod
    def rotation_x(cls, radians: float) -> Matrix:
        c, s = math.cos(radians), math.sin(radians)
        return cls._wrap(
            np.array(
                [
                    [1.0, 0.0, 0.0, 0.0],
                    [0.0, c, -s, 0.0],
                    [0.0, s, c, 0.0],
                    [0.0, 0.0, 0.0, 1.0],
                ]
            )
        )

    @classmethod
    def rotation_y(cls, radians: float) -> Matrix:
        c, s = math.cos(radians), math.sin(radians)
        return cls._wrap(
            np.array(
                [
                    [c, 0.0, s, 0.0],
                    [0.0, 1.0, 0.0, 0.0],
                    [-s, 0.0, c, 0.0],
                    [0.0, 0.0, 0.0, 1.0],
                ]
            )
        )

    @classmethod
    def rotation_z(cls, radians: float) -> Matrix:
        c, s = math.cos(radians), math.sin(radians)
        return cls._wrap(
            np.array(
                [
                    [c, -s, 0.0, 0.0],
                    [s, c, 0.0, 0.0],
                    [0.0, 0.0, 1.0, 0.0],
                    [0.0, 0.0, 0.0, 1.0],
                ]
            )
        )

    @classmethod
    def shearing(cls, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
        """Shear each axis in proportion to the other two.

        Args:
            xy: Moves x in proportion to y.
            xz: Moves x in proportion to z.
            yx: Moves y in proportion to x.
            yz: Moves y in proportion to z.
            zx: Moves z in proportion to x.
            zy: Moves z in proportion to y.
        """
        return cls._wrap(
            np.array(
                [
                    [1.0, xy, xz, 0.0],
                    [yx, 1.0, yz, 0.0],
                    [zx, zy, 1.0, 0.0],
                    [0.0, 0.0, 0.0, 1.0],
                ],
                dtype=np.float64,
            )
        )

    def _then(self, transform: Matrix, operation: str) -> Matrix:
        if self.order != 4:
            raise ContractViolation(f"{operation}() needs an order-4 matrix, got order {self.order}")
        return Matrix._wrap(transform._data @ self._data)

    def translate(self, x: float | Tuple4 | Sequence[float], y: float | None = None, z: float | None = None) -> Matrix:
        return self._then(Matrix.translation(x, y, z), "translate")

    def scale(self, x: float | Tuple4 | Sequence[float], y: float | None = None, z: float | None = None) -> Matrix:
        return self._then(Matrix.scaling(x, y, z), "scale")

    def rotate_x(self, radians: float) -> Matrix:
        return self._then(Matrix.rotation_x(radians), "rotate_x")

    def rotate_y(self, radians: float) -> Matrix:
        return self._then(Matrix.rotation_y(radians), "rotate_y")

    def rotate_z(self, radians: float) -> Matrix:
        return self._then(Matrix.rotation_z(radians), "rotate_z")

    def shear(self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
        return self._then(Matrix.shearing(xy, xz, yx, yz, zx, zy), "shear")
