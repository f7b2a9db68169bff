"""Immutable square matrices and affine transform composition.

Matrices are stored as read-only NumPy arrays and every operation returns a
new Matrix. The renderer only needs 2x2 through 4x4 matrices; 4x4 is the
canonical size for spatial transforms.

The determinant and inverse are computed with classical cofactor expansion
rather than LU decomposition, so an inverse is exactly the adjugate divided
by the determinant.

Multiplying with ``@``:
    - Matrix @ Matrix: standard row-by-column product.
    - Matrix @ Point: the point is treated as a homogeneous column (w = 1).
    - Matrix @ Vector: the vector is treated as a homogeneous column (w = 0),
      so translations do not affect it.

Example:
    >>> import math
    >>> from raytracer.core.transformations import rotation_x, scaling, translation
    >>> # Read left to right: rotate, then scale, then translate
    >>> transform = rotation_x(math.pi / 2).then(scaling(5, 5, 5)).then(translation(10, 5, 7))
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import overload

import numpy as np
import numpy.typing as npt

from raytracer.core.approximate import EPSILON
from raytracer.core.tuples import Point, Vector


class NonInvertibleMatrixError(ValueError):
    """Raised when inverting a matrix whose determinant is exactly zero."""


class Matrix:
    """An immutable rows x columns grid of floats.

    Attributes:
        rows: Number of rows.
        columns: Number of columns.
    """

    __slots__ = ("_values", "_inverse")

    def __init__(self, rows: int, columns: int, values: Iterable[float]) -> None:
        """Create a matrix from a flat, row-major list of values.

        Args:
            rows: Number of rows (positive).
            columns: Number of columns (positive).
            values: rows * columns numbers in row-major order.

        Raises:
            ValueError: If the number of values does not match the shape.
        """
        flat = np.asarray(list(values), dtype=np.float64)
        if rows <= 0 or columns <= 0:
            raise ValueError(f"Matrix dimensions must be positive, got {rows}x{columns}")
        if flat.size != rows * columns:
            raise ValueError(
                f"A {rows}x{columns} matrix needs {rows * columns} values, got {flat.size}"
            )
        array = flat.reshape(rows, columns)
        array.setflags(write=False)
        self._values = array
        self._inverse: Matrix | None = None

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, rows: int, columns: int, values: Iterable[float]) -> Matrix:
        return cls(rows, columns, values)

    @classmethod
    def square(cls, size: int, values: Iterable[float]) -> Matrix:
        return cls(size, size, values)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        """Create a matrix from a list of equally sized rows."""
        columns = len(rows[0]) if rows else 0
        if any(len(row) != columns for row in rows):
            raise ValueError("All rows must have the same length")
        return cls(len(rows), columns, (value for row in rows for value in row))

    @classmethod
    def identity(cls, size: int = 4) -> Matrix:
        return cls._wrap(np.identity(size, dtype=np.float64))

    @classmethod
    def _wrap(cls, array: npt.NDArray[np.float64]) -> Matrix:
        rows, columns = array.shape
        return cls(rows, columns, array.ravel())

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return int(self._values.shape[0])

    @property
    def columns(self) -> int:
        return int(self._values.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.columns)

    def get(self, row: int, column: int) -> float:
        return float(self._values[row, column])

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, column = index
        return self.get(row, column)

    def row(self, index: int) -> tuple[float, ...]:
        return tuple(float(v) for v in self._values[index, :])

    def column(self, index: int) -> tuple[float, ...]:
        return tuple(float(v) for v in self._values[:, index])

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a writable copy of the underlying values."""
        return self._values.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return bool(np.all(np.abs(self._values - other._values) < EPSILON))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows = ", ".join(str(list(self.row(r))) for r in range(self.rows))
        return f"Matrix({self.rows}x{self.columns}: [{rows}])"

    # -------------------------------------------------------------------------
    # Multiplication
    # -------------------------------------------------------------------------

    @overload
    def __matmul__(self, other: Matrix) -> Matrix: ...

    @overload
    def __matmul__(self, other: Point) -> Point: ...

    @overload
    def __matmul__(self, other: Vector) -> Vector: ...

    def __matmul__(self, other: Matrix | Point | Vector) -> Matrix | Point | Vector:
        if isinstance(other, Matrix):
            if self.columns != other.rows:
                raise ValueError(
                    f"Cannot multiply a {self.rows}x{self.columns} matrix "
                    f"by a {other.rows}x{other.columns} matrix"
                )
            return Matrix._wrap(self._values @ other._values)
        if isinstance(other, Point):
            x, y, z = self._apply(other.as_homogeneous())
            return Point(x, y, z)
        if isinstance(other, Vector):
            x, y, z = self._apply(other.as_homogeneous())
            return Vector(x, y, z)
        return NotImplemented

    def _apply(self, homogeneous: tuple[float, float, float, float]) -> tuple[float, ...]:
        """Multiply a tuple column and project it back to three components."""
        if self.columns == 4:
            column = np.asarray(homogeneous, dtype=np.float64)
        elif self.columns == 3:
            # 3x3 matrices (e.g. normal matrices) act on x, y, z directly
            column = np.asarray(homogeneous[:3], dtype=np.float64)
        else:
            raise ValueError(f"Cannot apply a {self.rows}x{self.columns} matrix to a tuple")
        result = self._values @ column
        return (float(result[0]), float(result[1]), float(result[2]))

    def then(self, following: Matrix) -> Matrix:
        """Compose transforms in application order.

        ``a.then(b)`` is the transform that applies ``a`` first and ``b``
        second, i.e. ``b @ a``.
        """
        return following @ self

    # -------------------------------------------------------------------------
    # Linear algebra
    # -------------------------------------------------------------------------

    def transpose(self) -> Matrix:
        return Matrix._wrap(self._values.T)

    def submatrix(self, row: int, column: int) -> Matrix:
        """Return a copy with the given row and column removed."""
        reduced = np.delete(np.delete(self._values, row, axis=0), column, axis=1)
        return Matrix._wrap(reduced)

    def determinant(self) -> float:
        """Compute the determinant by cofactor expansion along row 0."""
        if self.rows != self.columns:
            raise ValueError(f"Determinant is undefined for a {self.rows}x{self.columns} matrix")
        if self.rows == 1:
            return self.get(0, 0)
        if self.rows == 2:
            a, b, c, d = self._values.ravel()
            return float(a * d - b * c)
        return sum(self.get(0, c) * self.cofactor(0, c) for c in range(self.columns))

    def minor(self, row: int, column: int) -> float:
        return self.submatrix(row, column).determinant()

    def cofactor(self, row: int, column: int) -> float:
        minor = self.minor(row, column)
        return -minor if (row + column) % 2 else minor

    def invertible(self) -> bool:
        # Exact comparison: only a determinant of exactly zero is rejected.
        return self.determinant() != 0

    def inverse(self) -> Matrix:
        """Return the inverse matrix.

        The result is cached on the instance since matrices never change.

        Raises:
            NonInvertibleMatrixError: If the determinant is exactly zero.
        """
        if self._inverse is None:
            determinant = self.determinant()
            if determinant == 0:
                raise NonInvertibleMatrixError(f"Cannot invert uninvertible matrix {self!r}")
            size = self.rows
            # inv[r, c] = cofactor(c, r) / det, i.e. the transposed cofactor matrix
            values = [
                self.cofactor(column, row) / determinant
                for row in range(size)
                for column in range(size)
            ]
            self._inverse = Matrix(size, size, values)
        return self._inverse
