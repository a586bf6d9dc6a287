"""Square matrices for affine transformations.

Matrix wraps an immutable float64 NumPy array. Any square size is
supported so that determinants can be computed by cofactor expansion
(4x4 -> 3x3 -> 2x2), but the ray tracer itself works with 4x4 matrices
that act on homogeneous Tuples.

Multiplication uses the ``@`` operator:

    Matrix @ Matrix -> Matrix
    Matrix @ Tuple  -> Tuple

Composition order: ``C @ B @ A`` applies A first, then B, then C. The
fluent helpers (translate, scale, rotate_*, shear) left-multiply, so a
chain reads in application order instead:

    >>> from whitted.core.matrix import identity
    >>> from whitted.core.tuples import point
    >>> import math
    >>> m = identity().rotate_x(math.pi / 2).scale(5, 5, 5).translate(10, 5, 7)
    >>> m @ point(1.0, 0.0, 1.0) == point(15.0, 0.0, 7.0)
    True
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

from whitted.config import DETERMINANT_EPSILON, EPSILON
from whitted.core.tuples import Tuple
from whitted.errors import SingularMatrixError


class Matrix:
    """An immutable square matrix of float64 values.

    Attributes:
        size: Number of rows (equal to the number of columns).
    """

    __slots__ = ("_data",)

    def __init__(self, rows: Sequence[Sequence[float]] | npt.NDArray[np.float64]) -> None:
        """Create a matrix from nested rows.

        Args:
            rows: A square, non-empty nested sequence (or 2D array).

        Raises:
            ValueError: If the rows are ragged, empty or not square.
        """
        try:
            data = np.array(rows, dtype=np.float64)
        except ValueError as exc:
            raise ValueError("Matrix rows must all have the same length") from exc

        if data.ndim != 2 or data.shape[0] == 0 or data.shape[0] != data.shape[1]:
            raise ValueError(f"Matrix must be square and non-empty, got shape {data.shape}")

        data.setflags(write=False)
        self._data = data

    @property
    def size(self) -> int:
        return int(self._data.shape[0])

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return float(self._data[row, col])

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a writable copy of the underlying array."""
        return self._data.copy()

    def to_list(self) -> list[list[float]]:
        return self._data.tolist()

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __matmul__(self, other: Matrix | Tuple) -> Matrix | Tuple:
        if isinstance(other, Matrix):
            if other.size != self.size:
                raise ValueError(f"Cannot multiply {self.size}x{self.size} by {other.size}x{other.size}")
            return Matrix(self._data @ other._data)

        if isinstance(other, Tuple):
            if self.size != 4:
                raise ValueError(f"Only 4x4 matrices can transform tuples, got {self.size}x{self.size}")
            x, y, z, w = self._data @ np.array((other.x, other.y, other.z, other.w))
            return Tuple(x, y, z, w)

        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if other.size != self.size:
            return False
        return bool(np.all(np.abs(self._data - other._data) < EPSILON))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows = ", ".join(str(row) for row in self._data.tolist())
        return f"Matrix([{rows}])"

    def transpose(self) -> Matrix:
        return Matrix(self._data.T)

    # -------------------------------------------------------------------------
    # Determinant and inverse (cofactor expansion)
    # -------------------------------------------------------------------------

    def submatrix(self, row: int, col: int) -> Matrix:
        """Return a copy with the given row and column removed.

        Raises:
            ValueError: If the matrix is too small to have a submatrix.
        """
        if self.size < 2:
            raise ValueError("A 1x1 matrix has no submatrix")
        reduced = np.delete(np.delete(self._data, row, axis=0), col, axis=1)
        return Matrix(reduced)

    def minor(self, row: int, col: int) -> float:
        """Determinant of the submatrix at (row, col)."""
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        """The minor at (row, col), negated when row + col is odd."""
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 else minor

    def determinant(self) -> float:
        m = self._data
        if self.size == 1:
            return float(m[0, 0])
        if self.size == 2:
            return float(m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0])
        return sum(float(m[0, c]) * self.cofactor(0, c) for c in range(self.size))

    def is_invertible(self) -> bool:
        return abs(self.determinant()) >= DETERMINANT_EPSILON

    def inverse(self) -> Matrix:
        """Invert the matrix via its adjugate.

        Returns:
            The inverse matrix, such that ``M @ M.inverse()`` is identity.

        Raises:
            SingularMatrixError: If the determinant is within
                DETERMINANT_EPSILON of zero.
        """
        det = self.determinant()
        if abs(det) < DETERMINANT_EPSILON:
            raise SingularMatrixError(f"Matrix is not invertible (determinant={det!r})")

        n = self.size
        cofactors = np.empty((n, n), dtype=np.float64)
        for row in range(n):
            for col in range(n):
                cofactors[row, col] = self.cofactor(row, col)

        # The adjugate is the transposed cofactor matrix
        return Matrix(cofactors.T / det)

    # -------------------------------------------------------------------------
    # Fluent transformation chaining (each call left-multiplies)
    # -------------------------------------------------------------------------

    def translate(self, x: float, y: float, z: float) -> Matrix:
        from whitted.core.transform import translation

        return translation(x, y, z) @ self

    def scale(self, x: float, y: float, z: float) -> Matrix:
        from whitted.core.transform import scaling

        return scaling(x, y, z) @ self

    def rotate_x(self, radians: float) -> Matrix:
        from whitted.core.transform import rotation_x

        return rotation_x(radians) @ self

    def rotate_y(self, radians: float) -> Matrix:
        from whitted.core.transform import rotation_y

        return rotation_y(radians) @ self

    def rotate_z(self, radians: float) -> Matrix:
        from whitted.core.transform import rotation_z

        return rotation_z(radians) @ self

    def shear(self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
        from whitted.core.transform import shearing

        return shearing(xy, xz, yx, yz, zx, zy) @ self


def identity(size: int = 4) -> Matrix:
    """Return the identity matrix of the given size."""
    return Matrix(np.identity(size, dtype=np.float64))


IDENTITY = identity()
