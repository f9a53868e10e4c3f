"""
Matrix entity: a square n x n numeric buffer stored flat in row-major order.

Follows the same destination convention as Vector: results are written into
the receiver unless a destination matrix is given.
"""

from copy import copy as shallow_copy

import jax.numpy as jnp
import numpy as np

from . import arithmetic, rotation, translation
from .config import DEFAULT_CONFIG, AlgebraConfig
from .primitives import (
    FLOAT_DTYPE,
    X_AXIS,
    Y_AXIS,
    Z_AXIS,
    Array,
    ArrayLike,
    FlatMatrix,
    FloatScalar,
    as_flat,
    identity,
)
from .validation import (
    check_dimension,
    check_index,
    check_matrix,
    check_plane,
    check_vector,
)


class Matrix:
    """n x n matrix backed by flat row-major storage."""

    def __init__(
        self,
        n: int,
        values: ArrayLike | None = None,
        config: AlgebraConfig = DEFAULT_CONFIG,
    ) -> None:
        check_dimension(n)
        self.n = n
        self.config = config
        self.values: FlatMatrix = jnp.zeros(n * n, dtype=FLOAT_DTYPE)
        if values is not None:
            self.set(values)

    @classmethod
    def identity(cls, n: int, config: AlgebraConfig = DEFAULT_CONFIG) -> "Matrix":
        return cls(n, identity(n), config)

    # Container protocol

    def __len__(self) -> int:
        return self.n * self.n

    def __getitem__(self, index):
        return self.values[check_index(index, self.n * self.n)]

    def __setitem__(self, index, value) -> None:
        self.values = self.values.at[check_index(index, self.n * self.n)].set(value)

    def __iter__(self):
        return iter(self.values)

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        return np.array(self.values, dtype=dtype, copy=copy)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rows()})"

    def tolist(self) -> list[float]:
        return [float(x) for x in self.values]

    def rows(self) -> list[list[float]]:
        """Entries as a list of rows."""
        n = self.n
        flat = self.tolist()
        return [flat[row * n : (row + 1) * n] for row in range(n)]

    def entry(self, row: int, col: int) -> FloatScalar:
        return self.values[row * self.n + col]

    def allclose(self, other: ArrayLike, atol: float = 1e-5) -> bool:
        """True if every entry is within ``atol`` of ``other`` (flat or nested)."""
        other_values = as_flat(other)
        if other_values.shape != self.values.shape:
            return False
        return bool(jnp.allclose(self.values, other_values, atol=atol))

    # Helpers

    def _matrix_operand(self, other: ArrayLike, name: str = "matrix") -> Array:
        values = other.values if isinstance(other, Matrix) else as_flat(other)
        if self.config.check_dimensions:
            check_matrix(values, self.n, name)
        return values

    def _write(self, result: FlatMatrix, dst: "Matrix | None") -> "Matrix":
        if dst is None:
            dst = self
        elif not isinstance(dst, Matrix):
            raise TypeError(f"Destination must be a Matrix, got {type(dst).__name__}")
        elif self.config.check_dimensions and dst.n != self.n:
            raise ValueError(f"Destination has dimension {dst.n}, expected {self.n}")
        dst.values = result
        return dst

    # Operations

    def set(self, values: ArrayLike) -> "Matrix":
        """Overwrite every entry from flat row-major or nested row values."""
        self.values = self._matrix_operand(values, "values")[: self.n * self.n]
        return self

    def multiply_by_matrix(self, mat: ArrayLike, dst: "Matrix | None" = None) -> "Matrix":
        """Right-multiply by ``mat``: ``result = self @ mat``."""
        result = arithmetic.matrix_times_matrix(
            self.values, self._matrix_operand(mat), self.n
        )
        return self._write(result, dst)

    def translate(self, vec: ArrayLike, dst: "Matrix | None" = None) -> "Matrix":
        """Add ``vec`` to the last row (homogeneous translation)."""
        vec_values = as_flat(vec)
        if self.config.check_dimensions:
            check_vector(vec_values, self.n, "translation")
        result = translation.translate_matrix(self.values, vec_values, self.n)
        return self._write(result, dst)

    def copy(self) -> "Matrix":
        """Independent matrix of the same concrete type and contents."""
        return shallow_copy(self)

    def _rotate_about(self, axis: int, angle: float, dst: "Matrix | None") -> "Matrix":
        a_axis, b_axis = self.config.planes.plane(axis)
        if self.config.check_dimensions:
            check_plane((a_axis, b_axis), self.n)
        result = rotation.rotate_matrix(self.values, angle, self.n, a_axis, b_axis)
        return self._write(result, dst)

    def rotate_about_x(self, angle: float, dst: "Matrix | None" = None) -> "Matrix":
        return self._rotate_about(X_AXIS, angle, dst)

    def rotate_about_y(self, angle: float, dst: "Matrix | None" = None) -> "Matrix":
        return self._rotate_about(Y_AXIS, angle, dst)

    def rotate_about_z(self, angle: float, dst: "Matrix | None" = None) -> "Matrix":
        return self._rotate_about(Z_AXIS, angle, dst)


class Matrix2(Matrix):
    """2 x 2 matrix."""

    def __init__(
        self,
        values: ArrayLike | None = None,
        config: AlgebraConfig = DEFAULT_CONFIG,
    ) -> None:
        super().__init__(2, values, config)

    @classmethod
    def identity(cls, *, config: AlgebraConfig = DEFAULT_CONFIG) -> "Matrix2":
        return cls(identity(2), config)

    def rotate(self, angle: float, dst: Matrix | None = None) -> Matrix:
        """Rotate in the plane (alias of ``rotate_about_z``)."""
        return self.rotate_about_z(angle, dst)


class Matrix3(Matrix):
    """3 x 3 matrix."""

    def __init__(
        self,
        values: ArrayLike | None = None,
        config: AlgebraConfig = DEFAULT_CONFIG,
    ) -> None:
        super().__init__(3, values, config)

    @classmethod
    def identity(cls, *, config: AlgebraConfig = DEFAULT_CONFIG) -> "Matrix3":
        return cls(identity(3), config)


class Matrix4(Matrix):
    """4 x 4 matrix."""

    def __init__(
        self,
        values: ArrayLike | None = None,
        config: AlgebraConfig = DEFAULT_CONFIG,
    ) -> None:
        super().__init__(4, values, config)

    @classmethod
    def identity(cls, *, config: AlgebraConfig = DEFAULT_CONFIG) -> "Matrix4":
        return cls(identity(4), config)
