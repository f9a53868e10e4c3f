"""
Vector entity: a fixed-size numeric buffer with in-place algebra.

Operations write into the receiver unless a destination vector is given, in
which case only the destination is written. Every mutating operation returns
the vector it wrote to.
"""

from copy import copy as shallow_copy

import jax.numpy as jnp
import numpy as np

from . import arithmetic, rotation
from .config import DEFAULT_CONFIG, AlgebraConfig
from .matrix import Matrix
from .primitives import (
    FLOAT_DTYPE,
    X_AXIS,
    Y_AXIS,
    Z_AXIS,
    Array,
    ArrayLike,
    FlatVector,
    FloatScalar,
    as_flat,
)
from .validation import (
    check_dimension,
    check_index,
    check_matrix,
    check_plane,
    check_vector,
)


class Vector:
    """n-dimensional vector backed by flat storage."""

    def __init__(
        self,
        n: int,
        values: ArrayLike | None = None,
        config: AlgebraConfig = DEFAULT_CONFIG,
    ) -> None:
        check_dimension(n)
        self.n = n
        self.config = config
        self.values: FlatVector = jnp.zeros(n, dtype=FLOAT_DTYPE)
        if values is not None:
            self.set(values)

    # Container protocol

    def __len__(self) -> int:
        return self.n

    def __getitem__(self, index):
        return self.values[check_index(index, self.n)]

    def __setitem__(self, index, value) -> None:
        self.values = self.values.at[check_index(index, self.n)].set(value)

    def __iter__(self):
        return iter(self.values)

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        return np.array(self.values, dtype=dtype, copy=copy)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.tolist()})"

    def tolist(self) -> list[float]:
        return [float(x) for x in self.values]

    def allclose(self, other: ArrayLike, atol: float = 1e-5) -> bool:
        """True if every component is within ``atol`` of ``other``."""
        other_values = as_flat(other)
        if other_values.shape != self.values.shape:
            return False
        return bool(jnp.allclose(self.values, other_values, atol=atol))

    # Helpers

    def _operand(self, other: ArrayLike, name: str = "operand") -> Array:
        values = other.values if isinstance(other, Vector) else as_flat(other)
        if self.config.check_dimensions:
            check_vector(values, self.n, name)
        return values

    def _write(self, result: FlatVector, dst: "Vector | None") -> "Vector":
        if dst is None:
            dst = self
        elif not isinstance(dst, Vector):
            raise TypeError(f"Destination must be a Vector, got {type(dst).__name__}")
        elif self.config.check_dimensions and dst.n != self.n:
            raise ValueError(f"Destination has dimension {dst.n}, expected {self.n}")
        dst.values = result
        return dst

    # Operations

    def set(self, values: ArrayLike) -> "Vector":
        """Overwrite every component from ``values``."""
        self.values = self._operand(values, "values")[: self.n]
        return self

    def add(self, vec: ArrayLike, dst: "Vector | None" = None) -> "Vector":
        result = arithmetic.add(self.values, self._operand(vec), self.n)
        return self._write(result, dst)

    def subtract(self, vec: ArrayLike, dst: "Vector | None" = None) -> "Vector":
        result = arithmetic.subtract(self.values, self._operand(vec), self.n)
        return self._write(result, dst)

    def scale(self, factor: float, dst: "Vector | None" = None) -> "Vector":
        result = arithmetic.scale(self.values, factor, self.n)
        return self._write(result, dst)

    def length(self) -> FloatScalar:
        """Euclidean norm."""
        return arithmetic.length(self.values, self.n)

    def dot(self, vec: ArrayLike) -> FloatScalar:
        return arithmetic.dot(self.values, self._operand(vec), self.n)

    def normalize(self, dst: "Vector | None" = None) -> "Vector":
        """
        Scale to unit length.

        A zero-length vector produces non-finite components; there is no guard.
        """
        return self.scale(1.0 / self.length(), dst)

    def multiply_by_matrix(self, mat: ArrayLike, dst: "Vector | None" = None) -> "Vector":
        """Multiply as a row vector on the right by an n x n matrix."""
        mat_values = mat.values if isinstance(mat, Matrix) else as_flat(mat)
        if self.config.check_dimensions:
            check_matrix(mat_values, self.n)
        result = arithmetic.vector_times_matrix(self.values, mat_values, self.n)
        return self._write(result, dst)

    def copy(self) -> "Vector":
        """Independent vector of the same concrete type and contents."""
        return shallow_copy(self)

    def _rotate_about(self, axis: int, angle: float, dst: "Vector | None") -> "Vector":
        a_axis, b_axis = self.config.planes.plane(axis)
        if self.config.check_dimensions:
            check_plane((a_axis, b_axis), self.n)
        result = rotation.rotate_vector(self.values, angle, self.n, a_axis, b_axis)
        return self._write(result, dst)

    def rotate_about_x(self, angle: float, dst: "Vector | None" = None) -> "Vector":
        return self._rotate_about(X_AXIS, angle, dst)

    def rotate_about_y(self, angle: float, dst: "Vector | None" = None) -> "Vector":
        return self._rotate_about(Y_AXIS, angle, dst)

    def rotate_about_z(self, angle: float, dst: "Vector | None" = None) -> "Vector":
        return self._rotate_about(Z_AXIS, angle, dst)


class Vector2(Vector):
    """2-dimensional vector."""

    def __init__(
        self,
        values: ArrayLike | None = None,
        config: AlgebraConfig = DEFAULT_CONFIG,
    ) -> None:
        super().__init__(2, values, config)

    def rotate(self, angle: float, dst: Vector | None = None) -> Vector:
        """Rotate in the plane (alias of ``rotate_about_z``)."""
        return self.rotate_about_z(angle, dst)


class Vector3(Vector):
    """3-dimensional vector."""

    def __init__(
        self,
        values: ArrayLike | None = None,
        config: AlgebraConfig = DEFAULT_CONFIG,
    ) -> None:
        super().__init__(3, values, config)


class Vector4(Vector):
    """4-dimensional vector."""

    def __init__(
        self,
        values: ArrayLike | None = None,
        config: AlgebraConfig = DEFAULT_CONFIG,
    ) -> None:
        super().__init__(4, values, config)
