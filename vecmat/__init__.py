"""Vecmat - JAX-based small vector and matrix algebra for 2D-4D transforms."""

from vecmat.core.arithmetic import matrix_times_matrix, vector_times_matrix
from vecmat.core.config import DEFAULT_CONFIG, AlgebraConfig, AxisPlanes
from vecmat.core.matrix import Matrix, Matrix2, Matrix3, Matrix4
from vecmat.core.primitives import (
    AXIS_PLANES,
    EPS,
    FLOAT_DTYPE,
    X_AXIS,
    Y_AXIS,
    Z_AXIS,
    ArrayLike,
    identity,
)
from vecmat.core.rotation import (
    rotate_matrix,
    rotate_matrix_about,
    rotate_vector,
    rotate_vector_about,
    rotation_matrix,
    sin_cos_rotate_matrix,
    sin_cos_rotate_vector,
)
from vecmat.core.translation import translate_matrix
from vecmat.core.vector import Vector, Vector2, Vector3, Vector4


# Convenience functions
def vector(*components: float) -> Vector:
    """Create a vector whose dimension is the number of components given."""
    return Vector(len(components), components)


def matrix(rows: ArrayLike) -> Matrix:
    """Create a square matrix from nested rows."""
    n = len(rows)
    return Matrix(n, rows)


def transform(
    n: int,
    translation: ArrayLike | None = None,
    angle_x: float = 0.0,
    angle_y: float = 0.0,
    angle_z: float = 0.0,
) -> Matrix:
    """
    Build an n x n transform: rotations about X, Y then Z followed by a
    translation of the last row.
    """
    result = Matrix.identity(n)
    rotations = (
        (result.rotate_about_x, angle_x),
        (result.rotate_about_y, angle_y),
        (result.rotate_about_z, angle_z),
    )
    for rotate, angle in rotations:
        if angle != 0.0:
            rotate(angle)
    if translation is not None:
        result.translate(translation)
    return result


__all__ = [
    # Configuration classes
    "AlgebraConfig",
    "AxisPlanes",
    "DEFAULT_CONFIG",
    # Constants
    "AXIS_PLANES",
    "EPS",
    "FLOAT_DTYPE",
    "X_AXIS",
    "Y_AXIS",
    "Z_AXIS",
    # Entities
    "Vector",
    "Vector2",
    "Vector3",
    "Vector4",
    "Matrix",
    "Matrix2",
    "Matrix3",
    "Matrix4",
    # Core functions
    "identity",
    "vector_times_matrix",
    "matrix_times_matrix",
    "sin_cos_rotate_vector",
    "sin_cos_rotate_matrix",
    "rotate_vector",
    "rotate_matrix",
    "rotate_vector_about",
    "rotate_matrix_about",
    "rotation_matrix",
    "translate_matrix",
    # Convenience functions
    "vector",
    "matrix",
    "transform",
]
