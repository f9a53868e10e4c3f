"""
Rotation algebra for n-dimensional vectors and matrices.

A rotation acts in the plane spanned by two coordinate axes (a, b) and leaves
every other coordinate unchanged. Rotations are clockwise when seen from the
direction the orthogonal axis points at, in a right-handed coordinate system.
All angles in radians.
"""

import jax.numpy as jnp

from .config import AxisPlanes
from .primitives import FlatMatrix, FlatVector, FloatScalar, identity

DEFAULT_PLANES = AxisPlanes()


def sin_cos_rotate_vector(
    vec: FlatVector,
    sin: FloatScalar,
    cos: FloatScalar,
    n: int,
    a_axis: int,
    b_axis: int,
) -> FlatVector:
    """
    Rotate a vector in the (a, b) plane given a precomputed sine and cosine.

    Parameters
    ----------
    vec : (n,) FlatVector
        Vector to rotate.
    sin : FloatScalar
        Sine of the rotation angle.
    cos : FloatScalar
        Cosine of the rotation angle.
    n : int
        Dimension.
    a_axis : int
        First axis of the rotation plane.
    b_axis : int
        Second axis of the rotation plane.

    Returns
    -------
    (n,) FlatVector
        Rotated vector, with
        ``out[a] = vec[a]*cos - vec[b]*sin`` and
        ``out[b] = vec[b]*cos + vec[a]*sin``.
    """
    head = vec[:n]
    va = head[a_axis]
    vb = head[b_axis]
    return head.at[a_axis].set(va * cos - vb * sin).at[b_axis].set(vb * cos + va * sin)


def sin_cos_rotate_matrix(
    mat: FlatMatrix,
    sin: FloatScalar,
    cos: FloatScalar,
    n: int,
    a_axis: int,
    b_axis: int,
) -> FlatMatrix:
    """
    Rotate every row of a matrix in the (a, b) plane.

    Equivalent to right-multiplying the matrix by ``rotation_matrix`` for the
    same plane: each row is rotated like a vector, column index standing in
    for coordinate index.

    Parameters
    ----------
    mat : (n*n,) FlatMatrix
        Matrix in flat row-major order.
    sin : FloatScalar
        Sine of the rotation angle.
    cos : FloatScalar
        Cosine of the rotation angle.
    n : int
        Dimension.
    a_axis : int
        First axis of the rotation plane.
    b_axis : int
        Second axis of the rotation plane.

    Returns
    -------
    (n*n,) FlatMatrix
        Rotated matrix.
    """
    rows = mat[: n * n].reshape(n, n)
    col_a = rows[:, a_axis]
    col_b = rows[:, b_axis]
    rows = rows.at[:, a_axis].set(col_a * cos - col_b * sin)
    rows = rows.at[:, b_axis].set(col_b * cos + col_a * sin)
    return rows.reshape(n * n)


def rotate_vector(
    vec: FlatVector,
    angle: FloatScalar,
    n: int,
    a_axis: int,
    b_axis: int,
) -> FlatVector:
    """Rotate a vector by ``angle`` in the (a, b) plane."""
    return sin_cos_rotate_vector(vec, jnp.sin(angle), jnp.cos(angle), n, a_axis, b_axis)


def rotate_matrix(
    mat: FlatMatrix,
    angle: FloatScalar,
    n: int,
    a_axis: int,
    b_axis: int,
) -> FlatMatrix:
    """Rotate every row of a matrix by ``angle`` in the (a, b) plane."""
    return sin_cos_rotate_matrix(mat, jnp.sin(angle), jnp.cos(angle), n, a_axis, b_axis)


def rotate_vector_about(
    vec: FlatVector,
    angle: FloatScalar,
    n: int,
    axis: int | str,
    planes: AxisPlanes = DEFAULT_PLANES,
) -> FlatVector:
    """
    Rotate a vector about a named axis.

    Parameters
    ----------
    vec : (n,) FlatVector
        Vector to rotate.
    angle : FloatScalar
        Rotation angle [rad].
    n : int
        Dimension.
    axis : int | str
        X_AXIS, Y_AXIS or Z_AXIS, or one of "x", "y", "z".
    planes : AxisPlanes
        Axis to (a, b) plane mapping.

    Returns
    -------
    (n,) FlatVector
        Rotated vector.
    """
    a_axis, b_axis = planes.plane(axis)
    return rotate_vector(vec, angle, n, a_axis, b_axis)


def rotate_matrix_about(
    mat: FlatMatrix,
    angle: FloatScalar,
    n: int,
    axis: int | str,
    planes: AxisPlanes = DEFAULT_PLANES,
) -> FlatMatrix:
    """Rotate every row of a matrix about a named axis."""
    a_axis, b_axis = planes.plane(axis)
    return rotate_matrix(mat, angle, n, a_axis, b_axis)


def rotation_matrix(
    angle: FloatScalar,
    n: int,
    a_axis: int,
    b_axis: int,
) -> FlatMatrix:
    """
    Build the n x n matrix of a rotation in the (a, b) plane.

    Parameters
    ----------
    angle : FloatScalar
        Rotation angle [rad].
    n : int
        Dimension.
    a_axis : int
        First axis of the rotation plane.
    b_axis : int
        Second axis of the rotation plane.

    Returns
    -------
    (n*n,) FlatMatrix
        Matrix R such that ``vector_times_matrix(v, R, n)`` equals
        ``rotate_vector(v, angle, n, a_axis, b_axis)``.
    """
    return rotate_matrix(identity(n), angle, n, a_axis, b_axis)
