"""
Flat-buffer arithmetic for row-major vectors and square matrices.

Every function is pure: the result is staged in a new array and the inputs
are never written to, so destinations may alias either operand.
"""

import jax.numpy as jnp

from .primitives import FlatMatrix, FlatVector, FloatScalar


def vector_times_matrix(vec: FlatVector, mat: FlatMatrix, n: int) -> FlatVector:
    """
    Multiply a row vector on the right by a square matrix.

    Parameters
    ----------
    vec : (n,) FlatVector
        Row vector.
    mat : (n*n,) FlatMatrix
        Square matrix in flat row-major order.
    n : int
        Dimension.

    Returns
    -------
    (n,) FlatVector
        ``out[c] = sum_r vec[r] * mat[r*n + c]``.
    """
    return vec[:n] @ mat[: n * n].reshape(n, n)


def matrix_times_matrix(a: FlatMatrix, b: FlatMatrix, n: int) -> FlatMatrix:
    """
    Multiply two square matrices stored in flat row-major order.

    Parameters
    ----------
    a : (n*n,) FlatMatrix
        Left operand.
    b : (n*n,) FlatMatrix
        Right operand.
    n : int
        Dimension.

    Returns
    -------
    (n*n,) FlatMatrix
        ``out[row, col] = sum_i a[row, i] * b[i, col]``.
    """
    nn = n * n
    product = a[:nn].reshape(n, n) @ b[:nn].reshape(n, n)
    return product.reshape(nn)


def add(u: FlatVector, v: FlatVector, n: int) -> FlatVector:
    """Elementwise sum of the first n components."""
    return u[:n] + v[:n]


def subtract(u: FlatVector, v: FlatVector, n: int) -> FlatVector:
    """Elementwise difference of the first n components."""
    return u[:n] - v[:n]


def scale(vec: FlatVector, factor: FloatScalar, n: int) -> FlatVector:
    return vec[:n] * factor


def dot(u: FlatVector, v: FlatVector, n: int) -> FloatScalar:
    return jnp.sum(u[:n] * v[:n])


def length(vec: FlatVector, n: int) -> FloatScalar:
    """Euclidean norm, ``sqrt(sum of squares)``."""
    return jnp.sqrt(dot(vec, vec, n))
