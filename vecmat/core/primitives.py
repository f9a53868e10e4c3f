"""
Primitives module for flat-buffer aliases, numerical constants and axis conventions.

Structures are stored flat in row-major order: matrix entry (row, col) lives at
index ``row * n + col``.
"""

import jax
import jax.numpy as jnp
import numpy as np
from jaxtyping import Array, ArrayLike, Float

# Project precision settings
FLOAT_DTYPE = jnp.float32
EPS = 1e-8

# Supported sizes
MIN_DIMENSION = 1
MAX_DIMENSION = 4
SCRATCH_SIZE = MAX_DIMENSION * MAX_DIMENSION

# Project type aliases
FloatScalar = Float[Array, ""]
FlatVector = Float[Array, "N"]
FlatMatrix = Float[Array, "NN"]
Array = Array
ArrayLike = ArrayLike

# Coordinate axes
X_AXIS = 0
Y_AXIS = 1
Z_AXIS = 2

AXIS_NAMES = {"x": X_AXIS, "y": Y_AXIS, "z": Z_AXIS}

# Rotation plane (a, b) for each named axis
AXIS_PLANES = {
    X_AXIS: (Z_AXIS, Y_AXIS),
    Y_AXIS: (X_AXIS, Z_AXIS),
    Z_AXIS: (Y_AXIS, X_AXIS),
}


def as_flat(values: ArrayLike) -> Array:
    """
    Convert a vector or matrix-like value into flat storage.

    Parameters
    ----------
    values : ArrayLike
        Sequence, nested row sequence, NumPy/JAX array or entity exposing
        ``__array__``.

    Returns
    -------
    flat : Array
        One-dimensional array in row-major order with ``FLOAT_DTYPE``.
    """
    if not isinstance(values, jax.Array):
        values = np.asarray(values, dtype=FLOAT_DTYPE)
    return jnp.ravel(jnp.asarray(values, dtype=FLOAT_DTYPE))


def identity(n: int) -> FlatMatrix:
    """Flat row-major n x n identity matrix."""
    return jnp.eye(n, dtype=FLOAT_DTYPE).reshape(n * n)
