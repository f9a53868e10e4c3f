"""Dimension assertions for entity operands."""

import chex
import numpy as np

from .primitives import MAX_DIMENSION, MIN_DIMENSION, Array


def check_dimension(n: int) -> None:
    """Raise TypeError if ``n`` is not an int, ValueError if it is unsupported."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"Dimension must be an int, got {n!r}")
    if not MIN_DIMENSION <= n <= MAX_DIMENSION:
        raise ValueError(
            f"Unsupported dimension {n}: expected {MIN_DIMENSION}..{MAX_DIMENSION}"
        )


def check_vector(values: Array, n: int, name: str = "vector") -> None:
    """Assert that flat storage holds exactly ``n`` components."""
    chex.assert_shape(values, (n,), custom_message=f"{name} must have {n} components")


def check_matrix(values: Array, n: int, name: str = "matrix") -> None:
    """Assert that flat storage holds exactly ``n * n`` entries."""
    chex.assert_shape(
        values, (n * n,), custom_message=f"{name} must have {n * n} entries ({n}x{n})"
    )


def check_plane(plane: tuple[int, int], n: int) -> None:
    """
    Check that a rotation plane lies inside an n-dimensional space.

    Raises
    ------
    ValueError
        If either axis of the plane is outside ``0..n-1`` or both are equal.
    """
    a_axis, b_axis = plane
    if a_axis == b_axis:
        raise ValueError(f"Rotation plane axes must differ, got {plane}")
    if not (0 <= a_axis < n and 0 <= b_axis < n):
        raise ValueError(f"Rotation plane {plane} is undefined in {n} dimensions")


def check_index(index, size: int):
    """
    Resolve an integer index into ``0..size-1`` the way Python sequences do.

    Slices and other index types are returned unchanged.

    Raises
    ------
    IndexError
        If an integer index falls outside the buffer.
    """
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        return index
    resolved = int(index) + size if index < 0 else int(index)
    if not 0 <= resolved < size:
        raise IndexError(f"Index {index} out of range for {size} entries")
    return resolved
