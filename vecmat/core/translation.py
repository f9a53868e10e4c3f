"""Homogeneous-coordinate translation of row-major matrices."""

from .primitives import FlatMatrix, FlatVector


def translate_matrix(mat: FlatMatrix, vec: FlatVector, n: int) -> FlatMatrix:
    """
    Translate a matrix by adding a vector to its last row.

    Parameters
    ----------
    mat : (n*n,) FlatMatrix
        Matrix in flat row-major order.
    vec : (n,) FlatVector
        Translation, one component per column.
    n : int
        Dimension.

    Returns
    -------
    (n*n,) FlatMatrix
        Matrix with ``entry(n-1, i) += vec[i]``; all other rows unchanged.

    Notes
    -----
    With row vectors multiplied on the right, a point ``[x, y, z, 1]`` picks
    up the last row as its translation.
    """
    nn = n * n
    return mat[:nn].at[nn - n :].add(vec[:n])
