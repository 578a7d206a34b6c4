"""Invariant checks for adjacency matrices."""

from __future__ import annotations

import numpy as np


def is_square(mat: np.ndarray) -> bool:
    """
    Check whether an array is a square 2-D matrix.

    Parameters
    ----------
    mat:
        Array to inspect.

    Returns
    -------
    bool
        True if mat has shape (n, n).
    """
    return mat.ndim == 2 and mat.shape[0] == mat.shape[1]


def assert_square(mat: np.ndarray) -> None:
    """
    Assert that an array is a square 2-D matrix.

    Raises
    ------
    ValueError
        If mat is not square.
    """
    if not is_square(mat):
        raise ValueError(f"Expected a square matrix, got shape {mat.shape}.")


def is_symmetric(mat: np.ndarray, atol: float = 0.0) -> bool:
    """
    Check whether a square matrix equals its transpose.

    Parameters
    ----------
    mat:
        Square numeric or boolean matrix.
    atol:
        Absolute tolerance for numeric comparison. Boolean masks are compared
        exactly.

    Returns
    -------
    bool
        True if mat is symmetric within the tolerance, False otherwise.
    """
    if not is_square(mat):
        return False

    if mat.dtype == np.bool_:
        return bool(np.array_equal(mat, mat.T))

    diff = np.abs(mat - mat.T)
    if diff.size == 0:
        return True
    max_dev = diff.max()
    if not np.isfinite(max_dev):
        return False

    return bool(max_dev <= atol)


def assert_symmetric(mat: np.ndarray, atol: float = 0.0) -> None:
    """
    Assert that a square matrix is symmetric.

    Parameters
    ----------
    mat:
        Square numeric or boolean matrix.
    atol:
        Absolute tolerance for numeric comparison.

    Raises
    ------
    ValueError
        If the matrix is not symmetric within the tolerance.
    """
    if not is_symmetric(mat, atol=atol):
        raise ValueError(f"Matrix is not symmetric within tolerance {atol}.")


def assert_mask_consistent(weights: np.ndarray, mask: np.ndarray) -> None:
    """
    Assert that a weight matrix carries zero wherever its edge mask is unset.

    Raises
    ------
    ValueError
        If shapes differ or an absent cell holds a nonzero weight.
    """
    if weights.shape != mask.shape:
        raise ValueError(
            f"Weight matrix shape {weights.shape} does not match mask shape {mask.shape}."
        )

    stray = np.argwhere(~mask & (weights != 0))
    if stray.size:
        i, j = (int(x) for x in stray[0])
        raise ValueError(
            f"Cell ({i}, {j}) holds weight {weights[i, j]} but has no edge."
        )
