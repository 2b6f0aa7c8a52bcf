from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from scipy.spatial.distance import cdist

from .errors import DimensionMismatchError
from .model import Point


Array2D = NDArray[np.float64]


def euclidean_distance(p: Point, q: Point) -> float:
    """
    Euclidean distance between two points of equal dimensionality.

    Uses every coordinate, so for 2-D points this is the familiar
    ``sqrt((x1 - x2)**2 + (y1 - y2)**2)``.

    Raises
    ------
    DimensionMismatchError
        If the points have different numbers of coordinates.
    """
    if p.dim != q.dim:
        raise DimensionMismatchError(
            f"Cannot compare a {p.dim}-D point with a {q.dim}-D point"
        )
    return float(np.linalg.norm(p.as_array() - q.as_array()))


def pairwise_distances(A: Array2D, B: Array2D) -> Array2D:
    """
    Euclidean distance from every point of ``A`` to every point of ``B``.

    Parameters
    ----------
    A : (n, d) array
    B : (m, d) array

    Returns
    -------
    (n, m) array
        Entry ``[i, j]`` is the distance between ``A[i]`` and ``B[j]``.
    """
    if A.shape[1] != B.shape[1]:
        raise DimensionMismatchError(
            f"Dimension mismatch: first curve in R^{A.shape[1]}, second in R^{B.shape[1]}"
        )
    return cdist(A, B, metric="euclidean")
