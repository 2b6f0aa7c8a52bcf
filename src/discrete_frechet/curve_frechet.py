from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Literal, Sequence, Tuple, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .errors import DimensionMismatchError, EmptySequenceError
from .metric import pairwise_distances
from .model import Point

logger = logging.getLogger(__name__)


Array2D = NDArray[np.float64]
CurveLike = Union[Sequence[Point], ArrayLike]

# Memo cells not yet computed; every real distance is >= 0
UNSET = -1.0


@dataclass(frozen=True)
class FrechetResult:
    """
    Outcome of one discrete Fréchet computation.

    Attributes
    ----------
    distance : float
        Discrete Fréchet distance between the two curves.
    memo : (n, m) array
        Coupling distances for each grid cell. Cells the evaluation never
        needed hold ``UNSET``.
    """

    distance: float
    memo: Array2D


def curve_to_array(x: CurveLike, name: str = "curve") -> Array2D:
    """Convert a list of Points or an array-like to a float64 (n, d) array."""
    if isinstance(x, (list, tuple)) and x and all(isinstance(p, Point) for p in x):
        dims = {p.dim for p in x}
        if len(dims) > 1:
            raise DimensionMismatchError(
                f"{name} mixes points of dimensions {sorted(dims)}"
            )
        arr = np.array([p.dimensions for p in x], dtype=np.float64)
    else:
        try:
            arr = np.asarray(x, dtype=np.float64)
        except ValueError as exc:
            # Ragged nested sequences
            raise DimensionMismatchError(f"{name} is not rectangular: {exc}") from exc

    if arr.ndim == 1:
        # Interpret as 1D curve in R^1
        arr = arr.reshape(-1, 1)
    elif arr.ndim != 2:
        raise ValueError(f"{name} must be 1D or 2D; got shape {arr.shape}")

    if arr.shape[0] == 0:
        raise EmptySequenceError(f"{name} must not be empty")

    return arr


def _fill_iterative(dist: Array2D, ca: Array2D) -> None:
    n_a, n_b = dist.shape
    for i in range(n_a):
        for j in range(n_b):
            d = dist[i, j]
            if i == 0 and j == 0:
                ca[i, j] = d
            elif i == 0:
                ca[i, j] = max(ca[i, j - 1], d)
            elif j == 0:
                ca[i, j] = max(ca[i - 1, j], d)
            else:
                ca[i, j] = max(
                    min(
                        ca[i - 1, j],
                        ca[i - 1, j - 1],
                        ca[i, j - 1],
                    ),
                    d,
                )


def _predecessors(i: int, j: int) -> List[Tuple[int, int]]:
    if i == 0 and j == 0:
        return []
    if j == 0:
        return [(i - 1, 0)]
    if i == 0:
        return [(0, j - 1)]
    return [(i - 1, j), (i - 1, j - 1), (i, j - 1)]


def _fill_recursive(dist: Array2D, ca: Array2D) -> None:
    """
    Top-down memoized evaluation starting from the last cell.

    Frames live on an explicit stack instead of the Python call stack, so
    curve length is not bounded by the interpreter's recursion limit. A
    cell is computed once all of its predecessors are set, and only then.
    """
    n_a, n_b = dist.shape
    stack = [(n_a - 1, n_b - 1)]

    while stack:
        i, j = stack[-1]
        if ca[i, j] != UNSET:
            stack.pop()
            continue

        preds = _predecessors(i, j)
        pending = [(a, b) for a, b in preds if ca[a, b] == UNSET]
        if pending:
            stack.extend(pending)
            continue

        stack.pop()
        d = dist[i, j]
        if preds:
            ca[i, j] = max(min(ca[a, b] for a, b in preds), d)
        else:
            ca[i, j] = d


def compute_frechet(
    curve_a: CurveLike,
    curve_b: CurveLike,
    *,
    method: Literal["iterative", "recursive"] = "iterative",
) -> FrechetResult:
    """
    Compute the discrete Fréchet distance together with its memo table.

    Implements the coupling recurrence of Eiter & Mannila (1994):

        c(0, 0) = d(a_0, b_0)
        c(i, 0) = max(c(i-1, 0), d(a_i, b_0))
        c(0, j) = max(c(0, j-1), d(a_0, b_j))
        c(i, j) = max(min(c(i-1, j), c(i-1, j-1), c(i, j-1)), d(a_i, b_j))

    Parameters
    ----------
    curve_a : list of Point or array-like, shape (n_a, d)
        Points of the first curve.
    curve_b : list of Point or array-like, shape (n_b, d)
        Points of the second curve.
    method : {"iterative", "recursive"}
        "iterative" fills the whole table row by row. "recursive" evaluates
        top-down from the last cell, each cell at most once, using an
        explicit stack so long curves do not hit the recursion limit.

    Returns
    -------
    FrechetResult
        The distance ``c(n_a - 1, n_b - 1)`` and the memo table.

    Raises
    ------
    EmptySequenceError
        If either curve has no points.
    DimensionMismatchError
        If the curves (or points within one curve) differ in dimension.
    """
    A = curve_to_array(curve_a, "curve_a")
    B = curve_to_array(curve_b, "curve_b")

    if method == "iterative":
        fill = _fill_iterative
    elif method == "recursive":
        fill = _fill_recursive
    else:
        raise ValueError(f"Unknown method {method!r}; expected 'iterative' or 'recursive'")

    dist = pairwise_distances(A, B)
    ca = np.full(dist.shape, UNSET, dtype=np.float64)

    logger.debug("Filling %dx%d memo table (%s)", ca.shape[0], ca.shape[1], method)
    fill(dist, ca)

    return FrechetResult(distance=float(ca[-1, -1]), memo=ca)


def discrete_frechet_distance(
    curve_a: CurveLike,
    curve_b: CurveLike,
    *,
    method: Literal["iterative", "recursive"] = "iterative",
) -> float:
    """
    Compute the discrete Fréchet distance between two polygonal curves.

    Convenience wrapper around ``compute_frechet`` that drops the memo table.

    Examples
    --------
    >>> discrete_frechet_distance([[0, 0]], [[3, 4]])
    5.0
    """
    return compute_frechet(curve_a, curve_b, method=method).distance


def format_memo_table(memo: Array2D, *, precision: int = 3) -> str:
    """Render a memo table as tab-separated rows; unset cells show as ``-``."""
    rows = []
    for row in memo:
        cells = ["-" if v == UNSET else f"{v:.{precision}f}" for v in row]
        rows.append("\t".join(cells))
    return "\n".join(rows)
