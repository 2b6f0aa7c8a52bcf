from __future__ import annotations

import numpy as np
import pytest

from discrete_frechet import (
    UNSET,
    DimensionMismatchError,
    EmptySequenceError,
    Point,
    compute_frechet,
    discrete_frechet_distance,
    euclidean_distance,
    format_memo_table,
    pairwise_distances,
    parse_sequence,
)
from discrete_frechet.curve_frechet import _fill_iterative, _fill_recursive


def _naive_dfd(P, Q):
    """Plain unmemoized recursion, exponential but fine for tiny grids."""

    def c(i, j):
        d = euclidean_distance(P[i], Q[j])
        if i == 0 and j == 0:
            return d
        if j == 0:
            return max(c(i - 1, 0), d)
        if i == 0:
            return max(c(0, j - 1), d)
        return max(min(c(i - 1, j), c(i - 1, j - 1), c(i, j - 1)), d)

    return c(len(P) - 1, len(Q) - 1)


def _random_curve(rng, n):
    return [Point(tuple(int(v) for v in row)) for row in rng.integers(-20, 20, size=(n, 2))]


def test_single_points():
    assert discrete_frechet_distance([Point.of(0, 0)], [Point.of(3, 4)]) == pytest.approx(5.0)


def test_identical_curves():
    P = [Point.of(0, 0), Point.of(1, 1)]
    Q = [Point.of(0, 0), Point.of(1, 1)]
    assert discrete_frechet_distance(P, Q) == 0.0


def test_accepts_array_like():
    assert discrete_frechet_distance([[0, 0]], [[3, 4]]) == pytest.approx(5.0)
    assert discrete_frechet_distance([1, 2, 3], [1, 2, 3]) == 0.0


def test_known_value():
    # Second walker must wait on (2,4) while the first is at (2,3)
    P = [Point.of(2, 2), Point.of(2, 3), Point.of(2, 5)]
    Q = [Point.of(2, 2), Point.of(2, 4), Point.of(2, 5)]
    assert discrete_frechet_distance(P, Q) == pytest.approx(1.0)


def test_parsed_example_curves():
    P = parse_sequence("64,25;42,55;37,21;34,76;77,2;98,0;9,20;20,10;12,27")
    Q = parse_sequence("76,92;71,59;65,73;29,52;19,13;81,6;89,36")
    assert discrete_frechet_distance(P[:6], Q[:5]) == pytest.approx(_naive_dfd(P[:6], Q[:5]))
    assert discrete_frechet_distance(P, Q) == pytest.approx(
        discrete_frechet_distance(P, Q, method="recursive")
    )


@pytest.mark.parametrize("seed", range(10))
@pytest.mark.parametrize("method", ["iterative", "recursive"])
def test_matches_naive_recursion(seed, method):
    rng = np.random.default_rng(seed)
    P = _random_curve(rng, int(rng.integers(1, 7)))
    Q = _random_curve(rng, int(rng.integers(1, 7)))
    assert discrete_frechet_distance(P, Q, method=method) == pytest.approx(_naive_dfd(P, Q))


@pytest.mark.parametrize("seed", range(5))
def test_symmetry(seed):
    rng = np.random.default_rng(100 + seed)
    P = _random_curve(rng, 6)
    Q = _random_curve(rng, 4)
    assert discrete_frechet_distance(P, Q) == pytest.approx(discrete_frechet_distance(Q, P))


@pytest.mark.parametrize("seed", range(5))
def test_identity(seed):
    rng = np.random.default_rng(200 + seed)
    P = _random_curve(rng, 8)
    assert discrete_frechet_distance(P, P) == 0.0


def test_appending_far_point_does_not_decrease():
    rng = np.random.default_rng(7)
    P = _random_curve(rng, 5)
    Q = _random_curve(rng, 5)
    before = discrete_frechet_distance(P, Q)
    far = Point.of(1000, 1000)
    after = discrete_frechet_distance(P, Q + [far])
    assert after >= before
    assert after >= euclidean_distance(P[-1], far)


def test_duplicating_a_point_keeps_distance():
    rng = np.random.default_rng(11)
    P = _random_curve(rng, 6)
    Q = _random_curve(rng, 5)
    base = discrete_frechet_distance(P, Q)
    for k in range(len(Q)):
        stretched = Q[: k + 1] + [Q[k]] + Q[k + 1 :]
        assert discrete_frechet_distance(P, stretched) == pytest.approx(base)


def test_methods_fill_identical_tables():
    rng = np.random.default_rng(3)
    P = _random_curve(rng, 5)
    Q = _random_curve(rng, 7)
    it = compute_frechet(P, Q)
    rec = compute_frechet(P, Q, method="recursive")
    assert it.memo.shape == (5, 7)
    np.testing.assert_allclose(it.memo, rec.memo)
    assert it.distance == it.memo[-1, -1]
    assert (it.memo >= 0).all()


def test_each_call_gets_a_fresh_table():
    P = [Point.of(0, 0)]
    Q = [Point.of(3, 4)]
    first = compute_frechet(P, Q)
    second = compute_frechet(P, Q)
    assert first.memo is not second.memo


@pytest.mark.parametrize("P, Q", [([], [Point.of(1, 1)]), ([Point.of(1, 1)], []), ([], [])])
def test_empty_curve_is_rejected(P, Q):
    with pytest.raises(EmptySequenceError):
        compute_frechet(P, Q)


def test_mixed_dimensions_within_curve():
    with pytest.raises(DimensionMismatchError):
        compute_frechet([Point.of(1, 2), Point.of(1)], [Point.of(0, 0)])


def test_mixed_dimensions_between_curves():
    with pytest.raises(DimensionMismatchError):
        compute_frechet([[0, 0]], [[0, 0, 0]])


def test_higher_dimensional_curves():
    assert discrete_frechet_distance([[0, 0, 0]], [[1, 2, 2]]) == pytest.approx(3.0)


def test_unknown_method():
    with pytest.raises(ValueError):
        compute_frechet([[0, 0]], [[1, 1]], method="parallel")


def test_long_curves_iterative():
    t = np.linspace(0, 10, 600)
    P = np.column_stack([t, np.sin(t)])
    Q = np.column_stack([t, np.sin(t) + 0.5])
    assert discrete_frechet_distance(P, Q) == pytest.approx(0.5)


def test_format_memo_table():
    memo = np.array([[0.0, UNSET], [1.5, 2.0]])
    assert format_memo_table(memo) == "0.000\t-\n1.500\t2.000"
    assert format_memo_table(memo, precision=1) == "0.0\t-\n1.5\t2.0"


def test_long_curves_recursive():
    t = np.linspace(0, 10, 600)
    P = np.column_stack([t, np.sin(t)])
    Q = np.column_stack([t, np.sin(t) + 0.5])
    assert discrete_frechet_distance(P, Q, method="recursive") == pytest.approx(0.5)


class _CountingDistances:
    def __init__(self, dist):
        self.dist = dist
        self.shape = dist.shape
        self.reads = {}

    def __getitem__(self, key):
        self.reads[key] = self.reads.get(key, 0) + 1
        return self.dist[key]


class _WriteOnceTable:
    def __init__(self, shape):
        self.cells = np.full(shape, UNSET)
        self.shape = shape

    def __getitem__(self, key):
        return self.cells[key]

    def __setitem__(self, key, value):
        assert self.cells[key] == UNSET, f"cell {key} written twice"
        self.cells[key] = value


@pytest.mark.parametrize("fill", [_fill_iterative, _fill_recursive])
def test_each_cell_computed_once(fill):
    rng = np.random.default_rng(21)
    A = rng.integers(-20, 20, size=(7, 2)).astype(float)
    B = rng.integers(-20, 20, size=(5, 2)).astype(float)
    dist = _CountingDistances(pairwise_distances(A, B))
    table = _WriteOnceTable(dist.shape)

    fill(dist, table)

    assert set(dist.reads) == {(i, j) for i in range(7) for j in range(5)}
    assert all(n == 1 for n in dist.reads.values())
    assert table.cells[-1, -1] == pytest.approx(discrete_frechet_distance(A, B))
