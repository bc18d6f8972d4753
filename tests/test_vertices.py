from itertools import combinations

import numpy as np
import pytest

from mcp_polytope.polytope.vertices import find_vertices_naive
from mcp_polytope.schemas import VertexOptions


def test_empty_existing_set_gives_no_vertices():
    assert find_vertices_naive([[1.0, 0.0], [0.0, 1.0]], []) == []


def test_empty_new_set_gives_no_vertices():
    assert find_vertices_naive([], [[1.0, 0.0]]) == []


def test_single_state_returns_plane_coefficients():
    coefficients = [2.5, 0.3, 1.0, 7.0, -3.2, 0.1]
    vertices = find_vertices_naive([[c] for c in coefficients], [[1.0]])

    assert len(vertices) == len(coefficients)
    for (point, value), expected in zip(vertices, coefficients):
        assert point == pytest.approx([1.0], abs=1e-12)
        assert value == pytest.approx(expected, rel=1e-12)


@pytest.mark.parametrize(
    "a, b, c, d",
    [
        (1.0, 0.0, 0.0, 1.0),
        (2.0, 0.0, 0.0, 1.0),
        (0.2, 0.9, 0.7, 0.1),
        (-1.0, 3.0, 2.0, 0.5),
    ],
)
def test_two_states_match_closed_form(a, b, c, d):
    x = (d - b) / (a - b - c + d)
    assert 0.0 <= x <= 1.0

    vertices = find_vertices_naive([[a, b]], [[c, d]])

    assert len(vertices) == 1
    point, value = vertices[0]
    assert point == pytest.approx([x, 1.0 - x], abs=1e-10)
    assert value == pytest.approx(a * x + b * (1.0 - x), abs=1e-10)


def test_intersection_outside_simplex_is_dropped():
    # 0 == x + 2 (1 - x) only at x = 2
    assert find_vertices_naive([[0.0, 0.0]], [[1.0, 2.0]]) == []


def test_boundary_faces_are_combined_with_planes():
    vertices = find_vertices_naive([[1.0, 0.0, 0.0]], [[0.0, 1.0, 0.0]])

    points = np.array([point for point, _ in vertices])
    values = np.array([value for _, value in vertices])
    assert len(vertices) == 3
    # Two of them land on the same corner.
    assert points[0] == pytest.approx([0.0, 0.0, 1.0], abs=1e-12)
    assert points[1] == pytest.approx([0.0, 0.0, 1.0], abs=1e-12)
    assert points[2] == pytest.approx([0.5, 0.5, 0.0], abs=1e-12)
    assert values == pytest.approx([0.0, 0.0, 0.5], abs=1e-12)


def test_random_vertices_lie_in_simplex_and_on_new_planes():
    rng = np.random.default_rng(7)
    new_planes = rng.uniform(0.0, 1.0, size=(3, 4))
    planes = rng.uniform(0.0, 1.0, size=(5, 4))

    vertices = find_vertices_naive(new_planes, planes)

    assert vertices
    for point, value in vertices:
        assert np.all(point >= 0.0) and np.all(point <= 1.0)
        assert point.sum() == pytest.approx(1.0)
        assert np.min(np.abs(new_planes @ point - value)) < 1e-8


def test_repeated_calls_are_identical_and_inputs_untouched():
    rng = np.random.default_rng(3)
    new_planes = rng.uniform(0.0, 1.0, size=(2, 3))
    planes = rng.uniform(0.0, 1.0, size=(4, 3))
    new_copy, planes_copy = new_planes.copy(), planes.copy()

    first = find_vertices_naive(new_planes, planes)
    second = find_vertices_naive(new_planes, planes)

    assert len(first) == len(second)
    for (p1, v1), (p2, v2) in zip(first, second):
        assert np.array_equal(p1, p2)
        assert v1 == v2
    assert np.array_equal(new_planes, new_copy)
    assert np.array_equal(planes, planes_copy)


def test_tolerance_keeps_and_clips_near_boundary_vertices():
    # Planes meet at x = -1e-12 / (1 - 1e-12), just outside the simplex.
    new_planes, planes = [[0.0, 0.0]], [[1.0, 1e-12]]

    assert find_vertices_naive(new_planes, planes, VertexOptions(tol=0.0)) == []

    vertices = find_vertices_naive(new_planes, planes)
    assert len(vertices) == 1
    point, value = vertices[0]
    assert point[0] == 0.0
    assert point[1] == pytest.approx(1.0)
    assert value == pytest.approx(0.0, abs=1e-12)


def test_mismatched_dimensions_raise():
    with pytest.raises(ValueError):
        find_vertices_naive([[1.0, 0.0, 0.0]], [[1.0, 0.0]])


def _vertices_from_scratch(new_planes, planes, tol=1e-9):
    """Solve every (S-1)-subset with at least one plane independently, boundaries as x_i == 0 rows."""
    n, S = planes.shape
    found = []
    for plane in new_planes:
        for subset in combinations(range(n + S), S - 1):
            if subset and subset[0] >= n:
                continue
            rows = [np.append(plane, -1.0)]
            fixed = []
            for index in subset:
                if index < n:
                    rows.append(np.append(planes[index], -1.0))
                else:
                    unit = np.zeros(S + 1)
                    unit[index - n] = 1.0
                    rows.append(unit)
                    fixed.append(index - n)
            rows.append(np.append(np.ones(S), 0.0))
            rhs = np.zeros(S + 1)
            rhs[-1] = 1.0
            result = np.linalg.solve(np.array(rows), rhs)
            point = result[:S]
            if np.all((point >= -tol) & (point <= 1.0 + tol)):
                found.append((np.clip(point, 0.0, 1.0), result[S], subset, fixed))
    return found


@pytest.mark.parametrize("S, n, seed", [(3, 4, 11), (4, 5, 5), (4, 3, 19)])
def test_incremental_rows_match_independent_solves(S, n, seed):
    rng = np.random.default_rng(seed)
    new_planes = rng.uniform(0.0, 1.0, size=(2, S))
    planes = rng.uniform(0.0, 1.0, size=(n, S))

    vertices = find_vertices_naive(new_planes, planes)
    expected = _vertices_from_scratch(new_planes, planes)

    assert len(vertices) == len(expected)
    for (point, value), (ref_point, ref_value, subset, fixed) in zip(vertices, expected):
        assert point == pytest.approx(ref_point, abs=1e-9)
        assert value == pytest.approx(ref_value, abs=1e-9)
        # The vertex sits on every plane of its subset ...
        for index in subset:
            if index < n:
                assert planes[index] @ point == pytest.approx(value, abs=1e-9)
        # ... and exactly on the boundaries it was pinned to.
        for coord in fixed:
            assert point[coord] == 0.0
