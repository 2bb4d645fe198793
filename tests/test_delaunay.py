# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

import numpy as np
import pytest
from scipy.spatial import ConvexHull, Delaunay

import delaunay_emst as de
from delaunay_emst.geometry import Point, hull_vertices
from delaunay_emst.topology import (
    check_euler_property,
    find_global_delaunay_violations,
    find_local_delaunay_violations,
)
from delaunay_emst.triangulation import (
    compute_delaunay,
    delaunay_adjacency,
    triangulation_edges,
    triangulation_faces,
    triangulation_triangles,
    triangulation_vertices,
)

"""Tests for the divide-and-conquer Delaunay builder.

Random point sets are cross-checked against scipy.spatial.Delaunay; in
general position the Delaunay triangulation is unique, so the triangle
sets must agree exactly.
"""


def _triangle_keys(triangles):
    return {frozenset((float(p[0]), float(p[1])) for p in tri) for tri in triangles}


# ---------------------------------------------------------------------------
# Small and degenerate inputs
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("points", [
    [],
    [(1.0, 1.0)],
    [(1.0, 1.0), (1.0, 1.0), (1.0, 1.0)],
])
def test_fewer_than_two_distinct_points_returns_none(points):
    assert compute_delaunay(points) is None


def test_two_points_single_edge():
    pair = compute_delaunay([(1, 0), (0, 0)])
    assert pair.left.origin() == Point(0, 0)
    assert pair.left.destination() == Point(1, 0)
    assert pair.right == pair.left.symmetric()
    assert len(triangulation_edges(pair.left)) == 1


def test_three_points_counter_clockwise_order():
    pair = compute_delaunay([(0, 0), (1, 0), (2, 1)])
    assert pair.left.origin() == Point(0, 0)
    assert pair.right.origin() == Point(2, 1)
    assert len(triangulation_edges(pair.left)) == 3
    assert len(triangulation_triangles(pair.left)) == 1


def test_three_points_clockwise_order():
    # sorted order (0,0), (0,1), (1,0) turns clockwise
    pair = compute_delaunay([(0, 0), (1, 0), (0, 1)])
    assert pair.left.origin() == Point(0, 0)
    assert pair.left.destination() == Point(1, 0)
    assert pair.right.origin() == Point(1, 0)
    assert pair.right.destination() == Point(0, 0)
    assert len(triangulation_triangles(pair.left)) == 1


def test_three_collinear_points_form_chain():
    pair = compute_delaunay([(0, 0), (1, 0), (2, 0)])
    edges = triangulation_edges(pair.left)
    assert len(edges) == 2
    assert triangulation_triangles(pair.left) == []
    assert pair.left.origin() == Point(0, 0)
    assert pair.right.origin() == Point(2, 0)
    report = check_euler_property(pair)
    assert (report.vertices, report.edges, report.faces) == (3, 2, 1)


@pytest.mark.parametrize("n", [4, 5, 7, 10])
def test_many_collinear_points_form_chain(n):
    pts = [(0.0, float(i)) for i in range(n)]
    pair = compute_delaunay(pts[::-1])
    assert len(triangulation_edges(pair.left)) == n - 1
    assert triangulation_triangles(pair.left) == []
    assert check_euler_property(pair).is_valid
    adjacency = delaunay_adjacency(pair.left)
    assert max(len(v) for v in adjacency.values()) == 2


def test_unit_square():
    pair = compute_delaunay([(0, 0), (1, 0), (0, 1), (1, 1)])

    assert len(triangulation_vertices(pair.left)) == 4
    assert len(triangulation_edges(pair.left)) == 5
    assert len(triangulation_faces(pair.left)) == 3
    assert len(triangulation_triangles(pair.left)) == 2

    report = check_euler_property(pair)
    assert report.characteristic == 2

    # cocircular: the builder keeps the first diagonal it creates
    adjacency = delaunay_adjacency(pair.left)
    assert Point(1, 0) in adjacency[Point(0, 1)]
    assert Point(1, 1) not in adjacency[Point(0, 0)]


def test_hull_edges_bound_outer_face():
    pair = compute_delaunay([(0, 0), (1, 0), (0, 1), (1, 1)])
    assert pair.left.origin() == Point(0, 0)
    assert pair.right.origin() == Point(1, 1)
    assert hull_vertices(pair) == [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]


def test_rhombus_picks_short_diagonal():
    pts = [(-2, 0), (2, 0), (0, 1), (0, -1)]
    pair = compute_delaunay(pts)
    adjacency = delaunay_adjacency(pair.left)
    assert Point(0, -1) in adjacency[Point(0, 1)]
    assert Point(2, 0) not in adjacency[Point(-2, 0)]


def test_duplicates_do_not_change_triangulation():
    rng = np.random.default_rng(3)
    pts = rng.random((40, 2))
    with_dupes = np.vstack([pts, pts[:10]])
    a = compute_delaunay(pts)
    b = compute_delaunay(with_dupes)
    assert _triangle_keys(triangulation_triangles(a.left)) == _triangle_keys(triangulation_triangles(b.left))


def test_non_finite_input_raises():
    with pytest.raises(ValueError):
        compute_delaunay([(0.0, 0.0), (float('inf'), 1.0)])


# ---------------------------------------------------------------------------
# Random point sets
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("seed,n", [(0, 6), (1, 25), (2, 200), (7, 501)])
def test_random_points_match_scipy(seed, n):
    rng = np.random.default_rng(seed)
    pts = rng.random((n, 2))

    pair = compute_delaunay(pts)
    ours = _triangle_keys(triangulation_triangles(pair.left, eps=0.0))

    ref = Delaunay(pts)
    theirs = _triangle_keys(pts[simplex] for simplex in ref.simplices)

    assert ours == theirs


@pytest.mark.parametrize("seed", [4, 5])
def test_random_points_edge_count_and_hull(seed):
    rng = np.random.default_rng(seed)
    pts = rng.random((150, 2)) * 100.0

    pair = compute_delaunay(pts)
    hull = ConvexHull(pts)
    h = len(hull.vertices)

    assert len(triangulation_edges(pair.left)) == 3 * len(pts) - 3 - h
    assert {tuple(p) for p in hull_vertices(pair)} == {tuple(pts[i]) for i in hull.vertices}


def test_integer_points_are_delaunay():
    rng = np.random.default_rng(11)
    pts = rng.integers(0, 1000, size=(500, 2), endpoint=True).astype(float)

    pair = compute_delaunay(pts)

    assert check_euler_property(pair).is_valid
    assert find_local_delaunay_violations(pair) == []
    assert find_global_delaunay_violations(pts, pair) == []


def test_grid_points_with_cocircular_quads():
    xs, ys = np.meshgrid(np.arange(6, dtype=float), np.arange(5, dtype=float))
    pts = np.column_stack([xs.ravel(), ys.ravel()])

    pair = compute_delaunay(pts)

    assert check_euler_property(pair).is_valid
    assert len(triangulation_vertices(pair.left)) == 30
    assert find_local_delaunay_violations(pair) == []
    # every unit cell is split into two triangles
    assert len(triangulation_triangles(pair.left)) == 2 * 5 * 4


def test_package_level_entry_point():
    pair = de.compute_delaunay(np.array([[0.0, 0.0], [3.0, 0.0], [1.0, 2.0], [2.0, -1.5]]))
    assert isinstance(pair, de.EdgePair)
    assert pair.mesh.edge_count == len(triangulation_edges(pair.left))
