# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

import pytest

from delaunay_emst.geometry import Point
from delaunay_emst.triangulation import QuadEdgeMesh, make_edge

"""Unit tests for the quad-edge arena: algebra, splice, connect, delete."""


def _next_snapshot(mesh):
    return [mesh.handle(i).origin_next().index for i in range(mesh.slot_count)]


def _triangle(mesh):
    p1, p2, p3 = Point(0, 0), Point(1, 0), Point(0, 1)
    a = mesh.make_edge(p1, p2)
    b = mesh.make_edge(p2, p3)
    mesh.splice(a.symmetric(), b)
    c = mesh.connect(b, a)
    return a, b, c


def test_rotation_algebra():
    e = make_edge(Point(0, 0), Point(1, 0))
    for q in (e, e.rotate(), e.symmetric(), e.rotate_inverse()):
        assert q.rotate().rotate().rotate().rotate() == q
        assert q.symmetric().symmetric() == q
        assert q.symmetric() == q.rotate().rotate()
        assert q.rotate_inverse() == q.rotate().rotate().rotate()
    assert e != e.rotate()
    assert e != e.symmetric()


def test_make_edge_is_isolated():
    e = make_edge(Point(0, 0), Point(1, 0))

    assert e.origin() == Point(0, 0)
    assert e.destination() == Point(1, 0)
    assert e.symmetric().origin() == Point(1, 0)
    assert e.rotate().origin() is None

    assert e.origin_next() == e
    assert e.origin_prev() == e
    assert e.left_next() == e.symmetric()
    assert e.left_prev() == e.symmetric()
    assert e.right_next() == e.symmetric()
    assert e.right_prev() == e.symmetric()


def test_splice_joins_rings():
    mesh = QuadEdgeMesh()
    e0 = mesh.make_edge(Point(0, 0), Point(1, 0))
    e1 = mesh.make_edge(Point(0, 0), Point(0, 1))

    mesh.splice(e0, e1)

    assert e0.origin_next() == e1
    assert e1.origin_next() == e0
    assert e0.left_next() == e0.symmetric()
    assert e0.left_prev() == e1.symmetric()


def test_splice_twice_restores_linkage():
    mesh = QuadEdgeMesh()
    a, b, c = _triangle(mesh)
    before = _next_snapshot(mesh)

    mesh.splice(a, b.symmetric())
    assert _next_snapshot(mesh) != before
    mesh.splice(a, b.symmetric())

    assert _next_snapshot(mesh) == before


def test_connect_closes_left_face():
    mesh = QuadEdgeMesh()
    a, b, c = _triangle(mesh)

    assert c.origin() == Point(0, 1)
    assert c.destination() == Point(0, 0)
    assert a.left_next() == b
    assert b.left_next() == c
    assert c.left_next() == a
    assert mesh.edge_count == 3


def test_delete_detaches_edge_and_reuses_slots():
    mesh = QuadEdgeMesh()
    a, b, c = _triangle(mesh)
    slots = mesh.slot_count

    mesh.delete(c)

    assert mesh.edge_count == 2
    assert a.left_next() == b
    assert b.left_next() == b.symmetric()
    assert a.origin_next() == a

    d = mesh.make_edge(Point(5, 5), Point(6, 6))
    assert mesh.slot_count == slots
    assert mesh.edge_count == 3
    assert d.origin_next() == d


def test_handles_are_values():
    mesh = QuadEdgeMesh()
    e = mesh.make_edge(Point(0, 0), Point(1, 0))
    assert mesh.handle(e.index) == e
    assert len({e, mesh.handle(e.index), e.symmetric()}) == 2
    assert e.canonical() == e.symmetric().canonical()


def test_splice_rejects_foreign_mesh():
    e0 = make_edge(Point(0, 0), Point(1, 0))
    e1 = make_edge(Point(0, 0), Point(0, 1))
    with pytest.raises(TypeError):
        e0.mesh.splice(e0, e1)


def test_vertex_count_tracks_live_edges():
    mesh = QuadEdgeMesh()
    a, b, c = _triangle(mesh)
    assert mesh.vertex_count == 3

    mesh.delete(c)
    assert mesh.vertex_count == 3

    mesh.delete(b)
    assert mesh.vertex_count == 2
