# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Divide-and-conquer Delaunay triangulation (Guibas & Stolfi).

The point set is sorted and deduplicated, split recursively by index, and
each pair of sub-triangulations is stitched together from the lower common
tangent upwards by the merge loop. The result is a quad-edge mesh reached
through the two extreme hull edges.
"""

import logging
from typing import List, NamedTuple, Optional

from ..geometry.points import Point, prepare_points
from ..geometry.predicates import ccw, in_circle, left_of, right_of
from .quadedge import QuadEdgeMesh, QuarterEdge

logger = logging.getLogger(__name__)


class EdgePair(NamedTuple):
    """
    Extreme hull edges of a (sub)triangulation.

    ``left`` is the counter-clockwise hull edge leaving the leftmost vertex,
    ``right`` the clockwise hull edge leaving the rightmost vertex. Every
    edge of the mesh is reachable from either one.
    """

    left: QuarterEdge
    right: QuarterEdge

    @property
    def mesh(self) -> QuadEdgeMesh:
        return self.left.mesh


def compute_delaunay(points) -> Optional[EdgePair]:
    """
    Compute the Delaunay triangulation of a planar point set.

    :param points: Sequence of Point, sequence of (x, y) pairs, or (N, 2) array.
    :return: Hull edge pair of the triangulation, or None when fewer than
             two distinct points remain after deduplication.
    :rtype: Optional[EdgePair]
    :raises ValueError: If a coordinate is not finite.
    """
    pts = prepare_points(points)
    if len(pts) < 2:
        logger.debug("Only %d distinct point(s); nothing to triangulate", len(pts))
        return None

    mesh = QuadEdgeMesh()
    pair = _triangulate(mesh, pts, 0, len(pts) - 1)
    logger.debug("Triangulated %d points into %d edges", len(pts), mesh.edge_count)
    return pair


def _triangulate(mesh: QuadEdgeMesh, pts: List[Point], lo: int, hi: int) -> EdgePair:
    n = hi - lo + 1

    if n == 2:
        e = mesh.make_edge(pts[lo], pts[lo + 1])
        return EdgePair(e, e.symmetric())

    if n == 3:
        p1, p2, p3 = pts[lo], pts[lo + 1], pts[hi]
        a = mesh.make_edge(p1, p2)
        b = mesh.make_edge(p2, p3)
        mesh.splice(a.symmetric(), b)

        if ccw(p1, p2, p3):
            mesh.connect(b, a)
            return EdgePair(a, b.symmetric())
        if ccw(p1, p3, p2):
            c = mesh.connect(b, a)
            return EdgePair(c.symmetric(), c)
        # collinear: leave the chain open
        return EdgePair(a, b.symmetric())

    mid = (lo + hi) // 2
    ldo, ldi = _triangulate(mesh, pts, lo, mid)
    rdi, rdo = _triangulate(mesh, pts, mid + 1, hi)

    # Lower common tangent
    while True:
        if left_of(rdi.origin(), ldi):
            ldi = ldi.left_next()
        elif right_of(ldi.origin(), rdi):
            rdi = rdi.right_prev()
        else:
            break

    basel = mesh.connect(rdi.symmetric(), ldi)
    if ldi.origin() == ldo.origin():
        ldo = basel.symmetric()
    if rdi.origin() == rdo.origin():
        rdo = basel

    _merge(mesh, basel)
    return EdgePair(ldo, rdo)


def _merge(mesh: QuadEdgeMesh, basel: QuarterEdge) -> None:
    """Zip two sub-triangulations together upwards from the base edge."""
    while True:
        lcand = basel.symmetric().origin_next()
        if _valid(lcand, basel):
            while in_circle(basel.destination(), basel.origin(),
                            lcand.destination(), lcand.origin_next().destination()):
                t = lcand.origin_next()
                mesh.delete(lcand)
                lcand = t

        rcand = basel.origin_prev()
        if _valid(rcand, basel):
            while in_circle(basel.destination(), basel.origin(),
                            rcand.destination(), rcand.origin_prev().destination()):
                t = rcand.origin_prev()
                mesh.delete(rcand)
                rcand = t

        lvalid = _valid(lcand, basel)
        rvalid = _valid(rcand, basel)
        if not lvalid and not rvalid:
            # basel is the upper common tangent
            break

        if not lvalid or (rvalid and in_circle(lcand.destination(), lcand.origin(),
                                               rcand.origin(), rcand.destination())):
            basel = mesh.connect(rcand, basel.symmetric())
        else:
            basel = mesh.connect(basel.symmetric(), lcand.symmetric())


def _valid(e: QuarterEdge, basel: QuarterEdge) -> bool:
    return right_of(e.destination(), basel)
