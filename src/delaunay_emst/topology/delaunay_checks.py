# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Delaunay property checks.

The local check looks at every internal edge and its two adjacent
triangles; the global check tests every triangle against every input
point. Both use the checker tolerances from
:mod:`delaunay_emst.geometry.predicates`, which are looser than the
builder's so that borderline cocircular cases are not reported.
"""

import logging
from typing import List, NamedTuple, Tuple

from ..geometry.points import Point, as_points
from ..geometry.predicates import CHECK_CCW_TOLERANCE, CHECK_CIRCLE_TOLERANCE, ccw, circle_det
from ..triangulation.tessellation import iter_quarter_edges, triangulation_triangles

logger = logging.getLogger(__name__)


class DelaunayViolation(NamedTuple):
    """A point found strictly inside the circumcircle of a triangle."""

    triangle: Tuple[Point, Point, Point]
    point: Point
    determinant: float


def _internal_edges(edge_pair, ccw_eps: float):
    # Yields (a, b, c, d): edge a->b with triangle (a, b, c) on its left and
    # (b, a, d) on its right, both strictly counter-clockwise.
    for e in iter_quarter_edges(edge_pair.left):
        a = e.origin()
        b = e.destination()
        c = e.left_next().destination()
        d = e.symmetric().left_next().destination()
        if ccw(a, b, c, ccw_eps) and ccw(b, a, d, ccw_eps):
            yield a, b, c, d


def count_internal_edges(edge_pair, ccw_eps: float = CHECK_CCW_TOLERANCE) -> int:
    """
    Count directed edges that separate two real triangles.

    Each undirected internal edge is counted in both directions.
    """
    if edge_pair is None:
        return 0
    return sum(1 for _ in _internal_edges(edge_pair, ccw_eps))


def find_local_delaunay_violations(edge_pair,
                                   tolerance: float = CHECK_CIRCLE_TOLERANCE,
                                   ccw_eps: float = CHECK_CCW_TOLERANCE) -> List[DelaunayViolation]:
    """
    Check the in-circle property on every internal edge.

    For an edge shared by triangles (a, b, c) and (b, a, d), the vertex d
    must not lie strictly inside the circumcircle of (a, b, c).

    :param edge_pair: Hull edge pair returned by ``compute_delaunay``.
    :type edge_pair: EdgePair
    :param tolerance: In-circle determinant threshold for a violation.
    :type tolerance: float
    :param ccw_eps: Orientation threshold for a face to count as a triangle.
    :type ccw_eps: float
    :return: Violations found, empty when the triangulation is locally Delaunay.
    :rtype: List[DelaunayViolation]
    """
    if edge_pair is None:
        return []

    violations = []
    checked = 0
    for a, b, c, d in _internal_edges(edge_pair, ccw_eps):
        checked += 1
        det = circle_det(a, b, c, d)
        if det > tolerance:
            logger.warning("Violation on edge %s -> %s: %s inside triangle (%s, %s, %s)",
                           a, b, d, a, b, c)
            violations.append(DelaunayViolation((a, b, c), d, det))

    if not violations:
        logger.info("Local Delaunay check passed on %d internal edges", checked)
    return violations


def find_global_delaunay_violations(points, edge_pair,
                                    tolerance: float = CHECK_CIRCLE_TOLERANCE,
                                    ccw_eps: float = CHECK_CCW_TOLERANCE) -> List[DelaunayViolation]:
    """
    Test every triangle against every input point.

    Quadratic in the number of points; intended for verification on small
    and medium inputs. At most one violation is reported per triangle.

    :param points: The point set that was triangulated.
    :param edge_pair: Hull edge pair returned by ``compute_delaunay``.
    :type edge_pair: EdgePair
    :param tolerance: In-circle determinant threshold for a violation.
    :type tolerance: float
    :param ccw_eps: Orientation threshold for a face to count as a triangle.
    :type ccw_eps: float
    :return: Violations found.
    :rtype: List[DelaunayViolation]
    """
    if edge_pair is None:
        return []

    pts = as_points(points)
    triangles = triangulation_triangles(edge_pair.left, ccw_eps)
    violations = []
    for tri in triangles:
        a, b, c = tri
        for p in pts:
            if p == a or p == b or p == c:
                continue
            det = circle_det(a, b, c, p)
            if det > tolerance:
                logger.warning("Violation: point %s inside triangle (%s, %s, %s), det=%g",
                               p, a, b, c, det)
                violations.append(DelaunayViolation(tri, p, det))
                break

    if not violations:
        logger.info("Global Delaunay check passed on %d triangles", len(triangles))
    return violations
