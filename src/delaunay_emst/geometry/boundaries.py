# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Convex hull utilities for quad-edge triangulations.

The outer face of a Delaunay triangulation is its convex hull, so the hull
is read off the mesh by walking that face instead of being recomputed.
"""

from shapely.geometry import Polygon
from typing import List, Optional

from .points import Point, points_to_array


def hull_vertices(edge_pair) -> List[Point]:
    """
    Walk the outer face and list the hull vertices counter-clockwise.

    The walk starts at the leftmost hull edge, whose right face is the
    outer face, and steps with right-prev. Collinear hull points are kept.
    For a degenerate (collinear) triangulation the walk goes out and back
    along the chain, so interior chain points appear twice.

    :param edge_pair: Hull edge pair returned by ``compute_delaunay``.
    :type edge_pair: EdgePair
    :return: Hull vertices starting at the leftmost point.
    :rtype: List[Point]
    """
    if edge_pair is None:
        return []
    start = edge_pair.left
    vertices = []
    e = start
    while True:
        vertices.append(e.origin())
        e = e.right_prev()
        if e == start:
            break
    return vertices


def compute_convex_hull(edge_pair) -> Optional[Polygon]:
    """
    Build the convex hull of a triangulation as a Shapely polygon.

    :param edge_pair: Hull edge pair returned by ``compute_delaunay``.
    :type edge_pair: EdgePair
    :return: Hull polygon, or None if the hull has no area.
    :rtype: Optional[Polygon]
    """
    vertices = hull_vertices(edge_pair)
    if len(set(vertices)) < 3:
        return None
    polygon = Polygon(points_to_array(vertices))
    if polygon.area <= 0.0:
        return None
    return polygon

