# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Traversal and export utilities for quad-edge triangulations.

This module walks a triangulation through the quarter-edge navigation
operators and turns it into plain Python and NumPy structures: vertex and
edge lists, faces, triangles and point adjacency.
"""

from collections import deque
from typing import Dict, Iterator, List, Set, Tuple

import numpy as np

from ..geometry.points import Point
from ..geometry.predicates import CHECK_CCW_TOLERANCE, ccw
from .quadedge import QuarterEdge


def iter_quarter_edges(start: QuarterEdge) -> Iterator[QuarterEdge]:
    """
    Breadth-first walk over the directed primal edges reachable from ``start``.

    Neighbours are symmetric, origin-next and left-next, so both directions
    of every edge of the connected subdivision are yielded exactly once.

    :param start: Any primal quarter-edge of the mesh.
    :type start: QuarterEdge
    :return: Iterator over directed quarter-edges.
    :rtype: Iterator[QuarterEdge]
    """
    visited = {start}
    queue = deque([start])
    while queue:
        e = queue.popleft()
        yield e
        for n in (e.symmetric(), e.origin_next(), e.left_next()):
            if n not in visited:
                visited.add(n)
                queue.append(n)


def triangulation_vertices(start: QuarterEdge) -> List[Point]:
    """
    List the distinct vertices of the triangulation.

    :param start: Any primal quarter-edge of the mesh.
    :type start: QuarterEdge
    :return: Vertices in discovery order.
    :rtype: List[Point]
    """
    seen = {}
    for e in iter_quarter_edges(start):
        seen.setdefault(e.origin(), None)
    return list(seen)


def triangulation_edges(start: QuarterEdge) -> List[QuarterEdge]:
    """
    List each undirected edge once, as its canonical quarter-edge.

    :param start: Any primal quarter-edge of the mesh.
    :type start: QuarterEdge
    :return: Canonical quarter-edges in discovery order.
    :rtype: List[QuarterEdge]
    """
    return [e for e in iter_quarter_edges(start) if e == e.canonical()]


def triangulation_faces(start: QuarterEdge) -> List[List[QuarterEdge]]:
    """
    Group directed edges into faces by following left-next.

    The unbounded outer face is included.

    :param start: Any primal quarter-edge of the mesh.
    :type start: QuarterEdge
    :return: One list of boundary quarter-edges per face.
    :rtype: List[List[QuarterEdge]]
    """
    faces = []
    on_face = set()
    for e in iter_quarter_edges(start):
        if e in on_face:
            continue
        face = []
        curr = e
        while curr not in on_face:
            on_face.add(curr)
            face.append(curr)
            curr = curr.left_next()
        faces.append(face)
    return faces


def triangulation_triangles(start: QuarterEdge,
                            eps: float = CHECK_CCW_TOLERANCE) -> List[Tuple[Point, Point, Point]]:
    """
    List the bounded triangular faces, each once, in counter-clockwise order.

    :param start: Any primal quarter-edge of the mesh.
    :type start: QuarterEdge
    :param eps: Orientation threshold a face must exceed to count as a triangle.
    :type eps: float
    :return: Triangles as (a, b, c) point triples.
    :rtype: List[Tuple[Point, Point, Point]]
    """
    triangles = []
    for face in triangulation_faces(start):
        if len(face) != 3:
            continue
        a, b, c = (e.origin() for e in face)
        if ccw(a, b, c, eps):
            triangles.append((a, b, c))
    return triangles


def delaunay_adjacency(start: QuarterEdge) -> Dict[Point, Set[Point]]:
    """
    Build the point adjacency graph of the triangulation.

    :param start: Any primal quarter-edge of the mesh.
    :type start: QuarterEdge
    :return: Mapping from each vertex to the set of its neighbours.
    :rtype: Dict[Point, Set[Point]]
    """
    neighbors: Dict[Point, Set[Point]] = {}
    for e in iter_quarter_edges(start):
        neighbors.setdefault(e.origin(), set()).add(e.destination())
    return neighbors


def edges_to_array(edges: List[QuarterEdge]) -> np.ndarray:
    """
    Convert quarter-edges into an (E, 2, 2) coordinate array.

    :param edges: Quarter-edges to export.
    :type edges: List[QuarterEdge]
    :return: Array where ``out[i, 0]`` is the origin and ``out[i, 1]`` the destination.
    :rtype: np.ndarray
    """
    if not edges:
        return np.empty((0, 2, 2), dtype=float)
    return np.array([[e.origin(), e.destination()] for e in edges], dtype=float)

