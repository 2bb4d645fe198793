# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Euler characteristic check for quad-edge triangulations.

A connected planar subdivision satisfies V - E + F = 2 with the unbounded
face counted. A different value means the mesh has twisted rings or is not
planar.
"""

import logging
from typing import NamedTuple

from ..triangulation.tessellation import iter_quarter_edges, triangulation_faces

logger = logging.getLogger(__name__)


class EulerReport(NamedTuple):
    vertices: int
    edges: int
    faces: int

    @property
    def characteristic(self) -> int:
        return self.vertices - self.edges + self.faces

    @property
    def is_valid(self) -> bool:
        return self.characteristic == 2


def check_euler_property(edge_pair) -> EulerReport:
    """
    Count vertices, edges and faces of a triangulation.

    Edges are counted as half the number of directed quarter-edges reached
    by a breadth-first walk over symmetric, origin-next and left-next; faces
    as the number of left-next orbits, outer face included.

    :param edge_pair: Hull edge pair returned by ``compute_delaunay``.
    :type edge_pair: EdgePair
    :return: Counts and the resulting characteristic.
    :rtype: EulerReport
    :raises ValueError: If ``edge_pair`` is None.
    """
    if edge_pair is None or edge_pair.left is None:
        raise ValueError("Cannot check Euler property: triangulation is empty")

    directed = list(iter_quarter_edges(edge_pair.left))
    vertices = {e.origin() for e in directed}
    faces = triangulation_faces(edge_pair.left)

    report = EulerReport(len(vertices), len(directed) // 2, len(faces))
    logger.info("Euler check: V=%d E=%d F=%d, V - E + F = %d",
                report.vertices, report.edges, report.faces, report.characteristic)
    if not report.is_valid:
        logger.warning("Topology broken: Euler characteristic is %d, expected 2",
                       report.characteristic)
    return report
