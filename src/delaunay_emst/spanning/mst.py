# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Euclidean minimum spanning tree over a Delaunay triangulation.

The EMST is a subgraph of the Delaunay triangulation, so Kruskal's
algorithm only has to consider triangulation edges. The run is bounded by
an ``alpha`` length: the first tree edge longer than ``alpha`` stops the
computation and the partial tree is returned with the alpha property
marked as violated.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Tuple

from ..geometry.points import distance
from ..triangulation.quadedge import QuarterEdge
from .union_find import UnionFind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MSTResult:
    """
    Outcome of :func:`compute_mst`.

    :ivar edges: Accepted tree edges in order of acceptance (ascending length).
    :ivar total_weight: Sum of the accepted edge lengths.
    :ivar alpha_property_ok: False if a tree edge longer than alpha was met.
    """

    edges: Tuple[QuarterEdge, ...]
    total_weight: float
    alpha_property_ok: bool = True

    def __len__(self) -> int:
        return len(self.edges)


def edge_length(e: QuarterEdge) -> float:
    return distance(e.origin(), e.destination())


def collect_edges(start: QuarterEdge) -> List[QuarterEdge]:
    """
    Collect every undirected edge reachable from ``start`` exactly once.

    Depth-first search over origin-next, left-next and right-next. Each edge
    is represented by its canonical quarter-edge (the lower slot of the
    edge and its reverse), and both of its directions are expanded when it
    is first seen.

    :param start: Any primal quarter-edge of the mesh.
    :type start: QuarterEdge
    :return: Canonical quarter-edges in discovery order.
    :rtype: List[QuarterEdge]
    """
    visited = set()
    edges = []
    stack = [start]
    while stack:
        e = stack.pop()
        canonical = e.canonical()
        if canonical in visited:
            continue
        visited.add(canonical)
        edges.append(canonical)
        for d in (e, e.symmetric()):
            stack.append(d.origin_next())
            stack.append(d.left_next())
            stack.append(d.right_next())
    return edges


def compute_mst(edge_pair, alpha: float = math.inf) -> MSTResult:
    """
    Compute the alpha-bounded Euclidean minimum spanning tree.

    Edges are sorted by length (stable) and fed to Kruskal's algorithm.
    When an edge joining two components is longer than ``alpha`` the run
    stops and the tree built so far is returned with
    ``alpha_property_ok=False``.

    The tree only covers the vertices reachable from ``edge_pair``. If the
    mesh holds vertices the traversal does not reach, a warning is logged
    and ``alpha_property_ok`` still reflects the alpha test alone.

    :param edge_pair: Hull edge pair returned by ``compute_delaunay``.
    :type edge_pair: EdgePair
    :param alpha: Maximum allowed tree edge length.
    :type alpha: float
    :return: Selected edges, their total length and the alpha flag.
    :rtype: MSTResult
    :raises ValueError: If ``edge_pair`` is None or ``alpha`` is NaN.
    """
    if edge_pair is None:
        raise ValueError("No triangulation given; compute_delaunay returned None for this point set")
    alpha = float(alpha)
    if math.isnan(alpha):
        raise ValueError("alpha must be a number, got NaN")

    edges = collect_edges(edge_pair.left)
    reached = {p for e in edges for p in (e.origin(), e.destination())}
    in_mesh = edge_pair.left.mesh.vertex_count
    if len(reached) < in_mesh:
        # near-cocircular input can leave a hull handle on a stale quad
        logger.warning("Traversal reached %d of %d vertices; the tree will not span the point set",
                       len(reached), in_mesh)

    weighted = [(edge_length(e), e) for e in edges]
    weighted.sort(key=lambda item: item[0])

    dsu = UnionFind()
    tree = []
    total = 0.0
    for length, e in weighted:
        if not dsu.union(e.origin(), e.destination()):
            continue
        if length > alpha:
            logger.debug("Alpha property violated by edge of length %.6g > %.6g after %d edges",
                         length, alpha, len(tree))
            return MSTResult(tuple(tree), total, False)
        tree.append(e)
        total += length

    logger.debug("Spanning tree with %d edges, total weight %.6g", len(tree), total)
    return MSTResult(tuple(tree), total, True)
