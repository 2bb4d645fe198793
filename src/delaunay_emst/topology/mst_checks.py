# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Spanning tree checks.

Reference weights come from SciPy's minimum spanning tree on the complete
Euclidean graph, which does not depend on the triangulation at all.
"""

import numpy as np
from scipy.sparse.csgraph import minimum_spanning_tree
from scipy.spatial.distance import pdist, squareform

from ..geometry.points import points_to_array, prepare_points
from ..spanning.union_find import UnionFind


def reference_mst_weight(points) -> float:
    """
    Weight of the Euclidean MST over all pairwise distances.

    Quadratic memory; meant for cross-checking small inputs.

    :param points: Array-like point set (duplicates are removed first).
    :return: Total MST length, 0.0 for fewer than two distinct points.
    :rtype: float
    """
    coords = points_to_array(prepare_points(points))
    if len(coords) < 2:
        return 0.0
    dist = squareform(pdist(coords))
    tree = minimum_spanning_tree(dist)
    return float(tree.sum())


def is_acyclic(edges) -> bool:
    """
    Test that a collection of quarter-edges contains no cycle.

    :param edges: Quarter-edges (e.g. ``MSTResult.edges``).
    :return: True when every edge joins two previously separate components.
    :rtype: bool
    """
    dsu = UnionFind()
    return all(dsu.union(e.origin(), e.destination()) for e in edges)


def tree_edge_lengths(edges) -> np.ndarray:
    """Lengths of the given quarter-edges as a float array."""
    if not edges:
        return np.empty(0, dtype=float)
    seg = np.array([[e.origin(), e.destination()] for e in edges], dtype=float)
    return np.hypot(seg[:, 1, 0] - seg[:, 0, 0], seg[:, 1, 1] - seg[:, 0, 1])
