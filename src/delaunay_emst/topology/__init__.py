# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Topology module: Euler, Delaunay and spanning-tree correctness checks."""

from .euler import (
    EulerReport,
    check_euler_property
)

from .delaunay_checks import (
    DelaunayViolation,
    count_internal_edges,
    find_local_delaunay_violations,
    find_global_delaunay_violations
)

from .mst_checks import (
    reference_mst_weight,
    is_acyclic,
    tree_edge_lengths
)

__all__ = [
    # Euler
    'EulerReport',
    'check_euler_property',
    # Delaunay
    'DelaunayViolation',
    'count_internal_edges',
    'find_local_delaunay_violations',
    'find_global_delaunay_violations',
    # Spanning tree
    'reference_mst_weight',
    'is_acyclic',
    'tree_edge_lengths',
]
