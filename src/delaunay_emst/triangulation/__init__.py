# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Triangulation module: quad-edge structure, Delaunay builder and traversal."""

from .quadedge import (
    QuadEdgeMesh,
    QuarterEdge,
    make_edge,
    splice,
    connect,
    delete
)

from .delaunay import (
    EdgePair,
    compute_delaunay
)

from .tessellation import (
    iter_quarter_edges,
    triangulation_vertices,
    triangulation_edges,
    triangulation_faces,
    triangulation_triangles,
    delaunay_adjacency,
    edges_to_array
)

__all__ = [
    # Quad-edge
    'QuadEdgeMesh',
    'QuarterEdge',
    'make_edge',
    'splice',
    'connect',
    'delete',
    # Delaunay
    'EdgePair',
    'compute_delaunay',
    # Tessellation
    'iter_quarter_edges',
    'triangulation_vertices',
    'triangulation_edges',
    'triangulation_faces',
    'triangulation_triangles',
    'delaunay_adjacency',
    'edges_to_array',
]
