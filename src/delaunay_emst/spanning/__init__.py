# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Spanning-tree module: union-find and alpha-bounded EMST."""

from .union_find import UnionFind

from .mst import (
    MSTResult,
    edge_length,
    collect_edges,
    compute_mst
)

__all__ = [
    'UnionFind',
    'MSTResult',
    'edge_length',
    'collect_edges',
    'compute_mst',
]
