# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Delaunay EMST Package

Divide-and-conquer Delaunay triangulation over a quad-edge structure and
an alpha-bounded Euclidean minimum spanning tree built on top of it.

Modules:
--------
- geometry: Points, orientation/in-circle predicates, convex hull
- triangulation: Quad-edge mesh, Delaunay builder, traversal and export
- spanning: Union-find and Kruskal-based EMST
- topology: Euler characteristic and Delaunay/MST correctness checks
- io: Point file reading, writing and generation
- visualization: Plotting of triangulations and spanning trees
- utils: Reporting helpers

Example Usage:
--------------
    import delaunay_emst as de

    points = de.io.read_points('points.txt')
    pair = de.compute_delaunay(points)
    result = de.compute_mst(pair, alpha=40.0)
    if result.alpha_property_ok:
        print(result.total_weight)
"""

import logging

__version__ = '0.1.0'
__author__ = 'Delaunay EMST Team'

logging.getLogger(__name__).addHandler(logging.NullHandler())

from . import geometry
from . import triangulation
from . import spanning
from . import topology
from . import io
from . import visualization
from . import utils

from .geometry import Point
from .triangulation import EdgePair, QuarterEdge, compute_delaunay
from .spanning import MSTResult, compute_mst

__all__ = [
    'geometry',
    'triangulation',
    'spanning',
    'topology',
    'io',
    'visualization',
    'utils',
    'Point',
    'EdgePair',
    'QuarterEdge',
    'compute_delaunay',
    'MSTResult',
    'compute_mst',
]
