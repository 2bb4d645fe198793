# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Geometry module: points, numerical predicates and hull utilities."""

from .predicates import (
    EPSILON,
    CHECK_CCW_TOLERANCE,
    CHECK_CIRCLE_TOLERANCE,
    orientation,
    ccw,
    right_of,
    left_of,
    circle_det,
    in_circle
)

from .points import (
    Point,
    as_points,
    points_to_array,
    sort_points,
    deduplicate_points,
    prepare_points,
    distance
)

from .boundaries import (
    hull_vertices,
    compute_convex_hull
)

__all__ = [
    # Predicates
    'EPSILON',
    'CHECK_CCW_TOLERANCE',
    'CHECK_CIRCLE_TOLERANCE',
    'orientation',
    'ccw',
    'right_of',
    'left_of',
    'circle_det',
    'in_circle',
    # Points
    'Point',
    'as_points',
    'points_to_array',
    'sort_points',
    'deduplicate_points',
    'prepare_points',
    'distance',
    # Boundaries
    'hull_vertices',
    'compute_convex_hull',
]
