# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Point type and point-set preprocessing.

This module provides the immutable point type used throughout the package,
conversion of array-like inputs, and the sort/deduplicate step that
prepares a point set for divide-and-conquer triangulation.
"""

import math
from functools import cmp_to_key
from typing import Iterable, List, NamedTuple, Sequence

import numpy as np

from .predicates import EPSILON


class Point(NamedTuple):
    """Immutable planar point, compared and hashed by coordinate value."""

    x: float
    y: float

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def as_points(points) -> List[Point]:
    """
    Convert an array-like point set into a list of points.

    :param points: Sequence of Point, sequence of (x, y) pairs, or (N, 2) array.
    :type points: Iterable
    :return: List of points in input order.
    :rtype: List[Point]
    :raises ValueError: If the input is not (N, 2) shaped or holds non-finite values.
    """
    if points is None:
        return []
    if isinstance(points, np.ndarray):
        arr = np.asarray(points, dtype=float)
        if arr.size == 0:
            return []
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f"Expected an (N, 2) array of coordinates, got shape {arr.shape}")
        if not np.all(np.isfinite(arr)):
            raise ValueError("Point coordinates must be finite")
        return [Point(float(x), float(y)) for x, y in arr]

    result = []
    for p in points:
        if isinstance(p, Point):
            pt = p
        else:
            if len(p) != 2:
                raise ValueError(f"Expected an (x, y) pair, got {p!r}")
            pt = Point(float(p[0]), float(p[1]))
        if not (math.isfinite(pt.x) and math.isfinite(pt.y)):
            raise ValueError(f"Point coordinates must be finite, got {pt}")
        result.append(pt)
    return result


def points_to_array(points: Sequence[Point]) -> np.ndarray:
    """
    Stack points into an (N, 2) float array.

    :param points: Points to convert.
    :type points: Sequence[Point]
    :return: (N, 2) array of coordinates.
    :rtype: np.ndarray
    """
    if len(points) == 0:
        return np.empty((0, 2), dtype=float)
    return np.array([(p.x, p.y) for p in points], dtype=float)


def _compare(p1: Point, p2: Point) -> int:
    # x values closer than EPSILON are treated as a tie and ordered by y
    if abs(p1.x - p2.x) < EPSILON:
        return (p1.y > p2.y) - (p1.y < p2.y)
    return (p1.x > p2.x) - (p1.x < p2.x)


def sort_points(points: Iterable[Point]) -> List[Point]:
    """
    Sort points lexicographically, x first and y second.

    Two x coordinates closer than ``EPSILON`` count as equal, so the y
    coordinate decides their order.

    :param points: Points to sort.
    :type points: Iterable[Point]
    :return: New sorted list.
    :rtype: List[Point]
    """
    return sorted(points, key=cmp_to_key(_compare))


def deduplicate_points(points: Iterable[Point]) -> List[Point]:
    """
    Drop repeated coordinates, keeping the first occurrence.

    Duplicates are detected by exact coordinate equality, not by the
    sort tolerance, so two points closer than ``EPSILON`` both survive.

    :param points: Points, typically already sorted.
    :type points: Iterable[Point]
    :return: Points with exact duplicates removed, order preserved.
    :rtype: List[Point]
    """
    seen = set()
    unique = []
    for p in points:
        key = (p.x, p.y)
        if key not in seen:
            seen.add(key)
            unique.append(p)
    return unique


def prepare_points(points) -> List[Point]:
    """
    Convert, sort and deduplicate a point set for triangulation.

    :param points: Array-like point set (see :func:`as_points`).
    :return: Sorted list of distinct points.
    :rtype: List[Point]
    """
    return deduplicate_points(sort_points(as_points(points)))


def distance(p1: Point, p2: Point) -> float:
    """
    Euclidean distance between two points.

    :param p1: First point.
    :type p1: Point
    :param p2: Second point.
    :type p2: Point
    :return: Distance.
    :rtype: float
    """
    dx = p1.x - p2.x
    dy = p1.y - p2.y
    return math.sqrt(dx * dx + dy * dy)
