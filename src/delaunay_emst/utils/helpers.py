# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Utility functions and helpers.

Reporting helpers for spanning-tree results and a back-of-the-envelope
comparison of algorithm running times by asymptotic operation count.
"""

import math
import os
from enum import Enum
from typing import Dict, List


class Complexity(Enum):
    """Asymptotic operation counts used by :func:`compare_complexity`."""

    LINEAR = 'n'
    N_LOG_N = 'n log n'
    QUADRATIC = 'n^2'


def estimate_operations(complexity: Complexity, n: int) -> float:
    """
    Estimate the number of operations for input size ``n``.

    :param complexity: Growth class.
    :type complexity: Complexity
    :param n: Input size.
    :type n: int
    :return: Operation count (log base 2 for n log n).
    :rtype: float
    """
    if complexity is Complexity.LINEAR:
        return float(n)
    if complexity is Complexity.N_LOG_N:
        return n * math.log2(n) if n > 1 else 0.0
    if complexity is Complexity.QUADRATIC:
        return float(n) * n
    raise ValueError(f"Unknown complexity: {complexity!r}")


def compare_complexity(n: int, ops_per_sec: float,
                       first: Complexity = Complexity.QUADRATIC,
                       second: Complexity = Complexity.N_LOG_N) -> Dict[str, float]:
    """
    Compare estimated running times of two growth classes.

    :param n: Input size.
    :type n: int
    :param ops_per_sec: Assumed machine throughput.
    :type ops_per_sec: float
    :param first: Growth class of the first algorithm.
    :type first: Complexity
    :param second: Growth class of the second algorithm.
    :type second: Complexity
    :return: Dict with 'ops1', 'ops2', 'time1', 'time2' (seconds) and 'speedup' (time1 / time2).
    :rtype: Dict[str, float]
    """
    if ops_per_sec <= 0:
        raise ValueError(f"ops_per_sec must be positive, got {ops_per_sec}")
    ops1 = estimate_operations(first, n)
    ops2 = estimate_operations(second, n)
    time1 = ops1 / ops_per_sec
    time2 = ops2 / ops_per_sec
    speedup = time1 / time2 if time2 > 0 else math.inf
    return {
        'ops1': ops1,
        'ops2': ops2,
        'time1': time1,
        'time2': time2,
        'speedup': speedup,
    }


def format_edge(edge) -> str:
    """
    Format a quarter-edge as ``(x1, y1)(x2, y2)`` with integer coordinates.

    Coordinates are truncated toward zero.
    """
    p1 = edge.origin()
    p2 = edge.destination()
    return f"({int(p1.x)}, {int(p1.y)})({int(p2.x)}, {int(p2.y)})"


def format_mst_edges(result) -> List[str]:
    """
    Format every edge of a spanning tree result.

    :param result: Result of ``compute_mst``.
    :type result: MSTResult
    :return: One formatted line per edge.
    :rtype: List[str]
    """
    return [format_edge(e) for e in result.edges]


def ensure_dir_exists(path: str) -> None:
    """
    Create a directory and its parents if they are missing.

    An empty path stands for the current directory and is left alone, so
    ``os.path.dirname`` of a bare file name can be passed directly.

    :param path: Directory path.
    :type path: str
    """
    if path:
        os.makedirs(path, exist_ok=True)
