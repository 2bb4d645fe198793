# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Point file reading and writing utilities.

Point files are plain text with one point per line in the form ``(x,y)``.
Blank lines and lines without exactly two comma-separated fields are
ignored; lines whose fields are not finite numbers are skipped with a
warning.
"""

import logging
import math
import os
from typing import List, Optional, Sequence

import numpy as np

from ..geometry.points import Point
from ..utils.helpers import ensure_dir_exists

logger = logging.getLogger(__name__)


def parse_point_line(line: str) -> Optional[Point]:
    """
    Parse one ``(x,y)`` line.

    :param line: Raw text line.
    :type line: str
    :return: Parsed point, or None if the line holds no valid point.
    :rtype: Optional[Point]
    """
    line = line.strip()
    if not line:
        return None

    line = line.replace("(", "").replace(")", "")
    coords = line.split(",")
    if len(coords) != 2:
        return None

    try:
        x = float(coords[0].strip())
        y = float(coords[1].strip())
    except ValueError:
        logger.warning("Skipping invalid line: %s", line)
        return None
    if not (math.isfinite(x) and math.isfinite(y)):
        logger.warning("Skipping non-finite point: %s", line)
        return None
    return Point(x, y)


def read_points(path: str) -> List[Point]:
    """
    Read all points from a point file.

    :param path: Path to the text file.
    :type path: str
    :return: Points in file order (duplicates kept).
    :rtype: List[Point]
    :raises FileNotFoundError: If the file does not exist.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Point file not found: {path}")

    points = []
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            p = parse_point_line(line)
            if p is not None:
                points.append(p)
    logger.debug("Read %d points from %s", len(points), path)
    return points


def write_points(path: str, points: Sequence[Point], as_int: bool = False) -> None:
    """
    Write points to a file, one ``(x,y)`` per line.

    :param path: Output path.
    :type path: str
    :param points: Points to write.
    :type points: Sequence[Point]
    :param as_int: Truncate coordinates to integers.
    :type as_int: bool
    """
    ensure_dir_exists(os.path.dirname(path))
    with open(path, 'w', encoding='utf-8') as f:
        for x, y in points:
            if as_int:
                f.write(f"({int(x)},{int(y)})\n")
            else:
                f.write(f"({x!r},{y!r})\n")


def generate_points_file(size: int, path: str,
                         low: int = 0, high: int = 1000,
                         seed: Optional[int] = None) -> str:
    """
    Write ``size`` random integer points to a ``.txt`` point file.

    :param size: Number of points.
    :type size: int
    :param path: Output path; ``.txt`` is appended when missing.
    :type path: str
    :param low: Smallest coordinate value.
    :type low: int
    :param high: Largest coordinate value (inclusive).
    :type high: int
    :param seed: Seed for reproducibility.
    :type seed: Optional[int]
    :return: The path actually written.
    :rtype: str
    :raises ValueError: If ``size`` is negative or ``high < low``.
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    if high < low:
        raise ValueError(f"high ({high}) must not be smaller than low ({low})")
    if not path.endswith('.txt'):
        path += '.txt'

    rng = np.random.default_rng(seed)
    coords = rng.integers(low, high, size=(size, 2), endpoint=True)
    write_points(path, [Point(int(x), int(y)) for x, y in coords], as_int=True)
    logger.info("Created '%s' with %d points", path, size)
    return path
