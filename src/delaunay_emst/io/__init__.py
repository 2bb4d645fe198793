# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""I/O module for point files."""

from .points_reader import (
    parse_point_line,
    read_points,
    write_points,
    generate_points_file
)

__all__ = [
    'parse_point_line',
    'read_points',
    'write_points',
    'generate_points_file',
]
