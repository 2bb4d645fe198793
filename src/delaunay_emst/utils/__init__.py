# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Utils module for reporting and helper functions."""

from .helpers import (
    Complexity,
    estimate_operations,
    compare_complexity,
    format_edge,
    format_mst_edges,
    ensure_dir_exists
)

__all__ = [
    'Complexity',
    'estimate_operations',
    'compare_complexity',
    'format_edge',
    'format_mst_edges',
    'ensure_dir_exists',
]
