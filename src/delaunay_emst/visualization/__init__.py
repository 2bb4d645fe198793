# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Visualization module for plotting triangulations and spanning trees."""

from .plots import (
    plot_triangulation,
    plot_spanning_tree
)

__all__ = [
    'plot_triangulation',
    'plot_spanning_tree',
]
