# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Triangulation and spanning tree plotting utilities.

This module draws a quad-edge triangulation, optionally overlaid with its
alpha-bounded spanning tree, and saves the figure to disk.
"""

import os
from typing import Optional

import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection

from ..geometry.points import as_points, points_to_array
from ..triangulation.tessellation import edges_to_array, triangulation_edges, triangulation_vertices
from ..utils.helpers import ensure_dir_exists


def _save(fig, output_path: str, dpi: int) -> None:
    ensure_dir_exists(os.path.dirname(output_path))
    plt.tight_layout()
    plt.savefig(output_path, dpi=dpi)
    plt.close(fig)


def plot_triangulation(
    edge_pair,
    output_path: str,
    mst=None,
    title: str = 'Delaunay triangulation',
    page_w: float = 6.3,
    page_h: float = 6.3,
    dpi: int = 300
) -> None:
    """
    Plot a triangulation, optionally with its spanning tree highlighted.

    :param edge_pair: Hull edge pair returned by ``compute_delaunay``.
    :type edge_pair: EdgePair
    :param output_path: Output filepath (PNG).
    :type output_path: str
    :param mst: Spanning tree to overlay.
    :type mst: Optional[MSTResult]
    :param title: Plot title.
    :type title: str
    :param page_w: Figure width in inches.
    :type page_w: float
    :param page_h: Figure height in inches.
    :type page_h: float
    :param dpi: Figure DPI.
    :type dpi: int
    :raises ValueError: If ``edge_pair`` is None.
    """
    if edge_pair is None:
        raise ValueError("Nothing to plot: triangulation is empty")

    fig, ax = plt.subplots(figsize=(page_w, page_h))

    segments = edges_to_array(triangulation_edges(edge_pair.left))
    ax.add_collection(LineCollection(segments, colors='lightgray', linewidths=0.8,
                                     label='Delaunay edges'))

    if mst is not None and mst.edges:
        tree = edges_to_array(list(mst.edges))
        ax.add_collection(LineCollection(tree, colors='tab:red', linewidths=1.6,
                                         label='Spanning tree'))

    vertices = points_to_array(triangulation_vertices(edge_pair.left))
    ax.scatter(vertices[:, 0], vertices[:, 1], s=8, c='black', zorder=3)

    if mst is not None:
        status = 'respected' if mst.alpha_property_ok else 'violated'
        title = f"{title}\nMST weight {mst.total_weight:.3f} (alpha {status})"

    ax.set_title(title, weight="bold")
    ax.set_aspect('equal', adjustable='datalim')
    ax.autoscale_view()
    ax.legend(loc='best', fontsize=8)

    _save(fig, output_path, dpi)


def plot_spanning_tree(
    points,
    mst,
    output_path: str,
    title: Optional[str] = None,
    page_w: float = 6.3,
    page_h: float = 6.3,
    dpi: int = 300
) -> None:
    """
    Plot a point set and the edges of a spanning tree over it.

    :param points: Point set that was triangulated.
    :param mst: Result of ``compute_mst``.
    :type mst: MSTResult
    :param output_path: Output filepath (PNG).
    :type output_path: str
    :param title: Plot title; defaults to the tree weight.
    :type title: Optional[str]
    :param page_w: Figure width in inches.
    :type page_w: float
    :param page_h: Figure height in inches.
    :type page_h: float
    :param dpi: Figure DPI.
    :type dpi: int
    """
    coords = points_to_array(as_points(points))

    fig, ax = plt.subplots(figsize=(page_w, page_h))
    if mst.edges:
        ax.add_collection(LineCollection(edges_to_array(list(mst.edges)),
                                         colors='tab:blue', linewidths=1.2))
    ax.scatter(coords[:, 0], coords[:, 1], s=10, c='black', zorder=3)

    if title is None:
        title = f"Euclidean MST ({len(mst.edges)} edges, weight {mst.total_weight:.3f})"
    ax.set_title(title, weight="bold")
    ax.set_aspect('equal', adjustable='datalim')
    ax.autoscale_view()
    ax.grid(True, alpha=0.3)

    _save(fig, output_path, dpi)
