# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

import os

import numpy as np
import pytest

from delaunay_emst.spanning import compute_mst
from delaunay_emst.triangulation import compute_delaunay
from delaunay_emst.visualization import plot_spanning_tree, plot_triangulation

"""Smoke tests: plots are written to disk without errors."""


@pytest.fixture
def random_points():
    rng = np.random.default_rng(2)
    return rng.random((40, 2)) * 100.0


def test_plot_triangulation_writes_png(tmp_path, random_points):
    pair = compute_delaunay(random_points)
    out = tmp_path / "plots" / "triangulation.png"

    plot_triangulation(pair, str(out), dpi=50)

    assert out.exists()
    assert os.path.getsize(out) > 0


def test_plot_triangulation_with_partial_tree(tmp_path, random_points):
    pair = compute_delaunay(random_points)
    mst = compute_mst(pair, alpha=5.0)
    out = tmp_path / "with_tree.png"

    plot_triangulation(pair, str(out), mst=mst, dpi=50)

    assert out.exists()


def test_plot_spanning_tree_writes_png(tmp_path, random_points):
    mst = compute_mst(compute_delaunay(random_points))
    out = tmp_path / "tree.png"

    plot_spanning_tree(random_points, mst, str(out), dpi=50)

    assert out.exists()


def test_plot_collinear_triangulation(tmp_path):
    pair = compute_delaunay([(0, 0), (1, 1), (2, 2), (3, 3)])
    out = tmp_path / "chain.png"
    plot_triangulation(pair, str(out), dpi=50)
    assert out.exists()


def test_plot_without_triangulation_raises(tmp_path):
    with pytest.raises(ValueError):
        plot_triangulation(None, str(tmp_path / "none.png"))


def test_plot_to_bare_file_name(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    pair = compute_delaunay([(0, 0), (1, 0), (0, 1)])
    plot_triangulation(pair, "triangle.png", dpi=50)
    assert (tmp_path / "triangle.png").exists()
