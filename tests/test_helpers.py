# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

import math

import pytest

from delaunay_emst.spanning import compute_mst
from delaunay_emst.triangulation import compute_delaunay
from delaunay_emst.utils import (
    Complexity,
    compare_complexity,
    ensure_dir_exists,
    estimate_operations,
    format_edge,
    format_mst_edges,
)

"""Tests for reporting helpers and the complexity estimate."""


def test_estimate_operations():
    assert estimate_operations(Complexity.LINEAR, 8) == 8.0
    assert estimate_operations(Complexity.N_LOG_N, 8) == pytest.approx(24.0)
    assert estimate_operations(Complexity.QUADRATIC, 8) == 64.0
    assert estimate_operations(Complexity.N_LOG_N, 1) == 0.0


def test_compare_complexity_default_is_quadratic_vs_n_log_n():
    n = 1_000_000
    cmp = compare_complexity(n, 1e9)

    assert cmp['ops1'] == pytest.approx(1e12)
    assert cmp['ops2'] == pytest.approx(n * math.log2(n))
    assert cmp['time1'] == pytest.approx(1000.0)
    assert cmp['speedup'] == pytest.approx(n / math.log2(n))


def test_compare_complexity_rejects_bad_throughput():
    with pytest.raises(ValueError):
        compare_complexity(10, 0.0)


def test_compare_complexity_infinite_speedup_for_trivial_input():
    assert compare_complexity(1, 1e9)['speedup'] == math.inf


def test_format_edge_truncates_coordinates():
    pair = compute_delaunay([(0.9, 2.5), (10.2, -3.7)])
    assert format_edge(pair.left) == "(0, 2)(10, -3)"


def test_format_mst_edges_one_line_per_edge():
    result = compute_mst(compute_delaunay([(0, 0), (4, 0), (4, 3)]))
    lines = format_mst_edges(result)
    assert len(lines) == 2
    assert all(line.startswith("(") and line.count(")(") == 1 for line in lines)


def test_ensure_dir_exists(tmp_path):
    target = tmp_path / "a" / "b"
    ensure_dir_exists(str(target))
    ensure_dir_exists(str(target))
    assert target.is_dir()


def test_ensure_dir_exists_ignores_empty_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    ensure_dir_exists("")
    assert list(tmp_path.iterdir()) == []
