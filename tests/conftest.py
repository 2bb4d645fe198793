# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

import pytest


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "interactive: shows a plot and asks for confirmation; run with -m interactive"
    )


def pytest_collection_modifyitems(config, items):
    # interactive tests only run when selected explicitly
    if "interactive" in (config.getoption("-m") or ""):
        return
    skip = pytest.mark.skip(reason="interactive test; run with -m interactive")
    for item in items:
        if "interactive" in item.keywords:
            item.add_marker(skip)
