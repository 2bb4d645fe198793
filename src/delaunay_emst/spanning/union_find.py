# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Disjoint-set forest over points.

Used by the spanning-tree engine to detect cycles. Points are added lazily
on first lookup. Unions attach the first root under the second without a
rank heuristic; path compression keeps later lookups short.
"""

from typing import Dict, Hashable


class UnionFind:
    """Disjoint-set forest keyed by hashable items (points)."""

    def __init__(self):
        self._parent: Dict[Hashable, Hashable] = {}

    def __len__(self) -> int:
        return len(self._parent)

    def __contains__(self, item) -> bool:
        return item in self._parent

    def find(self, item):
        """
        Return the representative of ``item``'s class.

        Unseen items become their own representative.
        """
        parent = self._parent
        if item not in parent:
            parent[item] = item
            return item

        root = item
        while parent[root] != root:
            root = parent[root]

        while parent[item] != root:
            parent[item], item = root, parent[item]
        return root

    def union(self, a, b) -> bool:
        """
        Merge the classes of ``a`` and ``b``.

        :return: True if two classes were merged, False if already joined.
        :rtype: bool
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        self._parent[root_a] = root_b
        return True

    def connected(self, a, b) -> bool:
        return self.find(a) == self.find(b)
