# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Quad-edge structure for planar subdivisions.

Quarter-edges live in a flat arena owned by a :class:`QuadEdgeMesh`. Each
undirected edge takes four consecutive slots::

    base + 0   primal edge, origin -> dest
    base + 1   dual edge (rot of base + 0)
    base + 2   primal edge, dest -> origin (sym)
    base + 3   dual edge (rot of base + 2)

``rot`` is therefore slot arithmetic and never changes after allocation.
Only ``next`` is mutable, and only :meth:`QuadEdgeMesh.splice` writes it.
Callers navigate through :class:`QuarterEdge` handles.
"""

from typing import List, Optional

from ..geometry.points import Point


def _rot(i: int) -> int:
    return (i & ~3) | ((i + 1) & 3)


def _rot_inv(i: int) -> int:
    return (i & ~3) | ((i + 3) & 3)


def _sym(i: int) -> int:
    return i ^ 2


class QuadEdgeMesh:
    """
    Arena holding the quarter-edges of one subdivision.

    Deleted quads go on a free list and their slots are reused by later
    calls to :meth:`make_edge`.
    """

    def __init__(self):
        self._next: List[int] = []
        self._orig: List[Optional[Point]] = []
        self._free: List[int] = []

    @property
    def slot_count(self) -> int:
        """Number of allocated quarter-edge slots, free ones included."""
        return len(self._next)

    @property
    def edge_count(self) -> int:
        """Number of live undirected edges."""
        return len(self._next) // 4 - len(self._free)

    @property
    def vertex_count(self) -> int:
        """Number of distinct points that are endpoints of live edges."""
        return len({p for p in self._orig if p is not None})

    def handle(self, index: int) -> 'QuarterEdge':
        """Wrap an arena slot index in a navigable handle."""
        return QuarterEdge(self, index)

    def make_edge(self, origin: Point, dest: Point) -> 'QuarterEdge':
        """
        Allocate an isolated edge from ``origin`` to ``dest``.

        Each primal quarter-edge is its own origin-next; the two dual
        quarter-edges point at each other.

        :param origin: Origin point.
        :type origin: Point
        :param dest: Destination point.
        :type dest: Point
        :return: The primal quarter-edge origin -> dest.
        :rtype: QuarterEdge
        """
        if self._free:
            base = self._free.pop()
        else:
            base = len(self._next)
            self._next.extend([0, 0, 0, 0])
            self._orig.extend([None, None, None, None])

        self._next[base] = base
        self._next[base + 1] = base + 3
        self._next[base + 2] = base + 2
        self._next[base + 3] = base + 1

        self._orig[base] = origin
        self._orig[base + 1] = None
        self._orig[base + 2] = dest
        self._orig[base + 3] = None

        return QuarterEdge(self, base)

    def splice(self, a: 'QuarterEdge', b: 'QuarterEdge') -> None:
        """
        Join or separate the origin rings of ``a`` and ``b``.

        Exchanges ``a.next`` with ``b.next`` and the ``next`` fields of the
        corresponding dual quarter-edges. Applying it twice to the same pair
        restores the original linkage.
        """
        self._check_owner(a)
        self._check_owner(b)
        nxt = self._next
        ai = a.index
        bi = b.index

        alpha = _rot(nxt[ai])
        beta = _rot(nxt[bi])

        t1 = nxt[bi]
        t2 = nxt[ai]
        t3 = nxt[beta]
        t4 = nxt[alpha]

        nxt[ai] = t1
        nxt[bi] = t2
        nxt[alpha] = t3
        nxt[beta] = t4

    def connect(self, a: 'QuarterEdge', b: 'QuarterEdge') -> 'QuarterEdge':
        """
        Add an edge from the destination of ``a`` to the origin of ``b``.

        The new edge is left-next of ``a`` and ``b`` is its left-next, so
        all three share a left face afterwards.

        :return: The new quarter-edge a.dest -> b.orig.
        :rtype: QuarterEdge
        """
        e = self.make_edge(a.destination(), b.origin())
        self.splice(e, a.left_next())
        self.splice(e.symmetric(), b)
        return e

    def delete(self, e: 'QuarterEdge') -> None:
        """
        Detach ``e`` from the rings at both endpoints and free its quad.

        Handles to any of the four quarter-edges are invalid afterwards.
        """
        sym = e.symmetric()
        self.splice(e, e.origin_prev())
        self.splice(sym, sym.origin_prev())

        base = e.index & ~3
        for i in range(base, base + 4):
            self._next[i] = i
            self._orig[i] = None
        self._free.append(base)

    def _check_owner(self, e: 'QuarterEdge') -> None:
        if e.mesh is not self:
            raise TypeError("Quarter-edge belongs to a different mesh")


class QuarterEdge:
    """
    Handle on one quarter-edge slot of a :class:`QuadEdgeMesh`.

    Handles are cheap values: two handles are equal when they refer to the
    same slot of the same mesh. All navigation derives from ``rot`` and
    origin-next.
    """

    __slots__ = ('mesh', 'index')

    def __init__(self, mesh: QuadEdgeMesh, index: int):
        self.mesh = mesh
        self.index = index

    def __eq__(self, other) -> bool:
        if not isinstance(other, QuarterEdge):
            return NotImplemented
        return self.mesh is other.mesh and self.index == other.index

    def __hash__(self) -> int:
        return hash((id(self.mesh), self.index))

    def __repr__(self) -> str:
        return f"QuarterEdge({self.index}: {self.origin()} -> {self.destination()})"

    def canonical(self) -> 'QuarterEdge':
        """Return whichever of this edge and its reverse has the lower slot."""
        return QuarterEdge(self.mesh, self.index & ~2)

    # Endpoints

    def origin(self) -> Optional[Point]:
        return self.mesh._orig[self.index]

    def destination(self) -> Optional[Point]:
        return self.mesh._orig[_sym(self.index)]

    # Rotations

    def rotate(self) -> 'QuarterEdge':
        return QuarterEdge(self.mesh, _rot(self.index))

    def symmetric(self) -> 'QuarterEdge':
        return QuarterEdge(self.mesh, _sym(self.index))

    def rotate_inverse(self) -> 'QuarterEdge':
        return QuarterEdge(self.mesh, _rot_inv(self.index))

    # Rings

    def origin_next(self) -> 'QuarterEdge':
        return QuarterEdge(self.mesh, self.mesh._next[self.index])

    def origin_prev(self) -> 'QuarterEdge':
        nxt = self.mesh._next
        return QuarterEdge(self.mesh, _rot(nxt[_rot(self.index)]))

    def left_next(self) -> 'QuarterEdge':
        nxt = self.mesh._next
        return QuarterEdge(self.mesh, _rot(nxt[_rot_inv(self.index)]))

    def left_prev(self) -> 'QuarterEdge':
        return QuarterEdge(self.mesh, _sym(self.mesh._next[self.index]))

    def right_next(self) -> 'QuarterEdge':
        nxt = self.mesh._next
        return QuarterEdge(self.mesh, _rot_inv(nxt[_rot(self.index)]))

    def right_prev(self) -> 'QuarterEdge':
        return QuarterEdge(self.mesh, self.mesh._next[_sym(self.index)])


def make_edge(origin: Point, dest: Point, mesh: Optional[QuadEdgeMesh] = None) -> QuarterEdge:
    """
    Create an isolated edge, in a new mesh unless one is given.

    :param origin: Origin point.
    :type origin: Point
    :param dest: Destination point.
    :type dest: Point
    :param mesh: Mesh to allocate in.
    :type mesh: Optional[QuadEdgeMesh]
    :return: Quarter-edge origin -> dest.
    :rtype: QuarterEdge
    """
    if mesh is None:
        mesh = QuadEdgeMesh()
    return mesh.make_edge(origin, dest)


def splice(a: QuarterEdge, b: QuarterEdge) -> None:
    a.mesh.splice(a, b)


def connect(a: QuarterEdge, b: QuarterEdge) -> QuarterEdge:
    return a.mesh.connect(a, b)


def delete(e: QuarterEdge) -> None:
    e.mesh.delete(e)
