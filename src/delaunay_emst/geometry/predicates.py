# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Orientation and in-circle predicates.

Both predicates compare a floating-point determinant against a fixed
tolerance; no exact arithmetic fallback is attempted. The builder uses
``EPSILON``. The correctness checkers in :mod:`delaunay_emst.topology` use
the looser ``CHECK_CCW_TOLERANCE`` and ``CHECK_CIRCLE_TOLERANCE`` so that
they do not flag configurations the builder resolved as degenerate.
"""

# Builder tolerance for both orientation and in-circle tests
EPSILON = 1e-12

# Checker tolerances
CHECK_CCW_TOLERANCE = 1e-9
CHECK_CIRCLE_TOLERANCE = 1e-5


def orientation(a, b, c) -> float:
    """
    Twice the signed area of triangle (a, b, c).

    Positive for counter-clockwise, negative for clockwise, zero when
    collinear.
    """
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


def ccw(a, b, c, eps: float = EPSILON) -> bool:
    """
    Test whether (a, b, c) turns strictly counter-clockwise.

    :param a: First point.
    :param b: Second point.
    :param c: Third point.
    :param eps: Threshold the signed area must exceed.
    :type eps: float
    :return: True if strictly counter-clockwise; False when collinear or clockwise.
    :rtype: bool
    """
    return orientation(a, b, c) > eps


def right_of(p, e, eps: float = EPSILON) -> bool:
    """Test whether point ``p`` lies strictly right of directed edge ``e``."""
    return ccw(p, e.destination(), e.origin(), eps)


def left_of(p, e, eps: float = EPSILON) -> bool:
    """Test whether point ``p`` lies strictly left of directed edge ``e``."""
    return ccw(p, e.origin(), e.destination(), eps)


def circle_det(a, b, c, d) -> float:
    """
    Lifted in-circle determinant of d against the circle through a, b, c.

    Positive when d is inside the circle and (a, b, c) is counter-clockwise.
    """
    adx = a.x - d.x
    ady = a.y - d.y
    bdx = b.x - d.x
    bdy = b.y - d.y
    cdx = c.x - d.x
    cdy = c.y - d.y

    abdet = adx * bdy - bdx * ady
    bcdet = bdx * cdy - cdx * bdy
    cadet = cdx * ady - adx * cdy

    alift = adx * adx + ady * ady
    blift = bdx * bdx + bdy * bdy
    clift = cdx * cdx + cdy * cdy

    return alift * bcdet + blift * cadet + clift * abdet


def in_circle(a, b, c, d, eps: float = EPSILON) -> bool:
    """
    Test whether d lies strictly inside the circle through a, b, c.

    :param a: First circle point (counter-clockwise order assumed).
    :param b: Second circle point.
    :param c: Third circle point.
    :param d: Query point.
    :param eps: Threshold the determinant must exceed.
    :type eps: float
    :return: True if d is strictly inside.
    :rtype: bool
    """
    return circle_det(a, b, c, d) > eps
