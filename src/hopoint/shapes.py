"""Ready-made compositions.

These are built only from the public generators and combinators and
serve as worked examples of composing shapes instead of deriving their
equations.
"""

from __future__ import annotations

from math import pi

from hopoint.combinators import connect, loft, rotate, twist
from hopoint.geom import PointLike, origin, point, zaxis
from hopoint.generators import circle
from hopoint.tree import Node


def hyperboloid(radius: float = 1.0, height: float = 2.0, phase: float = pi / 2) -> Node:
    """Hyperboloid of one sheet as straight lines between two twisted circles.

    The bottom circle lies in the XY plane; the top circle is ``height``
    above it and rotated by ``phase`` about Z.  The result takes
    ``(u, angle)``: ``u`` in [0, 1] runs bottom to top along the ruling
    through ``angle``.  A phase of 0 gives a cylinder.
    """
    bottom = circle(origin, radius, zaxis)
    top = rotate(circle(point(0, 0, height), radius, zaxis), zaxis, phase)
    return connect(bottom, top)


def twisted_ring(radius: float = 1.0, rate: float = 1.0) -> Node:
    """A circle about Z twisted about Z; takes ``(angle, depth)``."""
    return twist(circle(origin, radius, zaxis), zaxis, rate)


def tube(radius: float, path: Node, *, up: PointLike = zaxis) -> Node:
    """Circular tube of ``radius`` swept along ``path``; takes ``(angle, v)``."""
    return loft(circle(origin, radius, zaxis), path, up=up)


__all__ = [
    "hyperboloid",
    "twisted_ring",
    "tube",
]
