"""Combinators: functions that build new generators from generators.

Combinators only capture their child generators and constant
arguments.  They never evaluate anything; see :mod:`hopoint.evaluate`
for the parameter splitting rule of each combinator.
"""

from __future__ import annotations

from typing import Optional

from hopoint.geom import PointLike, diff_step, origin, zaxis
from hopoint.tree import (
    Add,
    Connect,
    Derivative,
    Lift,
    Loft,
    Node,
    Reparam,
    Rotate,
    Scale,
    Sub,
    Translate,
    Twist,
)


def twist(source: Node, axis: PointLike = zaxis, rate: float = 1.0, *,
          center: PointLike = origin) -> Twist:
    """Rotate ``source`` about an axis by an angle growing with depth.

    Parameters
    ----------
    source : Node
        Generator to twist.
    axis : vector
        Rotation axis direction; the axis passes through ``center``.
    rate : float
        Radians of rotation per unit of depth.

    Returns
    -------
    Twist
        Generator over ``(*source_parameter, d)``.  At ``d`` it returns
        ``source(source_parameter)`` rotated by ``rate * d`` radians
        (right-hand rule about ``axis``).  The depth ``d`` is unbounded.
    """
    return Twist(source, axis, rate, center)


def connect(a: Node, b: Node) -> Connect:
    """Join two generators that share a parameter domain.

    The result takes ``(u, *v)`` and returns the point a fraction ``u``
    of the way from ``a(v)`` to ``b(v)``.  Two circles joined this way
    make a ruled surface: each angle gets its own connecting line.

    Raises ``DegenerateInputError`` if the domains differ.
    """
    return Connect(a, b)


def add(a: Node, b: Node) -> Add:
    """Pointwise sum of two generators over a shared parameter.

    Components on which one side is unbounded (for instance the slot a
    ``lift`` adds) take the other side's interval, so a circle and a
    height line combine into a cylinder::

        add(lift(circle()), lift(line(origin, zaxis), "left"))

    Raises ``DegenerateInputError`` if the domains cannot be combined.
    ``a + b`` on nodes builds the same generator.
    """
    return Add(a, b)


def sub(a: Node, b: Node) -> Sub:
    """Pointwise difference ``a(p) - b(p)``; domains combine as for ``add``."""
    return Sub(a, b)


def loft(cross_section: Node, path: Node, *, up: PointLike = zaxis) -> Loft:
    """Sweep ``cross_section`` along the curve ``path``.

    The result takes ``(*u, v)``.  ``cross_section(u)`` is interpreted
    in a local frame whose ``up`` axis (default +Z) is turned onto the
    tangent of ``path`` at ``v`` by the smallest rotation, then moved to
    ``path(v)``.  A cross section drawn in the XY plane therefore stays
    perpendicular to the path.

    Raises ``DegenerateInputError`` if ``path`` does not take exactly one
    parameter.  Evaluation raises ``NumericError`` where the path
    tangent vanishes.
    """
    return Loft(cross_section, path, up)


def translate(source: Node, offset: PointLike) -> Translate:
    """Move every point of ``source`` by ``offset``."""
    return Translate(source, offset)


def scale(source: Node, factor: float, *, center: PointLike = origin) -> Scale:
    """Scale ``source`` uniformly about ``center``; ``factor`` must be non-zero."""
    return Scale(source, factor, center)


def rotate(source: Node, axis: PointLike, angle: float, *,
           center: PointLike = origin) -> Rotate:
    """Rotate ``source`` by a fixed ``angle`` (radians) about ``axis`` through ``center``."""
    return Rotate(source, axis, angle, center)


def reparam(source: Node, scale: float = 1.0, offset: float = 0.0) -> Reparam:
    """Remap the parameter of a curve: the result at ``t`` is
    ``source(scale * t + offset)``.

    The domain of the result is the preimage of the source domain.
    Using ``offset`` on a circle shifts its phase.
    """
    return Reparam(source, scale, offset)


def lift(source: Node, side: str = "right") -> Lift:
    """Add a parameter component that ``source`` ignores.

    Useful to give two generators the same domain before ``connect``.
    """
    return Lift(source, side)


def derivative(source: Node, step: Optional[float] = None) -> Derivative:
    """Finite difference tangent of a curve, as a generator of vectors."""
    return Derivative(source, diff_step if step is None else step)


__all__ = [
    "twist",
    "connect",
    "add",
    "sub",
    "loft",
    "translate",
    "scale",
    "rotate",
    "reparam",
    "lift",
    "derivative",
]
