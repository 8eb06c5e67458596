"""Primitive generators.

Each function returns a leaf node of a composition tree.  Nothing is
evaluated here; arguments are validated and stored.

Generators:
- circle: angle parameter in radians, periodic domain [0, 2*pi)
- line: t in [0, 1], bounded
- bezier: t in [0, 1], bounded
- plane: (u, v) over bounded ranges
"""

from __future__ import annotations

from typing import Tuple

from hopoint.geom import PointLike, ispoint, origin, zaxis
from hopoint.tree import Bezier, Circle, Line, Plane


def circle(center: PointLike = origin, radius: float = 1.0,
           normal: PointLike = zaxis) -> Circle:
    """Create a circle generator.

    Parameters
    ----------
    center : point
        Center of the circle.
    radius : float
        Radius; must be positive.
    normal : vector
        Normal of the circle's plane.  Angles run counterclockwise about
        it; for the +Z normal angle 0 is on +X and pi/2 on +Y.

    Returns
    -------
    Circle
        Generator over one angle (radians).  The domain is periodic, so
        angles outside [0, 2*pi) wrap instead of failing.

    Raises
    ------
    DegenerateInputError
        If ``radius <= 0`` or ``normal`` is the zero vector.
    """
    return Circle(center, radius, normal)


def line(p0: PointLike, p1: PointLike) -> Line:
    """Create a line segment generator, ``p0`` at t=0 and ``p1`` at t=1.

    Parameters outside [0, 1] raise ``DomainError`` on evaluation.
    Coincident endpoints are allowed.
    """
    return Line(p0, p1)


def bezier(*controls: PointLike) -> Bezier:
    """Create a Bezier curve generator from two or more control points.

    Two points give a line, three a quadratic and four a cubic curve.
    ``bezier([p0, p1, p2])`` is accepted as well as ``bezier(p0, p1, p2)``.
    """
    if len(controls) == 1 and isinstance(controls[0], (list, tuple)) \
       and not ispoint(controls[0]):
        controls = tuple(controls[0])
    return Bezier(tuple(controls))


def plane(origin: PointLike = origin, normal: PointLike = zaxis, *,
          u_range: Tuple[float, float] = (-1.0, 1.0),
          v_range: Tuple[float, float] = (-1.0, 1.0)) -> Plane:
    """Create a planar patch generator over ``(u, v)``.

    Parameters
    ----------
    origin : point
        Point of the plane at ``(u, v) = (0, 0)``.
    normal : vector
        Normal to the plane; must be non-zero.
    u_range, v_range : tuple
        Bounded parameter ranges (default (-1, 1)).

    Returns
    -------
    Plane
        Generator mapping ``(u, v)`` to ``origin + u*U + v*V``, where
        ``U``, ``V`` span the plane the same way as ``circle`` does.
    """
    return Plane(origin, normal, u_range, v_range)


__all__ = [
    "circle",
    "line",
    "bezier",
    "plane",
]
