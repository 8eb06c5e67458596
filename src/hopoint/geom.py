## foundational point and vector operations for hopoint
## Copyright (c) 2026 hopoint contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""foundational point and vector operations for **hopoint**

====================
OVERVIEW
====================

Every generator in **hopoint** ultimately produces a ``Point3``, an
immutable ``(x, y, z)`` triple of floats.  Directions (normals, axes,
offsets) use the same type under the alias ``Vector3``; there is no
homogeneous ``w`` coordinate at this level.  The 4x4 homogeneous
machinery lives in :mod:`hopoint.xform`.

constants
=========

``epsilon``, ``pi2`` (2*pi) and ``diff_step`` (the finite difference
step used for tangents).  Redefine these at your peril.

scalars
=======

Scalars are ordinary Python ``int`` or ``float`` values.  Booleans are
not numbers for our purposes, see ``isgoodnum()``.  NaN and infinity are
never valid coordinates.

"""

from __future__ import annotations

from dataclasses import dataclass
from math import isfinite, pi, sqrt
from typing import Iterator, Sequence, Tuple, Union

## constants
epsilon = 0.000005
pi2 = 2.0 * pi
diff_step = 0.000001

Vec3 = Tuple[float, float, float]


## operations on scalars
## -----------------------

def isgoodnum(n) -> bool:
    """determine if an argument is actually a scalar number, and not boolean"""
    return (not isinstance(n, bool)) and isinstance(n, (int, float))


def isfinitenum(n) -> bool:
    """is ``n`` a good number that is neither NaN nor infinite"""
    return isgoodnum(n) and isfinite(n)


def close(a: float, b: float) -> bool:
    """are two scalars the same within epsilon"""
    return abs(a - b) < epsilon


## the point type
## ----------------

@dataclass(frozen=True)
class Point3:
    """Immutable point (or direction) in XYZ space."""

    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, i: int) -> float:
        return (self.x, self.y, self.z)[i]

    def __len__(self) -> int:
        return 3

    def isfinite(self) -> bool:
        return isfinite(self.x) and isfinite(self.y) and isfinite(self.z)

    def to_tuple(self) -> Vec3:
        return (self.x, self.y, self.z)


Vector3 = Point3
PointLike = Union[Point3, Sequence[float]]

origin = Point3(0.0, 0.0, 0.0)
xaxis = Point3(1.0, 0.0, 0.0)
yaxis = Point3(0.0, 1.0, 0.0)
zaxis = Point3(0.0, 0.0, 1.0)


def ispoint(x) -> bool:
    """is ``x`` a ``Point3`` or a sequence of exactly three good numbers"""
    if isinstance(x, Point3):
        return True
    return (isinstance(x, (list, tuple)) and len(x) == 3
            and all(isgoodnum(c) for c in x))


def point(x=False, y=False, z=False) -> Point3:
    """Convenience function for making a ``Point3`` from practically
    anything: another ``Point3``, a 3-sequence, or up to three numbers.
    Unspecified coordinates are zero.
    """
    if isinstance(x, Point3):
        return x
    if isinstance(x, (list, tuple)):
        if not ispoint(x):
            raise ValueError('bad value passed to point(): {}'.format(x))
        return Point3(float(x[0]), float(x[1]), float(x[2]))
    r = [0.0, 0.0, 0.0]
    if isgoodnum(x):
        r[0] = float(x)
        if isgoodnum(y):
            r[1] = float(y)
            if isgoodnum(z):
                r[2] = float(z)
    elif x is not False:
        raise ValueError('bad value passed to point(): {}'.format(x))
    return Point3(r[0], r[1], r[2])


vect = point


## R^3 -> R^3 functions
## ----------------------

def add(a: Point3, b: Point3) -> Point3:
    """3 vector, `a + b`"""
    return Point3(a.x + b.x, a.y + b.y, a.z + b.z)


def sub(a: Point3, b: Point3) -> Point3:
    """3 vector, `a - b`"""
    return Point3(a.x - b.x, a.y - b.y, a.z - b.z)


def scale3(a: Point3, c: float) -> Point3:
    """3 vector ``a`` times scalar ``c``"""
    return Point3(a.x * c, a.y * c, a.z * c)


def cross(a: Point3, b: Point3) -> Point3:
    """cross product `a x b`"""
    return Point3(a.y * b.z - a.z * b.y,
                  a.z * b.x - a.x * b.z,
                  a.x * b.y - a.y * b.x)


def lerp(a: Point3, b: Point3, t: float) -> Point3:
    """linear combination `(1-t) a + t b`; exact at t=0 and t=1"""
    s = 1.0 - t
    return Point3(s * a.x + t * b.x,
                  s * a.y + t * b.y,
                  s * a.z + t * b.z)


def normalize(a: Point3) -> Point3:
    """unit vector along ``a``. Raises ``ValueError`` for zero-length vectors."""
    m = mag(a)
    if m < epsilon:
        raise ValueError('cannot normalize zero-length vector {}'.format(a))
    return Point3(a.x / m, a.y / m, a.z / m)


## R^3 -> R functions
## --------------------

def dot(a: Point3, b: Point3) -> float:
    """3 vector ``a`` dot ``b``"""
    return a.x * b.x + a.y * b.y + a.z * b.z


def mag(a: Point3) -> float:
    """magnitude of 3 vector ``a``"""
    return sqrt(a.x * a.x + a.y * a.y + a.z * a.z)


def dist(a: Point3, b: Point3) -> float:
    """euclidean distance between points ``a`` and ``b``"""
    return mag(sub(a, b))


def vclose(a: Point3, b: Point3) -> bool:
    """are two points the same, to within epsilon"""
    return close(dist(a, b), 0.0)


## plane bases
## -------------

def plane_basis(normal: Point3) -> Tuple[Point3, Point3, Point3]:
    """Return ``(u, v, n)``, a right-handed orthonormal frame whose third
    axis is the unit ``normal``.

    ``u`` is +X projected into the plane, or +Y when ``normal`` is
    nearly parallel to X, so that a +Z normal yields the standard
    ``(X, Y, Z)`` frame.
    """
    n = normalize(normal)
    ref = xaxis if abs(n.x) < 0.9 else yaxis
    u = normalize(sub(ref, scale3(n, dot(ref, n))))
    v = cross(n, u)
    return u, v, n


__all__ = [
    'epsilon',
    'pi2',
    'diff_step',
    'Vec3',
    'Point3',
    'Vector3',
    'PointLike',
    'origin',
    'xaxis',
    'yaxis',
    'zaxis',
    'isgoodnum',
    'isfinitenum',
    'close',
    'ispoint',
    'point',
    'vect',
    'add',
    'sub',
    'scale3',
    'cross',
    'lerp',
    'normalize',
    'dot',
    'mag',
    'dist',
    'vclose',
    'plane_basis',
]
