## generalized matrix transformation operations for 3D homogeneous
## coordinates in hopoint

## Copyright (c) 2026 hopoint contributors
## All rights reserved

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

from math import atan2, cos, pi, sin

import hopoint.geom as geom

## a matrix is represented as a list of four rows of four numbers.
## Points are multiplied as column vectors with an implied w=1 and
## the result is projected back to w=1.  Angles are in radians.

## Matrix instances are mutable; build a fresh one for each use.


class Matrix:
    """4x4 transformation matrix class for transforming homogeneous 3D coordinates"""

    def __init__(self, a=False):
        self.m = [[1.0, 0.0, 0.0, 0.0],
                  [0.0, 1.0, 0.0, 0.0],
                  [0.0, 0.0, 1.0, 0.0],
                  [0.0, 0.0, 0.0, 1.0]]

        if isinstance(a, (tuple, list)):
            if len(a) == 4 and all(isinstance(r, (tuple, list)) and len(r) == 4 for r in a):
                for i in range(4):
                    for j in range(4):
                        x = a[i][j]
                        if geom.isgoodnum(x):
                            self.m[i][j] = float(x)
                        else:
                            raise ValueError('bad element in matrix initialization: {}'.format(x))
            else:
                raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))
        elif a is not False:
            raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))

    def __repr__(self):
        return "Matrix({},{},{},{})".format(self.m[0], self.m[1],
                                            self.m[2], self.m[3])

    def getrow(self, i):
        if i < 0 or i > 3:
            raise ValueError('bad row passed to getrow: {}'.format(i))
        return self.m[i]

    def getcol(self, j):
        if j < 0 or j > 3:
            raise ValueError('bad column passed to getcol: {}'.format(j))
        return [self.m[0][j], self.m[1][j], self.m[2][j], self.m[3][j]]

    # matrix multiply.  If x is a matrix, compute MX.  If x is a
    # Point3, compute Mx and project back to w=1.
    def mul(self, x):
        if isinstance(x, Matrix):
            result = Matrix()
            for i in range(4):
                row = self.getrow(i)
                for j in range(4):
                    col = x.getcol(j)
                    result.m[i][j] = sum(row[k] * col[k] for k in range(4))
            return result
        elif isinstance(x, geom.Point3):
            v = (x.x, x.y, x.z, 1.0)
            r = [sum(self.m[i][k] * v[k] for k in range(4)) for i in range(4)]
            w = r[3]
            if w == 1.0:
                return geom.Point3(r[0], r[1], r[2])
            return geom.Point3(r[0] / w, r[1] / w, r[2] / w)

        raise ValueError('bad thing passed to mul(): {}'.format(x))


# return the generalized 4x4 arbitrary axis rotation matrix, angle in
# radians, right hand rule about axis
def Rotation(axis, angle):
    m = geom.mag(axis)
    if m < geom.epsilon:
        raise ValueError('zero-length rotation axis not allowed')
    u = geom.scale3(axis, 1.0 / m)

    ux = u.x
    uy = u.y
    uz = u.z

    cang = cos(angle)
    cmin = 1.0 - cang
    sang = sin(angle)

    # see http://www.opengl-tutorial.org/assets/faq_quaternions/index.html#Q38
    R = [[cang + ux*ux*cmin, ux*uy*cmin - uz*sang, ux*uz*cmin + uy*sang, 0],
         [uy*ux*cmin + uz*sang, cang + uy*uy*cmin, uy*uz*cmin - ux*sang, 0],
         [uz*ux*cmin - uy*sang, uz*uy*cmin + ux*sang, cang + uz*uz*cmin, 0],
         [0, 0, 0, 1]]

    return Matrix(R)


def Translation(delta, inverse=False):
    if inverse:
        delta = geom.scale3(delta, -1.0)
    T = [[1, 0, 0, delta.x],
         [0, 1, 0, delta.y],
         [0, 0, 1, delta.z],
         [0, 0, 0, 1]]
    return Matrix(T)


# uniform scaling about the origin
def Scale(factor):
    if not geom.isgoodnum(factor):
        raise ValueError('bad scaling value passed to Scale: {}'.format(factor))
    S = [[factor, 0, 0, 0],
         [0, factor, 0, 0],
         [0, 0, factor, 0],
         [0, 0, 0, 1.0]]
    return Matrix(S)


# rotation about the line through center along axis
def RotationAbout(center, axis, angle):
    if center == geom.origin:
        return Rotation(axis, angle)
    return Translation(center).mul(Rotation(axis, angle)).mul(
        Translation(center, inverse=True))


# scaling about a fixed center point
def ScaleAbout(center, factor):
    if center == geom.origin:
        return Scale(factor)
    return Translation(center).mul(Scale(factor)).mul(
        Translation(center, inverse=True))


# minimal rotation taking direction src onto direction dst
def Align(src, dst):
    a = geom.normalize(src)
    b = geom.normalize(dst)
    axis = geom.cross(a, b)
    s = geom.mag(axis)
    c = geom.dot(a, b)
    if c < 0.0 and s < geom.epsilon:
        # antiparallel: half turn about any perpendicular
        perp = geom.plane_basis(a)[0]
        return Rotation(perp, pi)
    if s == 0.0:
        return Matrix()
    return Rotation(geom.scale3(axis, 1.0 / s), atan2(s, c))
