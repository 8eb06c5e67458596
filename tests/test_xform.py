import pytest
from math import pi, sqrt

from hopoint import geom
from hopoint.xform import *
## unit tests for hopoint xform.py


def _vclose(a, b, tol=1e-12):
    return geom.dist(a, b) < tol


class TestXform:
    """unit tests for hopoint matrix operations"""

    def test_matrix(self):
        foo = Matrix([[1,2,3,4],[5,6,7,8],[9,10,11,12],[13,14,15,16]])
        bar = Matrix([[1,0,0,1],[0,1,0,1],[0,0,1,1],[0,0,0,1]])
        I = Matrix()
        assert(I.mul(bar).m == bar.m)
        assert(I.mul(foo).m == foo.m)
        assert(I.mul(I).m == I.m)
        assert(foo.mul(bar).m == [[1,2,3,10],[5,6,7,26],[9,10,11,42],[13,14,15,58]])
        assert(foo.getcol(1) == [2.0,6.0,10.0,14.0])
        assert(bar.mul(geom.point(1,2,3)) == geom.point(2,3,4))
        ## homogeneous projection
        assert(_vclose(foo.mul(geom.point(1,2,3)),
                       geom.point(18.0/102.0, 46.0/102.0, 74.0/102.0)))

    def test_bad_init(self):
        with pytest.raises(ValueError):
            Matrix([1,2,3])
        with pytest.raises(ValueError):
            Matrix(list(range(16)))
        with pytest.raises(ValueError):
            Matrix([[1,0,0,0],[0,1,0,0],[0,0,1,0],[0,0,0,True]])
        with pytest.raises(ValueError):
            Matrix(5)
        with pytest.raises(ValueError):
            Matrix().mul("x")
        with pytest.raises(ValueError):
            Matrix().mul(2.0)

    def test_rotation(self):
        R = Rotation(geom.zaxis, pi/2)
        assert _vclose(R.mul(geom.xaxis), geom.yaxis)
        assert _vclose(R.mul(geom.yaxis), geom.point(-1,0,0))
        assert _vclose(R.mul(geom.zaxis), geom.zaxis)
        Ri = Rotation(geom.zaxis, -pi/2)
        assert _vclose(Ri.mul(R.mul(geom.point(1,2,3))), geom.point(1,2,3))
        ## axis need not be unit length
        R2 = Rotation(geom.point(0,0,7), pi/2)
        assert _vclose(R2.mul(geom.xaxis), geom.yaxis)
        with pytest.raises(ValueError):
            Rotation(geom.origin, 1.0)

    def test_translation_scale(self):
        T = Translation(geom.point(1,2,3))
        assert T.mul(geom.origin) == geom.point(1,2,3)
        Ti = Translation(geom.point(1,2,3), inverse=True)
        assert Ti.mul(T.mul(geom.point(5,5,5))) == geom.point(5,5,5)
        S = Scale(2.0)
        assert S.mul(geom.point(1,2,3)) == geom.point(2,4,6)
        with pytest.raises(ValueError):
            Scale("2")

    def test_about_center(self):
        c = geom.point(1,0,0)
        R = RotationAbout(c, geom.zaxis, pi)
        assert _vclose(R.mul(geom.point(2,0,0)), geom.origin)
        S = ScaleAbout(c, 3.0)
        assert _vclose(S.mul(geom.point(2,0,0)), geom.point(4,0,0))

    @pytest.mark.parametrize("dst", [(1,0,0), (0,1,1), (0,0,1), (0,0,-1), (1,-2,0.5)])
    def test_align(self, dst):
        d = geom.normalize(geom.point(dst))
        A = Align(geom.zaxis, d)
        assert _vclose(A.mul(geom.zaxis), d, tol=1e-9)
        ## rotations preserve lengths
        p = geom.point(0.3, -1.2, 0.0)
        assert abs(geom.mag(A.mul(p)) - geom.mag(p)) < 1e-9

    def test_align_identity(self):
        A = Align(geom.zaxis, geom.point(0,0,5))
        assert A.m == Matrix().m

    @pytest.mark.parametrize("tilt", [1e-7, 1e-9, 3e-12])
    def test_align_small_angle(self, tilt):
        ## nearly parallel directions still get their exact rotation
        d = geom.normalize(geom.point(tilt, 0, 1))
        A = Align(geom.zaxis, d)
        assert _vclose(A.mul(geom.zaxis), d, tol=1e-15)
        assert A.m != Matrix().m

    def test_align_antiparallel(self):
        A = Align(geom.zaxis, geom.point(0,0,-2))
        assert _vclose(A.mul(geom.zaxis), geom.point(0,0,-1))
        assert _vclose(A.mul(geom.point(0,0,3)), geom.point(0,0,-3))
