"""Tests for ready-made compositions."""

import pytest
from math import pi, cos, sqrt

from hopoint import evaluate, line, bezier, origin, DomainError
from hopoint.geom import dist, point
from hopoint.shapes import hyperboloid, twisted_ring, tube


class TestHyperboloid:
    """Test the ruled hyperboloid."""

    def test_ends_are_circles(self):
        h = hyperboloid(1.5, 3.0)
        for k in range(6):
            theta = k * pi / 3
            bottom = evaluate(h, (0.0, theta))
            top = evaluate(h, (1.0, theta))
            assert abs(sqrt(bottom.x ** 2 + bottom.y ** 2) - 1.5) < 1e-12
            assert bottom.z == 0.0
            assert abs(sqrt(top.x ** 2 + top.y ** 2) - 1.5) < 1e-12
            assert abs(top.z - 3.0) < 1e-12

    @pytest.mark.parametrize("phase", [0.0, pi / 3, pi / 2, 2.0])
    def test_waist_radius(self, phase):
        r = 2.0
        h = hyperboloid(r, 1.0, phase)
        for k in range(5):
            p = evaluate(h, (0.5, k * 0.7))
            assert abs(sqrt(p.x ** 2 + p.y ** 2) - r * cos(phase / 2)) < 1e-9
            assert abs(p.z - 0.5) < 1e-12

    def test_rulings_are_straight(self):
        h = hyperboloid()
        a = evaluate(h, (0.0, 1.0))
        b = evaluate(h, (1.0, 1.0))
        m = evaluate(h, (0.25, 1.0))
        assert abs(dist(a, m) + dist(m, b) - dist(a, b)) < 1e-12


class TestRingAndTube:
    """Test twisted rings and swept tubes."""

    def test_twisted_ring(self):
        ring = twisted_ring(3.0, 2.0)
        assert ring.arity == 2
        p = evaluate(ring, (0.0, pi / 4))
        assert dist(p, point(0, 3, 0)) < 1e-12

    def test_tube_along_line(self):
        t = tube(0.5, line(origin, (0, 0, 3)))
        for v in (0.0, 0.5, 1.0):
            for theta in (0.0, 1.0, 4.0):
                p = evaluate(t, (theta, v))
                assert abs(sqrt(p.x ** 2 + p.y ** 2) - 0.5) < 1e-9
                assert abs(p.z - 3.0 * v) < 1e-9

    def test_tube_along_curve(self):
        path = bezier((0, 0, 0), (0, 0, 2), (2, 0, 2), (2, 0, 0))
        t = tube(0.1, path)
        for v in (0.0, 0.3, 0.7, 1.0):
            c = evaluate(path, v)
            assert abs(dist(evaluate(t, (2.0, v)), c) - 0.1) < 1e-9
        with pytest.raises(DomainError):
            evaluate(t, (0.0, 1.1))
