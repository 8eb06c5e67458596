"""Tests for the primitive generators."""

import pytest
from math import pi, nan, inf

from hopoint import (
    circle, line, bezier, plane, evaluate,
    DomainError, DegenerateInputError, EvalError,
    point, origin, xaxis, zaxis,
)
from hopoint.geom import dist, dot, sub
from hopoint.tree import Circle, Line


def _close(a, b, tol=1e-10):
    assert dist(point(a), point(b)) <= tol


class TestCircle:
    """Test circle generator."""

    def test_create_circle(self):
        c = circle(origin, 2.0, zaxis)
        assert isinstance(c, Circle)
        assert c.radius == 2.0
        assert c.arity == 1

    def test_circle_identity(self):
        """Angle 0 lies on +X, pi/2 on +Y for a +Z normal."""
        r = 3.0
        c = circle(origin, r, zaxis)
        assert evaluate(c, 0.0) == point(r, 0, 0)
        _close(evaluate(c, pi / 2), (0, r, 0))
        _close(evaluate(c, pi), (-r, 0, 0))

    def test_circle_center_offset(self):
        c = circle((1, 2, 3), 1.0, zaxis)
        _close(evaluate(c, pi / 2), (1, 3, 3))

    def test_circle_tilted_plane(self):
        """Points stay at radius distance in the plane normal to ``normal``."""
        n = point(1, 1, 0)
        c = circle((0, 0, 1), 2.0, n)
        for k in range(8):
            p = evaluate(c, k * pi / 4)
            assert abs(dist(p, point(0, 0, 1)) - 2.0) < 1e-10
            assert abs(dot(sub(p, point(0, 0, 1)), n)) < 1e-10

    def test_circle_wraps_periodic_domain(self):
        c = circle(origin, 1.0, zaxis)
        _close(evaluate(c, 2 * pi + pi / 3), evaluate(c, pi / 3))
        _close(evaluate(c, -pi / 2), evaluate(c, 3 * pi / 2))
        _close(evaluate(c, 2 * pi), evaluate(c, 0.0))

    @pytest.mark.parametrize("radius", [0, 0.0, -1.0])
    def test_non_positive_radius(self, radius):
        with pytest.raises(DegenerateInputError):
            circle(origin, radius, zaxis)

    def test_radius_zero_is_also_domain_error(self):
        with pytest.raises(DomainError):
            circle(origin, 0.0, zaxis)

    def test_zero_normal(self):
        with pytest.raises(DegenerateInputError):
            circle(origin, 1.0, (0, 0, 0))

    def test_bad_arguments(self):
        with pytest.raises(DomainError):
            circle(origin, nan, zaxis)
        with pytest.raises(DomainError):
            circle((0, 0), 1.0, zaxis)
        with pytest.raises(DomainError):
            circle((inf, 0, 0), 1.0, zaxis)


class TestLine:
    """Test line segment generator."""

    def test_endpoints_exact(self):
        p0 = point(0.1, 0.2, 0.3)
        p1 = point(-7.7, 1e-3, 42.0)
        ln = line(p0, p1)
        assert evaluate(ln, 0) == p0
        assert evaluate(ln, 1) == p1

    def test_midpoint(self):
        ln = line((0, 0, 0), (2, 4, 6))
        _close(evaluate(ln, 0.5), (1, 2, 3))

    @pytest.mark.parametrize("t", [-0.001, 1.001, 5.0])
    def test_outside_domain(self, t):
        ln = line((0, 0, 0), (1, 0, 0))
        with pytest.raises(DomainError) as exc:
            evaluate(ln, t)
        assert exc.value.code == "E101"
        assert exc.value.node == "line"

    def test_coincident_endpoints_allowed(self):
        ln = line((1, 1, 1), (1, 1, 1))
        assert evaluate(ln, 0.3) == point(1, 1, 1)

    def test_sequence_arguments_become_points(self):
        ln = line([0, 0, 0], (1, 2, 3))
        assert isinstance(ln, Line)
        assert ln.p1 == point(1, 2, 3)


class TestBezier:
    """Test Bezier curve generator."""

    def test_linear_matches_line(self):
        b = bezier((0, 0, 0), (2, 2, 2))
        ln = line((0, 0, 0), (2, 2, 2))
        for t in (0.0, 0.25, 0.5, 1.0):
            assert evaluate(b, t) == evaluate(ln, t)

    def test_quadratic(self):
        b = bezier((0, 0, 0), (1, 2, 0), (2, 0, 0))
        _close(evaluate(b, 0.5), (1, 1, 0))
        assert evaluate(b, 0.0) == point(0, 0, 0)
        assert evaluate(b, 1.0) == point(2, 0, 0)

    def test_cubic(self):
        ctrl = [(0, 0, 0), (0, 1, 0), (1, 1, 0), (1, 0, 0)]
        b = bezier(ctrl)
        # (1/8)(P0 + 3P1 + 3P2 + P3)
        _close(evaluate(b, 0.5), (0.5, 0.75, 0))

    def test_needs_two_points(self):
        with pytest.raises(DegenerateInputError):
            bezier((0, 0, 0))

    def test_outside_domain(self):
        b = bezier((0, 0, 0), (1, 1, 0), (2, 0, 0))
        with pytest.raises(DomainError):
            evaluate(b, 1.5)


class TestPlane:
    """Test planar patch generator."""

    def test_xy_plane(self):
        pl = plane(origin, zaxis)
        assert pl.arity == 2
        _close(evaluate(pl, (0.5, -0.25)), (0.5, -0.25, 0))

    def test_custom_ranges(self):
        pl = plane((0, 0, 1), zaxis, u_range=(0, 10), v_range=(0, 5))
        _close(evaluate(pl, (10, 5)), (10, 5, 1))
        with pytest.raises(DomainError):
            evaluate(pl, (10.5, 0))

    def test_empty_range(self):
        with pytest.raises(DegenerateInputError):
            plane(origin, zaxis, u_range=(1, 1))

    def test_zero_normal(self):
        with pytest.raises(DegenerateInputError):
            plane(origin, (0, 0, 0))


class TestParameters:
    """Test parameter normalization shared by all generators."""

    def test_tuple_or_scalar(self):
        c = circle(origin, 1.0, zaxis)
        assert evaluate(c, 0.5) == evaluate(c, (0.5,)) == evaluate(c, [0.5])

    def test_wrong_arity(self):
        c = circle(origin, 1.0, zaxis)
        with pytest.raises(DomainError) as exc:
            evaluate(c, (0.1, 0.2))
        assert exc.value.code == "E102"

    @pytest.mark.parametrize("bad", [nan, inf, -inf, True, "0.5", None])
    def test_non_finite_parameter(self, bad):
        c = circle(origin, 1.0, zaxis)
        with pytest.raises(DomainError):
            evaluate(c, bad)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            evaluate(line(origin, xaxis), 2.0)
        assert issubclass(DomainError, EvalError)

    def test_error_json(self):
        with pytest.raises(DomainError) as exc:
            evaluate(line(origin, xaxis), 2.0)
        data = exc.value.to_json()
        assert data["code"] == "E101"
        assert data["kind"] == "DomainError"
        assert data["parameter"] == [2.0]
