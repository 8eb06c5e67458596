"""
Tree-walking evaluator for composition trees.

``evaluate(node, parameter)`` materializes one point.  Leaves check their
parameter components against their declared domain and compute a closed
form; combinator nodes check the components they consume, split the
parameter, evaluate their children and transform the child results.

Parameter splitting rules:

- ``Twist``: ``(*source, d)``, depth ``d`` is the trailing component
- ``Connect``: ``(u, *shared)``, ``u`` in [0, 1] is the leading component
- ``Loft``: ``(*cross_section, v)``, path parameter ``v`` is trailing
- ``Lift``: drops the first (``left``) or last (``right``) component
- ``Add``/``Sub``: both children get the whole parameter
- everything else passes the parameter through unchanged

Evaluation is a pure function of the tree and the parameter.  The first
error raised anywhere in the tree propagates to the caller.
"""

from math import cos, sin
from typing import Tuple

from hopoint import geom, xform
from hopoint.domain import UNIT, Parameter, normalize_parameter
from hopoint.errors import (
    error_non_finite_result,
    error_wrong_arity,
    error_zero_tangent,
)
from hopoint.geom import Point3
from hopoint.tree import (
    Add,
    Bezier,
    Circle,
    Connect,
    Derivative,
    Lift,
    Line,
    Loft,
    Node,
    NodeVisitor,
    Plane,
    Reparam,
    Rotate,
    Scale,
    Sub,
    Translate,
    Twist,
)

Params = Tuple[float, ...]


class Evaluator(NodeVisitor):
    """
    Evaluates composition tree nodes by dispatching to type-specific
    ``visit_*`` methods.  Holds no state, so one instance may be shared
    between threads.
    """

    def eval_node(self, node: Node, p: Params) -> Point3:
        """Evaluate ``node`` at the normalized parameter tuple ``p``."""
        if len(p) != node.arity:
            raise error_wrong_arity(node.arity, len(p), node=node.kind, parameter=p)
        result = node.accept(self, p)
        if not result.isfinite():
            raise error_non_finite_result(result, node=node.kind, parameter=p)
        return result

    def tangent(self, node: Node, t: float, step: float) -> Point3:
        """Finite difference derivative of the single-parameter ``node`` at ``t``.

        Central difference in the interior, one-sided at the bounds of
        a bounded interval so the stencil never leaves the domain.
        """
        interval = node.domain[0]
        if not interval.periodic and t - step < interval.lo:
            a, b, h = t, t + step, step
        elif not interval.periodic and t + step > interval.hi:
            a, b, h = t - step, t, step
        else:
            a, b, h = t - step, t + step, 2.0 * step
        pa = self.eval_node(node, (a,))
        pb = self.eval_node(node, (b,))
        return geom.scale3(geom.sub(pb, pa), 1.0 / h)

    # --- leaves ---

    def visit_Circle(self, node: Circle, p: Params) -> Point3:
        theta = node.domain[0].resolve(p[0], node=node.kind, parameter=p)
        u, v, _ = geom.plane_basis(node.normal)
        rc = node.radius * cos(theta)
        rs = node.radius * sin(theta)
        return Point3(node.center.x + rc * u.x + rs * v.x,
                      node.center.y + rc * u.y + rs * v.y,
                      node.center.z + rc * u.z + rs * v.z)

    def visit_Line(self, node: Line, p: Params) -> Point3:
        t = node.domain[0].resolve(p[0], node=node.kind, parameter=p)
        return geom.lerp(node.p0, node.p1, t)

    def visit_Bezier(self, node: Bezier, p: Params) -> Point3:
        t = node.domain[0].resolve(p[0], node=node.kind, parameter=p)
        # de Casteljau
        pts = list(node.controls)
        while len(pts) > 1:
            pts = [geom.lerp(pts[i], pts[i + 1], t) for i in range(len(pts) - 1)]
        return pts[0]

    def visit_Plane(self, node: Plane, p: Params) -> Point3:
        du, dv = node.domain
        s = du.resolve(p[0], node=node.kind, parameter=p)
        t = dv.resolve(p[1], node=node.kind, parameter=p)
        u, v, _ = geom.plane_basis(node.normal)
        return geom.add(node.origin, geom.add(geom.scale3(u, s), geom.scale3(v, t)))

    # --- combinators ---

    def visit_Twist(self, node: Twist, p: Params) -> Point3:
        q = self.eval_node(node.source, p[:-1])
        angle = node.rate * p[-1]
        if angle == 0.0:
            return q
        return xform.RotationAbout(node.center, node.axis, angle).mul(q)

    def visit_Connect(self, node: Connect, p: Params) -> Point3:
        u = UNIT.resolve(p[0], node=node.kind, parameter=p)
        rest = p[1:]
        a = self.eval_node(node.a, rest)
        b = self.eval_node(node.b, rest)
        return geom.lerp(a, b, u)

    def visit_Add(self, node: Add, p: Params) -> Point3:
        return geom.add(self.eval_node(node.a, p), self.eval_node(node.b, p))

    def visit_Sub(self, node: Sub, p: Params) -> Point3:
        return geom.sub(self.eval_node(node.a, p), self.eval_node(node.b, p))

    def visit_Loft(self, node: Loft, p: Params) -> Point3:
        n = node.cross_section.arity
        q = self.eval_node(node.cross_section, p[:n])
        v = p[n]
        base = self.eval_node(node.path, (v,))
        tangent = self.tangent(node.path, v, geom.diff_step)
        if geom.mag(tangent) < geom.epsilon:
            raise error_zero_tangent(node=node.kind, parameter=p)
        frame = xform.Align(node.up, tangent)
        return geom.add(base, frame.mul(q))

    def visit_Translate(self, node: Translate, p: Params) -> Point3:
        return geom.add(self.eval_node(node.source, p), node.offset)

    def visit_Scale(self, node: Scale, p: Params) -> Point3:
        q = self.eval_node(node.source, p)
        return xform.ScaleAbout(node.center, node.factor).mul(q)

    def visit_Rotate(self, node: Rotate, p: Params) -> Point3:
        q = self.eval_node(node.source, p)
        return xform.RotationAbout(node.center, node.axis, node.angle).mul(q)

    def visit_Reparam(self, node: Reparam, p: Params) -> Point3:
        t = node.domain[0].resolve(p[0], node=node.kind, parameter=p)
        s = node.scale * t + node.offset
        inner = node.source.domain[0]
        if not inner.periodic:
            # the bounds of the preimage can map back one ulp outside
            s = min(max(s, inner.lo), inner.hi)
        return self.eval_node(node.source, (s,))

    def visit_Lift(self, node: Lift, p: Params) -> Point3:
        inner = p[1:] if node.side == "left" else p[:-1]
        return self.eval_node(node.source, inner)

    def visit_Derivative(self, node: Derivative, p: Params) -> Point3:
        t = node.domain[0].resolve(p[0], node=node.kind, parameter=p)
        return self.tangent(node.source, t, node.step)


_EVALUATOR = Evaluator()


def evaluate(node: Node, parameter: Parameter) -> Point3:
    """Evaluate the composition tree ``node`` at ``parameter``.

    Parameters
    ----------
    node : Node
        Root of a composition tree.
    parameter : float, sequence of float or 1-d numpy array
        One value per component of ``node.domain``.  A bare number is
        accepted for single-parameter generators.

    Returns
    -------
    Point3
        The generated point.

    Raises
    ------
    DomainError
        Wrong number of components, a non-finite component, or a
        component outside a bounded domain.
    NumericError
        A node produced a non-finite coordinate.
    """
    if not isinstance(node, Node):
        raise TypeError(f"evaluate expects a composition tree node, got {type(node).__name__}")
    return _EVALUATOR.eval_node(node, normalize_parameter(parameter, node=node.kind))


__all__ = [
    "Evaluator",
    "evaluate",
]
