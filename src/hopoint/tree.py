"""
Composition tree node definitions for hopoint.

A composition tree is an immutable, acyclic, ordered structure of
generator nodes.  Leaves are primitive generators holding constant
arguments (``Circle``, ``Line``, ...).  Interior nodes are combinators
holding their child generators plus combinator parameters (``Twist``,
``Connect``, ``Loft``, ...).  Nothing is evaluated when a tree is
built; see :mod:`hopoint.evaluate`.

Arguments are validated in ``__post_init__`` so that every way of
building a node (constructor functions, direct instantiation,
deserialization) enforces the same invariants.  Point-like arguments
given as 3-sequences are converted to :class:`~hopoint.geom.Point3`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from functools import cached_property
from typing import Any, ClassVar, Iterator, List, Tuple

from hopoint.domain import (
    ANGLE, REAL_LINE, UNIT, Domain, Interval, merge_domain, same_domain,
)
from hopoint.errors import (
    error_bad_argument,
    error_bad_structure,
    error_domain_mismatch,
    error_non_positive,
    error_zero_scalar,
    error_zero_vector,
)
from hopoint.geom import (
    Point3,
    diff_step,
    epsilon,
    isfinitenum,
    ispoint,
    mag,
    origin,
    point,
    scale3,
    zaxis,
)


# =============================================================================
# Argument checks
# =============================================================================

def _check_point(node: "Node", name: str) -> Point3:
    value = getattr(node, name)
    if not ispoint(value):
        raise error_bad_argument(name, value, node=node.kind)
    p = point(value)
    if not p.isfinite():
        raise error_bad_argument(name, value, node=node.kind)
    object.__setattr__(node, name, p)
    return p


def _check_direction(node: "Node", name: str) -> Point3:
    p = _check_point(node, name)
    if mag(p) < epsilon:
        raise error_zero_vector(name, node=node.kind)
    return p


def _check_scalar(node: "Node", name: str) -> float:
    value = getattr(node, name)
    if not isfinitenum(value):
        raise error_bad_argument(name, value, node=node.kind)
    object.__setattr__(node, name, float(value))
    return float(value)


def _check_child(node: "Node", name: str) -> "Node":
    value = getattr(node, name)
    if not isinstance(value, Node):
        raise error_bad_structure(
            f"{name} must be a generator node, got {type(value).__name__}",
            node=node.kind)
    return value


def _check_curve(node: "Node", name: str) -> "Node":
    child = _check_child(node, name)
    if child.arity != 1:
        raise error_bad_structure(
            f"{name} must take a single parameter, got arity {child.arity}",
            node=node.kind)
    return child


# =============================================================================
# Base Classes
# =============================================================================

@dataclass(frozen=True)
class Node(ABC):
    """Base class for all composition tree nodes."""

    kind: ClassVar[str] = "node"

    @property
    @abstractmethod
    def domain(self) -> Domain:
        """One :class:`~hopoint.domain.Interval` per parameter component."""

    @property
    def arity(self) -> int:
        return len(self.domain)

    @property
    def children(self) -> Tuple["Node", ...]:
        return ()

    def accept(self, visitor: "NodeVisitor", *args: Any) -> Any:
        """Accept a visitor for traversal."""
        method_name = f"visit_{self.__class__.__name__}"
        method = getattr(visitor, method_name, visitor.generic_visit)
        return method(self, *args)

    def evaluate(self, parameter) -> Point3:
        """Evaluate this generator at ``parameter``."""
        from hopoint.evaluate import evaluate
        return evaluate(self, parameter)

    def __call__(self, parameter) -> Point3:
        return self.evaluate(parameter)

    # generator arithmetic: node + node is pointwise, node + point translates
    def __add__(self, other):
        if isinstance(other, Node):
            return Add(self, other)
        if ispoint(other):
            return Translate(self, other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Node):
            return Sub(self, other)
        if ispoint(other):
            return Translate(self, scale3(point(other), -1.0))
        return NotImplemented


class NodeVisitor:
    """Base class for tree visitors."""

    def generic_visit(self, node: Node, *args: Any) -> Any:
        """Default visit method."""
        raise NotImplementedError(f"No visitor for {node.__class__.__name__}")


# =============================================================================
# Leaf Generators
# =============================================================================

@dataclass(frozen=True)
class Circle(Node):
    """Circle in the plane through ``center`` normal to ``normal``.

    Parameter is an angle in radians; the domain is periodic.
    """
    kind: ClassVar[str] = "circle"

    center: Point3 = origin
    radius: float = 1.0
    normal: Point3 = zaxis

    def __post_init__(self):
        _check_point(self, "center")
        r = _check_scalar(self, "radius")
        if r <= 0:
            raise error_non_positive("radius", r, node=self.kind)
        _check_direction(self, "normal")

    @property
    def domain(self) -> Domain:
        return (ANGLE,)


@dataclass(frozen=True)
class Line(Node):
    """Segment from ``p0`` (t=0) to ``p1`` (t=1); bounded domain."""
    kind: ClassVar[str] = "line"

    p0: Point3
    p1: Point3

    def __post_init__(self):
        _check_point(self, "p0")
        _check_point(self, "p1")

    @property
    def domain(self) -> Domain:
        return (UNIT,)


@dataclass(frozen=True)
class Bezier(Node):
    """Bezier curve over two or more control points, t in [0, 1]."""
    kind: ClassVar[str] = "bezier"

    controls: Tuple[Point3, ...]

    def __post_init__(self):
        ctrl = self.controls
        if not isinstance(ctrl, (list, tuple)) or len(ctrl) < 2:
            raise error_bad_structure("bezier needs at least 2 control points",
                                      node=self.kind)
        pts = []
        for i, c in enumerate(ctrl):
            if not ispoint(c) or not point(c).isfinite():
                raise error_bad_argument(f"controls[{i}]", c, node=self.kind)
            pts.append(point(c))
        object.__setattr__(self, "controls", tuple(pts))

    @property
    def domain(self) -> Domain:
        return (UNIT,)


@dataclass(frozen=True)
class Plane(Node):
    """Rectangular patch of the plane through ``origin`` normal to ``normal``."""
    kind: ClassVar[str] = "plane"

    origin: Point3 = origin
    normal: Point3 = zaxis
    u_range: Tuple[float, float] = (-1.0, 1.0)
    v_range: Tuple[float, float] = (-1.0, 1.0)

    def __post_init__(self):
        _check_point(self, "origin")
        _check_direction(self, "normal")
        for name in ("u_range", "v_range"):
            rng = getattr(self, name)
            if (not isinstance(rng, (list, tuple)) or len(rng) != 2
                    or not all(isfinitenum(x) for x in rng)):
                raise error_bad_argument(name, rng, node=self.kind)
            object.__setattr__(self, name, (float(rng[0]), float(rng[1])))
        # raises DegenerateInputError for empty ranges
        self.domain

    @cached_property
    def domain(self) -> Domain:
        return (Interval(*self.u_range), Interval(*self.v_range))


# =============================================================================
# Combinators
# =============================================================================

@dataclass(frozen=True)
class Twist(Node):
    """Rotate ``source`` about ``axis`` by ``rate * d``; ``d`` is an
    extra trailing parameter component."""
    kind: ClassVar[str] = "twist"

    source: Node
    axis: Point3 = zaxis
    rate: float = 1.0
    center: Point3 = origin

    def __post_init__(self):
        _check_child(self, "source")
        _check_direction(self, "axis")
        _check_scalar(self, "rate")
        _check_point(self, "center")

    @cached_property
    def domain(self) -> Domain:
        return self.source.domain + (REAL_LINE,)

    @property
    def children(self) -> Tuple[Node, ...]:
        return (self.source,)


@dataclass(frozen=True)
class Connect(Node):
    """Interpolate between ``a(v)`` and ``b(v)`` by a leading ``u`` in [0, 1]."""
    kind: ClassVar[str] = "connect"

    a: Node
    b: Node

    def __post_init__(self):
        a = _check_child(self, "a")
        b = _check_child(self, "b")
        if not same_domain(a.domain, b.domain):
            raise error_domain_mismatch(
                tuple(str(i) for i in a.domain),
                tuple(str(i) for i in b.domain),
                node=self.kind)

    @cached_property
    def domain(self) -> Domain:
        return (UNIT,) + self.a.domain

    @property
    def children(self) -> Tuple[Node, ...]:
        return (self.a, self.b)


def _check_pointwise(node: "Node") -> Domain:
    a = _check_child(node, "a")
    b = _check_child(node, "b")
    merged = merge_domain(a.domain, b.domain)
    if merged is None:
        raise error_domain_mismatch(
            tuple(str(i) for i in a.domain),
            tuple(str(i) for i in b.domain),
            node=node.kind)
    return merged


@dataclass(frozen=True)
class Add(Node):
    """Pointwise sum ``a(p) + b(p)``.

    Both generators receive the whole parameter.  Their domains must
    agree component by component, except where one side is unbounded
    (typically a ``Lift``), which then defers to the other side.
    """
    kind: ClassVar[str] = "add"

    a: Node
    b: Node

    def __post_init__(self):
        _check_pointwise(self)

    @cached_property
    def domain(self) -> Domain:
        return merge_domain(self.a.domain, self.b.domain)

    @property
    def children(self) -> Tuple[Node, ...]:
        return (self.a, self.b)


@dataclass(frozen=True)
class Sub(Node):
    """Pointwise difference ``a(p) - b(p)``; domains combine as for ``Add``."""
    kind: ClassVar[str] = "sub"

    a: Node
    b: Node

    def __post_init__(self):
        _check_pointwise(self)

    @cached_property
    def domain(self) -> Domain:
        return merge_domain(self.a.domain, self.b.domain)

    @property
    def children(self) -> Tuple[Node, ...]:
        return (self.a, self.b)


@dataclass(frozen=True)
class Loft(Node):
    """Sweep ``cross_section`` along the curve ``path``.

    The cross section is rotated so that ``up`` follows the path tangent
    and is then translated to the path point.
    """
    kind: ClassVar[str] = "loft"

    cross_section: Node
    path: Node
    up: Point3 = zaxis

    def __post_init__(self):
        _check_child(self, "cross_section")
        _check_curve(self, "path")
        _check_direction(self, "up")

    @cached_property
    def domain(self) -> Domain:
        return self.cross_section.domain + self.path.domain

    @property
    def children(self) -> Tuple[Node, ...]:
        return (self.cross_section, self.path)


@dataclass(frozen=True)
class Translate(Node):
    kind: ClassVar[str] = "translate"

    source: Node
    offset: Point3

    def __post_init__(self):
        _check_child(self, "source")
        _check_point(self, "offset")

    @property
    def domain(self) -> Domain:
        return self.source.domain

    @property
    def children(self) -> Tuple[Node, ...]:
        return (self.source,)


@dataclass(frozen=True)
class Scale(Node):
    kind: ClassVar[str] = "scale"

    source: Node
    factor: float
    center: Point3 = origin

    def __post_init__(self):
        _check_child(self, "source")
        f = _check_scalar(self, "factor")
        if f == 0.0:
            raise error_zero_scalar("factor", node=self.kind)
        _check_point(self, "center")

    @property
    def domain(self) -> Domain:
        return self.source.domain

    @property
    def children(self) -> Tuple[Node, ...]:
        return (self.source,)


@dataclass(frozen=True)
class Rotate(Node):
    kind: ClassVar[str] = "rotate"

    source: Node
    axis: Point3
    angle: float
    center: Point3 = origin

    def __post_init__(self):
        _check_child(self, "source")
        _check_direction(self, "axis")
        _check_scalar(self, "angle")
        _check_point(self, "center")

    @property
    def domain(self) -> Domain:
        return self.source.domain

    @property
    def children(self) -> Tuple[Node, ...]:
        return (self.source,)


@dataclass(frozen=True)
class Reparam(Node):
    """Evaluate ``source`` at ``scale * t + offset``."""
    kind: ClassVar[str] = "reparam"

    source: Node
    scale: float = 1.0
    offset: float = 0.0

    def __post_init__(self):
        _check_curve(self, "source")
        s = _check_scalar(self, "scale")
        if s == 0.0:
            raise error_zero_scalar("scale", node=self.kind)
        _check_scalar(self, "offset")
        # raises DegenerateInputError for an empty or overflowing periodic preimage
        self.domain

    @cached_property
    def domain(self) -> Domain:
        return (self.source.domain[0].affine_preimage(self.scale, self.offset),)

    @property
    def children(self) -> Tuple[Node, ...]:
        return (self.source,)


@dataclass(frozen=True)
class Lift(Node):
    """Add an ignored parameter component on the ``left`` or ``right``."""
    kind: ClassVar[str] = "lift"

    source: Node
    side: str = "right"

    def __post_init__(self):
        _check_child(self, "source")
        if self.side not in ("left", "right"):
            raise error_bad_structure(
                f"lift side must be 'left' or 'right', got {self.side!r}",
                node=self.kind)

    @cached_property
    def domain(self) -> Domain:
        if self.side == "left":
            return (REAL_LINE,) + self.source.domain
        return self.source.domain + (REAL_LINE,)

    @property
    def children(self) -> Tuple[Node, ...]:
        return (self.source,)


@dataclass(frozen=True)
class Derivative(Node):
    """Finite difference tangent of the curve ``source``."""
    kind: ClassVar[str] = "derivative"

    source: Node
    step: float = diff_step

    def __post_init__(self):
        _check_curve(self, "source")
        h = _check_scalar(self, "step")
        if h <= 0:
            raise error_non_positive("step", h, node=self.kind)

    @property
    def domain(self) -> Domain:
        return self.source.domain

    @property
    def children(self) -> Tuple[Node, ...]:
        return (self.source,)


NODE_TYPES = (
    Circle, Line, Bezier, Plane,
    Twist, Connect, Add, Sub, Loft, Translate, Scale, Rotate, Reparam, Lift, Derivative,
)


# =============================================================================
# Traversal Helpers
# =============================================================================

def walk(node: Node) -> Iterator[Node]:
    """Yield ``node`` and its descendants, depth first, parents first."""
    yield node
    for child in node.children:
        yield from walk(child)


def depth(node: Node) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    return 1 + max((depth(c) for c in node.children), default=0)


class FormatVisitor(NodeVisitor):
    """Visitor that renders the tree structure as indented lines."""

    def __init__(self, indent: int = 0):
        self.indent = indent
        self.lines: List[str] = []

    def _emit(self, text: str) -> None:
        self.lines.append("  " * self.indent + text)

    def generic_visit(self, node: Node, *args: Any) -> List[str]:
        parts = []
        for f in fields(node):
            value = getattr(node, f.name)
            if isinstance(value, Node):
                continue
            if isinstance(value, Point3):
                value = value.to_tuple()
            elif isinstance(value, tuple):
                value = tuple(v.to_tuple() if isinstance(v, Point3) else v for v in value)
            parts.append(f"{f.name}={value!r}")
        self._emit(f"{node.kind}({', '.join(parts)}) arity={node.arity}")
        for f in fields(node):
            value = getattr(node, f.name)
            if isinstance(value, Node):
                sub = FormatVisitor(self.indent + 1)
                sub._emit(f"{f.name}:")
                sub.indent += 1
                value.accept(sub)
                self.lines.extend(sub.lines)
        return self.lines


def format_tree(node: Node) -> str:
    """Return an indented description of ``node`` and its children."""
    return "\n".join(node.accept(FormatVisitor()))


def print_tree(node: Node) -> None:
    """Print a composition tree for debugging."""
    print(format_tree(node))


__all__ = [
    "Node",
    "NodeVisitor",
    "Circle",
    "Line",
    "Bezier",
    "Plane",
    "Twist",
    "Connect",
    "Add",
    "Sub",
    "Loft",
    "Translate",
    "Scale",
    "Rotate",
    "Reparam",
    "Lift",
    "Derivative",
    "NODE_TYPES",
    "walk",
    "depth",
    "FormatVisitor",
    "format_tree",
    "print_tree",
]
