# -*- coding: utf-8 -*-
"""
hopoint: points in 3D space as higher-order functions.

A generator maps a parameter to a point; combinators build generators
from generators.  Trees of generators are immutable and are only
evaluated on demand.

Usage:
    from hopoint import circle, twist, evaluate, zaxis

    ring = twist(circle((0, 0, 0), 1.0, zaxis), zaxis, rate=1.0)
    p = evaluate(ring, (0.0, 3.14159))
"""

from importlib.metadata import PackageNotFoundError, version

from .geom import Point3, Vector3, origin, point, xaxis, yaxis, zaxis
from .errors import (
    EvalError,
    DomainError,
    DegenerateInputError,
    NumericError,
)
from .domain import Interval, REAL_LINE, UNIT, ANGLE
from .tree import Node, NodeVisitor, walk, depth, format_tree, print_tree
from .generators import circle, line, bezier, plane
from .combinators import (
    twist,
    connect,
    add,
    sub,
    loft,
    translate,
    scale,
    rotate,
    reparam,
    lift,
    derivative,
)
from .evaluate import Evaluator, evaluate

try:
    __version__ = version("higher-order-point")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"


__all__ = [
    # Values
    "Point3",
    "Vector3",
    "point",
    "origin",
    "xaxis",
    "yaxis",
    "zaxis",
    # Errors
    "EvalError",
    "DomainError",
    "DegenerateInputError",
    "NumericError",
    # Domains
    "Interval",
    "REAL_LINE",
    "UNIT",
    "ANGLE",
    # Tree
    "Node",
    "NodeVisitor",
    "walk",
    "depth",
    "format_tree",
    "print_tree",
    # Construction API
    "circle",
    "line",
    "bezier",
    "plane",
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
    # Evaluation API
    "Evaluator",
    "evaluate",
]
