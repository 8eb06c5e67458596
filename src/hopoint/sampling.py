"""Parameter grid sampling for composition trees.

Turns a generator into an array of points by evaluating it over a
regular parameter grid.  This is the bridge to renderers and exporters,
which consume plain ``numpy`` arrays of shape ``(..., 3)``.
"""

from __future__ import annotations

import itertools
import logging
from typing import Optional, Sequence, Tuple

import numpy as np

from hopoint.domain import Interval
from hopoint.evaluate import evaluate
from hopoint.geom import Point3
from hopoint.tree import Node

logger = logging.getLogger(__name__)

Span = Tuple[float, float]


def parameter_axis(interval: Interval, count: int, span: Optional[Span] = None) -> np.ndarray:
    """Return ``count`` parameter values covering ``interval``.

    Periodic intervals omit the upper bound (it coincides with the
    lower one); bounded intervals include both ends.  Unbounded
    intervals need an explicit ``span``, which overrides the interval
    bounds in any case.
    """
    if count < 1:
        raise ValueError('count must be >= 1')
    if span is not None:
        lo, hi = float(span[0]), float(span[1])
        return np.linspace(lo, hi, count)
    if not interval.bounded:
        raise ValueError(f'interval {interval} is unbounded; pass an explicit span')
    if interval.periodic:
        return np.linspace(interval.lo, interval.hi, count, endpoint=False)
    return np.linspace(interval.lo, interval.hi, count)


def sample_grid(node: Node, axes: Sequence[Sequence[float]]) -> np.ndarray:
    """Evaluate ``node`` at every combination of the per-component ``axes``.

    Returns an array of shape ``(len(axes[0]), len(axes[1]), ..., 3)``.
    Errors raised by :func:`~hopoint.evaluate.evaluate` propagate.
    """
    if len(axes) != node.arity:
        raise ValueError(f'need {node.arity} parameter axes, got {len(axes)}')
    values = [np.asarray(a, dtype=float) for a in axes]
    shape = tuple(len(a) for a in values)
    out = np.empty(shape + (3,), dtype=float)
    logger.debug("sampling %s over grid %s", node.kind, shape)
    for index in itertools.product(*(range(n) for n in shape)):
        param = tuple(float(values[k][i]) for k, i in enumerate(index))
        out[index] = evaluate(node, param).to_tuple()
    logger.debug("sampled %d points from %s", int(np.prod(shape)), node.kind)
    return out


def sample_curve(node: Node, count: int = 50, span: Optional[Span] = None) -> np.ndarray:
    """Sample a single-parameter generator into a ``(count, 3)`` array."""
    if node.arity != 1:
        raise ValueError(f'sample_curve needs a single-parameter generator, got arity {node.arity}')
    return sample_grid(node, [parameter_axis(node.domain[0], count, span)])


def sample_surface(node: Node, counts: Tuple[int, int] = (10, 30),
                   spans: Optional[Sequence[Optional[Span]]] = None) -> np.ndarray:
    """Sample a two-parameter generator into a ``(nu, nv, 3)`` array."""
    if node.arity != 2:
        raise ValueError(f'sample_surface needs a two-parameter generator, got arity {node.arity}')
    spans = spans or (None, None)
    axes = [parameter_axis(interval, n, span)
            for interval, n, span in zip(node.domain, counts, spans)]
    return sample_grid(node, axes)


def aabb(points) -> Tuple[Point3, Point3]:
    """Axis-aligned bounding box ``(min corner, max corner)`` of a point set.

    ``points`` may be any array-like of shape ``(..., 3)`` or an
    iterable of :class:`~hopoint.geom.Point3`.
    """
    if not isinstance(points, np.ndarray):
        points = [p.to_tuple() if isinstance(p, Point3) else p for p in points]
    arr = np.asarray(points, dtype=float).reshape(-1, 3)
    if arr.shape[0] == 0:
        raise ValueError('cannot compute bounding box of empty point set')
    lo = arr.min(axis=0)
    hi = arr.max(axis=0)
    return Point3(*(float(c) for c in lo)), Point3(*(float(c) for c in hi))


__all__ = [
    "parameter_axis",
    "sample_grid",
    "sample_curve",
    "sample_surface",
    "aabb",
]
