"""Parameter domains for generators.

A generator declares one ``Interval`` per parameter component.  An
interval is either *bounded* (values outside ``[lo, hi]`` are rejected
with :class:`~hopoint.errors.DomainError`) or *periodic* (values wrap
into ``[lo, hi)``).  Unbounded components use ``REAL_LINE``.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from math import inf, isfinite, isnan
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from hopoint.errors import (
    DegenerateInputError,
    error_bad_argument,
    error_non_finite_parameter,
    error_outside_domain,
)
from hopoint.geom import pi2

Parameter = Union[float, Sequence[float], np.ndarray]


@dataclass(frozen=True)
class Interval:
    """One component of a parameter domain."""

    lo: float
    hi: float
    periodic: bool = False

    def __post_init__(self):
        if isnan(self.lo) or isnan(self.hi) or not self.lo < self.hi:
            raise DegenerateInputError(f"empty interval [{self.lo}, {self.hi}]")
        if self.periodic and not self.bounded:
            raise DegenerateInputError("periodic interval must have finite bounds")

    def __str__(self) -> str:
        close = ")" if self.periodic else "]"
        return f"[{self.lo}, {self.hi}{close}" + (" periodic" if self.periodic else "")

    @property
    def bounded(self) -> bool:
        return isfinite(self.lo) and isfinite(self.hi)

    @property
    def length(self) -> float:
        return self.hi - self.lo

    def contains(self, x: float) -> bool:
        if self.periodic:
            return isfinite(x)
        return self.lo <= x <= self.hi

    def resolve(self, x: float, *, node: str = None, parameter=None) -> float:
        """Return ``x`` mapped into this interval.

        Periodic intervals wrap; bounded ones raise ``DomainError`` for
        values outside ``[lo, hi]``.
        """
        if self.periodic:
            if self.lo <= x < self.hi:
                return x
            r = self.lo + (x - self.lo) % self.length
            # float modulo can round up onto the excluded upper bound
            if r >= self.hi:
                r = self.lo
            return r
        if x < self.lo or x > self.hi:
            raise error_outside_domain(x, self.lo, self.hi,
                                       node=node, parameter=parameter)
        return x

    def affine_preimage(self, scale: float, offset: float) -> "Interval":
        """Interval of ``t`` such that ``scale * t + offset`` lies in this one."""
        a = (self.lo - offset) / scale
        b = (self.hi - offset) / scale
        if scale < 0:
            a, b = b, a
        return Interval(a, b, self.periodic)


REAL_LINE = Interval(-inf, inf)
UNIT = Interval(0.0, 1.0)
ANGLE = Interval(0.0, pi2, periodic=True)

Domain = Tuple[Interval, ...]


def normalize_parameter(parameter: Parameter, *, node: str = None) -> Tuple[float, ...]:
    """Return ``parameter`` as a tuple of finite floats.

    A bare number becomes a 1-tuple; lists, tuples and one-dimensional
    numpy arrays give one component per element.  Booleans, non-numbers,
    NaN and infinities raise ``DomainError``.
    """
    if isinstance(parameter, np.ndarray):
        if parameter.ndim > 1:
            raise error_bad_argument("parameter", parameter.shape, node=node)
        components = tuple(parameter.reshape(-1).tolist())
    elif isinstance(parameter, (list, tuple)):
        components = tuple(parameter)
    else:
        components = (parameter,)
    result = []
    for c in components:
        if isinstance(c, bool) or not isinstance(c, numbers.Real):
            raise error_non_finite_parameter(c, node=node)
        value = float(c)
        if not isfinite(value):
            raise error_non_finite_parameter(c, node=node)
        result.append(value)
    return tuple(result)


def same_domain(a: Domain, b: Domain) -> bool:
    return len(a) == len(b) and all(x == y for x, y in zip(a, b))


def merge_domain(a: Domain, b: Domain) -> Optional[Domain]:
    """Domain on which two generators are both defined, or ``None``.

    Components must agree, except that ``REAL_LINE`` (a component the
    generator ignores or accepts everywhere) yields to the other side.
    """
    if len(a) != len(b):
        return None
    merged = []
    for x, y in zip(a, b):
        if x == y or y == REAL_LINE:
            merged.append(x)
        elif x == REAL_LINE:
            merged.append(y)
        else:
            return None
    return tuple(merged)


__all__ = [
    "Parameter",
    "Interval",
    "Domain",
    "REAL_LINE",
    "UNIT",
    "ANGLE",
    "normalize_parameter",
    "same_domain",
    "merge_domain",
]
