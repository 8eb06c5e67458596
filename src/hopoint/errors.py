"""
Construction and evaluation exceptions.

Error code ranges:
- E1xx: Domain errors (parameter outside a generator's domain)
- E2xx: Degenerate input (construction arguments that make no sense)
- E3xx: Numeric errors (non-finite results during evaluation)

All errors derive from ``EvalError``, which is a ``ValueError`` so that
callers treating bad geometry input as a value problem keep working.
"""

from typing import Any, Optional, Sequence


class EvalError(ValueError):
    """Base exception for construction and evaluation failures."""

    code = "E000"

    def __init__(self, message: str, *, code: Optional[str] = None,
                 node: Optional[str] = None,
                 parameter: Optional[Sequence[float]] = None):
        if code is not None:
            self.code = code
        self.message = message
        self.node = node
        self.parameter = tuple(parameter) if parameter is not None else None
        super().__init__(message)

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.node is not None:
            parts.append(f"in {self.node}")
        if self.parameter is not None:
            parts.append(f"at parameter {self.parameter}")
        return " ".join(parts)

    def to_json(self) -> dict:
        """Convert to JSON-serializable dict for tooling integration."""
        return {
            "code": self.code,
            "kind": self.__class__.__name__,
            "message": self.message,
            "node": self.node,
            "parameter": list(self.parameter) if self.parameter is not None else None,
        }


class DomainError(EvalError):
    """Parameter or constant argument outside the valid domain (E1xx)."""
    code = "E100"


class DegenerateInputError(DomainError):
    """Construction arguments that make a generator meaningless (E2xx)."""
    code = "E200"


class NumericError(EvalError):
    """Evaluation produced a non-finite coordinate (E3xx)."""
    code = "E300"


# --- Domain error codes ---

def error_outside_domain(value: float, lo: float, hi: float, *,
                         node: str = None, parameter=None) -> DomainError:
    """E101: Parameter component outside a bounded interval."""
    return DomainError(
        f"parameter value {value!r} outside domain [{lo}, {hi}]",
        code="E101", node=node, parameter=parameter,
    )


def error_wrong_arity(expected: int, got: int, *, node: str = None,
                      parameter=None) -> DomainError:
    """E102: Parameter has the wrong number of components."""
    return DomainError(
        f"expected {expected} parameter component(s), got {got}",
        code="E102", node=node, parameter=parameter,
    )


def error_non_finite_parameter(value: Any, *, node: str = None,
                               parameter=None) -> DomainError:
    """E103: Parameter component is not a finite number."""
    return DomainError(
        f"parameter value {value!r} is not a finite number",
        code="E103", node=node, parameter=parameter,
    )


def error_bad_argument(name: str, value: Any, *, node: str = None) -> DomainError:
    """E104: Constant argument is not a finite number or point."""
    return DomainError(
        f"bad value for {name}: {value!r}",
        code="E104", node=node,
    )


# --- Degenerate input error codes ---

def error_non_positive(name: str, value: float, *, node: str = None) -> DegenerateInputError:
    """E201: A length that must be positive is not."""
    return DegenerateInputError(
        f"{name} must be positive, got {value!r}",
        code="E201", node=node,
    )


def error_zero_vector(name: str, *, node: str = None) -> DegenerateInputError:
    """E202: A direction vector has zero length."""
    return DegenerateInputError(
        f"{name} cannot be the zero vector",
        code="E202", node=node,
    )


def error_zero_scalar(name: str, *, node: str = None) -> DegenerateInputError:
    """E205: A factor that must be non-zero is zero."""
    return DegenerateInputError(
        f"{name} cannot be zero",
        code="E205", node=node,
    )


def error_domain_mismatch(left, right, *, node: str = None) -> DegenerateInputError:
    """E203: Generators that must share a parameter domain do not."""
    return DegenerateInputError(
        f"generators do not share a parameter domain: {left} vs {right}",
        code="E203", node=node,
    )


def error_bad_structure(message: str, *, node: str = None) -> DegenerateInputError:
    """E204: Child generator has the wrong shape for this combinator."""
    return DegenerateInputError(message, code="E204", node=node)


# --- Numeric error codes ---

def error_non_finite_result(value, *, node: str = None, parameter=None) -> NumericError:
    """E301: Evaluation produced NaN or infinity."""
    return NumericError(
        f"evaluation produced non-finite point {value}",
        code="E301", node=node, parameter=parameter,
    )


def error_zero_tangent(*, node: str = None, parameter=None) -> NumericError:
    """E302: Finite difference tangent vanished."""
    return NumericError(
        "path tangent has zero length",
        code="E302", node=node, parameter=parameter,
    )


__all__ = [
    "EvalError",
    "DomainError",
    "DegenerateInputError",
    "NumericError",
    "error_outside_domain",
    "error_wrong_arity",
    "error_non_finite_parameter",
    "error_bad_argument",
    "error_non_positive",
    "error_zero_vector",
    "error_zero_scalar",
    "error_domain_mismatch",
    "error_bad_structure",
    "error_non_finite_result",
    "error_zero_tangent",
]
