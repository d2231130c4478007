"""
hypercomplex - Complex and Quaternion values over the real numeric tower

Immutable hypercomplex value types with:
- Exact ring arithmetic over int/Fraction parts
- Numerically secure norms, division and transcendental functions
- Double-dispatch coercion with int, Fraction, float, complex,
  Vector and Polynomial operands
- Reduction to the least general equivalent kind
"""

import logging

from .coercion import (
    adapt_to,
    as_complex,
    as_quaternion,
    coerce_and_send,
    is_number,
    kind_of,
    reciprocal,
    reduced,
)
from .core.config import AbsPolicy, DivisionPolicy, ToleranceMode, get_settings
from .core.errors import (
    CoercionError,
    DivisionByZero,
    DomainError,
    ExponentTypeError,
    HypercomplexError,
)
from .geometric import Vector
from .numeric import Complex
from .polynomial import Polynomial
from .quaternion import Quaternion
from .solver import Singular, Solution, SolveResult, solve
from .value import HypercomplexValue, NumericContainer, NumericKind, Operator

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "HypercomplexValue",
    "NumericContainer",
    "NumericKind",
    "Operator",
    "Complex",
    "Quaternion",
    "Vector",
    "Polynomial",
    "kind_of",
    "is_number",
    "adapt_to",
    "coerce_and_send",
    "as_complex",
    "as_quaternion",
    "reduced",
    "reciprocal",
    "solve",
    "Solution",
    "Singular",
    "SolveResult",
    "AbsPolicy",
    "DivisionPolicy",
    "ToleranceMode",
    "get_settings",
    "HypercomplexError",
    "DivisionByZero",
    "DomainError",
    "ExponentTypeError",
    "CoercionError",
]
