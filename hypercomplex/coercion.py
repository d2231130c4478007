"""
Cross-kind coercion protocol.

When a binary operator meets operands of different numeric kinds, the less
general operand adapts to the more general kind and the same operator is
sent again with homogeneous operands. Containers (Vector, Polynomial) do
not promote; they distribute the operation over their elements.

Ordering: integer < rational < float < Complex < Quaternion, then the
containers.
"""

from __future__ import annotations

import numbers
from fractions import Fraction
from typing import Any, Optional

from .core.errors import CoercionError, DivisionByZero
from .core.logging import get_context_logger
from .value import HypercomplexValue, NumericContainer, NumericKind, Operator

logger = get_context_logger(__name__, component="coercion")


def kind_of(value: Any) -> Optional[NumericKind]:
    """
    Numeric kind of any value, or None when it takes no part in the tower.

    ``bool`` counts as an integer and Python's builtin ``complex`` as a
    Complex.
    """
    if isinstance(value, (HypercomplexValue, NumericContainer)):
        return value.kind
    if isinstance(value, numbers.Integral):
        return NumericKind.INTEGER
    if isinstance(value, numbers.Rational):
        return NumericKind.RATIONAL
    if isinstance(value, numbers.Real):
        return NumericKind.FLOAT
    if isinstance(value, numbers.Complex):
        return NumericKind.COMPLEX
    return None


def is_number(value: Any) -> bool:
    """True for every single number of the tower, False for containers."""
    kind = kind_of(value)
    return kind is not None and not kind.is_container


def adapt_to(value: Any, kind: NumericKind) -> Any:
    """
    Promote ``value`` to ``kind``.

    Raises:
        CoercionError: If ``kind`` is less general than ``value`` or is a
            container kind
    """
    from .numeric import Complex
    from .quaternion import Quaternion

    value_kind = kind_of(value)
    if value_kind is None or value_kind > kind or kind.is_container:
        raise CoercionError("adapt", value, kind.name)
    if value_kind is kind and not isinstance(value, numbers.Complex):
        return value

    if kind is NumericKind.QUATERNION:
        return Quaternion.adapt(value)
    if kind is NumericKind.COMPLEX:
        return Complex.adapt(value)
    if kind is NumericKind.FLOAT:
        return float(value)
    if kind is NumericKind.RATIONAL:
        return Fraction(value)
    return value


def coerce_and_send(operator: Operator, left: Any, right: Any) -> Any:
    """
    Re-send ``left <operator> right`` once both sides share a kind.

    Returns NotImplemented when either operand is not part of the tower so
    Python can try the reflected operator.
    """
    left_kind, right_kind = kind_of(left), kind_of(right)
    if left_kind is None or right_kind is None:
        return NotImplemented

    if left_kind.is_container or right_kind.is_container:
        if operator is Operator.EQ:
            return False
        if left_kind.is_container and right_kind.is_container:
            raise CoercionError(operator.value, left, right)
        if left_kind.is_container:
            return left.distribute(operator, right, reflected=False)
        return right.distribute(operator, left, reflected=True)

    target = max(left_kind, right_kind)
    logger.debug(
        "Promoting operands",
        extra_data={
            "operator": operator.value,
            "left": left_kind.name,
            "right": right_kind.name,
            "target": target.name,
        },
    )
    return operator.apply(adapt_to(left, target), adapt_to(right, target))


def as_complex(value: Any) -> Any:
    """Complex view of a number; a Quaternion must have ``j = k = 0``."""
    if isinstance(value, HypercomplexValue):
        return value.as_complex()
    return adapt_to(value, NumericKind.COMPLEX)


def as_quaternion(value: Any) -> Any:
    """Quaternion view of any number."""
    return adapt_to(value, NumericKind.QUATERNION)


def reduced(value: Any) -> Any:
    """Least general equivalent of ``value``; real scalars are returned as is."""
    if isinstance(value, HypercomplexValue):
        return value.reduce()
    if isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real):
        return value.real if value.imag == 0 else value
    return value


def reciprocal(value: Any) -> Any:
    """
    Multiplicative inverse of any number.

    Integers invert exactly to a Fraction.
    """
    if isinstance(value, HypercomplexValue):
        return value.reciprocal()
    if value == 0:
        raise DivisionByZero("reciprocal", value)
    if isinstance(value, numbers.Integral):
        return Fraction(1, int(value))
    return 1 / value
