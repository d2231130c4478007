"""
Base classes for the hypercomplex numeric tower.

This module provides the foundation shared by Complex and Quaternion:
- Numeric kind ordering used by the coercion protocol
- Operator overloading that re-sends mixed-kind operations through coercion
- Exponentiation, logarithms and the transcendental functions, each computed
  by one two-scalar kernel from ``stability``
- Fuzzy comparison with tolerances

Containers (Vector, Polynomial) share the ``NumericContainer`` base so the
coercion protocol can hand them scalars to distribute.
"""

from __future__ import annotations

import numbers
import operator
from abc import ABC, abstractmethod
from enum import Enum, IntEnum
from typing import Any, Callable, ClassVar, Iterable, Optional, Union

import numpy as np
from pydantic import BaseModel, ConfigDict

from . import stability
from .core.config import AbsPolicy, ToleranceMode, get_settings
from .core.errors import DivisionByZero, DomainError, ExponentTypeError
from .core.logging import get_context_logger

logger = get_context_logger(__name__, component="value")

RealScalar = Union[int, float, numbers.Real]
PartsFunction = Callable[[RealScalar, RealScalar], stability.Parts]


class NumericKind(IntEnum):
    """
    Generality ordering of the numeric kinds.

    Lower values adapt to higher values. Containers sit above every number
    and distribute operations over their elements instead of promoting.
    """

    INTEGER = 0
    RATIONAL = 1
    FLOAT = 2
    COMPLEX = 3
    QUATERNION = 4
    VECTOR = 5
    POLYNOMIAL = 6

    @property
    def is_real(self) -> bool:
        return self <= NumericKind.FLOAT

    @property
    def is_container(self) -> bool:
        return self >= NumericKind.VECTOR


class Operator(str, Enum):
    """Binary operator tags carried through the coercion protocol."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    EQ = "="

    def apply(self, left: Any, right: Any) -> Any:
        return _OPERATIONS[self](left, right)


_OPERATIONS = {
    Operator.ADD: operator.add,
    Operator.SUB: operator.sub,
    Operator.MUL: operator.mul,
    Operator.DIV: operator.truediv,
    Operator.EQ: operator.eq,
}


def as_real_scalar(value: Any) -> RealScalar:
    """Validate one component part; ``bool`` is stored as ``int``."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, numbers.Real):
        return value
    raise ValueError(f"Expected a real scalar part, got {type(value).__name__}")


class HypercomplexValue(BaseModel, ABC):
    """
    Base class for immutable hypercomplex values.

    Provides:
    - Operator overloading (``+ - * / ** ==`` in both directions)
    - Norm policies, exponentiation and transcendental functions
    - Fuzzy comparison

    Subclasses must implement:
    - kind: Class variable placing the type in the coercion ordering
    - parts, the constructors and the same-kind ring operations
    - _lift, which applies a two-scalar kernel to the value
    """

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[NumericKind]

    # Construction

    @classmethod
    @abstractmethod
    def zero(cls) -> HypercomplexValue:
        """Additive identity."""

    @classmethod
    @abstractmethod
    def one(cls) -> HypercomplexValue:
        """Multiplicative identity."""

    @classmethod
    @abstractmethod
    def adapt(cls, value: Any) -> HypercomplexValue:
        """Promote a value of the same or a less general kind to this type."""

    @property
    @abstractmethod
    def parts(self) -> tuple:
        """Components in constructor order."""

    def _with_parts(self, parts: Iterable[RealScalar]) -> HypercomplexValue:
        return type(self)(*parts)

    # Same-kind algebra

    @abstractmethod
    def _multiply(self, other: HypercomplexValue) -> HypercomplexValue:
        pass

    @abstractmethod
    def _divide(self, other: HypercomplexValue) -> HypercomplexValue:
        pass

    @abstractmethod
    def conjugate(self) -> HypercomplexValue:
        pass

    @abstractmethod
    def reciprocal(self) -> HypercomplexValue:
        pass

    @abstractmethod
    def reduce(self) -> Any:
        """Least general kind that represents this value exactly."""

    @abstractmethod
    def _lift(self, kernel: PartsFunction) -> HypercomplexValue:
        """Apply a ``stability`` kernel to this value."""

    @abstractmethod
    def as_complex(self) -> HypercomplexValue:
        pass

    @abstractmethod
    def as_quaternion(self) -> HypercomplexValue:
        pass

    @abstractmethod
    def to_string(self) -> str:
        pass

    @abstractmethod
    def to_python(self) -> Any:
        pass

    @abstractmethod
    def __hash__(self) -> int:
        pass

    def squared_norm(self) -> RealScalar:
        """``self * conjugate(self)`` as a real scalar."""
        return sum(part * part for part in self.parts)

    def is_zero(self) -> bool:
        return all(part == 0 for part in self.parts)

    def abs_naive(self) -> float:
        return stability.naive_norm(*self.parts)

    def abs_secure(self) -> RealScalar:
        return stability.secure_norm(*self.parts)

    # Capability queries

    def is_number(self) -> bool:
        return True

    def is_complex(self) -> bool:
        return self.kind is NumericKind.COMPLEX

    def is_quaternion(self) -> bool:
        return self.kind is NumericKind.QUATERNION

    # String representations

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({', '.join(repr(part) for part in self.parts)})"

    def to_numpy(self) -> np.ndarray:
        return np.array(self.parts, dtype=np.float64)

    # Operator overloading

    def __add__(self, other: Any) -> Any:
        if type(other) is type(self):
            return self._with_parts(x + y for x, y in zip(self.parts, other.parts))
        return self._coerce(Operator.ADD, self, other)

    def __radd__(self, other: Any) -> Any:
        return self._coerce(Operator.ADD, other, self)

    def __sub__(self, other: Any) -> Any:
        if type(other) is type(self):
            return self._with_parts(x - y for x, y in zip(self.parts, other.parts))
        return self._coerce(Operator.SUB, self, other)

    def __rsub__(self, other: Any) -> Any:
        return self._coerce(Operator.SUB, other, self)

    def __mul__(self, other: Any) -> Any:
        if type(other) is type(self):
            return self._multiply(other)
        return self._coerce(Operator.MUL, self, other)

    def __rmul__(self, other: Any) -> Any:
        return self._coerce(Operator.MUL, other, self)

    def __truediv__(self, other: Any) -> Any:
        if type(other) is type(self):
            if other.is_zero():
                logger.debug("Division by zero", extra_data={"dividend": repr(self)})
                raise DivisionByZero("division", other)
            return self._divide(other)
        return self._coerce(Operator.DIV, self, other)

    def __rtruediv__(self, other: Any) -> Any:
        return self._coerce(Operator.DIV, other, self)

    def __eq__(self, other: Any) -> Any:
        if type(other) is type(self):
            return self.parts == other.parts
        return self._coerce(Operator.EQ, self, other)

    def __ne__(self, other: Any) -> Any:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __neg__(self) -> HypercomplexValue:
        return self._with_parts(-part for part in self.parts)

    def __pos__(self) -> HypercomplexValue:
        return self

    def __abs__(self) -> RealScalar:
        """Norm computed with the configured policy."""
        if get_settings().ABS_POLICY is AbsPolicy.NAIVE:
            return self.abs_naive()
        return self.abs_secure()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __pow__(self, other: Any) -> HypercomplexValue:
        return self.raised_to(other)

    def __rpow__(self, other: Any) -> Any:
        from .coercion import adapt_to, kind_of

        other_kind = kind_of(other)
        if other_kind is None or other_kind.is_container:
            return NotImplemented
        return adapt_to(other, max(other_kind, self.kind)).raised_to(self)

    @staticmethod
    def _coerce(operator: Operator, left: Any, right: Any) -> Any:
        from .coercion import coerce_and_send

        return coerce_and_send(operator, left, right)

    # Comparison

    def compare(
        self,
        other: Any,
        tolerance: Optional[float] = None,
        mode: Union[ToleranceMode, str, None] = None,
    ) -> bool:
        """
        Fuzzy comparison with tolerance.

        Args:
            other: Value of any numeric kind to compare against
            tolerance: Allowed distance (settings default when omitted)
            mode: relative or absolute (settings default when omitted)

        Returns:
            True if ``|self - other|`` is within tolerance
        """
        from .coercion import is_number

        if not is_number(other):
            return False

        settings = get_settings()
        if tolerance is None:
            tolerance = settings.COMPARE_TOLERANCE
        mode = ToleranceMode(mode) if mode is not None else settings.COMPARE_MODE

        difference = abs(self - other)
        if mode is ToleranceMode.ABSOLUTE:
            return difference <= tolerance
        return difference <= tolerance * max(abs(self), abs(other))

    # Exponentiation

    def raised_to_integer(self, exponent: int) -> HypercomplexValue:
        """
        Integer power by repeated squaring.

        Raises:
            ExponentTypeError: If exponent is not integral
            DivisionByZero: If self is zero and exponent is negative
        """
        if not isinstance(exponent, numbers.Integral):
            raise ExponentTypeError(exponent)
        if exponent < 0:
            if self.is_zero():
                raise DivisionByZero("raised_to", self)
            return self.raised_to_integer(-exponent).reciprocal()
        if exponent == 1:
            return self

        result = self.one()
        base = self
        remaining = int(exponent)
        while remaining:
            if remaining & 1:
                result = result * base
            remaining >>= 1
            if remaining:
                base = base * base
        return result

    def raised_to(self, exponent: Any) -> HypercomplexValue:
        """
        Power with any numeric exponent.

        Integral exponents are exact; other exponents use
        ``exp(exponent * ln(self))``.
        """
        from .coercion import kind_of

        if isinstance(exponent, numbers.Integral):
            return self.raised_to_integer(exponent)

        exponent_kind = kind_of(exponent)
        if exponent_kind is None or exponent_kind.is_container:
            raise ExponentTypeError(exponent, "a number")
        if exponent == 0:
            return self.one()
        if exponent == 1:
            return self
        if self.is_zero():
            if exponent_kind.is_real and exponent > 0:
                return self.zero()
            if exponent_kind.is_real:
                raise DivisionByZero("raised_to", self)
            raise DomainError("raised_to", self)
        return (exponent * self.ln()).exp()

    # Transcendental functions

    def exp(self) -> HypercomplexValue:
        return self._lift(stability.exp_parts)

    def ln(self) -> HypercomplexValue:
        """Principal natural logarithm; undefined at zero."""
        return self._lift(stability.ln_parts)

    def log(self, base: Any) -> HypercomplexValue:
        """Logarithm to an arbitrary numeric base, ``ln(self) / ln(base)``."""
        from .coercion import adapt_to, kind_of

        base_kind = kind_of(base)
        if base_kind is None or base_kind.is_container:
            raise ExponentTypeError(base, "a number")
        return self.ln() / adapt_to(base, max(base_kind, self.kind)).ln()

    def sqrt(self) -> HypercomplexValue:
        return self._lift(stability.sqrt_parts)

    def cos(self) -> HypercomplexValue:
        return self._lift(stability.cos_parts)

    def sin(self) -> HypercomplexValue:
        return self._lift(stability.sin_parts)

    def tan(self) -> HypercomplexValue:
        return self._lift(stability.tan_parts)

    def cosh(self) -> HypercomplexValue:
        return self._lift(stability.cosh_parts)

    def sinh(self) -> HypercomplexValue:
        return self._lift(stability.sinh_parts)

    def tanh(self) -> HypercomplexValue:
        return self._lift(stability.tanh_parts)

    def arcsin(self) -> HypercomplexValue:
        return self._lift(stability.arcsin_parts)

    def arccos(self) -> HypercomplexValue:
        return self._lift(stability.arccos_parts)

    def arctan(self) -> HypercomplexValue:
        return self._lift(stability.arctan_parts)

    def arsinh(self) -> HypercomplexValue:
        return self._lift(stability.arsinh_parts)

    def arccosh(self) -> HypercomplexValue:
        return self._lift(stability.arccosh_parts)

    def artanh(self) -> HypercomplexValue:
        return self._lift(stability.artanh_parts)


class NumericContainer(BaseModel, ABC):
    """
    Base class for aggregates of numbers (Vector, Polynomial).

    A container never promotes; when combined with a single number it
    applies the operator to its elements, keeping the operand order.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: ClassVar[NumericKind]

    @abstractmethod
    def distribute(self, operator: Operator, scalar: Any, reflected: bool = False) -> NumericContainer:
        """
        Combine every element with ``scalar``.

        Args:
            operator: Operator to apply
            scalar: A single number of any kind
            reflected: True when ``scalar`` is the left operand
        """

    def is_number(self) -> bool:
        return False
