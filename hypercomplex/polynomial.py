"""
Polynomial container.

Coefficients are stored lowest degree first and may be numbers of any kind.
The indeterminate is written to the right of its coefficient, which fixes
the meaning of evaluation for quaternion coefficients and arguments.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Any, ClassVar

from pydantic import Field, field_validator

from .core.errors import CoercionError
from .value import NumericContainer, NumericKind, Operator


class Polynomial(NumericContainer):
    """
    Polynomial with numeric coefficients.

    Examples:
        >>> Polynomial([1, 0, 2])(3)   # 1 + 2*x**2 at x = 3
        19
    """

    kind: ClassVar[NumericKind] = NumericKind.POLYNOMIAL

    coefficients: tuple = Field(default=(0,))

    def __init__(self, coefficients: Any = (0,), **kwargs: Any) -> None:
        super().__init__(coefficients=coefficients, **kwargs)

    @field_validator("coefficients", mode="before")
    @classmethod
    def _validate_coefficients(cls, value):
        from .coercion import is_number

        coefficients = list(value)
        for coefficient in coefficients:
            if not is_number(coefficient):
                raise ValueError(
                    f"Polynomial coefficient must be a number, got {type(coefficient).__name__}"
                )
        while len(coefficients) > 1 and coefficients[-1] == 0:
            coefficients.pop()
        return tuple(coefficients) or (0,)

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    def __call__(self, argument: Any) -> Any:
        """Evaluate by Horner's rule: ``((c_n*x + c_n-1)*x + ...) + c_0``."""
        result = self.coefficients[-1]
        for coefficient in reversed(self.coefficients[:-1]):
            result = result * argument + coefficient
        return result

    def __repr__(self) -> str:
        return f"Polynomial({self.coefficients!r})"

    def distribute(self, operator: Operator, scalar: Any, reflected: bool = False) -> Polynomial:
        """
        Combine with a single number.

        ``+`` and ``-`` act on the constant coefficient, ``*`` and ``/`` on
        every coefficient. A number divided by a polynomial is not a
        polynomial.
        """
        head, *rest = self.coefficients
        if operator in (Operator.ADD, Operator.SUB):
            if reflected:
                constant = operator.apply(scalar, head)
                if operator is Operator.SUB:
                    rest = [-c for c in rest]
            else:
                constant = operator.apply(head, scalar)
            return Polynomial([constant, *rest])
        if reflected and operator is Operator.DIV:
            raise CoercionError(operator.value, scalar, self)
        if reflected:
            return Polynomial([operator.apply(scalar, c) for c in self.coefficients])
        return Polynomial([operator.apply(c, scalar) for c in self.coefficients])

    def _combine(self, operator: Operator, other: Any, reflected: bool = False) -> Any:
        from .coercion import is_number

        if is_number(other):
            return self.distribute(operator, other, reflected)
        return NotImplemented

    # Arithmetic operators

    def __add__(self, other: Any) -> Any:
        if isinstance(other, Polynomial):
            return Polynomial(
                [a + b for a, b in zip_longest(self.coefficients, other.coefficients, fillvalue=0)]
            )
        return self._combine(Operator.ADD, other)

    def __radd__(self, other: Any) -> Any:
        return self._combine(Operator.ADD, other, reflected=True)

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, Polynomial):
            return Polynomial(
                [a - b for a, b in zip_longest(self.coefficients, other.coefficients, fillvalue=0)]
            )
        return self._combine(Operator.SUB, other)

    def __rsub__(self, other: Any) -> Any:
        return self._combine(Operator.SUB, other, reflected=True)

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Polynomial):
            product = [0] * (len(self.coefficients) + len(other.coefficients) - 1)
            for m, a in enumerate(self.coefficients):
                for n, b in enumerate(other.coefficients):
                    product[m + n] = product[m + n] + a * b
            return Polynomial(product)
        return self._combine(Operator.MUL, other)

    def __rmul__(self, other: Any) -> Any:
        return self._combine(Operator.MUL, other, reflected=True)

    def __truediv__(self, other: Any) -> Any:
        return self._combine(Operator.DIV, other)

    def __rtruediv__(self, other: Any) -> Any:
        return self._combine(Operator.DIV, other, reflected=True)

    def __neg__(self) -> Polynomial:
        return Polynomial([-c for c in self.coefficients])

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.coefficients == other.coefficients

    def __hash__(self) -> int:
        return hash(self.coefficients)
