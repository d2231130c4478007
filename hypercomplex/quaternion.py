"""
Quaternion value.

Rank-4 hypercomplex value ``real + i*I + j*J + k*K`` under Hamilton's
multiplication table::

    I*I = J*J = K*K = -1
    I*J = K   J*K = I   K*I = J
    J*I = -K  K*J = -I  I*K = -J

Multiplication does not commute; every product keeps the operand order it
was given.

The unreal part ``u = i*I + j*J + k*K`` squares to ``-|u|**2``, so
``u / |u|`` behaves exactly like the imaginary unit. Transcendental
functions therefore evaluate the Complex kernel on ``(real, |u|)`` and map
the imaginary result back along ``u / |u|``.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, ClassVar

from pydantic import Field, field_validator

from . import stability
from .core.errors import CoercionError, DivisionByZero, DomainError
from .numeric import Complex
from .value import HypercomplexValue, NumericKind, PartsFunction, RealScalar, as_real_scalar


def _unscale(value: RealScalar, exponent: int) -> RealScalar:
    return math.ldexp(value, -exponent) if exponent else value


class Quaternion(HypercomplexValue):
    """
    Quaternion value.

    Examples:
        >>> Quaternion(0, 1, 0, 0) * Quaternion(0, 0, 1, 0)
        Quaternion(0, 0, 0, 1)
        >>> str(Quaternion(1, 2, 3, 4))
        '(1 i: 2 j: 3 k: 4)'
    """

    kind: ClassVar[NumericKind] = NumericKind.QUATERNION

    real: Any = Field(default=0, description="The real part")
    i: Any = Field(default=0, description="The I component")
    j: Any = Field(default=0, description="The J component")
    k: Any = Field(default=0, description="The K component")

    def __init__(
        self,
        real: RealScalar = 0,
        i: RealScalar = 0,
        j: RealScalar = 0,
        k: RealScalar = 0,
        **kwargs
    ):
        super().__init__(real=real, i=i, j=j, k=k, **kwargs)

    @field_validator("real", "i", "j", "k", mode="before")
    @classmethod
    def _validate_part(cls, value: Any) -> RealScalar:
        return as_real_scalar(value)

    # Construction

    @classmethod
    def zero(cls) -> Quaternion:
        return cls(0, 0, 0, 0)

    @classmethod
    def one(cls) -> Quaternion:
        return cls(1, 0, 0, 0)

    @classmethod
    def from_real(cls, value: RealScalar) -> Quaternion:
        return cls(value, 0, 0, 0)

    @classmethod
    def from_complex(cls, value: Any) -> Quaternion:
        """Embed a Complex (or builtin complex) using I as the imaginary axis."""
        if isinstance(value, Complex):
            return cls(value.real, value.imaginary, 0, 0)
        return cls(value.real, value.imag, 0, 0)

    @classmethod
    def adapt(cls, value: Any) -> Quaternion:
        if isinstance(value, Quaternion):
            return value
        if isinstance(value, numbers.Real):
            return cls.from_real(value)
        if isinstance(value, (Complex, numbers.Complex)):
            return cls.from_complex(value)
        raise CoercionError("adapt", value, cls.__name__)

    @property
    def parts(self) -> tuple:
        return (self.real, self.i, self.j, self.k)

    # Ring operations

    def _multiply(self, other: Quaternion) -> Quaternion:
        a1, b1, c1, d1 = self.parts
        a2, b2, c2, d2 = other.parts
        return Quaternion(
            a1 * a2 - b1 * b2 - c1 * c2 - d1 * d2,
            a1 * b2 + b1 * a2 + c1 * d2 - d1 * c2,
            a1 * c2 - b1 * d2 + c1 * a2 + d1 * b2,
            a1 * d2 + b1 * c2 - c1 * b2 + d1 * a2,
        )

    def _scaled(self) -> tuple:
        """
        ``(exponent, q)`` with ``self == q * 2**exponent`` and the largest part of
        ``q`` in ``[0.5, 1)``, so squaring ``q`` neither overflows nor underflows.

        Only float parts are scaled; exact parts come back unchanged with
        exponent 0. Scaling by a power of two loses no digits.
        """
        if not any(isinstance(part, float) for part in self.parts):
            return 0, self
        largest = max(abs(part) for part in self.parts)
        if largest == 0 or not math.isfinite(largest):
            return 0, self
        exponent = math.frexp(largest)[1]
        return exponent, Quaternion(*(math.ldexp(part, -exponent) for part in self.parts))

    def _divide(self, other: Quaternion) -> Quaternion:
        # right division: self * other**-1
        exponent, scaled = other._scaled()
        product = self._multiply(scaled.conjugate())
        norm = scaled.squared_norm()
        return Quaternion(*(_unscale(part / norm, exponent) for part in product.parts))

    def conjugate(self) -> Quaternion:
        return Quaternion(self.real, -self.i, -self.j, -self.k)

    def reciprocal(self) -> Quaternion:
        """
        Multiplicative inverse, ``conjugate / squared_norm``.

        The norm is taken on a power-of-two rescaled copy, so huge and tiny
        nonzero quaternions both invert.

        Raises:
            DivisionByZero: If self is zero
        """
        if self.is_zero():
            raise DivisionByZero("reciprocal", self)
        exponent, scaled = self._scaled()
        norm = scaled.squared_norm()
        return Quaternion(*(_unscale(part / norm, exponent) for part in scaled.conjugate().parts))


    def unreal(self) -> Quaternion:
        return Quaternion(0, self.i, self.j, self.k)

    def unreal_abs(self) -> RealScalar:
        return stability.secure_norm(self.i, self.j, self.k)

    def angle(self) -> float:
        """
        Angle between self and the positive real axis, in ``[0, pi]``.

        Raises:
            DomainError: If self is zero
        """
        magnitude = self.abs_secure()
        if magnitude == 0:
            raise DomainError("angle", self)
        return math.acos(max(-1, min(1, self.real / magnitude)))

    def angle_in_degrees(self) -> float:
        return math.degrees(self.angle())

    def _lift(self, kernel: PartsFunction) -> Quaternion:
        magnitude = self.unreal_abs()
        x, y = kernel(self.real, magnitude)
        if magnitude == 0:
            # direction is arbitrary for a real argument; use I
            return Quaternion(x, y, 0, 0)
        scale = y / magnitude
        return Quaternion(x, self.i * scale, self.j * scale, self.k * scale)

    # Reduction and conversions

    def reduce(self) -> Any:
        """
        Least general equivalent value.

        Returns the real part when ``i = j = k = 0``, a Complex on the I axis
        when ``j = k = 0``, otherwise self.
        """
        if self.j == 0 and self.k == 0:
            return Complex(self.real, self.i).reduce()
        return self

    def as_complex(self) -> Complex:
        if self.j != 0 or self.k != 0:
            raise DomainError("as_complex", self)
        return Complex(self.real, self.i)

    def as_quaternion(self) -> Quaternion:
        return self

    def to_string(self) -> str:
        return f"({self.real} i: {self.i} j: {self.j} k: {self.k})"

    def to_python(self) -> tuple:
        return self.parts

    def __hash__(self) -> int:
        if self.j == 0 and self.k == 0:
            return hash(Complex(self.real, self.i))
        return hash(self.parts)
