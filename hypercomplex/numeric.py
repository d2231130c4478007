"""
Complex number value.

Rank-2 hypercomplex value ``real + imaginary*i`` with ``i**2 = -1``. The
parts may be any real scalar (int, Fraction, float); exact parts stay exact
through the ring operations.
"""

from __future__ import annotations

import math
import numbers
import random
import sys
from typing import Any, ClassVar, Optional

from pydantic import Field, field_validator

from . import stability
from .core.config import DivisionPolicy, get_settings
from .core.errors import CoercionError
from .value import HypercomplexValue, NumericKind, PartsFunction, RealScalar, as_real_scalar


def complex_hash(real: RealScalar, imaginary: RealScalar) -> int:
    """
    ``hash(complex(real, imaginary))`` computed from the parts' own hashes.

    Integer parts too large for a float stay hashable, and every pair a
    builtin ``complex`` can hold hashes exactly as that ``complex`` does.
    """
    width = sys.hash_info.width
    combined = (hash(real) + sys.hash_info.imag * hash(imaginary)) & ((1 << width) - 1)
    if combined >= 1 << (width - 1):
        combined -= 1 << width
    return -2 if combined == -1 else combined


class Complex(HypercomplexValue):
    """
    Complex number value.

    Examples:
        >>> Complex(1, 2) * Complex(3, -1)
        Complex(5, 5)
        >>> str(Complex(1, -2))
        '1 - 2 i'
    """

    kind: ClassVar[NumericKind] = NumericKind.COMPLEX

    real: Any = Field(default=0, description="The real part")
    imaginary: Any = Field(default=0, description="The imaginary part")

    def __init__(self, real: RealScalar = 0, imaginary: RealScalar = 0, **kwargs):
        super().__init__(real=real, imaginary=imaginary, **kwargs)

    @field_validator("real", "imaginary", mode="before")
    @classmethod
    def _validate_part(cls, value: Any) -> RealScalar:
        return as_real_scalar(value)

    # Construction

    @classmethod
    def zero(cls) -> Complex:
        return cls(0, 0)

    @classmethod
    def one(cls) -> Complex:
        return cls(1, 0)

    @classmethod
    def from_real(cls, value: RealScalar) -> Complex:
        return cls(value, 0)

    @classmethod
    def from_polar(cls, magnitude: RealScalar, angle: RealScalar) -> Complex:
        """
        Build from magnitude and angle (radians).

        A zero angle keeps the magnitude exact.
        """
        if angle == 0:
            return cls(magnitude, 0)
        return cls(magnitude * math.cos(angle), magnitude * math.sin(angle))

    @classmethod
    def adapt(cls, value: Any) -> Complex:
        if isinstance(value, Complex):
            return value
        if isinstance(value, numbers.Real):
            return cls(value, 0)
        if isinstance(value, numbers.Complex):
            return cls(value.real, value.imag)
        raise CoercionError("adapt", value, cls.__name__)

    @classmethod
    def random(cls, rng: Optional[random.Random] = None) -> Complex:
        """
        Random value in the unit disc.

        Magnitude is drawn uniformly from ``[0, 1)`` and angle uniformly
        from ``[0, 2*pi)``.
        """
        rng = rng or random
        magnitude = rng.random()
        angle = rng.random() * 2 * math.pi
        return cls.from_polar(magnitude, angle)

    def random_within(self, rng: Optional[random.Random] = None) -> Complex:
        """Random value in the disc whose radius is ``abs(self)``."""
        return self * Complex.random(rng)

    @property
    def parts(self) -> tuple:
        return (self.real, self.imaginary)

    # Ring operations

    def _multiply(self, other: Complex) -> Complex:
        a, b = self.parts
        c, d = other.parts
        return Complex(a * c - b * d, a * d + b * c)

    def _divide(self, other: Complex) -> Complex:
        if get_settings().DIVISION_POLICY is DivisionPolicy.NORMALIZED:
            return self.divide_secure_normalized(other)
        return self.divide_secure_ratio(other)

    def divide_secure_ratio(self, other: Any) -> Complex:
        """Division with three real divisions (scaled by the divisor ratio)."""
        other = Complex.adapt(other)
        return Complex(*stability.divide_parts_ratio(*self.parts, *other.parts))

    def divide_secure_normalized(self, other: Any) -> Complex:
        """Division with six real divisions (normalized by ``|c| + |d|``)."""
        other = Complex.adapt(other)
        return Complex(*stability.divide_parts_normalized(*self.parts, *other.parts))

    def conjugate(self) -> Complex:
        return Complex(self.real, -self.imaginary)

    def reciprocal(self) -> Complex:
        """
        Multiplicative inverse.

        Raises:
            DivisionByZero: If self is zero
        """
        return self.one() / self

    def arg(self) -> float:
        """
        Angle with the positive real axis in ``(-pi, pi]``.

        Raises:
            DomainError: If self is zero
        """
        return stability.arg_parts(self.real, self.imaginary)

    def arg_in_degrees(self) -> float:
        return math.degrees(self.arg())

    def _lift(self, kernel: PartsFunction) -> Complex:
        return Complex(*kernel(self.real, self.imaginary))

    # Reduction and conversions

    def reduce(self) -> Any:
        """Real part alone when the imaginary part is zero, else self."""
        if self.imaginary == 0:
            return self.real
        return self

    def as_complex(self) -> Complex:
        return self

    def as_quaternion(self) -> Any:
        from .quaternion import Quaternion

        return Quaternion(self.real, self.imaginary, 0, 0)

    def to_string(self) -> str:
        """``"<real> + <imag> i"``, or ``-`` when the imaginary part is negative."""
        sign = "-" if self.imaginary < 0 else "+"
        return f"{self.real} {sign} {abs(self.imaginary)} i"

    def to_python(self) -> complex:
        return complex(self.real, self.imaginary)

    def __complex__(self) -> complex:
        return self.to_python()

    def __hash__(self) -> int:
        if self.imaginary == 0:
            return hash(self.real)
        return complex_hash(self.real, self.imaginary)
