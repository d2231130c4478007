"""
Numerically careful kernels shared by Complex and Quaternion.

Every function here works on two real scalars ``(a, b)`` standing for
``a + b*u`` where ``u`` is any square root of -1. Complex passes
``(real, imaginary)``; Quaternion passes ``(real, |unreal|)`` and maps the
returned imaginary part back onto its unreal direction. Results are
``(real, imaginary)`` tuples.
"""

from __future__ import annotations

import math
import numbers
from typing import Tuple, Union

from .core.errors import DivisionByZero, DomainError

RealScalar = Union[int, float, numbers.Real]
Parts = Tuple[RealScalar, RealScalar]

HALF_PI = math.pi / 2

# beyond this |real part| tanh is ±1 to double precision
TANH_CUTOFF = 20.0


def sign_copy(magnitude: RealScalar, sign_source: RealScalar) -> float:
    """Return ``|magnitude|`` carrying the sign of ``sign_source`` (``-0.0`` is negative)."""
    return math.copysign(magnitude, sign_source)


def _clamp_unit(value: RealScalar) -> RealScalar:
    return max(-1, min(1, value))


# Norms

def naive_norm(*parts: RealScalar) -> float:
    """Euclidean norm as ``sqrt(sum of squares)``; overflows for huge parts."""
    return math.sqrt(sum(part * part for part in parts))


def secure_norm(*parts: RealScalar) -> RealScalar:
    """
    Euclidean norm scaled by the largest component.

    Dividing by ``scale = max(|part|)`` before squaring keeps the squares in
    ``[0, 1]``, so astronomically large parts do not overflow and tiny ones
    do not underflow to zero.
    """
    scale = max(abs(part) for part in parts)
    if scale == 0:
        return 0
    if math.isinf(scale):
        return scale
    return scale * math.sqrt(sum((part / scale) * (part / scale) for part in parts))


# Division

def divide_parts_ratio(a: RealScalar, b: RealScalar, c: RealScalar, d: RealScalar) -> Parts:
    """
    ``(a + bu) / (c + du)`` with three divisions.

    Scales by the ratio of the smaller to the larger divisor component, so no
    intermediate is squared.
    """
    if c == 0 and d == 0:
        raise DivisionByZero("division", (c, d))
    if abs(c) >= abs(d):
        ratio = d / c
        denominator = c + d * ratio
        return (a + b * ratio) / denominator, (b - a * ratio) / denominator
    ratio = c / d
    denominator = c * ratio + d
    return (a * ratio + b) / denominator, (b * ratio - a) / denominator


def divide_parts_normalized(a: RealScalar, b: RealScalar, c: RealScalar, d: RealScalar) -> Parts:
    """
    ``(a + bu) / (c + du)`` with six divisions.

    Both operands are first normalized by ``|c| + |d|``.
    """
    if c == 0 and d == 0:
        raise DivisionByZero("division", (c, d))
    scale = abs(c) + abs(d)
    a, b, c, d = a / scale, b / scale, c / scale, d / scale
    denominator = c * c + d * d
    return (a * c + b * d) / denominator, (b * c - a * d) / denominator


# Angle, exponential, logarithm, roots

def arg_parts(a: RealScalar, b: RealScalar) -> float:
    """Four-quadrant angle of ``a + bu`` in ``(-pi, pi]``."""
    if a == 0 and b == 0:
        raise DomainError("arg", 0)
    theta = math.atan2(b, a)
    return math.pi if theta == -math.pi else theta


def exp_parts(a: RealScalar, b: RealScalar) -> Parts:
    scale = math.exp(a)
    return scale * math.cos(b), scale * math.sin(b)


def ln_parts(a: RealScalar, b: RealScalar) -> Parts:
    theta = arg_parts(a, b)
    return math.log(secure_norm(a, b)), theta


def sqrt_parts(a: RealScalar, b: RealScalar) -> Parts:
    """
    Principal square root.

    The imaginary part of the root has the sign of ``b``; a nonnegative real
    input gives exactly its nonnegative real root.
    """
    if b == 0:
        if a >= 0:
            return math.sqrt(a), 0
        return 0, sign_copy(math.sqrt(-a), b)
    # halve before adding so huge parts do not overflow
    t = math.sqrt(abs(a) / 2 + secure_norm(a, b) / 2)
    if a >= 0:
        return t, b / (2 * t)
    return abs(b) / (2 * t), sign_copy(t, b)


# Hyperbolic and circular functions, all expressed through cosh/sinh

def cosh_parts(a: RealScalar, b: RealScalar) -> Parts:
    return math.cosh(a) * math.cos(b), math.sinh(a) * math.sin(b)


def sinh_parts(a: RealScalar, b: RealScalar) -> Parts:
    return math.sinh(a) * math.cos(b), math.cosh(a) * math.sin(b)


def cos_parts(a: RealScalar, b: RealScalar) -> Parts:
    # cos z = cosh(uz)
    return cosh_parts(-b, a)


def sin_parts(a: RealScalar, b: RealScalar) -> Parts:
    # sin z = -u sinh(uz)
    x, y = sinh_parts(-b, a)
    return y, -x


def tan_parts(a: RealScalar, b: RealScalar) -> Parts:
    # tan z = -u tanh(uz)
    x, y = tanh_parts(-b, a)
    return y, -x


def tanh_parts(a: RealScalar, b: RealScalar) -> Parts:
    """
    Hyperbolic tangent over the denominator ``sinh(a)**2 + cos(b)**2``.

    That denominator equals ``(cosh 2a + cos 2b) / 2`` with nothing to cancel.
    Past ``TANH_CUTOFF`` the real part is ``±1`` to working precision and the
    imaginary part is taken as ``4 sin(b) cos(b) exp(-2|a|)``, so neither
    ``sinh`` nor ``cosh`` is evaluated.
    """
    if abs(a) > TANH_CUTOFF:
        return sign_copy(1.0, a), 4 * math.sin(b) * math.cos(b) * math.exp(-2 * abs(a))
    sinh_a = math.sinh(a)
    cos_b = math.cos(b)
    denominator = sinh_a * sinh_a + cos_b * cos_b
    if denominator == 0:
        raise DomainError("tanh", (a, b))
    return sinh_a * math.cosh(a) / denominator, math.sin(b) * cos_b / denominator


# Inverse functions

def _arcsin_intermediates(a: RealScalar, b: RealScalar) -> Tuple[float, float]:
    """
    ``(|sinh y|, cosh y)`` for ``x + uy`` whose sine (or cosine) is ``a + bu``.

    ``sinh(y)**2`` is the positive root of
    ``s**2 - 2*tmp*s - b**2 = 0`` with ``tmp = (a**2 + b**2 - 1) / 2``.
    When ``tmp < 0`` the root is taken in its quotient form so the sum never
    cancels.
    """
    tmp = (a * a + b * b - 1) / 2
    delta = tmp * tmp + b * b
    if tmp >= 0:
        sh2y = tmp + math.sqrt(delta)
    else:
        sh2y = b * b / (math.sqrt(delta) - tmp)
    shy = math.sqrt(sh2y)
    chy = math.sqrt(1 + sh2y)
    return shy, chy


def _arcosh_of(shy: float, chy: float) -> float:
    # ln(shy + chy) without losing digits when shy is small
    return math.log1p(shy + shy * shy / (chy + 1))


def arcsin_parts(a: RealScalar, b: RealScalar) -> Parts:
    if b == 0:
        if abs(a) <= 1:
            return math.asin(a), 0
        return sign_copy(HALF_PI, a), math.acosh(abs(a))
    shy, chy = _arcsin_intermediates(a, b)
    x = math.atan2(a * shy, abs(b) * chy)
    y = sign_copy(_arcosh_of(shy, chy), b)
    return x, y


def arccos_parts(a: RealScalar, b: RealScalar) -> Parts:
    if b == 0:
        if abs(a) <= 1:
            return math.acos(a), 0
        return (0 if a > 0 else math.pi), -math.acosh(abs(a))
    shy, chy = _arcsin_intermediates(a, b)
    x = math.atan2(abs(b) * chy, a * shy)
    y = -sign_copy(_arcosh_of(shy, chy), b)
    return x, y


def artanh_parts(a: RealScalar, b: RealScalar) -> Parts:
    if b == 0:
        if abs(a) < 1:
            return math.atanh(a), 0
        if abs(a) == 1:
            raise DomainError("artanh", a)
        return math.atanh(1 / a), HALF_PI
    one_minus = 1 - a
    denominator = one_minus * one_minus + b * b
    x = math.log1p(4 * a / denominator) / 4
    y = math.atan2(2 * b, one_minus * (1 + a) - b * b) / 2
    return x, y


def arctan_parts(a: RealScalar, b: RealScalar) -> Parts:
    if b == 0:
        return math.atan(a), 0
    # arctan z = -u artanh(uz)
    if a == 0 and abs(b) == 1:
        raise DomainError("arctan", (a, b))
    x, y = artanh_parts(-b, a)
    return y, -x


def arsinh_parts(a: RealScalar, b: RealScalar) -> Parts:
    if b == 0:
        return math.asinh(a), 0
    # arsinh z = -u arcsin(uz)
    x, y = arcsin_parts(-b, a)
    return y, -x


def arccosh_parts(a: RealScalar, b: RealScalar) -> Parts:
    # arccosh z = u arccos z or -u arccos z, whichever has nonnegative real part
    x, y = arccos_parts(a, b)
    if y < 0 or (y == 0 and sign_copy(1, b) > 0):
        return -y, x
    return y, -x

