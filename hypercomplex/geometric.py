"""
Vector container.

A Vector holds numbers of any kind (real scalars, Complex, Quaternion) and
combines with a single number by applying the operator to each component.
"""

from __future__ import annotations

from typing import Any, ClassVar, Iterator

import numpy as np
from pydantic import Field, field_validator

from .value import NumericContainer, NumericKind, Operator


class Vector(NumericContainer):
    """
    Vector in n-dimensional space.

    Examples:
        >>> Vector(1, 2) * Complex(0, 1)
        Vector(Complex(0, 1), Complex(0, 2))
    """

    kind: ClassVar[NumericKind] = NumericKind.VECTOR

    components: tuple = Field(default_factory=tuple)

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize from positional components or a single list/tuple."""
        if len(args) == 1 and isinstance(args[0], (list, tuple)):
            args = tuple(args[0])
        if args:
            kwargs["components"] = args
        super().__init__(**kwargs)

    @field_validator("components", mode="before")
    @classmethod
    def _validate_components(cls, value):
        from .coercion import is_number

        components = tuple(value)
        for component in components:
            if not is_number(component):
                raise ValueError(f"Vector component must be a number, got {type(component).__name__}")
        return components

    def __len__(self) -> int:
        return len(self.components)

    def __getitem__(self, index: int) -> Any:
        return self.components[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self.components)

    def __repr__(self) -> str:
        return f"Vector({', '.join(repr(c) for c in self.components)})"

    def to_python(self) -> list:
        return [c.to_python() if hasattr(c, "to_python") else c for c in self.components]

    def to_numpy(self) -> np.ndarray:
        """Convert to NumPy array."""
        return np.array(self.to_python())

    def dot(self, other: Vector) -> Any:
        """Sum of ``self[n] * other[n]``, keeping the operand order."""
        self._check_dimension(other)
        return sum(a * b for a, b in zip(self.components, other.components))

    def _check_dimension(self, other: Vector) -> None:
        if len(self.components) != len(other.components):
            raise ValueError("Vectors must have same dimension")

    def distribute(self, operator: Operator, scalar: Any, reflected: bool = False) -> Vector:
        if reflected:
            return Vector([operator.apply(scalar, c) for c in self.components])
        return Vector([operator.apply(c, scalar) for c in self.components])

    def _combine(self, operator: Operator, other: Any, reflected: bool = False) -> Any:
        from .coercion import is_number

        if isinstance(other, Vector):
            self._check_dimension(other)
            left, right = (other, self) if reflected else (self, other)
            return Vector([operator.apply(a, b) for a, b in zip(left.components, right.components)])
        if is_number(other):
            return self.distribute(operator, other, reflected)
        return NotImplemented

    # Arithmetic operators

    def __add__(self, other: Any) -> Any:
        return self._combine(Operator.ADD, other)

    def __radd__(self, other: Any) -> Any:
        return self._combine(Operator.ADD, other, reflected=True)

    def __sub__(self, other: Any) -> Any:
        return self._combine(Operator.SUB, other)

    def __rsub__(self, other: Any) -> Any:
        return self._combine(Operator.SUB, other, reflected=True)

    def __mul__(self, other: Any) -> Any:
        """Scalar multiplication or dot product."""
        if isinstance(other, Vector):
            return self.dot(other)
        return self._combine(Operator.MUL, other)

    def __rmul__(self, other: Any) -> Any:
        return self._combine(Operator.MUL, other, reflected=True)

    def __truediv__(self, other: Any) -> Any:
        if isinstance(other, Vector):
            return NotImplemented
        return self._combine(Operator.DIV, other)

    def __rtruediv__(self, other: Any) -> Any:
        return self._combine(Operator.DIV, other, reflected=True)

    def __neg__(self) -> Vector:
        return Vector([-c for c in self.components])

    def __pos__(self) -> Vector:
        return self

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.components == other.components

    def __hash__(self) -> int:
        return hash(self.components)
