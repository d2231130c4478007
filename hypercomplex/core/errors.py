"""
Library exceptions.

Every failure raised by the numeric tower derives from ``HypercomplexError``
and from the builtin exception a caller would naturally catch for it.
"""

from typing import Any, Dict, Optional


class HypercomplexError(Exception):
    """Base exception for hypercomplex errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Structured form used in log records"""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class DivisionByZero(HypercomplexError, ZeroDivisionError):
    """Raised when dividing by, or inverting, the additive identity"""

    def __init__(self, operation: str, operand: Any = None):
        super().__init__(
            message=f"Division by zero in {operation}",
            details={"operation": operation, "operand": repr(operand)},
        )


class DomainError(HypercomplexError, ValueError):
    """Raised when a function is undefined at its argument"""

    def __init__(self, function: str, argument: Any = None):
        super().__init__(
            message=f"{function} is undefined at {argument!r}",
            details={"function": function, "argument": repr(argument)},
        )


class ExponentTypeError(HypercomplexError, TypeError):
    """Raised when an exponent has an unsupported type"""

    def __init__(self, exponent: Any, expected: str = "an integer"):
        super().__init__(
            message=f"Exponent must be {expected}, got {type(exponent).__name__}",
            details={"exponent": repr(exponent), "expected": expected},
        )


class CoercionError(HypercomplexError, TypeError):
    """Raised when two operands cannot be brought to a common kind"""

    def __init__(self, operator: str, left: Any, right: Any):
        super().__init__(
            message=(
                f"Cannot apply '{operator}' to "
                f"{type(left).__name__} and {type(right).__name__}"
            ),
            details={
                "operator": operator,
                "left": type(left).__name__,
                "right": type(right).__name__,
            },
        )
