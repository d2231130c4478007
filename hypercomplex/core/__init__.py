"""Core utilities package"""

from .config import (
    AbsPolicy,
    DivisionPolicy,
    Settings,
    ToleranceMode,
    get_settings,
)
from .errors import (
    CoercionError,
    DivisionByZero,
    DomainError,
    ExponentTypeError,
    HypercomplexError,
)
from .logging import get_context_logger, get_logger, setup_logging

__all__ = [
    "AbsPolicy",
    "DivisionPolicy",
    "Settings",
    "ToleranceMode",
    "get_settings",
    "setup_logging",
    "get_logger",
    "get_context_logger",
    "HypercomplexError",
    "DivisionByZero",
    "DomainError",
    "ExponentTypeError",
    "CoercionError",
]
