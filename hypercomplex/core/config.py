"""
Library configuration.

Centralized configuration management with environment variables.
"""

from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AbsPolicy(str, Enum):
    """Norm computation used by ``abs()``."""

    SECURE = "secure"  # scaled by the largest component
    NAIVE = "naive"  # sqrt of the sum of squares


class DivisionPolicy(str, Enum):
    """Complex division algorithm used by ``/``."""

    RATIO = "ratio"  # 3 divisions, scaled by the divisor component ratio
    NORMALIZED = "normalized"  # 6 divisions, normalized by |c| + |d|


class ToleranceMode(str, Enum):
    """Modes for fuzzy comparison."""

    RELATIVE = "relative"  # |a - b| <= tol * max(|a|, |b|)
    ABSOLUTE = "absolute"  # |a - b| <= tol


class Settings(BaseSettings):
    """Library settings"""

    model_config = SettingsConfigDict(
        env_prefix="HYPERCOMPLEX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Arithmetic
    ABS_POLICY: AbsPolicy = AbsPolicy.SECURE
    DIVISION_POLICY: DivisionPolicy = DivisionPolicy.RATIO

    # Fuzzy comparison
    COMPARE_TOLERANCE: float = 1e-9
    COMPARE_MODE: ToleranceMode = ToleranceMode.RELATIVE

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "text"  # json or text
    LOG_FILE: Optional[str] = None


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
