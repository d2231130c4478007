"""Tests for configuration, errors and logging."""

import json
import logging

import pytest
from pydantic import ValidationError

from hypercomplex import Complex
from hypercomplex.core import (
    AbsPolicy,
    CoercionError,
    DivisionByZero,
    DivisionPolicy,
    DomainError,
    ExponentTypeError,
    HypercomplexError,
    ToleranceMode,
    get_context_logger,
    get_settings,
    setup_logging,
)
from hypercomplex.core.logging import StructuredFormatter, TextFormatter


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self):
        """Test default policies."""
        settings = get_settings()
        assert settings.ABS_POLICY is AbsPolicy.SECURE
        assert settings.DIVISION_POLICY is DivisionPolicy.RATIO
        assert settings.COMPARE_MODE is ToleranceMode.RELATIVE
        assert settings.COMPARE_TOLERANCE == 1e-9

    def test_cached(self):
        """Test settings are built once."""
        assert get_settings() is get_settings()

    def test_environment_override(self, use_settings):
        """Test HYPERCOMPLEX_* variables override defaults."""
        settings = use_settings(ABS_POLICY="naive", COMPARE_TOLERANCE="0.001", COMPARE_MODE="absolute")
        assert settings.ABS_POLICY is AbsPolicy.NAIVE
        assert settings.COMPARE_TOLERANCE == 0.001
        assert settings.COMPARE_MODE is ToleranceMode.ABSOLUTE

    def test_invalid_value(self, use_settings):
        """Test an unknown policy is rejected."""
        with pytest.raises(ValidationError):
            use_settings(DIVISION_POLICY="fastest")

    def test_compare_uses_settings(self, use_settings):
        """Test compare() defaults come from settings."""
        assert not Complex(1000, 0).compare(1000.5)
        use_settings(COMPARE_TOLERANCE="1", COMPARE_MODE="absolute")
        assert Complex(1000, 0).compare(1000.5)


class TestErrors:
    """Test the exception hierarchy."""

    @pytest.mark.parametrize(
        "error, builtin",
        [
            (DivisionByZero("division", 0), ZeroDivisionError),
            (DomainError("ln", 0), ValueError),
            (ExponentTypeError(0.5), TypeError),
            (CoercionError("+", 1, "x"), TypeError),
        ],
    )
    def test_hierarchy(self, error, builtin):
        """Test each error is also the natural builtin exception."""
        assert isinstance(error, HypercomplexError)
        assert isinstance(error, builtin)

    def test_messages(self):
        """Test error messages."""
        assert str(DivisionByZero("division")) == "Division by zero in division"
        assert str(DomainError("ln", 0)) == "ln is undefined at 0"
        assert str(ExponentTypeError(0.5)) == "Exponent must be an integer, got float"
        assert str(CoercionError("+", 1, "x")) == "Cannot apply '+' to int and str"

    def test_to_dict(self):
        """Test structured error output."""
        data = DomainError("arg", 0).to_dict()
        assert data["type"] == "DomainError"
        assert data["message"] == "arg is undefined at 0"
        assert data["details"] == {"function": "arg", "argument": "0"}


@pytest.fixture
def package_logger():
    """The package logger, restored after the test."""
    logger = logging.getLogger("hypercomplex")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)


class TestLogging:
    """Test logging configuration."""

    def _record(self, **extra):
        record = logging.LogRecord("hypercomplex.test", logging.DEBUG, __file__, 1, "hello", None, None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_structured_formatter(self):
        """Test JSON output includes extra data."""
        output = json.loads(StructuredFormatter().format(self._record(extra_data={"target": "COMPLEX"})))
        assert output["message"] == "hello"
        assert output["level"] == "DEBUG"
        assert output["target"] == "COMPLEX"

    def test_text_formatter(self):
        """Test text output."""
        output = TextFormatter().format(self._record())
        assert "hypercomplex.test - DEBUG - hello" in output

    def test_setup_logging_json(self, use_settings, package_logger):
        """Test setup_logging installs a JSON handler."""
        use_settings(LOG_FORMAT="json", LOG_LEVEL="debug")
        setup_logging()
        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1
        assert isinstance(package_logger.handlers[0].formatter, StructuredFormatter)

    def test_setup_logging_file(self, use_settings, package_logger, tmp_path):
        """Test setup_logging adds a file handler."""
        log_file = tmp_path / "logs" / "hypercomplex.log"
        use_settings(LOG_FILE=str(log_file))
        setup_logging()
        assert len(package_logger.handlers) == 2
        assert log_file.parent.is_dir()
        for handler in package_logger.handlers:
            handler.close()

    def test_context_logger(self, caplog):
        """Test permanent context is merged into extra_data."""
        logger = get_context_logger("hypercomplex.test", component="test")
        with caplog.at_level(logging.DEBUG, logger="hypercomplex.test"):
            logger.debug("event", extra_data={"size": 2})
        assert caplog.records[0].extra_data == {"component": "test", "size": 2}
