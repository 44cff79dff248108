"""Unit tests for the error hierarchy and logging setup."""

import logging

import pytest
from planegeo.exceptions import (
    GeometryError,
    ArityError,
    TypeMismatchError,
    EncodingNotImplementedError,
    DecodeError,
    ConfigurationError,
)
from planegeo.utils.log import setup_logging


class TestErrors:
    """Tests for error codes and messages."""

    @pytest.mark.parametrize("error,code", [
        (ArityError("bad count", expected=4, actual=3), "ARITY_MISMATCH"),
        (TypeMismatchError("bad type", observed="str"), "TYPE_MISMATCH"),
        (EncodingNotImplementedError("no path", type_name="Path"), "NOT_IMPLEMENTED"),
        (DecodeError("bad json", text="{"), "DECODE_ERROR"),
        (ConfigurationError("bad style", config_key="point"), "CONFIG_ERROR"),
    ])
    def test_error_codes(self, error, code):
        assert isinstance(error, GeometryError)
        assert error.error_code == code
        assert str(error) == f"[{code}] {error.message}"

    def test_base_without_code(self):
        assert str(GeometryError("plain")) == "plain"

    def test_code_is_per_class(self):
        assert ArityError.error_code == "ARITY_MISMATCH"
        assert GeometryError.error_code is None
        assert GeometryError("custom", error_code="X").error_code == "X"

    def test_arity_attributes(self):
        e = ArityError("bad count", expected=2, actual=6, multiple=True)
        assert (e.expected, e.actual, e.multiple) == (2, 6, True)


class TestSetupLogging:
    """Tests for setup_logging."""

    @pytest.fixture
    def restore_package_logger(self):
        package = logging.getLogger("planegeo")
        handlers, level = package.handlers[:], package.level
        yield
        for h in package.handlers:
            if h not in handlers:
                h.close()
        package.handlers[:] = handlers
        package.setLevel(level)

    def test_console_only(self, restore_package_logger):
        root_handlers = logging.getLogger().handlers[:]
        logger = setup_logging(logging.DEBUG)
        assert logger.name == "planegeo"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logging.getLogger().handlers == root_handlers

    def test_repeated_setup_replaces_handlers(self, restore_package_logger):
        setup_logging(logging.INFO)
        logger = setup_logging(logging.WARNING)
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING

    def test_with_file(self, restore_package_logger, tmp_path):
        log_file = tmp_path / "planegeo.log"
        logger = setup_logging(logging.INFO, str(log_file))
        logging.getLogger("planegeo.test").info("hello")
        for h in logger.handlers:
            h.flush()
        assert "hello" in log_file.read_text(encoding="utf-8")

    def test_unwritable_file_keeps_console(self, restore_package_logger, tmp_path, caplog):
        log_file = tmp_path / "missing" / "planegeo.log"
        logger = setup_logging(logging.INFO, str(log_file))
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)
        assert "Could not open log file" in caplog.text
