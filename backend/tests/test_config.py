"""
Unit tests for configuration and logging setup.

Run with: pytest tests/test_config.py -v
"""

import logging

import pytest

from todo_service.application.common import ConfigurationError
from todo_service.config.logging_config import (
    NO_CORRELATION_ID,
    CorrelationIdFilter,
    SafeFormatter,
    correlation_id_var,
    setup_logging,
)
from todo_service.config.settings import (
    Config,
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    get_config,
)


class TestGetConfig:
    def test_named_environments(self):
        assert get_config("testing") is TestingConfig
        assert get_config("production") is ProductionConfig

    def test_unknown_environment_falls_back_to_development(self):
        assert get_config("staging") is DevelopmentConfig

    def test_reads_app_env(self, monkeypatch):
        monkeypatch.setenv("APP_ENV", "testing")

        assert get_config() is TestingConfig


class TestValidate:
    def test_testing_config_is_valid(self):
        TestingConfig.validate()

    def test_missing_database_url(self):
        class Broken(TestingConfig):
            DATABASE_URL = "  "

        with pytest.raises(ConfigurationError, match="DATABASE_URL"):
            Broken.validate()

    def test_port_out_of_range(self):
        class Broken(TestingConfig):
            GRPC_PORT = 70000

        with pytest.raises(ConfigurationError, match="GRPC_PORT"):
            Broken.validate()

    def test_production_never_exposes_error_details(self):
        assert ProductionConfig.EXPOSE_ERROR_DETAILS is False


class TestCorrelationIdLogging:
    def _record(self):
        return logging.LogRecord("todo_service", logging.INFO, __file__, 1, "hello", None, None)

    def test_filter_uses_current_correlation_id(self):
        record = self._record()
        token = correlation_id_var.set("abc")
        try:
            CorrelationIdFilter().filter(record)
        finally:
            correlation_id_var.reset(token)

        assert record.correlation_id == "abc"

    def test_formatter_without_filter(self):
        formatted = SafeFormatter("[%(correlation_id)s] %(message)s").format(self._record())

        assert formatted == f"[{NO_CORRELATION_ID}] hello"


class TestSetupLogging:
    @pytest.fixture()
    def root(self):
        root = logging.getLogger()
        service = logging.getLogger("todo_service")
        handlers, levels = list(root.handlers), (root.level, service.level)
        yield root
        for handler in root.handlers[:]:
            if handler not in handlers:
                root.removeHandler(handler)
                handler.close()
        root.setLevel(levels[0])
        service.setLevel(levels[1])

    def test_repeated_calls_do_not_duplicate_handlers(self, root, tmp_path):
        log_file = str(tmp_path / "logs" / "todo.log")
        setup_logging("DEBUG", log_file)
        installed = len(root.handlers)

        setup_logging("DEBUG", log_file)

        assert len(root.handlers) == installed
        assert sum(isinstance(h, logging.FileHandler) for h in root.handlers) == 1

    def test_replaced_file_handler_is_closed(self, root, tmp_path):
        setup_logging("INFO", str(tmp_path / "first.log"))
        first = next(h for h in root.handlers if isinstance(h, logging.FileHandler))

        setup_logging("INFO")

        assert first not in root.handlers
        assert first.stream is None


class TestSettings:
    @pytest.mark.parametrize("name", ["APP_ENV", "TESTING", "DEBUG"])
    def test_no_unused_flags(self, name):
        assert not hasattr(Config, name)
