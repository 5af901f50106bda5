"""
Tests for config/settings.py and logging configuration
"""
import inspect
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from config import settings
from exceptions import ConfigurationError
from utils.logging_utils import (
    clear_logging_context,
    configure_logging,
    get_logging_context,
    log_operation,
    set_logging_context,
)


class TestDatabaseUrl:

    def test_explicit_url_wins(self, monkeypatch):
        monkeypatch.setenv("COMPANY_DB_URL", "postgresql://db/companies")

        assert settings.get_database_url() == "postgresql://db/companies"

    def test_default_lives_in_data_dir(self, monkeypatch, tmp_path):
        monkeypatch.delenv("COMPANY_DB_URL", raising=False)
        monkeypatch.setenv("COMPANY_DATA_DIR", str(tmp_path))

        assert settings.get_database_url() == f"sqlite:///{tmp_path / 'companies.db'}"


class TestLogSettings:

    def test_level_is_upper_cased(self, monkeypatch):
        monkeypatch.setenv("COMPANY_LOG_LEVEL", "debug")

        assert settings.get_log_level() == "DEBUG"

    def test_invalid_level_rejected(self, monkeypatch):
        monkeypatch.setenv("COMPANY_LOG_LEVEL", "chatty")

        with pytest.raises(ConfigurationError) as exc_info:
            settings.get_log_level()

        assert exc_info.value.details == {"missing_keys": ["COMPANY_LOG_LEVEL"]}

    def test_log_file_optional(self, monkeypatch):
        monkeypatch.delenv("COMPANY_LOG_FILE", raising=False)
        assert settings.get_log_file() is None

        monkeypatch.setenv("COMPANY_LOG_FILE", "/tmp/companies.log")
        assert settings.get_log_file() == Path("/tmp/companies.log")

    @pytest.mark.parametrize("value, expected", [("true", True), ("1", True), ("YES", True), ("no", False)])
    def test_sql_echo_flag(self, monkeypatch, value, expected):
        monkeypatch.setenv("COMPANY_SQL_ECHO", value)

        assert settings.is_sql_echo_enabled() is expected


class TestConfigureLogging:

    def test_rotating_file_handler_installed_and_replaced(self, tmp_path):
        root = logging.getLogger()
        level = root.level
        try:
            configure_logging("INFO", tmp_path / "logs" / "app.log")
            ours = [h for h in root.handlers if getattr(h, "_company_registry", False)]
            assert any(isinstance(h, RotatingFileHandler) for h in ours)
            assert (tmp_path / "logs").is_dir()

            configure_logging("WARNING")
            ours = [h for h in root.handlers if getattr(h, "_company_registry", False)]
            assert len(ours) == 1
            assert not isinstance(ours[0], RotatingFileHandler)
            assert root.level == logging.WARNING
        finally:
            for h in [h for h in root.handlers if getattr(h, "_company_registry", False)]:
                root.removeHandler(h)
            root.setLevel(level)

    def test_logging_context_roundtrip(self):
        set_logging_context(request_id="abc")
        set_logging_context(path="/companies")

        assert get_logging_context() == {"request_id": "abc", "path": "/companies"}

        clear_logging_context()
        assert get_logging_context() == {}


class TestLogOperation:

    def test_wraps_plain_function_and_logs_positional_id(self, caplog):
        @log_operation("rename_company")
        def rename_company(company_id, name):
            return f"{company_id}:{name}"

        with caplog.at_level(logging.INFO, logger=__name__):
            result = rename_company(7, "IBM")

        assert result == "7:IBM"
        assert not inspect.iscoroutinefunction(rename_company)
        assert rename_company.__name__ == "rename_company"
        messages = {r.getMessage(): r for r in caplog.records}
        assert messages["Starting rename_company"].company_id == 7
        assert messages["Completed rename_company"].operation == "rename_company"

    def test_request_context_attached_to_records(self, caplog):
        @log_operation("lookup")
        def lookup(company_id):
            return company_id

        set_logging_context(request_id="ctx-1")
        try:
            with caplog.at_level(logging.INFO, logger=__name__):
                lookup(company_id=3)
        finally:
            clear_logging_context()

        [started] = [r for r in caplog.records if r.getMessage() == "Starting lookup"]
        assert started.request_id == "ctx-1"
        assert started.company_id == 3
