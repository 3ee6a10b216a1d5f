import json
import logging

import pytest
from pydantic import ValidationError

from portal_assistant.config import Settings
from portal_assistant.core.logger import ColoredFormatter, JSONFormatter, build_formatter, configure_logging


class TestSettings:
    def test_assistant_config_reflects_settings(self):
        settings = Settings(SEARCH_RESULT_LIMIT=7, ORDER_HISTORY_MAX_LIMIT=30, CHAT_SYSTEM_PROMPT="Be nice.")

        config = settings.assistant_config()

        assert config["search_result_limit"] == 7
        assert config["order_history_max_limit"] == 30
        assert config["order_history_default_limit"] == 5
        assert config["system_prompt"] == "Be nice."

    def test_rejects_non_positive_limits(self):
        with pytest.raises(ValidationError):
            Settings(SEARCH_RESULT_LIMIT=0)

    def test_rejects_unknown_log_format(self):
        with pytest.raises(ValidationError):
            Settings(LOG_FORMAT="xml")

    def test_is_development(self):
        assert Settings(ENVIRONMENT="local").is_development
        assert not Settings(ENVIRONMENT="production", DEBUG=False).is_development


class TestLogging:
    def test_json_formatter(self):
        record = logging.LogRecord("portal_assistant.test", logging.INFO, __file__, 10, "hello %s", ("chai",), None)

        data = json.loads(JSONFormatter().format(record))

        assert data["level"] == "INFO"
        assert data["logger"] == "portal_assistant.test"
        assert data["message"] == "hello chai"

    def test_colored_formatter_keeps_original_record(self):
        record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)

        output = build_formatter("colored").format(record)

        assert "careful" in output
        assert "\033[33m" in output
        assert record.levelname == "WARNING"

    def test_build_formatter_types(self):
        assert isinstance(build_formatter("json"), JSONFormatter)
        assert isinstance(build_formatter("colored"), ColoredFormatter)
        assert type(build_formatter("plain")) is logging.Formatter

    def test_configure_logging_replaces_handlers(self):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            configure_logging("DEBUG", "plain")

            assert root.level == logging.DEBUG
            assert len(root.handlers) == 1
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
