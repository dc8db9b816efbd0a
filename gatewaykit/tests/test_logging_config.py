import json
import logging
import sys

import yaml

from gatewaykit.config import DEFAULT_LOG_CONFIG_PATH
from gatewaykit.core import logging_config, request_context


def _record(msg="Test message", **extra):
    record = logging.LogRecord(
        name="gatewaykit.test",
        level=logging.INFO,
        pathname="test_path.py",
        lineno=10,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_custom_json_formatter_includes_request_id():
    """Ensure the formatter includes the RequestID from context."""
    request_context.set_request_id("req-123")

    log_json = json.loads(logging_config.CustomJsonFormatter().format(_record()))

    assert log_json["message"] == "Test message"
    assert log_json["level"] == "INFO"
    assert log_json["logger"] == "gatewaykit.test"
    assert log_json["aws_request_id"] == "req-123"
    assert log_json["_time"].endswith("+00:00")


def test_custom_json_formatter_without_request_id():
    log_json = json.loads(logging_config.CustomJsonFormatter().format(_record()))

    assert "aws_request_id" not in log_json


def test_custom_json_formatter_includes_extra_fields():
    record = _record(status_code=599, headers={"X-A": "1"}, _private="hidden")

    log_json = json.loads(logging_config.CustomJsonFormatter().format(record))

    assert log_json["status_code"] == 599
    assert log_json["headers"] == {"X-A": "1"}
    assert "_private" not in log_json


def test_custom_json_formatter_includes_exception():
    try:
        raise ValueError("bad")
    except ValueError:
        record = logging.LogRecord(
            "gatewaykit.test", logging.ERROR, "p.py", 1, "failed", (), sys.exc_info()
        )

    log_json = json.loads(logging_config.CustomJsonFormatter().format(record))

    assert "ValueError: bad" in log_json["exception"]


def test_setup_logging_missing_file_uses_configured_level(monkeypatch, tmp_path):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setenv("LOG_LEVEL", "warning")

    logging_config.setup_logging(str(tmp_path / "missing.yml"))

    assert calls == [{"level": "WARNING"}]


def test_setup_logging_level_comes_from_config(monkeypatch, restore_logging):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    logging_config.setup_logging(DEFAULT_LOG_CONFIG_PATH)

    assert restore_logging.level == logging.DEBUG
    root_formatters = [handler.formatter for handler in logging.getLogger().handlers]
    assert any(isinstance(f, logging_config.CustomJsonFormatter) for f in root_formatters)


def test_setup_logging_defaults_level_without_env(monkeypatch, tmp_path, restore_logging):
    config_file = tmp_path / "logging.yml"
    config_file.write_text(
        yaml.safe_dump(
            {
                "version": 1,
                "disable_existing_loggers": False,
                "loggers": {"gatewaykit_test_custom": {"level": "${LOG_LEVEL}"}},
            }
        )
    )
    monkeypatch.setenv("LOG_CONFIG_PATH", str(config_file))
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    logging_config.setup_logging()

    assert logging.getLogger("gatewaykit_test_custom").level == logging.INFO


def test_ensure_logging_runs_setup_once(monkeypatch):
    calls = []
    monkeypatch.setattr(logging_config, "_logging_configured", False)
    monkeypatch.setattr(logging_config, "setup_logging", lambda: calls.append(1))

    logging_config.ensure_logging()
    logging_config.ensure_logging()

    assert calls == [1]
    assert logging_config._logging_configured is True
