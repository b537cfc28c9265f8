"""Tests for JSON logging configuration."""

import json
import logging

from aurora.logging_config import JSONFormatter, build_logging_config


def make_record(msg: str = "hello %s", args=("world",), **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="aurora.dialogue.agent",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=args,
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    def test_basic_fields(self):
        data = json.loads(JSONFormatter().format(make_record()))

        assert data["message"] == "hello world"
        assert data["level"] == "INFO"
        assert data["logger"] == "aurora.dialogue.agent"
        assert "user_id" not in data

    def test_conversation_fields_promoted(self):
        record = make_record(user_id="5511999990000@c.us", protocol="2025.12.08.1.0001")
        data = json.loads(JSONFormatter().format(record))

        assert data["user_id"] == "5511999990000@c.us"
        assert data["protocol"] == "2025.12.08.1.0001"

    def test_none_fields_omitted(self):
        data = json.loads(JSONFormatter().format(make_record(protocol=None)))
        assert "protocol" not in data

    def test_non_ascii_kept(self):
        data = JSONFormatter().format(make_record("Denúncia registrada", ()))
        assert "Denúncia" in data


class TestBuildLoggingConfig:
    def test_http_client_quiet_by_default(self, tmp_path):
        config = build_logging_config("info", str(tmp_path / "app.log"))

        assert config["root"]["level"] == "INFO"
        assert config["loggers"]["httpx"]["level"] == "WARNING"
        assert config["loggers"]["uvicorn"]["propagate"] is True

    def test_debug_unmutes_http_client(self, tmp_path):
        config = build_logging_config("DEBUG", str(tmp_path / "app.log"))
        assert config["loggers"]["httpx"]["level"] == "DEBUG"
