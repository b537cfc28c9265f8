"""JSON logging for Aurora.

Every record is one JSON object per line, written to a rotating file under
``04_logs/`` and to stdout. Conversation-scoped records carry the citizen
address and, once issued, the protocol::

    logger.info("Protocol issued", extra={"user_id": address, "protocol": protocol})

Message bodies are never logged.
"""

import json
import logging
import logging.config
import os
from datetime import datetime, timezone
from pathlib import Path

from .config import DEFAULT_LOG_PATH

# Record attributes promoted to top-level JSON keys when present
CONVERSATION_FIELDS = ("user_id", "protocol", "state")

# Chatty third-party loggers kept at WARNING unless LOG_LEVEL is DEBUG
QUIET_LOGGERS = ("httpx", "httpcore", "aiosqlite", "uvicorn.access")


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }

        for field in CONVERSATION_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_data[field] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def build_logging_config(log_level: str, log_file: str) -> dict:
    """dictConfig for the root logger, uvicorn included."""
    level = log_level.upper()
    quiet_level = "DEBUG" if level == "DEBUG" else "WARNING"

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {"()": JSONFormatter},
        },
        "handlers": {
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "filename": log_file,
                "maxBytes": 10 * 1024 * 1024,
                "backupCount": 5,
                "formatter": "json",
                "encoding": "utf-8",
            },
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            **{name: {"level": quiet_level} for name in QUIET_LOGGERS},
            # uvicorn installs its own handlers unless told to propagate
            "uvicorn": {"handlers": [], "propagate": True},
            "uvicorn.error": {"handlers": [], "propagate": True},
        },
        "root": {
            "level": level,
            "handlers": ["file", "console"],
        },
    }


def setup_logging(
    log_level: str | None = None,
    log_file: str | None = None,
) -> None:
    """
    Configure JSON logging.

    Args:
        log_level: Defaults to the LOG_LEVEL env var, then INFO.
        log_file: Defaults to the LOG_FILE env var, then 04_logs/app.log.
    """
    log_level = log_level or os.getenv("LOG_LEVEL", "INFO")
    log_file = log_file or os.getenv("LOG_FILE") or str(DEFAULT_LOG_PATH)

    Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(build_logging_config(log_level, log_file))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
