"""Structured JSON logging configuration."""

import json
import logging
import os
from datetime import datetime, timezone
from typing import Any

# Attributes every LogRecord carries; anything else came in through `extra`
_RESERVED = frozenset(vars(logging.LogRecord('', 0, '', 0, '', (), None))) | {'message', 'asctime'}


class JSONFormatter(logging.Formatter):
    """Render a log record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat().replace('+00:00', 'Z'),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        # logger.info("msg", extra={"userId": 1}) sets record.userId
        payload.update(
            (key, value) for key, value in record.__dict__.items()
            if key not in _RESERVED and not callable(value)
        )

        return json.dumps(payload, default=str)


def setup_structured_logging(level: str | None = None):
    """Install the JSON formatter on the root logger.

    The level defaults to the LOG_LEVEL environment variable (INFO if unset).
    uvicorn's access log is reduced to warnings.
    """
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    uvicorn_access = logging.getLogger("uvicorn.access")
    uvicorn_access.handlers = [handler]
    uvicorn_access.setLevel(logging.WARNING)
