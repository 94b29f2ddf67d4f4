"""JSON-lines logging for the service.

Services log a dotted event name as the message and repeat it in
``extra={"event": ...}`` together with the ids involved; every such extra
attribute ends up as a top-level key of the emitted line.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from orderdesk.core.config import Config, get_config

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}
_PRODUCTION_QUIET_LOGGERS = ("sqlalchemy.engine", "alembic.runtime.migration")


class JsonFormatter(logging.Formatter):
    def __init__(self, service: str = "orderdesk") -> None:
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "service": self.service,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, value) for key, value in vars(record).items() if key not in _RESERVED_ATTRS and key not in payload
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def _handlers(config: Config) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if config.LOG_FILE:
        handlers.append(logging.FileHandler(config.LOG_FILE))
    return handlers


def configure_logging() -> None:
    """Install JSON handlers on the root logger unless something already did."""
    config = get_config()
    root = logging.getLogger()
    if root.handlers:
        return

    formatter = JsonFormatter(service=config.APP_NAME)
    for handler in _handlers(config):
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(config.LOG_LEVEL)

    if config.is_production:
        for name in _PRODUCTION_QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
