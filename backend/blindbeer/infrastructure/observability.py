"""Structured Logging — JSON lines keyed by session code, player and beer number.

Invariants:
    - Every line carries timestamp, level, logger and message
    - Known extras (see LOG_FIELDS) become top-level keys when set on the record
    - UUIDs and other non-JSON values are rendered with str()
    - setup_logging() is idempotent: repeated calls replace, never stack, handlers

Design Decisions:
    - stdlib logging + a small Formatter: handlers pass extra={...}, nothing else
      to learn
    - "text" format for local runs, "json" for anything shipped to a collector
"""

import json
import logging
from datetime import datetime, timezone

LOG_FIELDS = (
    "session_code", "player_id", "beer_number",
    "error_code", "attempt", "path",
)

_HANDLER_NAME = "blindbeer"


def _jsonable(value):
    if isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


class JSONFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update({
            key: _jsonable(getattr(record, key))
            for key in LOG_FIELDS
            if getattr(record, key, None) is not None
        })
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    root = logging.getLogger()
    for handler in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        JSONFormatter() if fmt == "json"
        else logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s"),
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
