"""Structured Logging - one JSON object per line, carrying item and warehouse ids.

Invariants:
    - Every line has timestamp, level, logger and message
    - item_id / warehouse_id / error_code / severity (from WarehouserError.log_extra)
      and path / method (from the error handlers) appear only when set
    - LOG_FORMAT=text switches to a plain single-line format for local runs
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = (
    "item_id", "warehouse_id", "error_code", "severity", "path", "method",
)
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update({
            key: getattr(record, key) for key in EXTRA_FIELDS
            if getattr(record, key, None) is not None
        })
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install a single stream handler on the root logger."""
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT))
    logging.root.handlers = [handler]
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
