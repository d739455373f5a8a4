"""Logging setup for the calculator app.

The engine modules only create module-level loggers; this is where handlers
and formatting get installed, once, at application start.  ``fmt="json"``
emits one JSON object per record, anything else a plain text line.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = ("domain", "variant", "field", "tag")


class JSONFormatter(logging.Formatter):
    """Format records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


_HANDLER_NAME = "calcbox"


def setup_logging(level: str = "INFO", fmt: str = "text") -> logging.Handler:
    """Install a stream handler on the root logger.

    Calling it again replaces the handler it installed before instead of
    stacking a second one (Streamlit re-runs the script on every change).
    """
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s"))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler


__all__ = ["JSONFormatter", "setup_logging"]
