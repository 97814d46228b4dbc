"""Logging setup for the command-line entry point.

Handlers log through module-level loggers; nothing is printed until
``setup_logging`` installs a handler on the root logger.  Log records go
to stderr so they never mix with rendered output.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class CliLogHandler(logging.StreamHandler):
    """Stream handler owned by the CLI; replaced on every setup."""


def setup_logging(level: str = "WARNING", fmt: str = "text") -> None:
    """Configure the root logger.  Calling it again replaces the handler."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, CliLogHandler):
            root.removeHandler(handler)

    handler = CliLogHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
