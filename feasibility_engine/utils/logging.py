"""
Logging setup for the feasibility engine CLI.

``configure_logging(config, debug=...)`` is called once by each CLI command
after the config loads. Library modules only ever call
``logging.getLogger(__name__)``; everything under the ``feasibility_engine``
package logger propagates to the handlers installed here.

Output goes to stderr so that ``score --format json`` leaves stdout as pure
JSON. With ``debug`` on, the package logger drops to DEBUG (the composer's
per-domain breakdown) while the root level keeps third-party loggers at the
configured level.

JSON format (``json_format = true`` under ``[logging]``) emits one object per
line. Scoring context passed through ``extra=`` is lifted to the top level::

    {"ts": "2026-02-24T15:00:00Z", "level": "INFO",
     "logger": "feasibility_engine.scoring.engine",
     "msg": "Feasibility score: 47 (conditional) ...",
     "overall_score": 47, "rating": "conditional"}
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from feasibility_engine.config import LoggingConfig

PACKAGE_LOGGER = "feasibility_engine"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# extra= keys the engine and loaders attach to their records
CONTEXT_FIELDS = (
    "domain",
    "percentage",
    "passed",
    "overall_score",
    "rating",
    "response_count",
    "question_count",
    "source",
)


class _JsonFormatter(logging.Formatter):
    """One JSON object per record: ts, level, logger, msg, plus scoring context."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(
                LOG_DATE_FORMAT
            ),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            if hasattr(record, field):
                payload[field] = getattr(record, field)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(config: "LoggingConfig", debug: bool = False) -> None:
    """Install stderr (and optional file) handlers on the root logger.

    Args:
        config: Logging section of ``AppConfig``.
        debug:  Lower the ``feasibility_engine`` logger to DEBUG regardless
                of ``config.level``.
    """
    level = getattr(logging, config.level.upper(), logging.INFO)

    formatter: logging.Formatter
    if config.json_format:
        formatter = _JsonFormatter()
    else:
        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=handlers, force=True)
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if debug else logging.NOTSET)
