from __future__ import annotations

import logging
import sys
from typing import Optional

from httperror.core.config import get_settings


class _StatusFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        # Records logged without extra={"status": ...} still format cleanly.
        if not hasattr(record, "status"):
            record.status = "-"
        return True


def setup_logging(level: Optional[str] = None) -> None:
    if level is None:
        level = get_settings().LOG_LEVEL
    lvl = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("httperror")
    logger.setLevel(lvl)

    # Replace handlers to avoid duplicated logs when called twice.
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(_StatusFilter())

    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s | status=%(status)s"
    handler.setFormatter(logging.Formatter(fmt))

    logger.handlers = [handler]


def get_logger(name: str = "httperror") -> logging.Logger:
    return logging.getLogger(name)
