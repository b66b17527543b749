from __future__ import annotations

import logging
import sys
from typing import Dict, Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(threadName)s | %(name)s | %(message)s"

# third-party loggers that drown out per-document progress at INFO
QUIET_LOGGERS: Dict[str, int] = {
    "pypdf": logging.ERROR,
    "httpx": logging.WARNING,
    "openai": logging.WARNING,
    "apscheduler.executors": logging.WARNING,
}


def setup_logging(level: LogLevel = "INFO") -> None:
    """
    Configure console logging for the indexer.

    Scheduled runs execute on APScheduler worker threads, so the thread name is
    part of every line. Client library chatter is capped per QUIET_LOGGERS,
    except at DEBUG where everything is shown.
    """
    logging.basicConfig(
        level=getattr(logging, level),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(logging.NOTSET if level == "DEBUG" else quiet_level)
