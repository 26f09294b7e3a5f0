"""Logging setup for Meowa."""

import logging
import sys
from pathlib import Path
from typing import Optional

from meowa.utils.config import log_level

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Loggers of the HTTP stack; their per-request DEBUG lines drown ours.
_NOISY_LOGGERS = ("urllib3", "requests")


def setup_logger(
    name: str = "meowa",
    level: Optional[int] = None,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Configure and return the application logger.

    Streamlit re-runs app.py on every widget interaction, so a logger that
    already has handlers is returned untouched instead of stacking handlers.

    Args:
        name: Logger name.
        level: Logging level. None reads MEOWA_LOG_LEVEL (default INFO).
        log_file: Optional path to log file. If None, logs to stderr only.

    Returns:
        Configured logger.
    """
    log = logging.getLogger(name)
    if log.handlers:
        return log

    if level is None:
        level = log_level()
    log.setLevel(level)
    fmt = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    h = logging.StreamHandler(sys.stderr)
    h.setFormatter(fmt)
    log.addHandler(h)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(fmt)
        log.addHandler(fh)

    if level > logging.DEBUG:
        for noisy in _NOISY_LOGGERS:
            logging.getLogger(noisy).setLevel(logging.WARNING)

    return log


def get_logger(name: str = "meowa") -> logging.Logger:
    """Return the application logger. Use after setup_logger has been called."""
    return logging.getLogger(name)
