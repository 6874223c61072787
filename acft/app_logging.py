"""Application logging: console, plus an optional debug log file."""

import logging
import os
from pathlib import Path

LOGGER_NAME = "acft"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_app_logging(level: str | None = None, log_file: str | Path | None = None) -> logging.Logger:
    """
    Configure the "acft" logger once. Console level from `level` or
    $ACFT_LOG_LEVEL (default INFO); file handler at DEBUG when `log_file`
    or $ACFT_LOG_FILE is set.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger
    logger.setLevel(logging.DEBUG)

    console_level = (level or os.environ.get("ACFT_LOG_LEVEL") or "INFO").upper()
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    # Console
    ch = logging.StreamHandler()
    ch.setLevel(console_level)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    # File
    log_file = log_file or os.environ.get("ACFT_LOG_FILE")
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger
