"""Utility for logging application events to a file."""

import logging
from pathlib import Path

from mememaker.utils.config import APP_DATA_DIR

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_log_path() -> Path:
    """Return the path to the application log file."""
    log_dir = APP_DATA_DIR / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "mememaker.log"


def configure_logging(level: int = logging.INFO, log_path: Path | None = None) -> logging.Logger:
    """Attach a file handler to the package logger (once)."""
    logger = logging.getLogger("mememaker")
    logger.setLevel(level)

    if not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        fh = logging.FileHandler(log_path or get_log_path(), encoding="utf-8")
        fh.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(fh)
    return logger
