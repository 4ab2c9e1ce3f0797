"""Logging configuration."""
import logging
import sys
from pathlib import Path
from typing import Optional

try:
    # Seed/reset scripts should still get logging when settings cannot be loaded.
    from config.settings import settings  # type: ignore
except Exception:  # pragma: no cover
    settings = None  # type: ignore

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(log_level: Optional[str]) -> int:
    if not log_level and settings is not None:
        log_level = getattr(settings, "log_level", None)
    return getattr(logging, (log_level or "INFO").upper(), logging.INFO)


def setup_logger(
    name: str = "freelancehub",
    log_level: Optional[str] = None,
    log_file: Optional[Path] = None
) -> logging.Logger:
    """
    Set up and configure the application logger.

    Calling it again only updates the level, so modules can import the
    shared `logger` before app.py applies the configured level.

    Args:
        name: Logger name
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(_resolve_level(log_level))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file and not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def attach_to_flask(app, name: str = "freelancehub") -> None:
    """Route Flask's own logger through the application handlers."""
    source = logging.getLogger(name)
    app.logger.handlers = list(source.handlers)
    app.logger.setLevel(source.level)


# Default logger instance
logger = setup_logger()
