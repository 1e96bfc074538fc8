"""Logger setup for filelocator consumers."""

from __future__ import annotations

import logging
import os

from rich.logging import RichHandler


def setup_logger(
    name: str,
    log_dir: str | None = None,
    log_filename: str = "filelocator.log",
    level: str | None = None,
) -> logging.Logger:
    """Set up a logger with a rich console handler and optional file logging.

    Args:
        name: Logger name (usually a package such as ``"locate"``)
        log_dir: Directory to write ``log_filename`` into; no file logging if None
        log_filename: Name of the log file
        level: Explicit level; falls back to ``LOG_LEVEL`` and then ``INFO``

    Returns:
        The configured logger. Calling this again for the same name does not
        add duplicate handlers.
    """
    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    if not logger.handlers:
        rich_handler = RichHandler()
        rich_handler.setLevel(log_level)
        rich_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(rich_handler)

        if log_dir is not None:
            os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(
                os.path.join(log_dir, log_filename), encoding="utf-8"
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                    datefmt="[%Y-%m-%d %H:%M:%S]",
                )
            )
            logger.addHandler(file_handler)

    return logger
