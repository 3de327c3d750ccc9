"""Logging setup shared by the ngdocgen CLI and library modules."""

from __future__ import annotations

import logging
from pathlib import Path

ROOT_LOGGER = "ngdocgen"
CONSOLE_FORMAT = "[ngdocgen] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``ngdocgen.<name>``, or the ngdocgen root logger when no name is given."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Send ngdocgen progress to stderr and, with ``log_file``, append it to that file.

    Calling this again replaces the handlers installed by the previous call.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[tuple[logging.Handler, str]] = [(logging.StreamHandler(), CONSOLE_FORMAT)]
    if log_file is not None:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append((logging.FileHandler(log_path, encoding="utf-8"), FILE_FORMAT))

    for handler, fmt in handlers:
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)
    return logger


__all__ = ["configure_logging", "get_logger"]
