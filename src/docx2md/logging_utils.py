"""Logging setup for the docx2md command-line interface.

Library modules only create ``logging.getLogger(__name__)`` loggers; handlers
are installed here, once, by the CLI entry point.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

DEFAULT_LOG_FORMAT = "%(levelname)s: %(message)s"
TRACE_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def _build_formatter(trace_mode: bool) -> logging.Formatter:
    if trace_mode:
        return logging.Formatter(TRACE_LOG_FORMAT, datefmt=TRACE_DATE_FORMAT)
    return logging.Formatter(DEFAULT_LOG_FORMAT)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Replace the root logger's handlers with docx2md's console (and file) handlers.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g. ``"INFO"``)
    log_file : str, optional
        Also append log records to this file
    trace_mode : bool, default False
        Include timestamps and logger names in every line
    stream : IO[str], optional
        Console stream; standard error when None

    Returns
    -------
    logging.Logger
        The configured root logger

    """
    level = _resolve_level(log_level)
    formatter = _build_formatter(trace_mode)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        if isinstance(handler, logging.FileHandler):
            handler.close()

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as e:
            root_logger.warning(f"Could not open log file {log_file}: {e}")
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            root_logger.info(f"Logging to file: {log_file}")

    return root_logger
