#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docx2md/utils/timing.py
"""Timing helper for debug logging."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Generator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Log how long a block took, only when DEBUG logging is enabled.

    Parameters
    ----------
    logger : logging.Logger
        Logger to write the timing message to
    operation : str
        Description of the timed block, e.g. ``"Loading report.docx"``

    Examples
    --------
        >>> with debug_timer(logger, "Rendering (markdown)"):
        ...     text = renderer.render_to_string(doc)

    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return
    start_time = time.perf_counter()
    yield
    logger.debug(f"{operation} completed in {time.perf_counter() - start_time:.3f}s")
