#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docx2md/utils/io_utils.py
"""Helpers for writing rendered text to files and streams."""

from __future__ import annotations

import io
import logging
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from docx2md.exceptions import OutputWriteError

logger = logging.getLogger(__name__)


def _is_binary_stream(output: object) -> bool:
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO):
        return False
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_text(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write rendered text to a path or an open stream.

    Parameters
    ----------
    text : str
        Rendered output
    output : str, Path, IO[bytes] or IO[str]
        Destination. Paths are written as UTF-8; binary streams receive the
        UTF-8 encoding of ``text``.

    Raises
    ------
    OutputWriteError
        If a destination path cannot be written
    TypeError
        If ``output`` is neither a path nor a writable stream

    Examples
    --------
        >>> buffer = BytesIO()
        >>> write_text("# Hello", buffer)
        >>> buffer.getvalue()
        b'# Hello'

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            output_path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(str(output_path), original_error=e) from e
        logger.debug(f"Wrote {len(text)} characters to {output_path}")
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if _is_binary_stream(output):
        cast(IO[bytes], output).write(text.encode("utf-8"))
    else:
        cast(IO[str], output).write(text)


__all__ = ["write_text"]
