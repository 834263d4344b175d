#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docx2md/utils/images.py
"""Image helpers: MIME detection, data URIs and export to disk.

Images extracted from a Word package are keyed by their package-relative
target (``media/image1.png``). Markdown output references them as
``./media/image1.png``, so exporting writes each image to the same relative
path under an output directory (the current working directory by default).

"""

from __future__ import annotations

import base64
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Mapping

from docx2md.constants import DEFAULT_MIME_TYPE, IMAGE_MIME_TYPES
from docx2md.exceptions import OutputWriteError

logger = logging.getLogger(__name__)


def guess_mime_type(path: str) -> str:
    """Infer an image MIME type from a file extension.

    Parameters
    ----------
    path : str
        Image path or file name

    Returns
    -------
    str
        MIME type, ``application/octet-stream`` for unknown extensions

    Examples
    --------
        >>> guess_mime_type("media/image1.PNG")
        'image/png'
        >>> guess_mime_type("media/image2.emf")
        'application/octet-stream'

    """
    extension = PurePosixPath(path).suffix.lstrip(".").lower()
    return IMAGE_MIME_TYPES.get(extension, DEFAULT_MIME_TYPE)


def encode_base64(data: bytes) -> str:
    """Encode bytes as an ASCII base64 string."""
    return base64.b64encode(data).decode("ascii")


def to_data_uri(path: str, data: bytes) -> str:
    """Build a ``data:<mime>;base64,<payload>`` URI for an image.

    Parameters
    ----------
    path : str
        Image path, used only for MIME detection
    data : bytes
        Raw image bytes

    Returns
    -------
    str
        Data URI

    """
    return f"data:{guess_mime_type(path)};base64,{encode_base64(data)}"


@dataclass
class ImageExportResult:
    """Outcome of an image export pass.

    Attributes
    ----------
    written : list of Path
        Files written successfully
    failed : dict of str to str
        Image key mapped to the error message for each failed write

    """

    written: list[Path] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """Return True when every image was written."""
        return not self.failed


def export_images(
    images: Mapping[str, bytes],
    output_dir: str | Path | None = None,
    fail_fast: bool = False,
) -> ImageExportResult:
    """Write images to disk at their package-relative paths.

    Parameters
    ----------
    images : Mapping[str, bytes]
        Image bytes keyed by package-relative target path
    output_dir : str, Path or None, default None
        Base directory; the current working directory when None
    fail_fast : bool, default False
        Raise OutputWriteError on the first failure instead of logging it
        and continuing with the remaining images

    Returns
    -------
    ImageExportResult
        Written paths and per-image failures

    Raises
    ------
    OutputWriteError
        When ``fail_fast`` is set and a write fails or an image key points
        outside ``output_dir``

    """
    base_dir = Path(output_dir) if output_dir is not None else Path(os.getcwd())
    resolved_base = base_dir.resolve()
    result = ImageExportResult()

    for key, data in images.items():
        target = base_dir / PurePosixPath(key)
        if not target.resolve().is_relative_to(resolved_base):
            message = f"Image path {key!r} escapes the output directory {base_dir}"
            if fail_fast:
                raise OutputWriteError(str(target), message=message)
            logger.error(message)
            result.failed[key] = message
            continue
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
        except OSError as e:
            if fail_fast:
                raise OutputWriteError(str(target), original_error=e) from e
            logger.error(f"Failed to write image {target}: {e}")
            result.failed[key] = str(e)
            continue
        logger.debug(f"Wrote image to: {target}")
        result.written.append(target)

    return result
