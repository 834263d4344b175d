#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for JSON rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from docx2md.constants import DEFAULT_JSON_IMAGE_MODE, JsonImageMode
from docx2md.options.base import BaseRendererOptions


# src/docx2md/options/json.py
@dataclass(frozen=True)
class JsonRendererOptions(BaseRendererOptions):
    """Configuration options for rendering the document model to JSON.

    Parameters
    ----------
    indent : int or None, default None
        Indentation for pretty-printed output; compact output when None.
    image_mode : {"data_uri", "base64", "omit"}, default "data_uri"
        How embedded images are encoded:
        - "data_uri": ``data:<mime>;base64,<payload>``
        - "base64": bare base64 payload
        - "omit": ``null``

    """

    indent: int | None = field(
        default=None,
        metadata={"help": "Indent JSON output by this many spaces", "type": int, "importance": "core"},
    )
    image_mode: JsonImageMode = field(
        default=DEFAULT_JSON_IMAGE_MODE,
        metadata={
            "help": "How to encode embedded images",
            "choices": ["data_uri", "base64", "omit"],
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Validate field values.

        Raises
        ------
        ValueError
            If indent is negative or image_mode is not a known mode.

        """
        if self.indent is not None and self.indent < 0:
            raise ValueError(f"indent must be non-negative, got {self.indent}")
        if self.image_mode not in ("data_uri", "base64", "omit"):
            raise ValueError(f"image_mode must be one of data_uri, base64, omit, got {self.image_mode!r}")
