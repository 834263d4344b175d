#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for DOCX parsing."""

from dataclasses import dataclass, field

from docx2md.constants import DEFAULT_INCLUDE_IMAGES
from docx2md.options.base import BaseParserOptions


# src/docx2md/options/docx.py
@dataclass(frozen=True)
class DocxParserOptions(BaseParserOptions):
    """Configuration options for loading a DOCX package into the document model.

    Parameters
    ----------
    include_images : bool, default True
        Whether inline drawings become image blocks and image bytes are
        collected. When False, drawings are skipped and ``Document.images``
        stays empty.

    """

    include_images: bool = field(
        default=DEFAULT_INCLUDE_IMAGES,
        metadata={
            "help": "Include inline images and collect their bytes",
            "importance": "core",
        },
    )
