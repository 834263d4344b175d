#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from docx2md.constants import DEFAULT_EXPORT_IMAGES
from docx2md.options.base import BaseRendererOptions


# src/docx2md/options/markdown.py
@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    """Configuration options for rendering the document model to Markdown.

    Parameters
    ----------
    export_images : bool, default False
        Write every embedded image to disk at its package-relative path so
        the ``./media/...`` references in the output resolve.
    image_output_dir : str or None, default None
        Base directory for exported images; the current working directory
        when None.

    """

    export_images: bool = field(
        default=DEFAULT_EXPORT_IMAGES,
        metadata={"help": "Write embedded images next to the Markdown output", "importance": "core"},
    )
    image_output_dir: str | None = field(
        default=None,
        metadata={"help": "Directory to export images into (default: current directory)", "importance": "core"},
    )
