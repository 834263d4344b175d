#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Options classes for docx2md parsers and renderers."""

from docx2md.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from docx2md.options.docx import DocxParserOptions
from docx2md.options.json import JsonRendererOptions
from docx2md.options.markdown import MarkdownRendererOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "DocxParserOptions",
    "JsonRendererOptions",
    "MarkdownRendererOptions",
]
