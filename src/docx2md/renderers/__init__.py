#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docx2md/renderers/__init__.py
"""Renderers that turn the document model into Markdown or JSON text."""

from docx2md.renderers.base import BaseRenderer
from docx2md.renderers.json import JsonRenderer
from docx2md.renderers.markdown import MarkdownRenderer
from docx2md.renderers.numbering import NumberingEngine
from docx2md.renderers.table import TableLayout

__all__ = [
    "BaseRenderer",
    "JsonRenderer",
    "MarkdownRenderer",
    "NumberingEngine",
    "TableLayout",
]
