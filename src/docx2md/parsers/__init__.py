#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docx2md/parsers/__init__.py
"""Parsers that load source documents into the docx2md model."""

from docx2md.parsers.base import BaseParser
from docx2md.parsers.docx import DocxParser

__all__ = ["BaseParser", "DocxParser"]
