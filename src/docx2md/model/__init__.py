#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docx2md/model/__init__.py
"""Document model, style cascade and run coalescing."""

from docx2md.model.coalesce import RunCoalescer, coalesce_runs
from docx2md.model.nodes import (
    BodyContent,
    BookmarkAnchor,
    ContentBlock,
    Document,
    DocumentMetadata,
    ImageBlock,
    InlineStyle,
    LinkBlock,
    NumberingDefinition,
    NumberingRef,
    Paragraph,
    ParagraphStyle,
    Table,
    TableRow,
    TextBlock,
)
from docx2md.model.serialization import document_to_dict
from docx2md.model.styles import StyleRegistry, resolve_inline_style, resolve_paragraph_style

__all__ = [
    "BodyContent",
    "BookmarkAnchor",
    "ContentBlock",
    "Document",
    "DocumentMetadata",
    "ImageBlock",
    "InlineStyle",
    "LinkBlock",
    "NumberingDefinition",
    "NumberingRef",
    "Paragraph",
    "ParagraphStyle",
    "RunCoalescer",
    "StyleRegistry",
    "Table",
    "TableRow",
    "TextBlock",
    "coalesce_runs",
    "document_to_dict",
    "resolve_inline_style",
    "resolve_paragraph_style",
]
