#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docx2md/model/serialization.py
"""JSON-ready serialization of the document model.

Every node is converted to a plain dictionary tagged with a ``node_type``
key, so the output can be consumed without knowing the Python classes.
Embedded images are emitted as data URIs, bare base64 payloads, or omitted.

Examples
--------
    >>> from docx2md.model import Document, Paragraph, TextBlock
    >>> doc = Document(content=[Paragraph(blocks=[TextBlock(text="Hi")])])
    >>> document_to_dict(doc)["content"][0]["node_type"]
    'Paragraph'

"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Optional

from docx2md.constants import JsonImageMode
from docx2md.exceptions import RenderingError
from docx2md.model.nodes import (
    BodyContent,
    BookmarkAnchor,
    ContentBlock,
    Document,
    ImageBlock,
    InlineStyle,
    LinkBlock,
    NumberingDefinition,
    Paragraph,
    ParagraphStyle,
    Table,
    TableRow,
    TextBlock,
)
from docx2md.utils.images import encode_base64, to_data_uri


def _serialize_inline_style(style: Optional[InlineStyle]) -> Optional[dict[str, Any]]:
    return asdict(style) if style is not None else None


def _serialize_paragraph_style(style: Optional[ParagraphStyle]) -> Optional[dict[str, Any]]:
    if style is None:
        return None
    return {
        "style_id": style.style_id,
        "outline_level": style.outline_level,
        "numbering": asdict(style.numbering) if style.numbering is not None else None,
        "page_break_before": style.page_break_before,
        "inline": _serialize_inline_style(style.inline),
    }


def _serialize_block(block: ContentBlock) -> dict[str, Any]:
    if isinstance(block, TextBlock):
        return {"node_type": "Text", "text": block.text, "style": _serialize_inline_style(block.style)}
    if isinstance(block, ImageBlock):
        return {"node_type": "Image", "alt": block.alt, "target": block.target}
    if isinstance(block, LinkBlock):
        return {"node_type": "Link", "label": block.label, "target": block.target}
    if isinstance(block, BookmarkAnchor):
        return {"node_type": "BookmarkAnchor", "name": block.name}
    raise RenderingError(f"Unknown content block type: {type(block).__name__}", rendering_stage="serialization")


def _serialize_paragraph(paragraph: Paragraph) -> dict[str, Any]:
    return {
        "node_type": "Paragraph",
        "style": _serialize_paragraph_style(paragraph.style),
        "blocks": [_serialize_block(block) for block in paragraph.blocks],
    }


def _serialize_table_row(row: TableRow) -> dict[str, Any]:
    return {
        "node_type": "TableRow",
        "is_header": row.is_header,
        "cells": [[_serialize_paragraph(p) for p in cell] for cell in row.cells],
    }


def _serialize_content(item: BodyContent) -> dict[str, Any]:
    if isinstance(item, Paragraph):
        return _serialize_paragraph(item)
    if isinstance(item, Table):
        return {"node_type": "Table", "rows": [_serialize_table_row(row) for row in item.rows]}
    raise RenderingError(f"Unknown content type: {type(item).__name__}", rendering_stage="serialization")


def _serialize_numbering(definition: NumberingDefinition) -> dict[str, Any]:
    return {"list_id": definition.list_id, "format": definition.format, "level_text": definition.level_text}


def _serialize_image(path: str, data: bytes, image_mode: JsonImageMode) -> Optional[str]:
    if image_mode == "data_uri":
        return to_data_uri(path, data)
    if image_mode == "base64":
        return encode_base64(data)
    return None


def document_to_dict(document: Document, image_mode: JsonImageMode = "data_uri") -> dict[str, Any]:
    """Convert a document to a JSON-compatible dictionary.

    Parameters
    ----------
    document : Document
        Document to serialize
    image_mode : {"data_uri", "base64", "omit"}, default "data_uri"
        How embedded image bytes are written

    Returns
    -------
    dict
        Dictionary with ``metadata``, ``content``, ``styles``, ``numberings``
        and ``images`` keys

    """
    return {
        "node_type": "Document",
        "metadata": asdict(document.metadata),
        "content": [_serialize_content(item) for item in document.content],
        "styles": {style_id: _serialize_paragraph_style(style) for style_id, style in document.styles.items()},
        # JSON object keys are strings
        "numberings": {str(list_id): _serialize_numbering(d) for list_id, d in document.numberings.items()},
        "images": {path: _serialize_image(path, data, image_mode) for path, data in document.images.items()},
    }
