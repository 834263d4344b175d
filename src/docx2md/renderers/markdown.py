#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docx2md/renderers/markdown.py
"""Markdown rendering of the document model.

This module provides the MarkdownRenderer class which walks the document
body in order and emits Markdown text. Paragraph formatting is resolved
through the style cascade, list markers come from a NumberingEngine created
for each render pass, and tables are laid out by TableLayout with their cells
rendered through the same paragraph path as body text.

Output Shape
------------
- ``# {title}`` and a blank line when the document has a title
- one line per paragraph; tables as padded pipe tables
- a blank line between consecutive body items

"""

from __future__ import annotations

import logging

from docx2md.constants import (
    BOLD_MARKER,
    ITALIC_MARKER,
    MAX_HEADING_LEVEL,
    STRIKE_MARKER,
    TABLE_CELL_LINE_BREAK,
    UNDERLINE_MARKER,
)
from docx2md.exceptions import RenderingError
from docx2md.model.nodes import (
    BookmarkAnchor,
    ContentBlock,
    Document,
    ImageBlock,
    InlineStyle,
    LinkBlock,
    Paragraph,
    ParagraphStyle,
    Table,
    TextBlock,
)
from docx2md.model.styles import resolve_inline_style, resolve_paragraph_style
from docx2md.options.markdown import MarkdownRendererOptions
from docx2md.renderers.base import BaseRenderer
from docx2md.renderers.numbering import NumberingEngine
from docx2md.renderers.table import TableLayout
from docx2md.utils.images import ImageExportResult, export_images

logger = logging.getLogger(__name__)


def wrap_text(text: str, style: InlineStyle) -> str:
    """Wrap text in emphasis markers.

    Markers are applied innermost first in a fixed order: bold, italic,
    underline, strike.

    Examples
    --------
        >>> wrap_text("Hi", InlineStyle(bold=True, strike=True))
        '~~**Hi**~~'

    """
    if style.bold:
        text = f"{BOLD_MARKER}{text}{BOLD_MARKER}"
    if style.italic:
        text = f"{ITALIC_MARKER}{text}{ITALIC_MARKER}"
    if style.underline:
        text = f"{UNDERLINE_MARKER}{text}{UNDERLINE_MARKER}"
    if style.strike:
        text = f"{STRIKE_MARKER}{text}{STRIKE_MARKER}"
    return text


def heading_prefix(outline_level: int) -> str:
    """Return the ATX heading prefix for a zero-based outline level."""
    return "#" * min(outline_level + 1, MAX_HEADING_LEVEL) + " "


class MarkdownRenderer(BaseRenderer):
    """Render a Document to Markdown text.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown rendering options

    Examples
    --------
        >>> from docx2md.model import DocumentMetadata, TextBlock
        >>> doc = Document(
        ...     metadata=DocumentMetadata(title="Doc"),
        ...     content=[Paragraph(style=ParagraphStyle(outline_level=0),
        ...                        blocks=[TextBlock("Hi", InlineStyle(bold=True))])],
        ... )
        >>> MarkdownRenderer().render_to_string(doc)
        '# Doc\\n\\n# **Hi**\\n'

    """

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options
        self._table_layout = TableLayout()
        self.last_export: ImageExportResult | None = None

    def render_to_string(self, doc: Document) -> str:
        """Render the document to a Markdown string.

        When ``export_images`` is enabled the document's images are written to
        disk as a side effect; failures are logged and recorded in
        ``last_export`` without changing the returned text.

        Parameters
        ----------
        doc : Document
            Loaded document

        Returns
        -------
        str
            Markdown text

        Raises
        ------
        RenderingError
            If the body contains an unsupported content type
        OutputWriteError
            If an image cannot be written and ``fail_on_resource_errors`` is set

        """
        numbering = NumberingEngine()
        parts: list[str] = []

        if doc.metadata.title:
            parts.append(f"# {doc.metadata.title}\n\n")

        last_index = len(doc.content) - 1
        for index, item in enumerate(doc.content):
            if isinstance(item, Paragraph):
                parts.append(self.render_paragraph(item, doc, numbering))
                parts.append("\n")
            elif isinstance(item, Table):
                parts.append(self.render_table(item, doc, numbering))
            else:
                raise RenderingError(
                    f"Unsupported body content type: {type(item).__name__}", rendering_stage="markdown"
                )
            if index != last_index:
                parts.append("\n")

        if self.options.export_images:
            self.last_export = self._export_images(doc)

        return "".join(parts)

    def render_paragraph(self, paragraph: Paragraph, doc: Document, numbering: NumberingEngine) -> str:
        """Render one paragraph without a trailing newline.

        Parameters
        ----------
        paragraph : Paragraph
            Paragraph to render
        doc : Document
            Owning document, for its style and numbering registries
        numbering : NumberingEngine
            Counters of the current render pass

        Returns
        -------
        str
            Heading prefix, list marker and inline content

        """
        style = resolve_paragraph_style(paragraph.style, doc.styles)
        parts: list[str] = []

        if style.outline_level is not None:
            parts.append(heading_prefix(style.outline_level))

        if style.numbering is not None:
            parts.append(numbering.next_marker(style.numbering.list_id, style.numbering.indent_level, doc.numberings))

        for block in paragraph.blocks:
            parts.append(self.render_block(block, style))

        return "".join(parts)

    def render_block(self, block: ContentBlock, paragraph_style: ParagraphStyle) -> str:
        """Render one inline content block under its paragraph's effective style.

        Images, links and anchors carry no run formatting of their own, so
        they are wrapped in the paragraph's inline formatting only.

        """
        if isinstance(block, TextBlock):
            return wrap_text(block.text, resolve_inline_style(block.style, paragraph_style.inline))

        if isinstance(block, ImageBlock):
            markdown = f"![{block.alt}](./{block.target})"
        elif isinstance(block, LinkBlock):
            markdown = f"[{block.label}]({block.target})"
        elif isinstance(block, BookmarkAnchor):
            markdown = f'<a name="{block.name}"></a>'
        else:
            raise RenderingError(
                f"Unsupported content block type: {type(block).__name__}", rendering_stage="markdown"
            )
        return wrap_text(markdown, resolve_inline_style(None, paragraph_style.inline))

    def render_table(self, table: Table, doc: Document, numbering: NumberingEngine) -> str:
        """Render a table as a padded pipe table.

        Cell paragraphs are rendered in document order, sharing the list
        counters of the body, and joined with ``<br/>``.

        """
        rows = []
        for row in table.rows:
            cells = [
                TABLE_CELL_LINE_BREAK.join(self.render_paragraph(paragraph, doc, numbering) for paragraph in cell)
                for cell in row.cells
            ]
            rows.append((row.is_header, cells))
        return self._table_layout.render(rows)

    def _export_images(self, doc: Document) -> ImageExportResult:
        result = export_images(
            doc.images,
            output_dir=self.options.image_output_dir,
            fail_fast=self.options.fail_on_resource_errors,
        )
        if result.failed:
            logger.warning(f"{len(result.failed)} of {len(doc.images)} images could not be exported")
        return result
