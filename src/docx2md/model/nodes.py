#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docx2md/model/nodes.py
"""Document model for Word-to-Markdown conversion.

This module defines the value types produced by the DOCX parser and
consumed by the renderers. The model is deliberately flat: a document is an
ordered list of paragraphs and tables, a paragraph is an ordered list of
content blocks, and all formatting lives in small style values that are
cascaded at render time.

Model Overview
--------------
Styles:
    - InlineStyle: character formatting (bold, italic, underline, strike, size)
    - ParagraphStyle: paragraph formatting, either a named style's defaults
      or a paragraph's direct formatting
    - NumberingRef / NumberingDefinition: list membership and list format

Content:
    - TextBlock, ImageBlock, LinkBlock, BookmarkAnchor (inline blocks)
    - Paragraph, Table, TableRow (block content)
    - Document (root, with lookup tables and media)

All style values are frozen; combining two layers always produces a new
value so a document can be rendered any number of times without changing.

"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Mapping, Optional, Union


@dataclass(frozen=True)
class InlineStyle:
    """Character-level formatting of a run or a paragraph layer.

    Parameters
    ----------
    bold : bool, default = False
        Bold text
    italic : bool, default = False
        Italic or emphasised text
    underline : bool, default = False
        Underlined text
    strike : bool, default = False
        Single or double strike-through
    size : int or None, default = None
        Font size in half-points (so 19 means 9.5pt)

    """

    bold: bool = False
    italic: bool = False
    underline: bool = False
    strike: bool = False
    size: Optional[int] = None

    def combine_with(self, other: InlineStyle) -> InlineStyle:
        """Overlay a higher-precedence layer on top of this one.

        The four flags are taken from ``other`` unconditionally; the size is
        only taken from ``other`` when it is set there.

        Parameters
        ----------
        other : InlineStyle
            The higher-precedence layer

        Returns
        -------
        InlineStyle
            New combined style

        """
        return InlineStyle(
            bold=other.bold,
            italic=other.italic,
            underline=other.underline,
            strike=other.strike,
            size=other.size if other.size is not None else self.size,
        )


@dataclass(frozen=True)
class NumberingRef:
    """Reference from a paragraph (or named style) to a list.

    Parameters
    ----------
    list_id : int or None
        Numbering instance id (``w:numId``); None when numbering is removed
    indent_level : int or None
        Zero-based nesting level (``w:ilvl``)

    """

    list_id: Optional[int] = None
    indent_level: Optional[int] = None


@dataclass(frozen=True)
class NumberingDefinition:
    """Format of one list, collapsed to its first level.

    Parameters
    ----------
    list_id : int
        Numbering instance id
    format : str or None
        ST_NumberFormat token such as ``decimal``, ``bullet`` or ``upperLetter``
    level_text : str or None
        Level text template (``w:lvlText``), used to detect blank bullets

    """

    list_id: int
    format: Optional[str] = None
    level_text: Optional[str] = None


@dataclass(frozen=True)
class ParagraphStyle:
    """Paragraph formatting layer.

    Parameters
    ----------
    style_id : str or None
        Named style referenced by the paragraph (``w:pStyle``)
    outline_level : int or None
        Zero-based outline level; renders as a heading
    numbering : NumberingRef or None
        List membership
    page_break_before : bool or None
        Whether a page break precedes the paragraph
    inline : InlineStyle or None
        Character formatting applied to the whole paragraph

    """

    style_id: Optional[str] = None
    outline_level: Optional[int] = None
    numbering: Optional[NumberingRef] = None
    page_break_before: Optional[bool] = None
    inline: Optional[InlineStyle] = None

    def combine_with(self, other: ParagraphStyle) -> ParagraphStyle:
        """Fill the unset fields of this layer from a lower-precedence one.

        Parameters
        ----------
        other : ParagraphStyle
            The fallback layer, usually a named style from the registry

        Returns
        -------
        ParagraphStyle
            New combined style

        """
        if self.inline is None:
            inline = other.inline
        elif other.inline is None:
            inline = self.inline
        else:
            inline = other.inline.combine_with(self.inline)

        return replace(
            self,
            style_id=self.style_id if self.style_id is not None else other.style_id,
            outline_level=self.outline_level if self.outline_level is not None else other.outline_level,
            numbering=self.numbering if self.numbering is not None else other.numbering,
            page_break_before=(
                self.page_break_before if self.page_break_before is not None else other.page_break_before
            ),
            inline=inline,
        )


# ============================================================================
# Inline content blocks
# ============================================================================


@dataclass(frozen=True)
class TextBlock:
    """Run of text sharing one raw inline style.

    Parameters
    ----------
    text : str
        Text content
    style : InlineStyle or None, default = None
        The run's own formatting, None when the run carries no ``w:rPr``

    """

    text: str
    style: Optional[InlineStyle] = None


@dataclass(frozen=True)
class ImageBlock:
    """Inline picture.

    Parameters
    ----------
    alt : str
        Alternative text (``wp:docPr/@descr``)
    target : str
        Package-relative image path, e.g. ``media/image1.png``

    """

    alt: str
    target: str


@dataclass(frozen=True)
class LinkBlock:
    """Hyperlink with its visible label."""

    label: str
    target: str


@dataclass(frozen=True)
class BookmarkAnchor:
    """Named bookmark, rendered as an HTML anchor."""

    name: str


ContentBlock = Union[TextBlock, ImageBlock, LinkBlock, BookmarkAnchor]


# ============================================================================
# Block content
# ============================================================================


@dataclass
class Paragraph:
    """Paragraph with optional direct formatting and its content blocks.

    Parameters
    ----------
    style : ParagraphStyle or None, default = None
        Direct paragraph formatting
    blocks : list of ContentBlock, default = empty list
        Coalesced inline content in document order

    """

    style: Optional[ParagraphStyle] = None
    blocks: list[ContentBlock] = field(default_factory=list)


@dataclass
class TableRow:
    """Table row; each cell is the ordered list of its paragraphs.

    Parameters
    ----------
    cells : list of list of Paragraph, default = empty list
        Cells in column order
    is_header : bool, default = False
        Whether the row is flagged as a repeating header row

    """

    cells: list[list[Paragraph]] = field(default_factory=list)
    is_header: bool = False


@dataclass
class Table:
    """Table as an ordered list of rows."""

    rows: list[TableRow] = field(default_factory=list)


BodyContent = Union[Paragraph, Table]


@dataclass
class DocumentMetadata:
    """Document properties taken from the core and extended property parts."""

    creator: Optional[str] = None
    last_editor: Optional[str] = None
    company: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    subject: Optional[str] = None
    keywords: Optional[str] = None


@dataclass
class Document:
    """Root of the docx2md model.

    Parameters
    ----------
    metadata : DocumentMetadata
        Document properties
    content : list of Paragraph or Table
        Body content in document order
    styles : Mapping of str to ParagraphStyle
        Named paragraph styles keyed by style id
    numberings : dict of int to NumberingDefinition
        List formats keyed by numbering instance id
    images : dict of str to bytes
        Embedded pictures keyed by their package-relative target path

    Notes
    -----
    ``styles`` and ``numberings`` are filled once by the parser and treated
    as read-only by the renderers.

    """

    metadata: DocumentMetadata = field(default_factory=DocumentMetadata)
    content: list[BodyContent] = field(default_factory=list)
    styles: Mapping[str, ParagraphStyle] = field(default_factory=dict)
    numberings: dict[int, NumberingDefinition] = field(default_factory=dict)
    images: dict[str, bytes] = field(default_factory=dict)

    def add_paragraph(self, paragraph: Paragraph) -> bool:
        """Append a paragraph unless it has no content blocks.

        Returns
        -------
        bool
            True when the paragraph was kept

        """
        if not paragraph.blocks:
            return False
        self.content.append(paragraph)
        return True
