#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docx2md/model/coalesce.py
"""Merge adjacent same-style text fragments into single content blocks.

A Word paragraph is frequently split into many runs that carry identical
formatting (spell-check boundaries, revision marks, autocorrect). Rendering
each of them separately would produce noise such as ``**Hello ****World**``.
The coalescer appends a text fragment to the previous block when that block is
text with an equal raw style, and starts a new block otherwise.

"""

from __future__ import annotations

from typing import Optional

from docx2md.model.nodes import (
    BookmarkAnchor,
    ContentBlock,
    ImageBlock,
    InlineStyle,
    LinkBlock,
    TextBlock,
)


class RunCoalescer:
    """Accumulate a paragraph's inline content in document order.

    Examples
    --------
        >>> coalescer = RunCoalescer()
        >>> coalescer.add_text("Hello ", None)
        >>> coalescer.add_text("World", None)
        >>> coalescer.blocks
        [TextBlock(text='Hello World', style=None)]

    """

    def __init__(self) -> None:
        self._blocks: list[ContentBlock] = []
        # Text of the trailing TextBlock, kept mutable until the block is sealed
        self._pending: list[str] = []
        self._pending_style: Optional[InlineStyle] = None

    def add_text(self, text: str, style: Optional[InlineStyle]) -> None:
        """Append a text fragment, merging with the previous text block when styles match."""
        if self._pending and style == self._pending_style:
            self._pending.append(text)
            return
        self._flush()
        self._pending = [text]
        self._pending_style = style

    def add_image(self, alt: str, target: str) -> None:
        """Append an inline picture; never merged with neighbouring text."""
        self._append(ImageBlock(alt=alt, target=target))

    def add_link(self, label: str, target: str) -> None:
        """Append a hyperlink; never merged with neighbouring text."""
        self._append(LinkBlock(label=label, target=target))

    def add_bookmark(self, name: str) -> None:
        """Append a bookmark anchor; never merged with neighbouring text."""
        self._append(BookmarkAnchor(name=name))

    @property
    def blocks(self) -> list[ContentBlock]:
        """Return the coalesced blocks collected so far."""
        if not self._pending:
            return list(self._blocks)
        return [*self._blocks, TextBlock(text="".join(self._pending), style=self._pending_style)]

    def _append(self, block: ContentBlock) -> None:
        self._flush()
        self._blocks.append(block)

    def _flush(self) -> None:
        if not self._pending:
            return
        self._blocks.append(TextBlock(text="".join(self._pending), style=self._pending_style))
        self._pending = []
        self._pending_style = None


def coalesce_runs(fragments: list[tuple[str, Optional[InlineStyle]]]) -> list[ContentBlock]:
    """Coalesce a sequence of ``(text, style)`` fragments.

    Parameters
    ----------
    fragments : list of (str, InlineStyle or None)
        Text fragments of one paragraph in document order

    Returns
    -------
    list of ContentBlock
        Text blocks with adjacent equal-style fragments concatenated

    """
    coalescer = RunCoalescer()
    for text, style in fragments:
        coalescer.add_text(text, style)
    return coalescer.blocks
