#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docx2md/model/styles.py
"""Named-style registry and style cascade.

Formatting in a Word document comes from three layers:

1. the named style a paragraph references (``w:pStyle``),
2. the paragraph's direct formatting (``w:pPr``),
3. the run's direct formatting (``w:rPr``).

Each layer is a plain value with optional fields. Resolution walks the layers
from lowest to highest precedence and fills only what the higher layer leaves
unset, except for the four inline flags, which a higher inline layer always
replaces as a whole.

"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from docx2md.model.nodes import InlineStyle, ParagraphStyle

logger = logging.getLogger(__name__)

_EMPTY_PARAGRAPH_STYLE = ParagraphStyle()
_PLAIN_INLINE_STYLE = InlineStyle()


class StyleRegistry(Mapping[str, ParagraphStyle]):
    """Read-only lookup of named paragraph styles by style id.

    Parameters
    ----------
    styles : Mapping[str, ParagraphStyle]
        Styles collected from the document's style part

    """

    def __init__(self, styles: Optional[Mapping[str, ParagraphStyle]] = None):
        self._styles = MappingProxyType(dict(styles or {}))

    def __getitem__(self, style_id: str) -> ParagraphStyle:
        return self._styles[style_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._styles)

    def __len__(self) -> int:
        return len(self._styles)


def resolve_paragraph_style(
    style: Optional[ParagraphStyle], registry: Mapping[str, ParagraphStyle]
) -> ParagraphStyle:
    """Compute a paragraph's effective style.

    Parameters
    ----------
    style : ParagraphStyle or None
        The paragraph's direct formatting
    registry : Mapping[str, ParagraphStyle]
        Named styles keyed by id

    Returns
    -------
    ParagraphStyle
        Direct formatting with unset fields filled from the named style

    """
    effective = style if style is not None else _EMPTY_PARAGRAPH_STYLE
    if effective.style_id is None:
        return effective

    named = registry.get(effective.style_id)
    if named is None:
        logger.debug(f"Style '{effective.style_id}' not found in registry; using direct formatting only")
        return effective
    return effective.combine_with(named)


def resolve_inline_style(run_style: Optional[InlineStyle], paragraph_inline: Optional[InlineStyle]) -> InlineStyle:
    """Compute a run's effective character formatting.

    Parameters
    ----------
    run_style : InlineStyle or None
        The run's own formatting
    paragraph_inline : InlineStyle or None
        The inline layer of the paragraph's effective style

    Returns
    -------
    InlineStyle
        Effective formatting; all flags off when neither layer is set

    """
    if run_style is None:
        return paragraph_inline if paragraph_inline is not None else _PLAIN_INLINE_STYLE
    if paragraph_inline is None:
        return run_style
    return paragraph_inline.combine_with(run_style)
