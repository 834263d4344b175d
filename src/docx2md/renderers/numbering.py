#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docx2md/renderers/numbering.py
"""List marker generation.

Word stores list numbering as per-list counters that advance with every
paragraph belonging to the list. :class:`NumberingEngine` keeps those counters
for a single render pass, so rendering a document twice yields the same
markers. Body paragraphs and table-cell paragraphs share one engine and are
numbered in document order.

"""

from __future__ import annotations

import logging
from typing import Callable, Mapping, Optional

from docx2md.constants import (
    BLANK_BULLET_MARKER,
    BULLET_MARKER,
    LIST_INDENT,
    NUMBER_FORMAT_BULLET,
    NUMBER_FORMAT_LOWER_LETTER,
    NUMBER_FORMAT_LOWER_ROMAN,
    NUMBER_FORMAT_UPPER_LETTER,
    NUMBER_FORMAT_UPPER_ROMAN,
)
from docx2md.model.nodes import NumberingDefinition

logger = logging.getLogger(__name__)


def _offset_marker(base: str) -> Callable[[int], str]:
    # Single-character approximation: counter 0 is the base letter, 1 the next one, ...
    return lambda counter: f"{chr(ord(base) + counter)}."


_FORMAT_MARKERS: dict[str, Callable[[int], str]] = {
    NUMBER_FORMAT_UPPER_ROMAN: _offset_marker("I"),
    NUMBER_FORMAT_LOWER_ROMAN: _offset_marker("i"),
    NUMBER_FORMAT_UPPER_LETTER: _offset_marker("A"),
    NUMBER_FORMAT_LOWER_LETTER: _offset_marker("a"),
}


def _decimal_marker(counter: int) -> str:
    return f"{counter + 1}."


def format_marker(definition: Optional[NumberingDefinition], counter: int) -> str:
    """Build the marker for one list item.

    Parameters
    ----------
    definition : NumberingDefinition or None
        The list's format; None when the list id is not registered
    counter : int
        Zero-based position of the item within its list

    Returns
    -------
    str
        Marker text without the trailing space

    Examples
    --------
        >>> format_marker(NumberingDefinition(list_id=1, format="upperLetter"), 2)
        'C.'
        >>> format_marker(None, 0)
        '1.'

    """
    if definition is None or definition.format is None:
        return _decimal_marker(counter)

    if definition.format == NUMBER_FORMAT_BULLET:
        level_text = definition.level_text
        if level_text is not None and not level_text.strip():
            return BLANK_BULLET_MARKER
        return BULLET_MARKER

    marker = _FORMAT_MARKERS.get(definition.format, _decimal_marker)
    return marker(counter)


class NumberingEngine:
    """Per-render list counters.

    A fresh engine must be created for every render pass; the engine is
    the only mutable state involved in rendering.

    Examples
    --------
        >>> registry = {3: NumberingDefinition(list_id=3, format="decimal")}
        >>> engine = NumberingEngine()
        >>> engine.next_marker(3, 0, registry)
        '1. '
        >>> engine.next_marker(3, 1, registry)
        '    2. '

    """

    def __init__(self) -> None:
        self._counters: dict[int, int] = {}

    def next_marker(
        self,
        list_id: Optional[int],
        indent_level: Optional[int],
        registry: Mapping[int, NumberingDefinition],
    ) -> str:
        """Return the indentation and marker for the next item of a list.

        Parameters
        ----------
        list_id : int or None
            Numbering instance id; None produces indentation only
        indent_level : int or None
            Nesting level; four spaces per level
        registry : Mapping[int, NumberingDefinition]
            List formats keyed by id

        Returns
        -------
        str
            Indentation, then the marker followed by one space when a list id
            is given

        """
        prefix = LIST_INDENT * indent_level if indent_level is not None and indent_level > 0 else ""
        if list_id is None:
            return prefix

        counter = self._counters.get(list_id, 0)
        definition = registry.get(list_id)
        if definition is None:
            logger.debug(f"Numbering id {list_id} not registered; using decimal markers")

        self._counters[list_id] = counter + 1
        return f"{prefix}{format_marker(definition, counter)} "
