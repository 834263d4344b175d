#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docx2md/renderers/table.py
"""Pipe-table layout with padded columns.

Cells arrive already rendered to Markdown. The layout pads every cell to
its column's width so the table lines up in plain text, and synthesizes a
blank header row when the table has none, since Markdown tables require one.

"""

from __future__ import annotations

from typing import Sequence

RenderedRow = tuple[bool, list[str]]


class TableLayout:
    """Render rows of pre-rendered cell text as a Markdown pipe table.

    Examples
    --------
        >>> print(TableLayout().render([(True, ["Name", "Qty"]), (False, ["Apple", "3"])]), end="")
        | Name  | Qty |
        | ----- | --- |
        | Apple | 3   |

    """

    @staticmethod
    def calculate_column_widths(rows: Sequence[RenderedRow]) -> list[int]:
        """Return the width of each column, growing for ragged rows.

        Parameters
        ----------
        rows : sequence of (bool, list of str)
            ``(is_header, cells)`` for every row

        Returns
        -------
        list of int
            Maximum ``len()`` of the cells in each column

        """
        widths: list[int] = []
        for _, cells in rows:
            for index, cell in enumerate(cells):
                if index >= len(widths):
                    widths.append(len(cell))
                else:
                    widths[index] = max(widths[index], len(cell))
        return widths

    @staticmethod
    def _render_row(cells: Sequence[str], widths: Sequence[int]) -> str:
        parts = []
        for index, width in enumerate(widths):
            cell = cells[index] if index < len(cells) else ""
            parts.append(f"| {cell.ljust(width)} ")
        return "".join(parts) + "|\n"

    @staticmethod
    def _render_divider(widths: Sequence[int]) -> str:
        return "".join(f"| {'-' * width} " for width in widths) + "|\n"

    def render(self, rows: Sequence[RenderedRow]) -> str:
        """Lay out a table.

        Parameters
        ----------
        rows : sequence of (bool, list of str)
            ``(is_header, cells)`` for every row, cells already rendered

        Returns
        -------
        str
            Pipe table with every line ending in a newline; the empty string
            for a table without rows

        """
        if not rows:
            return ""

        widths = self.calculate_column_widths(rows)
        lines: list[str] = []

        first_is_header, first_cells = rows[0]
        if first_is_header:
            lines.append(self._render_row(first_cells, widths))
            lines.append(self._render_divider(widths))
        else:
            lines.append(self._render_row([], widths))
            lines.append(self._render_divider(widths))
            lines.append(self._render_row(first_cells, widths))

        for _, cells in rows[1:]:
            lines.append(self._render_row(cells, widths))

        return "".join(lines)
