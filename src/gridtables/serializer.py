"""Canonical text output for grid tables.

Turns a Table back into separator and content lines:

    +----+--------+
    | ab | x      |
    | cd |        |
    +----+--------+

Column widths come from the content. A caller can pass the widths a table was
last written with (``base_widths``) so a column the user widened on purpose
keeps its width, but a column is never narrower than its longest line plus
the two padding spaces. Visual width hints are written after the dashes of
every separator line and play no part in layout.

Thread Safety:
    Pure function, safe to call from any thread.

"""

from __future__ import annotations

from collections.abc import Sequence

from gridtables.errors import InvalidArgumentError
from gridtables.lines import ContentLine, TableLine, separator_for_widths
from gridtables.nodes import Table


def _content_widths(table: Table) -> list[int]:
    """Longest line of each column, over all rows."""
    widths: list[int] = []
    for row in table.rows:
        for col_idx, cell in enumerate(row.cells):
            if len(widths) <= col_idx:
                widths.append(0)
            longest = max(len(line) for line in cell.content.split("\n"))
            if longest > widths[col_idx]:
                widths[col_idx] = longest
    return widths


def _minimum_width(content_width: int) -> int:
    # An empty column still gets one dash and renders as "| |"
    return 1 if content_width == 0 else content_width + 2


def separator_widths(
    table: Table, base_widths: Sequence[int] | None = None
) -> list[int]:
    """Compute the dash count of every column.

    Args:
        table: The table being written.
        base_widths: Preferred widths per column. Missing or non-positive
            entries fall back to the content-derived width; entries below
            that width are raised to it. A width of 2 cannot hold a padded
            fragment and becomes 3.

    """
    widths: list[int] = []
    for col_idx, content_width in enumerate(_content_widths(table)):
        minimum = _minimum_width(content_width)
        preferred = base_widths[col_idx] if base_widths and col_idx < len(base_widths) else 0
        width = minimum if preferred <= 0 else max(preferred, minimum)
        if width == 2:
            # An empty fragment renders as "| |" and a padded one as "|   |"
            width = 3
        widths.append(width)
    return widths


def table_to_parts(
    table: Table,
    base_widths: Sequence[int] | None = None,
    visual_widths: Sequence[int | None] | None = None,
) -> list[TableLine]:
    """Lay out ``table`` as separator and content lines.

    Raises:
        InvalidArgumentError: If the table has no columns to write.

    """
    widths = separator_widths(table, base_widths)
    if not widths:
        raise InvalidArgumentError("Cannot serialize a table without columns")

    separator = separator_for_widths(widths, visual_widths)
    padding = [0 if width <= 1 else width - 2 for width in widths]

    parts: list[TableLine] = []
    for row in table.rows:
        parts.append(separator)
        cell_lines = [cell.content.split("\n") for cell in row.cells]
        height = max((len(lines) for lines in cell_lines), default=0)

        for line_idx in range(height):
            parts.append(
                ContentLine(
                    tuple(
                        (lines[line_idx] if line_idx < len(lines) else "").ljust(padding[col_idx])
                        for col_idx, lines in enumerate(cell_lines)
                    )
                )
            )
    parts.append(separator)
    return parts


def serialize_table(
    table: Table,
    base_widths: Sequence[int] | None = None,
    visual_widths: Sequence[int | None] | None = None,
) -> str:
    """Serialize ``table`` to canonical grid-table text.

    Args:
        table: Table to write. Must have at least one row with one cell.
        base_widths: Preferred dash count per column (see ``separator_widths``).
            A base width of 2 is written as 3, since neither ``| |`` nor a
            padded fragment fits two dashes.
        visual_widths: Visual width hints to encode on every separator line.
            ``None`` entries leave a column unhinted.

    Returns:
        The table text, lines joined with ``\\n`` and no trailing newline.

    Raises:
        InvalidArgumentError: If the table has no columns to write.

    Example:
        >>> from gridtables.nodes import Cell, Row, Table
        >>> print(serialize_table(Table([Row([Cell("a"), Cell("")])])))
        +---+-+
        | a | |
        +---+-+

    """
    return "\n".join(part.render() for part in table_to_parts(table, base_widths, visual_widths))


__all__ = ["separator_widths", "serialize_table", "table_to_parts"]
