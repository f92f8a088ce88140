"""Table data model for gridtables.

Plain containers for parsed grid-table content:

Table
└── Row
    └── Cell

Unlike the transient line objects in ``gridtables.lines``, these are owned by
the caller for a whole editing session and are mutated in place, so they are
regular (non-frozen) slotted dataclasses. Equality is structural, which is
what round-trip comparisons rely on.

All rows of a table are expected to have the same number of cells. That is
the caller's invariant; nothing here enforces it.

"""

from __future__ import annotations

from dataclasses import dataclass, field

from gridtables.errors import InvalidArgumentError


@dataclass(slots=True)
class Cell:
    """A single table cell.

    ``content`` may contain ``\\n``: each newline-separated part is rendered on
    its own physical content line inside the cell.

    """

    content: str = ""


@dataclass(slots=True)
class Row:
    """An ordered sequence of cells."""

    cells: list[Cell] = field(default_factory=list)


@dataclass(slots=True)
class Table:
    """An ordered sequence of rows.

    Example:
        >>> table = Table.empty(rows=1, columns=2)
        >>> table.rows[0].cells[1].content = "x"
        >>> print(table)
        +-+---+
        | | x |
        +-+---+

    """

    rows: list[Row] = field(default_factory=list)

    @classmethod
    def empty(cls, rows: int = 2, columns: int = 2) -> Table:
        """Create a table of the given shape filled with empty cells."""
        if rows < 0 or columns < 0:
            raise InvalidArgumentError(f"Table shape must not be negative, got {rows}x{columns}")
        return cls(rows=[Row(cells=[Cell() for _ in range(columns)]) for _ in range(rows)])

    @property
    def column_count(self) -> int:
        """Number of cells in the first row (0 for a table without rows)."""
        if not self.rows:
            return 0
        return len(self.rows[0].cells)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def add_row(self, length: int | None = None, index: int | None = None) -> Row:
        """Insert a row of empty cells.

        Args:
            length: Number of cells. Defaults to the current column count.
            index: Position of the new row. ``None`` appends.

        Returns:
            The inserted row.

        Raises:
            InvalidArgumentError: If the table has no rows and ``length``
                is not given.

        """
        if length is None:
            if not self.rows:
                raise InvalidArgumentError("Length of row must be specified for an empty table")
            length = self.column_count

        row = Row(cells=[Cell() for _ in range(length)])
        if index is None:
            self.rows.append(row)
        else:
            self.rows.insert(index, row)
        return row

    def add_column(self, index: int | None = None) -> None:
        """Insert an empty cell into every row.

        Args:
            index: Column position of the new cells. ``None`` appends.

        """
        for row in self.rows:
            if index is None:
                row.cells.append(Cell())
            else:
                row.cells.insert(index, Cell())

    def move_column(self, from_index: int, to_index: int) -> None:
        """Move the column at ``from_index`` so it ends up at ``to_index``.

        Out-of-range or equal indices leave the table unchanged.
        """
        cols = self.column_count
        if not (0 <= from_index < cols and 0 <= to_index < cols) or from_index == to_index:
            return

        for row in self.rows:
            if from_index >= len(row.cells):
                continue
            cell = row.cells.pop(from_index)
            row.cells.insert(to_index, cell)

    def __str__(self) -> str:
        from gridtables.serializer import serialize_table

        return serialize_table(self)


__all__ = ["Cell", "Row", "Table"]
