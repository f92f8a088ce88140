"""Tests for the Table / Row / Cell data model."""

import pytest

from gridtables.errors import InvalidArgumentError
from gridtables.nodes import Cell, Row, Table


def _contents(table: Table) -> list[list[str]]:
    return [[cell.content for cell in row.cells] for row in table.rows]


def _table(*rows: list[str]) -> Table:
    return Table([Row([Cell(content) for content in row]) for row in rows])


class TestAccessors:
    def test_counts(self) -> None:
        table = _table(["a", "b", "c"], ["d", "e", "f"])
        assert table.column_count == 3
        assert table.row_count == 2

    def test_empty_table(self) -> None:
        assert Table().column_count == 0
        assert Table().row_count == 0

    def test_structural_equality(self) -> None:
        assert _table(["a", "b"]) == _table(["a", "b"])
        assert _table(["a", "b"]) != _table(["a", "c"])

    def test_empty_factory(self) -> None:
        assert _contents(Table.empty(rows=3, columns=1)) == [[""], [""], [""]]

    def test_empty_factory_rejects_negative(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Table.empty(rows=-1)

    def test_cells_are_mutable(self) -> None:
        table = Table.empty(rows=1, columns=1)
        table.rows[0].cells[0].content = "edited"
        assert _contents(table) == [["edited"]]


class TestAddRow:
    def test_defaults_to_column_count(self) -> None:
        table = _table(["a", "b"])
        row = table.add_row()
        assert row == Row([Cell(""), Cell("")])
        assert _contents(table) == [["a", "b"], ["", ""]]

    def test_empty_table_requires_length(self) -> None:
        with pytest.raises(InvalidArgumentError, match="must be specified"):
            Table().add_row()

    def test_explicit_length(self) -> None:
        table = Table()
        table.add_row(3)
        assert _contents(table) == [["", "", ""]]

    def test_insert_at_index(self) -> None:
        table = _table(["a"], ["b"])
        table.add_row(index=1)
        assert _contents(table) == [["a"], [""], ["b"]]

    def test_new_cells_are_distinct(self) -> None:
        table = Table()
        row = table.add_row(2)
        row.cells[0].content = "x"
        assert row.cells[1].content == ""


class TestAddColumn:
    def test_append(self) -> None:
        table = _table(["a"], ["b"])
        table.add_column()
        assert _contents(table) == [["a", ""], ["b", ""]]

    def test_insert(self) -> None:
        table = _table(["a", "b"])
        table.add_column(0)
        assert _contents(table) == [["", "a", "b"]]


class TestMoveColumn:
    def test_move_right(self) -> None:
        table = _table(["a", "b", "c"], ["d", "e", "f"])
        table.move_column(0, 2)
        assert _contents(table) == [["b", "c", "a"], ["e", "f", "d"]]

    def test_move_left(self) -> None:
        table = _table(["a", "b", "c"])
        table.move_column(2, 1)
        assert _contents(table) == [["a", "c", "b"]]

    @pytest.mark.parametrize(("from_index", "to_index"), [(0, 0), (-1, 0), (0, 3), (5, 1)])
    def test_noop(self, from_index: int, to_index: int) -> None:
        table = _table(["a", "b", "c"])
        table.move_column(from_index, to_index)
        assert _contents(table) == [["a", "b", "c"]]
