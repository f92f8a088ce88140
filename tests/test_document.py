"""Tests for finding and rewriting tables inside documents."""

from gridtables.config import TableConfig, table_config_context
from gridtables.document import find_tables, format_tables, replace_table
from gridtables.nodes import Cell, Row, Table

DOCUMENT = "\n".join(
    [
        "# Notes",
        "+---+------+",
        "| a | one  |",
        "|   | more |",
        "+---+------+",
        "| b | two  |",
        "+---+------+",
        "",
        "text between",
        "+--+",
        "|xx|",
        "+--+",
    ]
)


class TestFindTables:
    def test_finds_all_tables(self) -> None:
        regions = find_tables(DOCUMENT)
        assert [(r.lineno, r.end_lineno) for r in regions] == [(2, 7), (10, 12)]

    def test_parsed_content(self) -> None:
        first, second = find_tables(DOCUMENT)
        assert first.table == Table(
            [
                Row([Cell("a\n"), Cell("one\nmore")]),
                Row([Cell("b"), Cell("two")]),
            ]
        )
        assert second.table == Table([Row([Cell("xx")])])

    def test_offsets_cover_table_text(self) -> None:
        first, second = find_tables(DOCUMENT)
        assert DOCUMENT[first.offset : first.end_offset] == "\n".join(DOCUMENT.split("\n")[1:7])
        assert DOCUMENT[second.offset : second.end_offset] == "+--+\n|xx|\n+--+"

    def test_widths(self) -> None:
        first, _ = find_tables(DOCUMENT)
        assert first.base_widths == [3, 6]
        assert first.visual_widths is None

    def test_visual_widths(self) -> None:
        (region,) = find_tables("+---9+\n| a |\n+---9+")
        assert region.visual_widths == (9,)

    def test_no_tables(self) -> None:
        assert find_tables("just\nsome text") == []
        assert find_tables("") == []

    def test_malformed_table_is_skipped(self) -> None:
        source = "+---+\n| a |\n+---+---+\nafter"
        assert find_tables(source) == []

    def test_oversized_hint_does_not_hide_other_tables(self) -> None:
        source = "text\n+-" + "9" * 5000 + "+\n| |\n+-+\n\n+---+\n| a |\n+---+"
        (region,) = find_tables(source)
        assert (region.lineno, region.end_lineno) == (6, 8)
        assert region.table == Table([Row([Cell("a")])])

    def test_crlf_document_has_no_tables(self) -> None:
        source = "intro\r\n+---+\r\n| a |\r\n+---+\r\n"
        assert find_tables(source) == []
        assert len(find_tables(source.replace("\r\n", "\n"))) == 1

    def test_lone_separator(self) -> None:
        assert find_tables("+---+") == []

    def test_candidate_inside_broken_table_can_start_a_table(self) -> None:
        # The first run ends on a content line, so it is not a table; the
        # separator on line 3 starts a valid one.
        source = "+-+\n|a|\n+---+\n| b |\n+---+"
        (region,) = find_tables(source)
        assert (region.lineno, region.end_lineno) == (3, 5)
        assert region.table == Table([Row([Cell("b")])])

    def test_directly_adjacent_tables(self) -> None:
        source = "+-+\n|a|\n+-+\n+--+\n|bb|\n+--+"
        # The scanner is greedy: the second table's separator joins the first
        # run, which then breaks the alternation rule. Only the second table,
        # scanned from its own separator, is found.
        (region,) = find_tables(source)
        assert (region.lineno, region.end_lineno) == (4, 6)
        assert region.table == Table([Row([Cell("bb")])])


class TestReplaceTable:
    def test_replace(self) -> None:
        source = "before\n+---+\n| a |\n+---+\nafter"
        (region,) = find_tables(source)
        table = region.table
        table.rows[0].cells[0].content = "longer"
        assert replace_table(source, region, table) == (
            "before\n+--------+\n| longer |\n+--------+\nafter"
        )

    def test_replace_with_widths(self) -> None:
        source = "+---+\n| a |\n+---+"
        (region,) = find_tables(source)
        result = replace_table(source, region, region.table, base_widths=[5], visual_widths=[30])
        assert result == "+-----30+\n| a   |\n+-----30+"


class TestFormatTables:
    def test_canonicalizes_content_lines(self) -> None:
        source = "x\n+-----+\n|a    |\n+-----+\ny"
        assert format_tables(source) == "x\n+-----+\n| a   |\n+-----+\ny"

    def test_keeps_wide_columns_and_drops_hints(self) -> None:
        source = "+------12+\n| a    |\n+------12+"
        assert format_tables(source) == "+------+\n| a    |\n+------+"

    def test_opinionated_keeps_hints_and_shrinks(self) -> None:
        source = "+------12+\n| a    |\n+------12+"
        with table_config_context(TableConfig(opinionated_sizes=True)):
            assert format_tables(source) == "+---12+\n| a |\n+---12+"

    def test_multiple_tables(self) -> None:
        source = "+--+\n|a |\n+--+\ntext\n+--+\n|bb|\n+--+"
        assert format_tables(source) == "+---+\n| a |\n+---+\ntext\n+----+\n| bb |\n+----+"

    def test_idempotent(self) -> None:
        once = format_tables(DOCUMENT)
        assert format_tables(once) == once

    def test_without_tables(self) -> None:
        assert format_tables("plain\ntext") == "plain\ntext"
