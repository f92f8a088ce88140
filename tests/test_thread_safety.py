"""Thread safety tests for gridtables.

Parsing and serialization keep no state between calls. These tests run them
from many threads at once and check every thread gets the same answer as a
single-threaded run.
"""

from concurrent.futures import ThreadPoolExecutor

from gridtables import find_tables, format_tables, parse, serialize_table
from gridtables.config import TableConfig, table_config_context
from gridtables.nodes import Cell, Row, Table


def _document(index: int) -> str:
    table = Table(
        [
            Row([Cell(f"row {index}"), Cell("a\nb")]),
            Row([Cell(""), Cell("x" * (index % 7))]),
        ]
    )
    return f"heading {index}\n{serialize_table(table)}\ntrailer"


class TestConcurrentParsing:
    def test_parallel_find_tables(self) -> None:
        documents = [_document(i) for i in range(50)]
        expected = [find_tables(doc) for doc in documents]

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(find_tables, documents))

        assert results == expected

    def test_parallel_round_trip(self) -> None:
        tables = [parse(_document(i).split("\n", 1)[1]) for i in range(50)]

        def round_trip(table: Table) -> Table:
            return parse(serialize_table(table, [12, 1]))

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(round_trip, tables))

        assert results == tables

    def test_config_is_per_thread(self) -> None:
        source = "+------9+\n| a    |\n+------9+"

        def format_with(opinionated: bool) -> str:
            with table_config_context(TableConfig(opinionated_sizes=opinionated)):
                return format_tables(source)

        flags = [i % 2 == 0 for i in range(40)]
        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(format_with, flags))

        for opinionated, result in zip(flags, results):
            if opinionated:
                assert result == "+---9+\n| a |\n+---9+"
            else:
                assert result == "+------+\n| a    |\n+------+"
