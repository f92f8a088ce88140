"""Grid table parsing: validation and conversion of scanned lines.

Pipeline:
    raw lines
      -> look_ahead_for_table_parts   (gridtables.scanner)
      -> is_valid_table_spec          structural check, returns bool
      -> valid_spec_to_table          fold lines into Table / Row / Cell

A well-formed table is ``sep (content+ sep)+``: it starts and ends with a
separator, every separator has the first separator's column lengths, and
separators never follow each other directly.

Thread Safety:
    All functions are pure; conversion state is local to each call.

"""

from __future__ import annotations

from collections.abc import Sequence

from gridtables.errors import InvalidTableError
from gridtables.lines import ContentLine, SeparatorLine, TableLine
from gridtables.nodes import Cell, Row, Table
from gridtables.scanner import look_ahead_for_table_parts
from gridtables.utils.logger import get_logger

logger = get_logger(__name__)

# A content fragment may exceed its column length by the two padding spaces
_PADDING_TOLERANCE = 2


def is_valid_table_spec(parts: Sequence[TableLine]) -> bool:
    """Check scanned lines against the structure of a well-formed table.

    Returns False (never raises) when there are fewer than three lines, the
    first or last line is not a separator, two separators are adjacent, a
    separator's column lengths differ from the first one's, or a content
    line has the wrong number of fragments or a fragment longer than its
    column length plus two.
    """
    if len(parts) < 3:
        logger.debug("Less than 3 parts: %d", len(parts))
        return False

    first = parts[0]
    if not isinstance(first, SeparatorLine):
        logger.debug("First line isn't a separator line: %r", first)
        return False
    if not isinstance(parts[-1], SeparatorLine):
        logger.debug("Last line isn't a separator line: %r", parts[-1])
        return False

    expected_columns = first.column_lengths
    separator_ok = False

    for index, entry in enumerate(parts[1:], start=1):
        match entry:
            case SeparatorLine():
                if not separator_ok:
                    logger.debug("Unexpected separator at line %d", index)
                    return False
                if entry != first:
                    logger.debug(
                        "Separator at line %d doesn't match the first one: %s != %s",
                        index,
                        entry.column_lengths,
                        expected_columns,
                    )
                    return False
                separator_ok = False
            case ContentLine():
                if len(entry.data_chunks) != len(expected_columns):
                    logger.debug(
                        "Content line %d has %d fragments for %d columns",
                        index,
                        len(entry.data_chunks),
                        len(expected_columns),
                    )
                    return False
                for chunk, column_length in zip(entry.data_chunks, expected_columns):
                    if len(chunk) - column_length > _PADDING_TOLERANCE:
                        logger.debug(
                            "Content line %d: fragment %r is too long for column length %d",
                            index,
                            chunk,
                            column_length,
                        )
                        return False
                separator_ok = True

    return True


def valid_spec_to_table(parts: Sequence[TableLine]) -> Table:
    """Fold validated lines into a Table.

    Every separator after the first closes a row: the fragments collected for
    each column since the previous separator are joined with ``\\n`` into one
    cell. Fragments are right-stripped as they are collected.

    The caller must have checked ``parts`` with ``is_valid_table_spec``;
    behaviour on unvalidated input is undefined.
    """
    rows: list[Row] = []
    fragments: list[list[str]] = []
    first_separator = True

    for entry in parts:
        match entry:
            case SeparatorLine():
                if not first_separator:
                    rows.append(Row(cells=[Cell("\n".join(column)) for column in fragments]))
                first_separator = False
                fragments = [[] for _ in entry.column_lengths]
            case ContentLine():
                for column, chunk in zip(fragments, entry.data_chunks):
                    column.append(chunk.rstrip())

    return Table(rows=rows)


def parse_table(parts: Sequence[TableLine]) -> Table:
    """Validate scanned lines and convert them into a Table.

    Raises:
        InvalidTableError: If ``parts`` is not a well-formed table.

    """
    if not is_valid_table_spec(parts):
        raise InvalidTableError("Table format is invalid", part_count=len(parts))
    return valid_spec_to_table(parts)


def parse(source: str) -> Table:
    """Parse the grid table that starts on the first line of ``source``.

    Lines after the end of the table are ignored. Lines are split on ``\\n``
    only; normalize ``\\r\\n`` line endings before calling.

    Raises:
        InvalidTableError: If no well-formed table starts on the first line.

    Example:
        >>> table = parse("+---+\\n| a |\\n+---+")
        >>> table.rows[0].cells[0].content
        'a'

    """
    return parse_table(look_ahead_for_table_parts(source.split("\n")))


__all__ = [
    "is_valid_table_spec",
    "parse",
    "parse_table",
    "valid_spec_to_table",
]
