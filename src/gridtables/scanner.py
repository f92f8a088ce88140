"""Lookahead scanner for grid tables.

Grid tables carry no length prefix, so the extent of a table is discovered by
reading forward from a candidate first line until a line fits neither line
kind. The scanner is greedy and never backtracks: the first line is the only
separator it will ever treat as governing content lines, and the first line
that fails both interpretations ends the scan.

The result is only grammar-compatible, not necessarily a well-formed table.
Use ``gridtables.parser.parse_table`` to validate and convert it.

Thread Safety:
    Pure function over its input, safe to call from any thread.

"""

from __future__ import annotations

from collections.abc import Iterable

from gridtables.errors import FormatMismatchError
from gridtables.lines import ContentLine, SeparatorLine, TableLine


def look_ahead_for_table_parts(lines: Iterable[str]) -> list[TableLine]:
    """Collect the run of separator/content lines starting at the first line.

    Args:
        lines: Candidate lines, starting at the presumed first line of a table.
            Consumed lazily; iteration stops at the first line that ends the
            run.

    Returns:
        The recognized lines in order. Empty if the first line is not a
        separator line. Never raises for malformed input.

    Example:
        >>> look_ahead_for_table_parts(["+-+", "|a|", "+-+", "text"])
        [SeparatorLine(column_lengths=(1,), ...), ContentLine(data_chunks=('a',)), ...]

    """
    parts: list[TableLine] = []
    governing: SeparatorLine | None = None

    for line in lines:
        if governing is None:
            try:
                governing = SeparatorLine.try_parse(line)
            except FormatMismatchError:
                break
            parts.append(governing)
            continue

        try:
            parts.append(SeparatorLine.try_parse(line))
            continue
        except FormatMismatchError:
            pass

        try:
            parts.append(ContentLine.try_parse(line, governing))
            continue
        except FormatMismatchError:
            pass

        # Neither a separator nor a content line: the run ends here
        break

    return parts


scan_table_lines = look_ahead_for_table_parts


__all__ = ["look_ahead_for_table_parts", "scan_table_lines"]
