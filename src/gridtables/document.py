"""Grid tables inside larger documents.

A host editor hands over a whole document and wants back the regions that
hold tables, so it can render them as widgets and write edits back:

1. Every line that parses as a separator line is a candidate table start.
2. From each candidate not already inside a found table, the lookahead
   scanner collects the run of table lines.
3. Runs that validate become ``TableRegion`` objects; the rest stay
   ordinary text.

Malformed or partial tables never raise here. They are simply not reported.

Thread Safety:
    All functions are pure, safe to call from any thread.

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import islice

from gridtables.config import get_table_config
from gridtables.errors import FormatMismatchError, InvalidTableError
from gridtables.lines import SeparatorLine
from gridtables.nodes import Table
from gridtables.parser import parse_table
from gridtables.scanner import look_ahead_for_table_parts
from gridtables.serializer import serialize_table
from gridtables.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class TableRegion:
    """A table found in a document.

    Attributes:
        lineno: First line of the table (1-indexed)
        end_lineno: Last line of the table (1-indexed, inclusive)
        offset: Offset of the table's first character in the source
        end_offset: Offset just past the table's last character (the final
            separator line's newline is not part of the region)
        table: Parsed table content
        separator: The table's first separator line

    """

    lineno: int
    end_lineno: int
    offset: int
    end_offset: int
    table: Table
    separator: SeparatorLine

    @property
    def base_widths(self) -> list[int]:
        """Column widths the table was written with."""
        return list(self.separator.column_lengths)

    @property
    def visual_widths(self) -> tuple[int | None, ...] | None:
        """Visual width hints of the first separator line, if any."""
        return self.separator.visual_widths


def _line_offsets(lines: Sequence[str]) -> list[int]:
    offsets = []
    position = 0
    for line in lines:
        offsets.append(position)
        position += len(line) + 1
    return offsets


def find_tables(source: str) -> list[TableRegion]:
    """Find every well-formed grid table in ``source``.

    Args:
        source: Document text. Lines are split on ``\\n`` only, so a
            ``\\r\\n`` document yields no tables until the caller normalizes
            its line endings.

    Returns:
        Regions in document order. Regions never overlap.

    Example:
        >>> regions = find_tables("intro\\n+---+\\n| a |\\n+---+\\noutro")
        >>> [(r.lineno, r.end_lineno) for r in regions]
        [(2, 4)]

    """
    lines = source.split("\n")
    candidates: list[int] = []
    for index, line in enumerate(lines):
        try:
            SeparatorLine.try_parse(line)
        except FormatMismatchError:
            continue
        candidates.append(index)

    offsets = _line_offsets(lines)
    regions: list[TableRegion] = []
    scanned_up_to = -1

    for start in candidates:
        if start <= scanned_up_to:
            continue

        parts = look_ahead_for_table_parts(islice(lines, start, None))
        try:
            table = parse_table(parts)
        except InvalidTableError as e:
            logger.debug("No table at line %d: %s", start + 1, e)
            continue

        first = parts[0]
        if not isinstance(first, SeparatorLine):
            continue

        end = start + len(parts) - 1
        regions.append(
            TableRegion(
                lineno=start + 1,
                end_lineno=end + 1,
                offset=offsets[start],
                end_offset=offsets[end] + len(lines[end]),
                table=table,
                separator=first,
            )
        )
        logger.debug("Found table at lines %d-%d", start + 1, end + 1)
        scanned_up_to = end

    return regions


def replace_table(
    source: str,
    region: TableRegion,
    table: Table,
    *,
    base_widths: Sequence[int] | None = None,
    visual_widths: Sequence[int | None] | None = None,
) -> str:
    """Write ``table`` over ``region`` and return the new document.

    ``region`` must come from ``find_tables(source)``.
    """
    text = serialize_table(table, base_widths, visual_widths)
    return source[: region.offset] + text + source[region.end_offset :]


def format_tables(source: str) -> str:
    """Rewrite every table in ``source`` in canonical form.

    With ``TableConfig.opinionated_sizes`` the visual width hints are kept and
    column widths are derived from content. Otherwise the current column
    widths are kept as base widths (growing where content needs it) and hints
    are dropped.

    Running it on its own output returns the output unchanged.
    """
    opinionated = get_table_config().opinionated_sizes

    # Last to first, so earlier offsets stay valid
    for region in reversed(find_tables(source)):
        if opinionated:
            source = replace_table(
                source, region, region.table, visual_widths=region.visual_widths
            )
        else:
            source = replace_table(source, region, region.table, base_widths=region.base_widths)
    return source


__all__ = ["TableRegion", "find_tables", "format_tables", "replace_table"]
