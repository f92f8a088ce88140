"""
gridtables: grid-table parsing and serialization for Python

Reads and writes multiline plaintext tables built from ``+---+`` separator
lines and ``| cell |`` content lines, with lossless round trips and optional
per-column visual width hints. Zero runtime dependencies.

Quick Start:
    >>> from gridtables import parse, serialize_table
    >>> table = parse("+----+---+\\n| ab | x |\\n| cd |   |\\n+----+---+")
    >>> table.rows[0].cells[0].content
    'ab\\ncd'
    >>> print(serialize_table(table))
    +----+---+
    | ab | x |
    | cd |   |
    +----+---+

Tables in a document:
    >>> from gridtables import find_tables
    >>> regions = find_tables(document_text)
    >>> for region in regions:
    ...     print(region.lineno, region.table.row_count)

Lower level:
    >>> from gridtables import look_ahead_for_table_parts, parse_table
    >>> parts = look_ahead_for_table_parts(lines[start:])
    >>> table = parse_table(parts)   # raises InvalidTableError if malformed
"""

from gridtables.config import (
    TableConfig,
    get_table_config,
    reset_table_config,
    set_table_config,
    table_config_context,
)
from gridtables.document import TableRegion, find_tables, format_tables, replace_table
from gridtables.errors import (
    FormatMismatchError,
    GridTableError,
    InvalidArgumentError,
    InvalidTableError,
)
from gridtables.lines import (
    ContentLine,
    SeparatorLine,
    TableLine,
    parse_content_line,
    parse_separator_line,
)
from gridtables.nodes import Cell, Row, Table
from gridtables.parser import is_valid_table_spec, parse, parse_table, valid_spec_to_table
from gridtables.scanner import look_ahead_for_table_parts, scan_table_lines
from gridtables.serialization import from_dict, from_json, to_dict, to_json
from gridtables.serializer import serialize_table

__version__ = "0.1.0"

__all__ = [
    # Data model
    "Cell",
    "Row",
    "Table",
    # Line grammar
    "ContentLine",
    "SeparatorLine",
    "TableLine",
    "parse_content_line",
    "parse_separator_line",
    # Parsing
    "is_valid_table_spec",
    "look_ahead_for_table_parts",
    "parse",
    "parse_table",
    "scan_table_lines",
    "valid_spec_to_table",
    # Serialization
    "serialize_table",
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    # Documents
    "TableRegion",
    "find_tables",
    "format_tables",
    "replace_table",
    # Configuration
    "TableConfig",
    "get_table_config",
    "reset_table_config",
    "set_table_config",
    "table_config_context",
    # Errors
    "FormatMismatchError",
    "GridTableError",
    "InvalidArgumentError",
    "InvalidTableError",
    # Version
    "__version__",
]
