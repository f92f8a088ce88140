"""Exception classes for gridtables.

Provides standardized exceptions for error handling throughout gridtables.

Hierarchy:
    GridTableError
    ├── FormatMismatchError   (a line is neither a separator nor a content line)
    ├── InvalidArgumentError  (a model or line was built with bad arguments)
    └── InvalidTableError     (recognized lines do not form a well-formed table)
"""

from __future__ import annotations


class GridTableError(Exception):
    """Base exception for all gridtables errors.
    
    Subclass this for specific error categories.
    """

    pass


class FormatMismatchError(GridTableError):
    """A single line does not conform to the separator or content grammar.
    
    Recoverable by design: the scanner catches it and stops, and document
    detection catches it and moves on to the next candidate line.
    """

    def __init__(
        self,
        message: str,
        line: str | None = None,
        lineno: int | None = None,
        col_offset: int | None = None,
    ) -> None:
        """Initialize format mismatch with optional location.
        
        Args:
            message: Error description
            line: The offending line (optional)
            lineno: Line number where the mismatch occurred (1-indexed)
            col_offset: Column where the mismatch was detected (1-indexed)
        """
        self.message = message
        self.line = line
        self.lineno = lineno
        self.col_offset = col_offset

        location = ""
        if lineno is not None:
            location += f"{lineno}:"
        if col_offset is not None:
            location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class InvalidArgumentError(GridTableError, ValueError):
    """A construction precondition was violated.
    
    Signals a bug in the calling code (for example a separator line with no
    columns), not malformed user text.
    """

    pass


class InvalidTableError(GridTableError):
    """A sequence of recognized lines is not a well-formed table.
    
    Raised only by the "parse or fail" entry points. Document detection
    treats the same condition as "not a table" and skips it.
    """

    def __init__(self, message: str, part_count: int | None = None) -> None:
        """Initialize invalid table error.
        
        Args:
            message: Description of the structural problem
            part_count: Number of recognized lines that were validated
        """
        self.part_count = part_count
        suffix = f" ({part_count} lines)" if part_count is not None else ""
        super().__init__(f"{message}{suffix}")
