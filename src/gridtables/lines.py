"""Line grammar for grid tables.

A grid table is built from two kinds of physical lines:

Separator line:
    +----+--------+
    +----12+--------+      (optional visual width hint after the dashes)

Content line:
    | ab | x      |

A separator line stands on its own. A content line only has meaning against a
governing separator line: the separator's dash counts fix how many characters
each column occupies, so ``|`` characters inside a cell need no escaping.

Both line kinds are transient: they exist while a table is being parsed or
serialized and are never stored in the table model.

Thread Safety:
    Line objects are frozen and every function here is pure.

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TypeAlias

from gridtables.config import get_table_config
from gridtables.errors import FormatMismatchError, InvalidArgumentError

_SEPARATOR_MISMATCH = "Line doesn't match format! Should look like this: '+--+---+-+'"
_CONTENT_MISMATCH = "Line doesn't match format! Should be '| content1 | content2 |'"

_DIGITS = frozenset("0123456789")


@dataclass(frozen=True, slots=True)
class SeparatorLine:
    """A ``+---+`` line.

    Attributes:
        column_lengths: Dash count of each column, all strictly positive.
        visual_widths: ``None`` when no column carries a hint, otherwise one
            entry per column: the hint, or ``None`` for an unhinted column.
            Hints are layout metadata only and do not take part in equality.

    """

    column_lengths: tuple[int, ...]
    visual_widths: tuple[int | None, ...] | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        lengths = tuple(self.column_lengths)
        if not lengths:
            raise InvalidArgumentError("column_lengths must not be empty")
        for length in lengths:
            if length < 1:
                raise InvalidArgumentError(f"Column lengths must be positive, got {lengths}")
        object.__setattr__(self, "column_lengths", lengths)

        if self.visual_widths is None:
            return
        hints = tuple(self.visual_widths)
        if len(hints) != len(lengths):
            raise InvalidArgumentError(
                f"visual_widths has {len(hints)} entries for {len(lengths)} columns"
            )
        for hint in hints:
            if hint is not None and hint < 0:
                raise InvalidArgumentError(f"Visual widths must not be negative, got {hints}")
        # A hint tuple without a single hint is the same as no hints at all
        object.__setattr__(
            self, "visual_widths", hints if any(h is not None for h in hints) else None
        )

    @property
    def column_count(self) -> int:
        return len(self.column_lengths)

    def render(self) -> str:
        """Render as text, e.g. ``+--+---+`` or ``+--10+---+``."""
        hints = self.visual_widths
        segments = []
        for i, length in enumerate(self.column_lengths):
            hint = hints[i] if hints is not None else None
            segments.append("-" * length + ("" if hint is None else str(hint)))
        return f"+{'+'.join(segments)}+"

    @classmethod
    def try_parse(cls, line: str) -> SeparatorLine:
        """Recognize a separator line.

        Each column segment is one or more dashes, then an optional run of
        decimal digits (the visual width hint), then ``+``.

        Raises:
            FormatMismatchError: If the line is not a separator line. The
                ``col_offset`` points at the offending character.

        """
        if not line.startswith("+") or not line.endswith("+"):
            raise FormatMismatchError(_SEPARATOR_MISMATCH, line=line, col_offset=1)

        end = len(line) - 1
        column_lengths: list[int] = []
        hints: list[int | None] = []

        i = 1
        while i < end:
            dashes_start = i
            while i < end and line[i] == "-":
                i += 1
            if i == dashes_start:
                raise FormatMismatchError(_SEPARATOR_MISMATCH, line=line, col_offset=i + 1)

            digits_start = i
            while i < end and line[i] in _DIGITS:
                i += 1
            if line[i] != "+":
                raise FormatMismatchError(_SEPARATOR_MISMATCH, line=line, col_offset=i + 1)

            hint = None
            if i > digits_start:
                try:
                    hint = int(line[digits_start:i])
                except ValueError as e:
                    # Digit runs past the interpreter's int conversion limit
                    raise FormatMismatchError(
                        _SEPARATOR_MISMATCH, line=line, col_offset=digits_start + 1
                    ) from e

            column_lengths.append(digits_start - dashes_start)
            hints.append(hint)
            i += 1

        if not column_lengths:
            raise FormatMismatchError(_SEPARATOR_MISMATCH, line=line, col_offset=1)

        return cls(tuple(column_lengths), tuple(hints))


@dataclass(frozen=True, slots=True)
class ContentLine:
    """A ``| a | b |`` line, one raw text fragment per column."""

    data_chunks: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "data_chunks", tuple(self.data_chunks))

    def render(self) -> str:
        """Render as text, padding every fragment with one space on each side.

        An empty fragment renders as a single space, which is what a
        one-dash column holds.
        """
        cells = (" " if chunk == "" else f" {chunk} " for chunk in self.data_chunks)
        return f"|{'|'.join(cells)}|"

    @classmethod
    def try_parse(
        cls,
        line: str,
        sep_line: SeparatorLine,
        *,
        strict: bool | None = None,
    ) -> ContentLine:
        """Recognize a content line laid out by ``sep_line``.

        Each column takes exactly ``length + 1`` characters: the column text
        and its closing ``|``. At most one space is stripped from each end of
        the column text.

        A slice whose last character is not ``|`` is skipped without
        consuming any input, so the result may hold fewer chunks than
        ``sep_line`` has columns. Pass ``strict=True`` (or enable
        ``TableConfig.strict_cell_delimiters``) to reject such lines instead.

        Raises:
            FormatMismatchError: If the line doesn't start with ``|``, runs out
                before every column is consumed, or has characters left over.

        """
        if strict is None:
            strict = get_table_config().strict_cell_delimiters

        if not line.startswith("|"):
            raise FormatMismatchError(_CONTENT_MISMATCH, line=line, col_offset=1)

        chunks: list[str] = []
        pos = 1
        for length in sep_line.column_lengths:
            width = length + 1
            part = line[pos : pos + width]
            if len(part) != width:
                raise FormatMismatchError(_CONTENT_MISMATCH, line=line, col_offset=pos + 1)
            if part[-1] != "|":
                if strict:
                    raise FormatMismatchError(
                        "Column doesn't end with '|'", line=line, col_offset=pos + width
                    )
                continue

            text = part[:-1]
            if text.startswith(" "):
                text = text[1:]
            if text.endswith(" "):
                text = text[:-1]
            chunks.append(text)
            pos += width

        if pos != len(line):
            raise FormatMismatchError(_CONTENT_MISMATCH, line=line, col_offset=pos + 1)

        return cls(tuple(chunks))


TableLine: TypeAlias = SeparatorLine | ContentLine


def parse_separator_line(line: str) -> SeparatorLine:
    """Parse ``line`` as a separator line. See ``SeparatorLine.try_parse``."""
    return SeparatorLine.try_parse(line)


def parse_content_line(
    line: str, governing: SeparatorLine, *, strict: bool | None = None
) -> ContentLine:
    """Parse ``line`` as a content line. See ``ContentLine.try_parse``."""
    return ContentLine.try_parse(line, governing, strict=strict)


def separator_for_widths(
    column_lengths: Sequence[int], visual_widths: Sequence[int | None] | None = None
) -> SeparatorLine:
    """Build a separator, fitting ``visual_widths`` to the column count.

    Missing hints become ``None``; surplus hints are dropped. An empty or
    ``None`` hint sequence means no hints.
    """
    if not visual_widths:
        return SeparatorLine(tuple(column_lengths))
    count = len(column_lengths)
    hints = tuple(visual_widths[:count]) + (None,) * (count - len(visual_widths))
    return SeparatorLine(tuple(column_lengths), hints)


__all__ = [
    "ContentLine",
    "SeparatorLine",
    "TableLine",
    "parse_content_line",
    "parse_separator_line",
    "separator_for_widths",
]
