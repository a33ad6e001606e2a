"""Per-call state for the line processor.

Everything that changes while folding over a document lives here, in a
ParseContext created fresh for each ``process`` call. The processor itself
only holds immutable configuration, so one instance can be shared freely.

Retroactive edits to already-emitted output go through LineSink, which
only ever exposes the last entry.

"""

from __future__ import annotations

from dataclasses import dataclass, field

from linemark.lines import ClassifiedLine
from linemark.rules import BlockRule
from linemark.styles import LineStyle
from linemark.tables import TableAccumulator


class LineSink:
    """Append-only output with a cursor on the last emitted entry.

    The only retroactive operations are restyling, replacing or removing
    the last entry.

    """

    __slots__ = ("_lines",)

    def __init__(self) -> None:
        self._lines: list[ClassifiedLine] = []

    def __len__(self) -> int:
        return len(self._lines)

    def __bool__(self) -> bool:
        return bool(self._lines)

    @property
    def last(self) -> ClassifiedLine | None:
        return self._lines[-1] if self._lines else None

    def append(self, line: ClassifiedLine) -> None:
        self._lines.append(line)

    def restyle_last(self, style: LineStyle) -> None:
        """Give the last entry a new style, keeping its text."""
        previous = self._lines[-1]
        self._lines[-1] = ClassifiedLine(
            text=previous.text,
            style=style,
            table_rows=previous.table_rows,
            literal=False,
            lineno=previous.lineno,
        )

    def pop_last(self) -> ClassifiedLine:
        return self._lines.pop()

    def attach_rows(self, rows: list[list[str]]) -> None:
        """Attach table rows to the last entry."""
        self._lines[-1].table_rows = rows

    def to_list(self) -> list[ClassifiedLine]:
        return list(self._lines)


@dataclass(slots=True)
class ParseContext:
    """Mutable state threaded through one processing run.

    Attributes:
        output: Emitted lines
        front_matter: Attributes read from the preamble
        active_block: Block rule whose region is open, if any
        close_token: Token of the open until-close region, if any
        close_token_lineno: Line that opened the until-close region
        table: Table currently being assembled
        source_file: Optional source name for error messages

    """

    output: LineSink = field(default_factory=LineSink)
    front_matter: dict[str, str] = field(default_factory=dict)
    active_block: BlockRule | None = None
    close_token: str | None = None
    close_token_lineno: int | None = None
    table: TableAccumulator = field(default_factory=TableAccumulator)
    source_file: str | None = None
