"""Pipe table helpers for the retroactive adjuster.

Tables are assembled across several lines:

    A | B        <- header (emitted first as an ordinary table line)
    --- | ---    <- delimiter (replaces the header entry, opens the table)
    1 | 2        <- content rows (absorbed into the accumulator)

The accumulator buffers the header and content rows until the table
stops continuing, then hands them to the table entry in one go.
"""

from __future__ import annotations

from dataclasses import dataclass, field

DELIMITER_CHAR = "-"
MIN_DELIMITER_LENGTH = 3


def split_cells(line: str) -> list[str]:
    """Split a pipe-delimited line into trimmed cells.

    Empty pieces are dropped, which strips the artifacts of leading and
    trailing pipes.

    Args:
        line: Raw line text

    Returns:
        List of non-empty cell strings (may be empty).
    """
    cells = []
    for piece in line.strip().split("|"):
        if not piece:
            continue
        cells.append(piece.strip())
    return cells


def is_delimiter_cell(cell: str) -> bool:
    """True if ``cell`` is a run of at least three dashes."""
    return len(cell) >= MIN_DELIMITER_LENGTH and all(c == DELIMITER_CHAR for c in cell)


def is_delimiter_row(cells: list[str]) -> bool:
    """True if every cell of a non-empty row is a delimiter cell."""
    return bool(cells) and all(is_delimiter_cell(cell) for cell in cells)


@dataclass(slots=True)
class TableAccumulator:
    """Header and pending rows of the table currently being assembled.

    The first row is always the header. The accumulator is empty when no
    table is open.

    """

    rows: list[list[str]] = field(default_factory=list)

    @property
    def is_open(self) -> bool:
        return bool(self.rows)

    @property
    def width(self) -> int:
        """Number of header cells (0 when no table is open)."""
        return len(self.rows[0]) if self.rows else 0

    def open(self, header: list[str]) -> None:
        self.rows = [list(header)]

    def add_row(self, cells: list[str]) -> bool:
        """Append a content row, padding it to the header width.

        Returns:
            False if the row is wider than the header and was dropped.
        """
        if len(cells) > self.width:
            return False
        self.rows.append(cells + [""] * (self.width - len(cells)))
        return True

    def take(self) -> list[list[str]]:
        """Return the buffered rows and reset the accumulator."""
        rows, self.rows = self.rows, []
        return rows
