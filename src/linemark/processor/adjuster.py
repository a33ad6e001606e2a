"""Retroactive adjuster mixin."""

from __future__ import annotations

from linemark.context import ParseContext
from linemark.lines import ClassifiedLine
from linemark.tables import is_delimiter_row, split_cells
from linemark.utils.logger import get_logger

logger = get_logger(__name__)


class RetroactiveAdjusterMixin:
    """Mixin resolving dependencies between a line and the one before it.

    A freshly classified line may:
    - restyle the previous entry and vanish (underline markers)
    - open, continue or end a table anchored on the previous entry
    - be appended as an independent entry

    All edits to earlier output go through ``ctx.output`` (a LineSink),
    which only exposes the last entry.

    """

    def _flush_table(self, ctx: ParseContext) -> None:
        """Attach an open table's rows to the last entry and close it."""
        if not ctx.table.is_open:
            return
        rows = ctx.table.take()
        ctx.output.attach_rows(rows)
        logger.debug("Table flushed with %d rows", len(rows))

    def _adjust(self, line: str, classified: ClassifiedLine, ctx: ParseContext) -> None:
        """Place a classified line into the output.

        Args:
            line: Raw source line the entry was classified from
            classified: Result of the line classifier
            ctx: Current parse context
        """
        output = ctx.output
        previous = output.last

        restyle = classified.style.affects_previous_line
        if restyle is not None and previous is not None:
            # Table entries keep their style; the marker stands on its own
            if not (previous.table_rows or ctx.table.is_open):
                output.restyle_last(restyle)
                return

        if classified.style.affects_previous_and_next is not None and previous is not None:
            if previous.style.is_table and self._adjust_table_row(line, classified, previous, ctx):
                return

        self._flush_table(ctx)
        output.append(classified)

    def _adjust_table_row(
        self,
        line: str,
        classified: ClassifiedLine,
        previous: ClassifiedLine,
        ctx: ParseContext,
    ) -> bool:
        """Handle a table line that follows another table line.

        A delimiter row turns the previous entry into the table header: the
        header cells go into the accumulator, the previous entry is removed
        and the delimiter is emitted with empty text as the table entry.
        A row following an open table entry is a content row and is
        absorbed into the accumulator.

        Returns:
            True if the line was placed (as the new table entry) or absorbed,
            False if it should be appended as an ordinary line.
        """
        cells = split_cells(line)

        if is_delimiter_row(cells):
            header = split_cells(previous.text)
            if header and len(cells) >= len(header):
                ctx.table.open(header)
                ctx.output.pop_last()
                classified.text = ""
                ctx.output.append(classified)
                logger.debug("Table opened at line %s with %d columns", classified.lineno, len(header))
                return True

        if not previous.text and ctx.table.is_open and cells:
            if not ctx.table.add_row(cells):
                logger.debug(
                    "Dropped table row at line %s: %d cells for %d columns",
                    classified.lineno,
                    len(cells),
                    ctx.table.width,
                )
            return True

        return False
