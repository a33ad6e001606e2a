"""Classified line output of the line processor.

The processor produces an ordered list of ClassifiedLine entries. Each
entry carries the (possibly stripped) text of one source line, its style,
and, for table entries, the rows collected from the lines that followed.

ClassifiedLine is mutable only so the processor can restyle or attach
table rows to the most recently emitted entry; callers should treat the
returned entries as read-only.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from linemark.styles import LineStyle


@dataclass(slots=True, eq=False)
class ClassifiedLine:
    """One classified line of output.

    Attributes:
        text: Line text after token removal and trimming
        style: Assigned style
        table_rows: Header row followed by content rows (table entries only)
        literal: True for verbatim lines from a block region
        lineno: 1-indexed source line that produced the entry

    Equality compares ``text`` only: two entries with equal text are
    interchangeable when looking up a previously emitted line.

    """

    text: str
    style: LineStyle
    table_rows: list[list[str]] = field(default_factory=list)
    literal: bool = False
    lineno: int | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClassifiedLine):
            return NotImplemented
        return self.text == other.text

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        text = self.text
        if len(text) > 20:
            text = text[:17] + "..."
        extra = f", rows={len(self.table_rows)}" if self.table_rows else ""
        return f"ClassifiedLine({self.style.name}, {text!r}{extra})"

    @property
    def needs_tokenization(self) -> bool:
        """Whether an inline tokenizer should process this line's text."""
        return not self.literal and self.style.needs_tokenization


@dataclass(frozen=True, slots=True)
class ProcessedDocument:
    """Result of a single processing run.

    Attributes:
        lines: Classified lines in source order
        front_matter: Attributes read from the front matter preamble
        unclosed_token: Token of an until-close region still open at end of input
        unclosed_block: End token of a block region still open at end of input

    Thread Safety:
        Frozen; the front matter mapping is a read-only proxy.

    """

    lines: list[ClassifiedLine]
    front_matter: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    unclosed_token: str | None = None
    unclosed_block: str | None = None

    def __iter__(self):
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)
