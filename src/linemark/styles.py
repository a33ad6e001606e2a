"""Line styles assigned by the classifier.

Every classified line carries exactly one LineStyle. Besides naming the
kind of line, a style answers three questions the processor asks while
folding over the document:

- Does the line's text still need inline tokenization?
- Is the line a marker that restyles the previously emitted line?
- Does the line take part in a two-line table relationship?

The answers live in lookup tables keyed by member, so the set of styles
is closed and the queries never inspect types.

Thread Safety:
LineStyle is an enum (inherently immutable).

"""

from __future__ import annotations

from enum import Enum, auto

from linemark.errors import RuleConfigError


class LineStyle(Enum):
    """Styles a line can be classified as.

    Organized by category:
    - Headings (including underline markers for the previous line)
    - Body text and quotes
    - Code
    - Lists
    - Links and tables

    """

    # Headings
    H1 = auto()
    H2 = auto()
    H3 = auto()
    H4 = auto()
    H5 = auto()
    H6 = auto()
    PREVIOUS_H1 = auto()  # === under a line
    PREVIOUS_H2 = auto()  # --- under a line

    # Text
    BODY = auto()
    BLOCKQUOTE = auto()

    # Code
    CODEBLOCK = auto()

    # Lists
    UNORDERED_LIST = auto()
    UNORDERED_LIST_INDENT_FIRST_ORDER = auto()
    UNORDERED_LIST_INDENT_SECOND_ORDER = auto()
    ORDERED_LIST = auto()
    ORDERED_LIST_INDENT_FIRST_ORDER = auto()
    ORDERED_LIST_INDENT_SECOND_ORDER = auto()

    # Links and tables
    REFERENCED_LINK = auto()
    TABLE = auto()  # | cell | cell |

    @property
    def needs_tokenization(self) -> bool:
        """Whether the line's text should be handed to an inline tokenizer."""
        return self not in _VERBATIM_STYLES

    @property
    def affects_previous_line(self) -> LineStyle | None:
        """Style to give the previous line when this marker is found, if any."""
        return _PREVIOUS_LINE_STYLES.get(self)

    @property
    def affects_previous_and_next(self) -> LineStyle | None:
        """Style shared by a two-line table relationship, if any."""
        return _PRE_AND_BACK_STYLES.get(self)

    @property
    def is_table(self) -> bool:
        """True for the single table-capable style."""
        return self is LineStyle.TABLE

    @classmethod
    def from_name(cls, name: str) -> LineStyle:
        """Look up a style by member name, case-insensitively.

        Args:
            name: Member name such as ``"h1"`` or ``"UNORDERED_LIST"``

        Returns:
            The matching LineStyle.

        Raises:
            RuleConfigError: If no member has that name.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise RuleConfigError("style", f"unknown line style {name!r}") from None


_VERBATIM_STYLES = frozenset({LineStyle.CODEBLOCK})

_PREVIOUS_LINE_STYLES: dict[LineStyle, LineStyle] = {
    LineStyle.PREVIOUS_H1: LineStyle.H1,
    LineStyle.PREVIOUS_H2: LineStyle.H2,
}

_PRE_AND_BACK_STYLES: dict[LineStyle, LineStyle] = {
    LineStyle.TABLE: LineStyle.TABLE,
}
