"""Rule definitions for the line processor.

Three kinds of rule drive classification, each supplied as an ordered
table at construction time:

- LineRule: a token tested against a single line (first match wins)
- BlockRule: a start pattern and exact end token bounding a verbatim region
- FrontMatterRule: open/close tags bounding a key/value preamble

Rule order is a semantic input. Tables are stored as tuples exactly as
supplied.

Thread Safety:
All rules are frozen and safe to share across threads.

"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto

from linemark.errors import RuleConfigError
from linemark.styles import LineStyle


class Removal(Enum):
    """Which part of a line a matching rule strips."""

    LEADING = auto()  # exact token prefix
    TRAILING = auto()  # stripped token suffix
    BOTH = auto()
    ENTIRE_LINE = auto()  # only if nothing else remains
    NONE = auto()  # text untouched, always matches


class Scope(Enum):
    """Which line(s) a matching rule applies to."""

    CURRENT = auto()
    PREVIOUS = auto()  # underline marker restyling the line above
    UNTIL_CLOSE = auto()  # brackets a suppressed region
    PRE_AND_BACK = auto()  # table header/delimiter/content rows


def _enum_from_name(enum_cls: type[Enum], field: str, value: str | Enum) -> Enum:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls[str(value).strip().upper()]
    except KeyError:
        raise RuleConfigError(field, f"unknown value {value!r}") from None


@dataclass(frozen=True, slots=True)
class LineRule:
    """A token-driven rule tested against one line.

    Attributes:
        token: Substring that must appear in the line
        style: Style given to a matching line
        remove_from: Which part of the line the token is stripped from
        trim: Strip surrounding whitespace before and after matching
        scope: Which line(s) the rule applies to
        min_length: Minimum length of a PREVIOUS-scope marker line

    """

    token: str
    style: LineStyle
    remove_from: Removal = Removal.LEADING
    trim: bool = True
    scope: Scope = Scope.CURRENT
    min_length: int = 1

    @classmethod
    def from_dict(cls, data: dict) -> LineRule:
        """Create a LineRule from plain data.

        Enum-valued fields may be given by member name, case-insensitively.

        Example:
            >>> rule = LineRule.from_dict({"token": "# ", "style": "h1", "remove_from": "both"})
            >>> rule.remove_from
            <Removal.BOTH: 3>

        """
        if "token" not in data or "style" not in data:
            raise RuleConfigError("line_rules", "each rule needs 'token' and 'style'")
        style = data["style"]
        return cls(
            token=data["token"],
            style=style if isinstance(style, LineStyle) else LineStyle.from_name(style),
            remove_from=_enum_from_name(Removal, "remove_from", data.get("remove_from", Removal.LEADING)),
            trim=bool(data.get("trim", True)),
            scope=_enum_from_name(Scope, "scope", data.get("scope", Scope.CURRENT)),
            min_length=int(data.get("min_length", 1)),
        )


@dataclass(frozen=True, slots=True, eq=False)
class BlockRule:
    """A verbatim region opened by a pattern and closed by an exact token.

    Two block rules are equal when they share the same compiled pattern
    object, not when their patterns merely look alike.

    Attributes:
        start_pattern: Compiled pattern searched for in each candidate line
        end_token: Line that closes the region (exact match)
        style: Style given to every line inside the region

    """

    start_pattern: re.Pattern[str]
    end_token: str
    style: LineStyle

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BlockRule):
            return NotImplemented
        return self.start_pattern is other.start_pattern

    def __hash__(self) -> int:
        return id(self.start_pattern)

    def opens(self, line: str) -> bool:
        """Check whether ``line`` starts this region."""
        return self.start_pattern.search(line) is not None

    @classmethod
    def compile(cls, pattern: str, end_token: str, style: LineStyle) -> BlockRule:
        """Build a BlockRule from a pattern string.

        Raises:
            RuleConfigError: If the pattern does not compile.
        """
        try:
            compiled = re.compile(pattern)
        except re.error as e:
            raise RuleConfigError("start_pattern", f"{pattern!r}: {e}") from e
        return cls(start_pattern=compiled, end_token=end_token, style=style)

    @classmethod
    def from_dict(cls, data: dict) -> BlockRule:
        """Create a BlockRule from plain data (pattern given as a string)."""
        try:
            pattern = data["start_pattern"]
            end_token = data["end_token"]
            style = data["style"]
        except KeyError as e:
            raise RuleConfigError("block_rules", f"missing {e.args[0]!r}") from None
        if not isinstance(style, LineStyle):
            style = LineStyle.from_name(style)
        if isinstance(pattern, re.Pattern):
            return cls(start_pattern=pattern, end_token=end_token, style=style)
        return cls.compile(pattern, end_token, style)


@dataclass(frozen=True, slots=True)
class FrontMatterRule:
    """Open/close tags bounding a key/value metadata preamble.

    Attributes:
        open_tag: First line of the document that starts the preamble
        close_tag: Line that ends the preamble
        separator: Single character between key and value

    """

    open_tag: str
    close_tag: str
    separator: str = ":"

    def __post_init__(self) -> None:
        if len(self.separator) != 1:
            raise RuleConfigError(
                "separator", f"expected a single character, got {self.separator!r}"
            )

    @classmethod
    def from_dict(cls, data: dict) -> FrontMatterRule:
        """Create a FrontMatterRule from plain data."""
        try:
            return cls(
                open_tag=data["open_tag"],
                close_tag=data["close_tag"],
                separator=data.get("separator", ":"),
            )
        except KeyError as e:
            raise RuleConfigError("front_matter_rules", f"missing {e.args[0]!r}") from None
