"""Line rule classifier mixin."""

from __future__ import annotations

from linemark.context import ParseContext
from linemark.lines import ClassifiedLine
from linemark.rules import LineRule, Removal, Scope
from linemark.styles import LineStyle
from linemark.utils.logger import get_logger

logger = get_logger(__name__)


def strip_leading_token(token: str, text: str) -> str:
    """Remove ``token`` from the start of ``text`` if it is an exact prefix."""
    if token and text.startswith(token):
        return text[len(token) :]
    return text


def strip_trailing_token(token: str, text: str) -> str:
    """Remove the whitespace-stripped ``token`` from the end of ``text``."""
    token = token.strip()
    if token and text.endswith(token):
        return text[: -len(token)]
    return text


def apply_removal(rule: LineRule, text: str) -> str | None:
    """Apply a rule's removal policy to ``text``.

    Args:
        rule: Rule being tested
        text: Working copy of the line (already trimmed if the rule trims)

    Returns:
        The text with the token removed, or None if the rule does not match.
        A rule matches only if the text changed, except for Removal.NONE
        which always matches. ENTIRE_LINE only matches when nothing but
        the token remains, so incidental occurrences mid-line are ignored.
    """
    policy = rule.remove_from
    if policy is Removal.NONE:
        return text

    if policy is Removal.LEADING:
        output = strip_leading_token(rule.token, text)
    elif policy is Removal.TRAILING:
        output = strip_trailing_token(rule.token, text)
    elif policy is Removal.BOTH:
        output = strip_trailing_token(rule.token, strip_leading_token(rule.token, text))
    else:
        replaced = text.replace(rule.token, "")
        output = replaced if not replaced else text

    if output == text:
        return None
    return output


def is_marker_line(rule: LineRule, text: str) -> bool:
    """True if ``text`` consists only of characters from the rule's token."""
    if len(text) < max(rule.min_length, 1):
        return False
    return set(text) <= set(rule.token)


class LineClassifierMixin:
    """Mixin providing rule-table classification of a single line.

    Rules are tried in table order and the first structural match wins.
    PREVIOUS-scope rules are only tried once no other rule matched.

    """

    # These will be set by the LineProcessor class
    line_rules: tuple[LineRule, ...]
    default_style: LineStyle
    empty_line_style: LineStyle | None
    _previous_rules: tuple[LineRule, ...]

    def _classify_line(
        self, line: str, lineno: int, ctx: ParseContext
    ) -> ClassifiedLine | None:
        """Classify one line outside any block region.

        Args:
            line: Raw source line
            lineno: 1-indexed line number
            ctx: Current parse context

        Returns:
            The classified line, or None if the line is dropped (blank
            line without an empty-line style, until-close marker, or a
            line inside an until-close region).
        """
        if not line:
            if self.empty_line_style is None:
                return None
            return ClassifiedLine(text="", style=self.empty_line_style, lineno=lineno)

        if ctx.close_token is not None:
            self._match_close_token(line, lineno, ctx)
            return None

        for rule in self.line_rules:
            if not rule.token or rule.scope is Scope.PREVIOUS:
                continue

            working = line.strip() if rule.trim else line
            if rule.token not in working:
                continue

            output = apply_removal(rule, working)
            if output is None:
                continue

            if rule.scope is Scope.UNTIL_CLOSE:
                self._toggle_close_token(rule.token, lineno, ctx)
                return None

            if rule.trim:
                output = output.strip()
            return ClassifiedLine(text=output, style=rule.style, lineno=lineno)

        for rule in self._previous_rules:
            working = line.strip() if rule.trim else line
            if is_marker_line(rule, working):
                return ClassifiedLine(text="", style=rule.style, lineno=lineno)

        return ClassifiedLine(text=line.strip(), style=self.default_style, lineno=lineno)

    def _match_close_token(self, line: str, lineno: int, ctx: ParseContext) -> None:
        """Close the open until-close region if ``line`` is its close token.

        The line is compared as the region's rule sees it: stripped only
        if the rule trims.
        """
        for rule in self.line_rules:
            if rule.scope is not Scope.UNTIL_CLOSE or rule.token != ctx.close_token:
                continue
            working = line.strip() if rule.trim else line
            if working == rule.token:
                self._toggle_close_token(rule.token, lineno, ctx)
                return

    def _toggle_close_token(self, token: str, lineno: int, ctx: ParseContext) -> None:
        """Open or close an until-close region."""
        if ctx.close_token is None:
            ctx.close_token = token
            ctx.close_token_lineno = lineno
            logger.debug("Region %r opened at line %d", token, lineno)
        elif ctx.close_token == token:
            ctx.close_token = None
            ctx.close_token_lineno = None
            logger.debug("Region %r closed at line %d", token, lineno)
