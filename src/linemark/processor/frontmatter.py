"""Front matter extractor mixin."""

from __future__ import annotations

from linemark.context import ParseContext
from linemark.errors import UnterminatedFrontMatterError
from linemark.rules import FrontMatterRule
from linemark.utils.logger import get_logger

logger = get_logger(__name__)


class FrontMatterMixin:
    """Mixin providing front matter extraction.

    Consumes a key/value preamble from the start of the line sequence
    before any line is classified.

    """

    # These will be set by the LineProcessor class
    front_matter_rules: tuple[FrontMatterRule, ...]

    def _select_front_matter_rule(self, first_line: str) -> FrontMatterRule | None:
        """Return the first rule whose open tag equals the stripped first line."""
        stripped = first_line.strip()
        for rule in self.front_matter_rules:
            if stripped == rule.open_tag:
                return rule
        return None

    def _extract_front_matter(self, lines: list[str], ctx: ParseContext) -> int:
        """Consume the front matter preamble into ``ctx.front_matter``.

        Lines between the open and close tags are split at the first
        separator. Text after the first separator is kept whole, later
        separators included. Lines without a separator are ignored.
        Blank lines directly after the close tag are consumed too.

        Args:
            lines: All source lines
            ctx: Context receiving the attributes

        Returns:
            Number of leading lines consumed (0 if there is no front matter).

        Raises:
            UnterminatedFrontMatterError: If the close tag never appears.
        """
        if not lines:
            return 0

        rule = self._select_front_matter_rule(lines[0])
        if rule is None:
            return 0

        logger.debug("Front matter opened with %r", rule.open_tag)
        pos = 1
        while True:
            if pos >= len(lines):
                raise UnterminatedFrontMatterError(
                    rule.open_tag, rule.close_tag, lineno=1, source_file=ctx.source_file
                )
            line = lines[pos]
            pos += 1
            if line.strip() == rule.close_tag:
                break

            key, sep, value = line.partition(rule.separator)
            if not sep:
                continue
            # Values are stripped so "key: value" yields "value", not " value"
            ctx.front_matter[key.strip()] = value.strip()

        while pos < len(lines) and not lines[pos]:
            pos += 1

        logger.debug("Front matter consumed %d lines, %d attributes", pos, len(ctx.front_matter))
        return pos
