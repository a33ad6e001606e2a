"""Block region matcher mixin."""

from __future__ import annotations

from linemark.context import ParseContext
from linemark.lines import ClassifiedLine
from linemark.rules import BlockRule
from linemark.utils.logger import get_logger

logger = get_logger(__name__)


class BlockMatcherMixin:
    """Mixin providing verbatim block region matching.

    Two states: inactive (``ctx.active_block is None``) or active with a
    rule. Opening and closing marker lines are consumed, never emitted.
    Lines inside a region are emitted verbatim: no trimming, no rules.

    """

    # These will be set by the LineProcessor class
    block_rules: tuple[BlockRule, ...]

    def _match_block_start(self, line: str) -> BlockRule | None:
        """Return the first block rule whose start pattern matches ``line``."""
        for rule in self.block_rules:
            if rule.opens(line):
                return rule
        return None

    def _process_block_line(self, line: str, lineno: int, ctx: ParseContext) -> bool:
        """Run one line through the block state machine.

        Args:
            line: Raw source line
            lineno: 1-indexed line number
            ctx: Current parse context

        Returns:
            True if the line was handled (consumed as a marker or emitted
            verbatim), False if it should go on to the line classifier.
        """
        rule = ctx.active_block
        if rule is None:
            rule = self._match_block_start(line)
            if rule is None:
                return False
            # Provided by RetroactiveAdjusterMixin when composed
            self._flush_table(ctx)  # type: ignore[attr-defined]
            ctx.active_block = rule
            logger.debug("Block region opened at line %d (%s)", lineno, rule.style.name)
            return True

        if line == rule.end_token:
            ctx.active_block = None
            logger.debug("Block region closed at line %d", lineno)
            return True

        ctx.output.append(
            ClassifiedLine(text=line, style=rule.style, literal=True, lineno=lineno)
        )
        return True
