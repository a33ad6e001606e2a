"""Line processor: a left-to-right fold over a document's lines.

Pipeline for one call:
1. Split the text into lines on any Unicode newline boundary
2. Consume the front matter preamble
3. For each remaining line: block region matcher, then (outside regions)
   the line classifier, then the retroactive adjuster
4. Flush any table still open

Thread Safety:
The processor holds only immutable configuration. All state lives in a
ParseContext created per call, so ``process_document`` may be called
concurrently on one shared instance. ``process`` additionally records the
last front matter on the instance for ``front_matter_attributes``.

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from linemark.context import ParseContext
from linemark.errors import UnclosedRegionError
from linemark.lines import ClassifiedLine, ProcessedDocument
from linemark.processor.adjuster import RetroactiveAdjusterMixin
from linemark.processor.blocks import BlockMatcherMixin
from linemark.processor.classifier import LineClassifierMixin
from linemark.processor.frontmatter import FrontMatterMixin
from linemark.rules import BlockRule, FrontMatterRule, LineRule, Scope
from linemark.styles import LineStyle
from linemark.utils.logger import get_logger

if TYPE_CHECKING:
    from linemark.config import ProcessorConfig

logger = get_logger(__name__)

_EMPTY_ATTRIBUTES: Mapping[str, str] = MappingProxyType({})


class LineProcessor(
    FrontMatterMixin,
    BlockMatcherMixin,
    LineClassifierMixin,
    RetroactiveAdjusterMixin,
):
    """Classify every line of a document against ordered rule tables.

    Usage:
        >>> from linemark import LineProcessor, LineRule, LineStyle
        >>> processor = LineProcessor(
        ...     block_rules=[],
        ...     line_rules=[LineRule("# ", LineStyle.H1)],
        ...     default_style=LineStyle.BODY,
        ... )
        >>> processor.process("# Title\\nSome text")
        [ClassifiedLine(H1, 'Title'), ClassifiedLine(BODY, 'Some text')]

    """

    __slots__ = (
        "block_rules",
        "line_rules",
        "default_style",
        "front_matter_rules",
        "empty_line_style",
        "strict",
        "_previous_rules",
        "_last_front_matter",
    )

    def __init__(
        self,
        block_rules: Iterable[BlockRule],
        line_rules: Iterable[LineRule],
        default_style: LineStyle,
        front_matter_rules: Iterable[FrontMatterRule] = (),
        empty_line_style: LineStyle | None = None,
        *,
        strict: bool = False,
    ) -> None:
        """Initialize the processor with its rule tables.

        Args:
            block_rules: Verbatim region rules, in priority order
            line_rules: Line rules, in priority order (first match wins)
            default_style: Style for lines no rule matches
            front_matter_rules: Preamble rules, in priority order
            empty_line_style: Style for blank lines; blank lines are
                skipped when None
            strict: Raise UnclosedRegionError instead of silently dropping
                the rest of a document whose until-close region never closes
        """
        self.block_rules = tuple(block_rules)
        self.line_rules = tuple(line_rules)
        self.default_style = default_style
        self.front_matter_rules = tuple(front_matter_rules)
        self.empty_line_style = empty_line_style
        self.strict = strict
        self._previous_rules = tuple(
            rule for rule in self.line_rules if rule.token and rule.scope is Scope.PREVIOUS
        )
        self._last_front_matter = _EMPTY_ATTRIBUTES

    @classmethod
    def from_config(cls, config: ProcessorConfig) -> LineProcessor:
        """Create a processor from a ProcessorConfig."""
        return cls(
            block_rules=config.block_rules,
            line_rules=config.line_rules,
            default_style=config.default_style,
            front_matter_rules=config.front_matter_rules,
            empty_line_style=config.empty_line_style,
            strict=config.strict,
        )

    @property
    def front_matter_attributes(self) -> Mapping[str, str]:
        """Front matter read by the most recent ``process`` call (read-only)."""
        return self._last_front_matter

    def process(self, text: str) -> list[ClassifiedLine]:
        """Classify ``text`` into an ordered list of lines.

        Args:
            text: Raw multi-line document

        Returns:
            Classified lines in source order.

        Raises:
            UnterminatedFrontMatterError: If the front matter never closes.
            UnclosedRegionError: In strict mode, if an until-close region
                never closes.
        """
        document = self.process_document(text)
        self._last_front_matter = document.front_matter
        return document.lines

    def process_document(
        self, text: str, *, source_file: str | None = None
    ) -> ProcessedDocument:
        """Classify ``text`` without touching any processor state.

        Args:
            text: Raw multi-line document
            source_file: Optional source name for error messages

        Returns:
            ProcessedDocument with lines, front matter and diagnostics.
        """
        ctx = ParseContext(source_file=source_file)
        lines = text.splitlines()

        start = self._extract_front_matter(lines, ctx)

        for lineno, line in enumerate(lines[start:], start=start + 1):
            if self._process_block_line(line, lineno, ctx):
                continue

            classified = self._classify_line(line, lineno, ctx)
            if classified is None:
                continue

            self._adjust(line, classified, ctx)

        self._flush_table(ctx)
        self._check_unclosed(ctx)

        return ProcessedDocument(
            lines=ctx.output.to_list(),
            front_matter=MappingProxyType(ctx.front_matter),
            unclosed_token=ctx.close_token,
            unclosed_block=ctx.active_block.end_token if ctx.active_block else None,
        )

    def _check_unclosed(self, ctx: ParseContext) -> None:
        if ctx.active_block is not None:
            logger.debug(
                "Block region awaiting %r still open at end of input",
                ctx.active_block.end_token,
            )

        if ctx.close_token is None:
            return
        if self.strict:
            raise UnclosedRegionError(
                ctx.close_token, lineno=ctx.close_token_lineno, source_file=ctx.source_file
            )
        logger.warning(
            "Region %r opened at line %s never closed; remaining lines were dropped",
            ctx.close_token,
            ctx.close_token_lineno,
        )
