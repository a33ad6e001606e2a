"""Built-in rule tables for Markdown documents.

The tables are ordered: more specific tokens come before the tokens they
contain (``"\\t\\t- "`` before ``"\\t- "`` before ``"- "``), and headings are
tried from ``######`` down to ``#`` so that ``"## "`` is not taken for an H1.

RULES:
- Tables are tuples of frozen rules; never mutate them at runtime.
- Build a new ProcessorConfig to customize, e.g. with
  ``dataclasses.replace(markdown_config(), empty_line_style=LineStyle.BODY)``.
"""

from __future__ import annotations

from linemark.config import ProcessorConfig
from linemark.rules import BlockRule, FrontMatterRule, LineRule, Removal, Scope
from linemark.styles import LineStyle

MARKDOWN_FRONT_MATTER_RULES: tuple[FrontMatterRule, ...] = (
    FrontMatterRule(open_tag="---", close_tag="---", separator=":"),
)

MARKDOWN_BLOCK_RULES: tuple[BlockRule, ...] = (
    BlockRule.compile(r"^```", "```", LineStyle.CODEBLOCK),
)

MARKDOWN_LINE_RULES: tuple[LineRule, ...] = (
    # Setext underlines restyle the line above
    LineRule("=", LineStyle.PREVIOUS_H1, Removal.ENTIRE_LINE, scope=Scope.PREVIOUS),
    LineRule("-", LineStyle.PREVIOUS_H2, Removal.ENTIRE_LINE, scope=Scope.PREVIOUS),
    # Lists, deepest indent first
    LineRule("\t\t- ", LineStyle.UNORDERED_LIST_INDENT_SECOND_ORDER, trim=False),
    LineRule("\t- ", LineStyle.UNORDERED_LIST_INDENT_FIRST_ORDER, trim=False),
    LineRule("- ", LineStyle.UNORDERED_LIST),
    LineRule("\t\t* ", LineStyle.UNORDERED_LIST_INDENT_SECOND_ORDER, trim=False),
    LineRule("\t* ", LineStyle.UNORDERED_LIST_INDENT_FIRST_ORDER, trim=False),
    LineRule("* ", LineStyle.UNORDERED_LIST),
    LineRule("\t\t1. ", LineStyle.ORDERED_LIST_INDENT_SECOND_ORDER, trim=False),
    LineRule("\t1. ", LineStyle.ORDERED_LIST_INDENT_FIRST_ORDER, trim=False),
    LineRule("1. ", LineStyle.ORDERED_LIST),
    # Indented code
    LineRule("    ", LineStyle.CODEBLOCK, trim=False),
    LineRule("\t", LineStyle.CODEBLOCK, trim=False),
    LineRule(">", LineStyle.BLOCKQUOTE),
    # ATX headings, closing hashes removed too
    LineRule("###### ", LineStyle.H6, Removal.BOTH),
    LineRule("##### ", LineStyle.H5, Removal.BOTH),
    LineRule("#### ", LineStyle.H4, Removal.BOTH),
    LineRule("### ", LineStyle.H3, Removal.BOTH),
    LineRule("## ", LineStyle.H2, Removal.BOTH),
    LineRule("# ", LineStyle.H1, Removal.BOTH),
    # Pipe tables
    LineRule("|", LineStyle.TABLE, Removal.NONE, scope=Scope.PRE_AND_BACK),
)


def markdown_config(*, strict: bool = False) -> ProcessorConfig:
    """Return a ProcessorConfig using the built-in Markdown tables.

    Args:
        strict: Raise on until-close regions left open at end of input

    Returns:
        ProcessorConfig with body as the default style.
    """
    return ProcessorConfig(
        block_rules=MARKDOWN_BLOCK_RULES,
        line_rules=MARKDOWN_LINE_RULES,
        default_style=LineStyle.BODY,
        front_matter_rules=MARKDOWN_FRONT_MATTER_RULES,
        strict=strict,
    )


__all__ = [
    "MARKDOWN_BLOCK_RULES",
    "MARKDOWN_FRONT_MATTER_RULES",
    "MARKDOWN_LINE_RULES",
    "markdown_config",
]
