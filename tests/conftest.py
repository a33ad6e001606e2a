"""Shared fixtures for linemark tests."""

import pytest

from linemark import LineProcessor, LineRule, LineStyle, Removal, Scope
from linemark.presets import markdown_config


@pytest.fixture
def markdown() -> LineProcessor:
    """Processor using the built-in Markdown tables."""
    return LineProcessor.from_config(markdown_config())


@pytest.fixture
def table_processor() -> LineProcessor:
    """Processor with only the pipe table and setext underline rules."""
    return LineProcessor(
        block_rules=[],
        line_rules=[
            LineRule("=", LineStyle.PREVIOUS_H1, Removal.ENTIRE_LINE, scope=Scope.PREVIOUS),
            LineRule("|", LineStyle.TABLE, Removal.NONE, scope=Scope.PRE_AND_BACK),
        ],
        default_style=LineStyle.BODY,
    )
