"""
linemark — Line-oriented document classifier

Splits text into lines, strips a front matter preamble, recognizes fenced
verbatim regions, classifies every other line against an ordered rule
table, and resolves dependencies between neighbouring lines (setext
underlines, pipe tables). The output is a flat list of classified lines,
ready for an inline tokenizer or renderer.

Quick Start:
    >>> from linemark import process
    >>> process("Title\\n=====\\n\\n- item")
    [ClassifiedLine(H1, 'Title'), ClassifiedLine(UNORDERED_LIST, 'item')]

Custom Rules:
    >>> from linemark import LineProcessor, LineRule, LineStyle, Removal
    >>> processor = LineProcessor(
    ...     block_rules=[],
    ...     line_rules=[LineRule("!! ", LineStyle.BLOCKQUOTE, Removal.LEADING)],
    ...     default_style=LineStyle.BODY,
    ... )
    >>> processor.process("!! careful")
    [ClassifiedLine(BLOCKQUOTE, 'careful')]
"""

from linemark.config import (
    ProcessorConfig,
    default_config_context,
    get_default_config,
    reset_default_config,
    set_default_config,
)
from linemark.errors import (
    LinemarkError,
    ProcessError,
    RuleConfigError,
    UnclosedRegionError,
    UnterminatedFrontMatterError,
)
from linemark.lines import ClassifiedLine, ProcessedDocument
from linemark.presets import markdown_config
from linemark.processor import LineProcessor
from linemark.rules import BlockRule, FrontMatterRule, LineRule, Removal, Scope
from linemark.serialization import from_json, to_json
from linemark.styles import LineStyle

__version__ = "0.1.0"


def process(text: str, config: ProcessorConfig | None = None) -> list[ClassifiedLine]:
    """Classify the lines of ``text``.

    Args:
        text: Raw multi-line document
        config: Processor configuration (uses the context default, the
            Markdown preset unless changed, if None)

    Returns:
        Classified lines in source order.

    Example:
        >>> lines = process("# Hello")
        >>> lines[0].style
        <LineStyle.H1: 1>

    """
    if config is None:
        config = get_default_config()
    return LineProcessor.from_config(config).process(text)


def process_document(
    text: str,
    config: ProcessorConfig | None = None,
    *,
    source_file: str | None = None,
) -> ProcessedDocument:
    """Classify ``text`` and return lines together with front matter.

    Args:
        text: Raw multi-line document
        config: Processor configuration (context default if None)
        source_file: Optional source name for error messages

    Returns:
        ProcessedDocument with lines, front matter and diagnostics.

    """
    if config is None:
        config = get_default_config()
    return LineProcessor.from_config(config).process_document(text, source_file=source_file)


__all__ = [
    "BlockRule",
    "ClassifiedLine",
    "FrontMatterRule",
    "LineProcessor",
    "LineRule",
    "LineStyle",
    "LinemarkError",
    "ProcessError",
    "ProcessedDocument",
    "ProcessorConfig",
    "Removal",
    "RuleConfigError",
    "Scope",
    "UnclosedRegionError",
    "UnterminatedFrontMatterError",
    "__version__",
    "default_config_context",
    "from_json",
    "get_default_config",
    "markdown_config",
    "process",
    "process_document",
    "reset_default_config",
    "set_default_config",
    "to_json",
]
