"""Modular line processor for linemark.

The processor folds over a document's lines, classifying each one and
resolving dependencies between neighbouring lines.

Architecture:
processor/
├── __init__.py          # Re-exports LineProcessor
├── core.py              # LineProcessor (mixin composition + fold loop)
├── frontmatter.py       # Front matter preamble extraction
├── blocks.py            # Verbatim block region state machine
├── classifier.py        # Ordered line rule table
└── adjuster.py          # Retroactive restyling and table assembly

Usage:
    >>> from linemark.processor import LineProcessor
    >>> from linemark.presets import markdown_config
    >>> processor = LineProcessor.from_config(markdown_config())
    >>> processor.process("Title\\n===")
    [ClassifiedLine(H1, 'Title')]

"""

from linemark.processor.core import LineProcessor

__all__ = ["LineProcessor"]
