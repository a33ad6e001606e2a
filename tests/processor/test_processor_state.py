"""Tests ensuring processor state does not leak between calls.

All parse state lives in a per-call context, so one processor can be
reused and shared across threads.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from linemark import LineProcessor, LineRule, LineStyle, Removal, Scope
from linemark.context import LineSink, ParseContext
from linemark.presets import markdown_config
from linemark.processor.adjuster import RetroactiveAdjusterMixin


class TestMixinComposition:
    def test_table_flush_resolves_to_adjuster(self) -> None:
        assert LineProcessor._flush_table is RetroactiveAdjusterMixin._flush_table

    def test_plain_line_processes(self) -> None:
        processor = LineProcessor(block_rules=[], line_rules=[], default_style=LineStyle.BODY)

        assert [(line.text, line.style) for line in processor.process("hello")] == [
            ("hello", LineStyle.BODY)
        ]

    def test_block_open_after_table(self, markdown: LineProcessor) -> None:
        lines = markdown.process("A | B\n--- | ---\n1 | 2\n```\ncode\n```")

        assert lines[0].table_rows == [["A", "B"], ["1", "2"]]
        assert lines[1].text == "code"


class TestReuse:
    def test_unclosed_region_does_not_leak(self) -> None:
        processor = LineProcessor(
            block_rules=[],
            line_rules=[LineRule("$$", LineStyle.BODY, Removal.ENTIRE_LINE, scope=Scope.UNTIL_CLOSE)],
            default_style=LineStyle.BODY,
        )
        processor.process("$$\nnever closed")
        lines = processor.process("visible")

        assert [line.text for line in lines] == ["visible"]

    def test_open_block_does_not_leak(self, markdown: LineProcessor) -> None:
        markdown.process("```\nunterminated")
        lines = markdown.process("# Heading")

        assert lines[0].style is LineStyle.H1
        assert lines[0].literal is False

    def test_open_table_does_not_leak(self, markdown: LineProcessor) -> None:
        markdown.process("A | B\n--- | ---\n1 | 2")
        lines = markdown.process("3 | 4")

        assert lines[0].text == "3 | 4"
        assert lines[0].table_rows == []

    def test_returned_lists_are_independent(self, markdown: LineProcessor) -> None:
        first = markdown.process("one")
        markdown.process("two")

        assert [line.text for line in first] == ["one"]


class TestThreadSafety:
    def test_shared_processor_across_threads(self) -> None:
        processor = LineProcessor.from_config(markdown_config())
        sources = [f"---\nid: {i}\n---\n# Doc {i}\n\nA | B\n---|---\n{i} | x" for i in range(40)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            documents = list(pool.map(processor.process_document, sources))

        for i, document in enumerate(documents):
            assert document.front_matter["id"] == str(i)
            assert document.lines[0].text == f"Doc {i}"
            assert document.lines[1].table_rows == [["A", "B"], [str(i), "x"]]


class TestLineSink:
    def test_last_on_empty(self) -> None:
        assert LineSink().last is None

    def test_fresh_context_per_call(self) -> None:
        a = ParseContext()
        b = ParseContext()

        a.front_matter["k"] = "v"
        a.table.open(["x"])

        assert b.front_matter == {}
        assert not b.table.is_open
