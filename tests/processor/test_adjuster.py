"""Tests for retroactive adjustment: underline markers and pipe tables."""

from linemark import LineProcessor, LineRule, LineStyle, Removal, Scope


def entries(lines) -> list[tuple[str, LineStyle, list[list[str]]]]:
    return [(line.text, line.style, line.table_rows) for line in lines]


class TestUnderlineMarkers:
    def test_underline_restyles_previous(self, table_processor: LineProcessor) -> None:
        lines = table_processor.process("Title\n===\n")

        assert len(lines) == 1
        assert lines[0].text == "Title"
        assert lines[0].style is LineStyle.H1

    def test_restyled_line_keeps_source_line(self, table_processor: LineProcessor) -> None:
        lines = table_processor.process("intro\nTitle\n===")

        assert [line.lineno for line in lines] == [1, 2]

    def test_marker_without_previous_line_kept(self, table_processor: LineProcessor) -> None:
        lines = table_processor.process("===\nText")

        assert entries(lines) == [
            ("", LineStyle.PREVIOUS_H1, []),
            ("Text", LineStyle.BODY, []),
        ]

    def test_markdown_setext_levels(self, markdown: LineProcessor) -> None:
        lines = markdown.process("Main\n====\n\nSub\n----")

        assert entries(lines) == [("Main", LineStyle.H1, []), ("Sub", LineStyle.H2, [])]

    def test_blank_line_between_is_skipped(self, markdown: LineProcessor) -> None:
        """Blank lines are dropped before adjustment, so the marker still reaches the text."""
        lines = markdown.process("Title\n\n===")

        assert entries(lines) == [("Title", LineStyle.H1, [])]

    def test_underline_of_code_line_clears_literal(self, markdown: LineProcessor) -> None:
        lines = markdown.process("```\ncode\n```\n===")

        assert lines[0].style is LineStyle.H1
        assert lines[0].literal is False


class TestTableAssembly:
    def test_basic_table(self, table_processor: LineProcessor) -> None:
        lines = table_processor.process("A | B\n--- | ---\n1 | 2\n")

        assert len(lines) == 1
        assert lines[0].text == ""
        assert lines[0].style is LineStyle.TABLE
        assert lines[0].table_rows == [["A", "B"], ["1", "2"]]

    def test_outer_pipes(self, table_processor: LineProcessor) -> None:
        lines = table_processor.process("| A | B |\n|---|---|\n| 1 | 2 |\n| 3 | 4 |")

        assert lines[0].table_rows == [["A", "B"], ["1", "2"], ["3", "4"]]

    def test_table_flushed_by_following_line(self, table_processor: LineProcessor) -> None:
        lines = table_processor.process("A | B\n---|---\n1 | 2\nafter")

        assert entries(lines) == [
            ("", LineStyle.TABLE, [["A", "B"], ["1", "2"]]),
            ("after", LineStyle.BODY, []),
        ]

    def test_header_only_table(self, table_processor: LineProcessor) -> None:
        lines = table_processor.process("A | B\n--- | ---")

        assert entries(lines) == [("", LineStyle.TABLE, [["A", "B"]])]

    def test_short_row_padded(self, table_processor: LineProcessor) -> None:
        lines = table_processor.process("A | B | C\n--- | --- | ---\n1 | 2")

        assert lines[0].table_rows == [["A", "B", "C"], ["1", "2", ""]]

    def test_wide_row_dropped(self, table_processor: LineProcessor) -> None:
        lines = table_processor.process("A | B\n--- | ---\n1 | 2 | 3\n4 | 5")

        assert lines[0].table_rows == [["A", "B"], ["4", "5"]]

    def test_rows_without_delimiter_stay_separate(self, table_processor: LineProcessor) -> None:
        lines = table_processor.process("A | B\nC | D")

        assert entries(lines) == [
            ("A | B", LineStyle.TABLE, []),
            ("C | D", LineStyle.TABLE, []),
        ]

    def test_delimiter_narrower_than_header(self, table_processor: LineProcessor) -> None:
        lines = table_processor.process("A | B | C\n--- | ---")

        assert entries(lines) == [
            ("A | B | C", LineStyle.TABLE, []),
            ("--- | ---", LineStyle.TABLE, []),
        ]

    def test_short_dashes_are_not_a_delimiter(self, table_processor: LineProcessor) -> None:
        lines = table_processor.process("A | B\n-- | --")

        assert [line.text for line in lines] == ["A | B", "-- | --"]

    def test_pipe_line_after_body_text(self, table_processor: LineProcessor) -> None:
        lines = table_processor.process("intro\nA | B")

        assert entries(lines) == [("intro", LineStyle.BODY, []), ("A | B", LineStyle.TABLE, [])]

    def test_two_tables(self, table_processor: LineProcessor) -> None:
        text = "A | B\n--- | ---\n1 | 2\nbetween\nC | D\n--- | ---\n3 | 4"
        lines = table_processor.process(text)

        assert entries(lines) == [
            ("", LineStyle.TABLE, [["A", "B"], ["1", "2"]]),
            ("between", LineStyle.BODY, []),
            ("", LineStyle.TABLE, [["C", "D"], ["3", "4"]]),
        ]

    def test_blank_line_style_ends_table(self) -> None:
        processor = LineProcessor(
            block_rules=[],
            line_rules=[LineRule("|", LineStyle.TABLE, Removal.NONE, scope=Scope.PRE_AND_BACK)],
            default_style=LineStyle.BODY,
            empty_line_style=LineStyle.BODY,
        )
        lines = processor.process("A | B\n--- | ---\n1 | 2\n\nafter")

        assert entries(lines) == [
            ("", LineStyle.TABLE, [["A", "B"], ["1", "2"]]),
            ("", LineStyle.BODY, []),
            ("after", LineStyle.BODY, []),
        ]

    def test_underline_after_table_does_not_restyle_it(self, table_processor: LineProcessor) -> None:
        lines = table_processor.process("A | B\n--- | ---\n1 | 2\n===")

        assert lines[0].style is LineStyle.TABLE
        assert lines[0].table_rows == [["A", "B"], ["1", "2"]]
        assert lines[1].style is LineStyle.PREVIOUS_H1

    def test_markdown_table(self, markdown: LineProcessor) -> None:
        lines = markdown.process("# Stats\n\n| Name | Score |\n| ---- | ----- |\n| Ann | 9 |\n| Bob |\n")

        assert entries(lines) == [
            ("Stats", LineStyle.H1, []),
            ("", LineStyle.TABLE, [["Name", "Score"], ["Ann", "9"], ["Bob", ""]]),
        ]

    def test_delimiter_row_removed_from_output(self, table_processor: LineProcessor) -> None:
        lines = table_processor.process("A | B\n--- | ---\n1 | 2")

        assert all("---" not in line.text for line in lines)
        assert all(line.text != "A | B" for line in lines)
