"""Tests for ProcessorConfig.from_dict() method.

from_dict() builds rule tables from plain data, e.g. a parsed JSON or
TOML file supplied by a surrounding tool.
"""

import json

import pytest

from linemark import LineProcessor
from linemark.config import ProcessorConfig
from linemark.errors import RuleConfigError
from linemark.rules import Removal, Scope
from linemark.styles import LineStyle

CONFIG_JSON = """
{
    "default_style": "body",
    "empty_line_style": null,
    "front_matter_rules": [{"open_tag": "---", "close_tag": "---", "separator": ":"}],
    "block_rules": [{"start_pattern": "^```", "end_token": "```", "style": "codeblock"}],
    "line_rules": [
        {"token": "=", "style": "previous_h1", "remove_from": "entire_line", "scope": "previous"},
        {"token": "# ", "style": "h1", "remove_from": "both"},
        {"token": "|", "style": "table", "remove_from": "none", "scope": "pre_and_back"}
    ]
}
"""


class TestFromDict:
    def test_from_dict_empty(self) -> None:
        config = ProcessorConfig.from_dict({})
        default = ProcessorConfig()

        assert config == default

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ProcessorConfig.from_dict({"strict": True, "unknown_key": "ignored"})

        assert config.strict is True

    def test_from_json_document(self) -> None:
        config = ProcessorConfig.from_dict(json.loads(CONFIG_JSON))

        assert config.default_style is LineStyle.BODY
        assert config.empty_line_style is None
        assert config.front_matter_rules[0].separator == ":"
        assert config.block_rules[0].style is LineStyle.CODEBLOCK
        assert [rule.scope for rule in config.line_rules] == [
            Scope.PREVIOUS,
            Scope.CURRENT,
            Scope.PRE_AND_BACK,
        ]
        assert config.line_rules[2].remove_from is Removal.NONE

    def test_rule_order_preserved(self) -> None:
        config = ProcessorConfig.from_dict(
            {"line_rules": [{"token": t, "style": "h2"} for t in ["c", "a", "b"]]}
        )

        assert [rule.token for rule in config.line_rules] == ["c", "a", "b"]

    def test_loaded_config_processes(self) -> None:
        processor = LineProcessor.from_config(ProcessorConfig.from_dict(json.loads(CONFIG_JSON)))
        lines = processor.process("---\ntitle: T\n---\n# Head\nText\n===\n```\nx\n```")

        assert [(line.text, line.style) for line in lines] == [
            ("Head", LineStyle.H1),
            ("Text", LineStyle.H1),
            ("x", LineStyle.CODEBLOCK),
        ]
        assert processor.front_matter_attributes["title"] == "T"

    def test_unknown_style(self) -> None:
        with pytest.raises(RuleConfigError, match="unknown line style"):
            ProcessorConfig.from_dict({"default_style": "fancy"})

    def test_rules_must_be_a_list(self) -> None:
        with pytest.raises(RuleConfigError, match="line_rules"):
            ProcessorConfig.from_dict({"line_rules": {"token": "#"}})

    def test_bad_block_pattern(self) -> None:
        with pytest.raises(RuleConfigError, match="start_pattern"):
            ProcessorConfig.from_dict(
                {"block_rules": [{"start_pattern": "[", "end_token": "]", "style": "codeblock"}]}
            )
